"""Logfire setup.

Application code logs and traces through logfire directly:

    logfire.info("Comment created", comment_id=comment.id, post_id=post_id)

    with logfire.span("comment_service.validate_parent", parent_id=parent_id):
        ...

Tests configure logfire without a backend in tests/conftest.py.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from social.config import Settings

SERVICE_NAME = "social-comments"


def should_send_to_logfire(settings: Settings) -> bool:
    """Explicit OBSERVABILITY__SEND_TO_LOGFIRE wins, else send iff a token is set."""
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire for the API process.

    Must run before the FastAPI app is created, since instrumentation
    attaches at creation time.
    """
    send = should_send_to_logfire(settings)
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request, attributes: dict) -> dict:
    # Route parameters (post_id, comment_id) are already in ``attributes``
    if request.client:
        return {**attributes, "client_host": request.client.host}
    return attributes


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health probes."""
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL, including the recursive reply-subtree reads."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
