#!/usr/bin/env python3
"""Apply alembic migrations before the API starts.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c41d9e2a7b0
"""

import argparse
import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from social.config import Settings
from social.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("revision", nargs="?", default="head")
    args = parser.parse_args(argv)

    settings = Settings()
    configure_logfire(settings)

    with logfire.span("Upgrading schema", revision=args.revision):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), args.revision)
        except Exception as e:
            # The deploy must stop rather than serve against a half-migrated schema
            logfire.error(
                "Migration failed",
                revision=args.revision,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise
    logfire.info("Schema is at revision", revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
