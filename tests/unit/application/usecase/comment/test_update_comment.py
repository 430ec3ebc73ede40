"""Unit tests for UpdateCommentUseCase."""

import pytest

from social.application.usecase.comment import (
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from social.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from social.persistence.repository.inmemory import InMemoryDatabase
from tests.factories import add_comment, add_post, add_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_updates_content(self, unit_env):
        # Arrange
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(UpdateCommentUseCase)
        user = add_user(db)
        post = add_post(db, user.id)
        comment = add_comment(db, post.id, user.id, content="Frist")

        # Act
        result = await use_case.execute(
            UpdateCommentRequest(comment_id=comment.id, user_id=user.id, content=" First ")
        )

        # Assert
        assert result.message == "Comment updated successfully"
        assert result.comment.content == "First"
        assert result.comment.is_edited is True
        assert db.comments[comment.id].content == "First"

    @pytest.mark.asyncio
    async def test_other_user_is_forbidden(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(UpdateCommentUseCase)
        author = add_user(db, "alice")
        other = add_user(db, "mallory")
        post = add_post(db, author.id)
        comment = add_comment(db, post.id, author.id, content="Original")

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=comment.id, user_id=other.id, content="Hijacked"
                )
            )
        assert db.comments[comment.id].content == "Original"

    @pytest.mark.asyncio
    async def test_blank_content_rejected(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(UpdateCommentUseCase)
        user = add_user(db)
        post = add_post(db, user.id)
        comment = add_comment(db, post.id, user.id)

        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdateCommentRequest(comment_id=comment.id, user_id=user.id, content="   ")
            )

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateCommentRequest(comment_id=404, user_id=1, content="Hello")
            )
