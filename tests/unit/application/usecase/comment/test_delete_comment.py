"""Unit tests for DeleteCommentUseCase."""

import pytest

from social.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from social.domain.error import NotAuthorizedError, NotFoundError
from social.persistence.repository.inmemory import InMemoryDatabase
from tests.factories import add_chain, add_comment, add_post, add_reaction, add_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_leaf_comment(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(DeleteCommentUseCase)
        user = add_user(db)
        post = add_post(db, user.id)
        comment = add_comment(db, post.id, user.id)

        result = await use_case.execute(
            DeleteCommentRequest(comment_id=comment.id, user_id=user.id)
        )

        assert result.deleted_replies == 0
        assert result.message == "Comment deleted successfully"
        assert db.comments == {}

    @pytest.mark.asyncio
    async def test_reports_direct_replies_and_removes_subtree(self, unit_env):
        # Arrange: root -> reply -> nested reply
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(DeleteCommentUseCase)
        user = add_user(db)
        post = add_post(db, user.id)
        root, reply, nested = add_chain(db, post.id, user.id, length=3)
        add_reaction(db, user.id, nested.id, "fire", "🔥")

        # Act
        result = await use_case.execute(
            DeleteCommentRequest(comment_id=root.id, user_id=user.id)
        )

        # Assert
        assert result.comment_id == root.id
        assert result.deleted_replies == 1
        assert result.message == "Comment deleted successfully along with 1 replies"
        assert db.comments == {}
        assert db.reactions == {}

    @pytest.mark.asyncio
    async def test_other_user_is_forbidden(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(DeleteCommentUseCase)
        author = add_user(db, "alice")
        other = add_user(db, "mallory")
        post = add_post(db, author.id)
        comment = add_comment(db, post.id, author.id)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=comment.id, user_id=other.id)
            )
        assert comment.id in db.comments

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(DeleteCommentRequest(comment_id=404, user_id=1))
