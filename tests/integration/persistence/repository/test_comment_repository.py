"""Integration tests for PostgresCommentRepository.

These run the real SQL, including the recursive subtree query, against
PostgreSQL.
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.repository import CommentRepository
from social.domain.value import CommentSort
from social.persistence.tables import media_table, reactions_table
from tests.factories import (
    insert_comment,
    insert_media,
    insert_post,
    insert_reaction,
    insert_user,
)
from tests.harness import create_env_fixture

integration_env = create_env_fixture(unmock={"persistence"})


class TestCreateAndFind:
    @pytest.mark.asyncio
    async def test_create_reply_round_trips(self, integration_env):
        # Arrange
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(CommentRepository)
        user_id = await insert_user(session)
        post_id = await insert_post(session, user_id)
        root = await repo.create(post_id, user_id, "Root")

        # Act
        reply = await repo.create(post_id, user_id, "Reply", parent_id=root.id)
        found = await repo.find_by_id(reply.id)

        # Assert
        assert found is not None
        assert found.parent_id == root.id
        assert found.content == "Reply"
        assert found.is_published is True
        assert found.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_update_content(self, integration_env):
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(CommentRepository)
        user_id = await insert_user(session)
        post_id = await insert_post(session, user_id)
        comment = await repo.create(post_id, user_id, "Before")

        updated = await repo.update_content(comment.id, "After")

        assert updated is not None
        assert updated.content == "After"
        assert updated.updated_at >= comment.updated_at
        assert await repo.update_content(comment.id + 1000, "Nope") is None


class TestTopLevelComments:
    @pytest.mark.asyncio
    async def test_paging_and_count_skip_replies_and_unpublished(
        self, integration_env
    ):
        # Arrange
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(CommentRepository)
        user_id = await insert_user(session)
        post_id = await insert_post(session, user_id)
        other_post_id = await insert_post(session, user_id)
        roots = [await insert_comment(session, post_id, user_id) for _ in range(3)]
        await insert_comment(session, post_id, user_id, is_published=False)
        await insert_comment(session, post_id, user_id, parent_id=roots[0])
        await insert_comment(session, other_post_id, user_id)

        # Act
        first_page = await repo.find_top_level_by_post(post_id, limit=2, offset=0)
        second_page = await repo.find_top_level_by_post(post_id, limit=2, offset=2)
        newest = await repo.find_top_level_by_post(post_id, sort=CommentSort.NEWEST)
        total = await repo.count_top_level_by_post(post_id)

        # Assert
        assert [c.id for c in first_page] == roots[:2]
        assert [c.id for c in second_page] == roots[2:]
        assert [c.id for c in newest] == roots[::-1]
        assert total == 3

    @pytest.mark.asyncio
    async def test_empty_post(self, integration_env):
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(CommentRepository)
        user_id = await insert_user(session)
        post_id = await insert_post(session, user_id)

        assert await repo.find_top_level_by_post(post_id) == []
        assert await repo.count_top_level_by_post(post_id) == 0


class TestDescendants:
    @pytest.mark.asyncio
    async def test_subtree_five_levels_deep(self, integration_env):
        # Arrange
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(CommentRepository)
        user_id = await insert_user(session)
        post_id = await insert_post(session, user_id)
        root = await insert_comment(session, post_id, user_id)
        chain = [root]
        for _ in range(5):
            chain.append(
                await insert_comment(session, post_id, user_id, parent_id=chain[-1])
            )
        sibling = await insert_comment(session, post_id, user_id, parent_id=root)
        other_root = await insert_comment(session, post_id, user_id)
        await insert_comment(session, post_id, user_id, parent_id=other_root)

        # Act
        descendants = await repo.find_descendants([root])

        # Assert
        assert [c.id for c in descendants] == [*chain[1:], sibling]
        assert {c.parent_id for c in descendants} == {*chain[:-1]}

    @pytest.mark.asyncio
    async def test_walk_stops_at_unpublished_reply(self, integration_env):
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(CommentRepository)
        user_id = await insert_user(session)
        post_id = await insert_post(session, user_id)
        root = await insert_comment(session, post_id, user_id)
        visible = await insert_comment(session, post_id, user_id, parent_id=root)
        hidden = await insert_comment(
            session, post_id, user_id, parent_id=visible, is_published=False
        )
        await insert_comment(session, post_id, user_id, parent_id=hidden)
        await insert_comment(
            session, post_id, user_id, parent_id=root, is_published=False
        )

        descendants = await repo.find_descendants([root])

        assert [c.id for c in descendants] == [visible]

    @pytest.mark.asyncio
    async def test_several_roots_newest_first(self, integration_env):
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(CommentRepository)
        user_id = await insert_user(session)
        post_id = await insert_post(session, user_id)
        first_root = await insert_comment(session, post_id, user_id)
        second_root = await insert_comment(session, post_id, user_id)
        a = await insert_comment(session, post_id, user_id, parent_id=first_root)
        b = await insert_comment(session, post_id, user_id, parent_id=second_root)
        c = await insert_comment(session, post_id, user_id, parent_id=a)

        descendants = await repo.find_descendants(
            [first_root, second_root], sort=CommentSort.NEWEST
        )

        # One transaction shares created_at, so ids break the tie
        assert [d.id for d in descendants] == [c, b, a]

    @pytest.mark.asyncio
    async def test_no_roots(self, integration_env):
        repo = await integration_env.get(CommentRepository)

        assert await repo.find_descendants([]) == []


class TestReplies:
    @pytest.mark.asyncio
    async def test_direct_replies_and_children_count(self, integration_env):
        # Arrange
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(CommentRepository)
        user_id = await insert_user(session)
        post_id = await insert_post(session, user_id)
        root = await insert_comment(session, post_id, user_id)
        first = await insert_comment(session, post_id, user_id, parent_id=root)
        second = await insert_comment(session, post_id, user_id, parent_id=root)
        await insert_comment(
            session, post_id, user_id, parent_id=root, is_published=False
        )
        await insert_comment(session, post_id, user_id, parent_id=first)

        # Act
        replies = await repo.find_replies(root, sort=CommentSort.NEWEST)
        limited = await repo.find_replies(root, limit=1)
        children = await repo.count_children(root)

        # Assert
        assert [r.id for r in replies] == [second, first]
        assert [r.id for r in limited] == [first]
        assert children == 3
        assert await repo.count_children(second) == 0


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_cascades_to_subtree_reactions_and_media(
        self, integration_env
    ):
        # Arrange
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(CommentRepository)
        user_id = await insert_user(session)
        post_id = await insert_post(session, user_id)
        root = await insert_comment(session, post_id, user_id)
        reply = await insert_comment(session, post_id, user_id, parent_id=root)
        nested = await insert_comment(session, post_id, user_id, parent_id=reply)
        survivor = await insert_comment(session, post_id, user_id)
        await insert_reaction(session, user_id, nested, "heart", "❤️")
        await insert_reaction(session, user_id, survivor, "fire", "🔥")
        await insert_media(session, reply)

        # Act
        await repo.delete(root)

        # Assert
        for comment_id in (root, reply, nested):
            assert await repo.find_by_id(comment_id) is None
        assert await repo.find_by_id(survivor) is not None
        reactions = await session.execute(
            select(reactions_table.c.comment_id).select_from(reactions_table)
        )
        assert reactions.scalars().all() == [survivor]
        media = await session.execute(select(func.count()).select_from(media_table))
        assert media.scalar_one() == 0
