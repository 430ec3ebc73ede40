"""Integration tests for PostgresReactionRepository."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.repository import ReactionRepository
from social.domain.value import EmojiName, EmojiUnicode
from tests.factories import insert_comment, insert_post, insert_reaction, insert_user
from tests.harness import create_env_fixture

integration_env = create_env_fixture(unmock={"persistence"})


class TestReactionRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_second_insert_for_same_user_and_comment_returns_none(
        self, integration_env
    ):
        # Arrange
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(ReactionRepository)
        user_id = await insert_user(session)
        post_id = await insert_post(session, user_id)
        comment_id = await insert_comment(session, post_id, user_id)
        first = await repo.create(
            user_id, comment_id, EmojiName("heart"), EmojiUnicode("❤️")
        )

        # Act
        second = await repo.create(
            user_id, comment_id, EmojiName("fire"), EmojiUnicode("🔥")
        )

        # Assert
        assert first is not None
        assert second is None
        kept = await repo.find_by_user_and_comment(user_id, comment_id)
        assert kept.id == first.id
        assert kept.emoji_name.root == "heart"

    @pytest.mark.asyncio
    async def test_update_emoji_keeps_the_row(self, integration_env):
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(ReactionRepository)
        user_id = await insert_user(session)
        post_id = await insert_post(session, user_id)
        comment_id = await insert_comment(session, post_id, user_id)
        reaction_id = await insert_reaction(session, user_id, comment_id, "wow", "😮")

        updated = await repo.update_emoji(
            reaction_id, EmojiName("clap"), EmojiUnicode("👏")
        )

        assert updated.id == reaction_id
        assert updated.emoji_unicode.root == "👏"

    @pytest.mark.asyncio
    async def test_counts_ordered_by_count_then_name(self, integration_env):
        # Arrange
        session = await integration_env.get(AsyncSession)
        repo = await integration_env.get(ReactionRepository)
        users = [await insert_user(session, username=f"user{i}") for i in range(4)]
        post_id = await insert_post(session, users[0])
        first = await insert_comment(session, post_id, users[0])
        second = await insert_comment(session, post_id, users[0])
        quiet = await insert_comment(session, post_id, users[0])
        await insert_reaction(session, users[0], first, "wow", "😮")
        await insert_reaction(session, users[1], first, "heart", "❤️")
        await insert_reaction(session, users[2], first, "heart", "❤️")
        await insert_reaction(session, users[3], first, "clap", "👏")
        await insert_reaction(session, users[0], second, "fire", "🔥")

        # Act
        counts = await repo.count_by_comments([first, second, quiet])

        # Assert
        assert [(c.emoji_name, c.count) for c in counts[first]] == [
            ("heart", 2),
            ("clap", 1),
            ("wow", 1),
        ]
        assert [(c.emoji_name, c.count) for c in counts[second]] == [("fire", 1)]
        assert quiet not in counts
        assert await repo.count_by_comments([]) == {}
