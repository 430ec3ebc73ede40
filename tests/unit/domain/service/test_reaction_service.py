"""Unit tests for ReactionService."""

import pytest

from social.domain.error import ConflictError, ValidationError
from social.domain.service import ReactionService
from social.domain.value import ReactionAction
from social.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryReactionRepository,
)
from tests.factories import add_comment, add_post, add_reaction, add_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestNormalizeEmoji:
    """Tests for normalize_emoji."""

    def test_known_name_resolves_unicode(self):
        name, unicode = ReactionService.normalize_emoji("Thumbs Up")

        assert name.root == "thumbs_up"
        assert unicode.root == "\U0001f44d"

    def test_custom_name_keeps_given_unicode(self):
        name, unicode = ReactionService.normalize_emoji("party-parrot!", " 🦜 ")

        assert name.root == "partyparrot"
        assert unicode.root == "🦜"

    def test_custom_name_without_unicode_rejected(self):
        with pytest.raises(ValidationError, match="unicode is required"):
            ReactionService.normalize_emoji("party_parrot")

    def test_name_without_usable_characters_rejected(self):
        with pytest.raises(ValidationError, match="Emoji name"):
            ReactionService.normalize_emoji("!!!", "x")


class TestToggleCommentReaction:
    """Tests for toggle_comment_reaction."""

    @pytest.mark.asyncio
    async def test_add_then_remove_with_same_emoji(self, unit_env):
        # Arrange
        db = await unit_env.get(InMemoryDatabase)
        service = await unit_env.get(ReactionService)
        user = add_user(db)
        comment = add_comment(db, add_post(db, user.id).id, user.id)

        # Act
        first_action, reaction = await service.toggle_comment_reaction(
            user.id, comment.id, "heart"
        )
        second_action, removed = await service.toggle_comment_reaction(
            user.id, comment.id, "heart"
        )

        # Assert
        assert first_action is ReactionAction.ADDED
        assert reaction is not None and reaction.emoji_name.root == "heart"
        assert second_action is ReactionAction.REMOVED
        assert removed is None
        assert db.reactions == {}

    @pytest.mark.asyncio
    async def test_different_emoji_replaces_existing(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        service = await unit_env.get(ReactionService)
        user = add_user(db)
        comment = add_comment(db, add_post(db, user.id).id, user.id)
        existing = add_reaction(db, user.id, comment.id, "heart", "❤️")

        action, reaction = await service.toggle_comment_reaction(
            user.id, comment.id, "fire"
        )

        assert action is ReactionAction.UPDATED
        assert reaction.id == existing.id
        assert reaction.emoji_name.root == "fire"
        assert len(db.reactions) == 1


class RacingReactionRepository(InMemoryReactionRepository):
    """Lets another request insert a reaction right after the first lookup."""

    def __init__(self, database, competing_emoji, vanish=False):
        super().__init__(database)
        self.competing_emoji = competing_emoji
        self.vanish = vanish
        self.lookups = 0

    async def find_by_user_and_comment(self, user_id, comment_id):
        self.lookups += 1
        if self.lookups == 1:
            return None
        if self.vanish:
            self._db.reactions.clear()
            return None
        return await super().find_by_user_and_comment(user_id, comment_id)

    async def create(self, user_id, comment_id, emoji_name, emoji_unicode):
        name, unicode = self.competing_emoji
        add_reaction(self._db, user_id, comment_id, name, unicode)
        # The insert conflicts with the row that just landed
        return None


class TestConcurrentToggle:
    """A second toggle that loses the insert race acts on the winning row."""

    @pytest.mark.asyncio
    async def test_same_emoji_removes_winning_row(self):
        db = InMemoryDatabase()
        user = add_user(db)
        comment = add_comment(db, add_post(db, user.id).id, user.id)
        repository = RacingReactionRepository(db, ("heart", "❤️"))
        service = ReactionService(repository)

        action, reaction = await service.toggle_comment_reaction(
            user.id, comment.id, "heart"
        )

        assert action is ReactionAction.REMOVED
        assert reaction is None
        assert db.reactions == {}
        assert repository.lookups == 2

    @pytest.mark.asyncio
    async def test_other_emoji_replaces_winning_row(self):
        db = InMemoryDatabase()
        user = add_user(db)
        comment = add_comment(db, add_post(db, user.id).id, user.id)
        service = ReactionService(RacingReactionRepository(db, ("wow", "😮")))

        action, reaction = await service.toggle_comment_reaction(
            user.id, comment.id, "fire"
        )

        assert action is ReactionAction.UPDATED
        assert reaction.emoji_name.root == "fire"
        assert len(db.reactions) == 1

    @pytest.mark.asyncio
    async def test_row_gone_after_lost_insert_is_a_conflict(self):
        db = InMemoryDatabase()
        user = add_user(db)
        comment = add_comment(db, add_post(db, user.id).id, user.id)
        service = ReactionService(
            RacingReactionRepository(db, ("heart", "❤️"), vanish=True)
        )

        with pytest.raises(ConflictError, match="retry"):
            await service.toggle_comment_reaction(user.id, comment.id, "heart")

        assert db.reactions == {}


class TestReactionCounts:
    """Tests for grouped reaction tallies."""

    @pytest.mark.asyncio
    async def test_counts_ordered_by_count_then_name(self, unit_env):
        # Arrange
        db = await unit_env.get(InMemoryDatabase)
        service = await unit_env.get(ReactionService)
        users = [add_user(db, username=f"user{i}") for i in range(4)]
        post = add_post(db, users[0].id)
        first = add_comment(db, post.id, users[0].id)
        second = add_comment(db, post.id, users[0].id)
        quiet = add_comment(db, post.id, users[0].id)
        add_reaction(db, users[0].id, first.id, "wow", "😮")
        add_reaction(db, users[1].id, first.id, "heart", "❤️")
        add_reaction(db, users[2].id, first.id, "heart", "❤️")
        add_reaction(db, users[3].id, first.id, "clap", "👏")
        add_reaction(db, users[0].id, second.id, "fire", "🔥")

        # Act
        counts = await service.get_counts_for_comments([first.id, second.id, quiet.id])

        # Assert
        assert [(c.emoji_name, c.count) for c in counts[first.id]] == [
            ("heart", 2),
            ("clap", 1),
            ("wow", 1),
        ]
        assert [(c.emoji_name, c.count) for c in counts[second.id]] == [("fire", 1)]
        assert quiet.id not in counts

    @pytest.mark.asyncio
    async def test_no_ids_gives_empty_mapping(self, unit_env):
        service = await unit_env.get(ReactionService)

        assert await service.get_counts_for_comments([]) == {}
