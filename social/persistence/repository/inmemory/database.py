"""Shared in-memory store backing the in-memory repositories."""

from itertools import count

from social.domain.model import Comment, Media, Post, Reaction, User
from social.domain.value import CommentId, MediaId, PostId, ReactionId, UserId


class InMemoryDatabase:
    """Tables as dicts keyed by ID, with per-table ID sequences.

    Repositories built on the same instance see each other's writes, which
    lets a comment delete cascade into reactions and media the way the
    foreign keys do in PostgreSQL.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.posts: dict[PostId, Post] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.reactions: dict[ReactionId, Reaction] = {}
        self.media: dict[MediaId, Media] = {}

        self._sequences = {
            "users": count(1),
            "posts": count(1),
            "comments": count(1),
            "reactions": count(1),
            "media": count(1),
        }

    def next_id(self, table: str) -> int:
        return next(self._sequences[table])

    def delete_comment_subtree(self, comment_id: CommentId) -> None:
        """Remove a comment, every reply below it, and their reactions and media."""
        doomed = {comment_id}
        frontier = [comment_id]
        while frontier:
            parent_id = frontier.pop()
            for comment in self.comments.values():
                if comment.parent_id == parent_id and comment.id not in doomed:
                    doomed.add(comment.id)
                    frontier.append(comment.id)

        for doomed_id in doomed:
            self.comments.pop(doomed_id, None)
        self.reactions = {
            k: r for k, r in self.reactions.items() if r.comment_id not in doomed
        }
        self.media = {k: m for k, m in self.media.items() if m.comment_id not in doomed}
