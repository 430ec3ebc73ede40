"""Comment tree assembly.

Turns a flat working set of comments into a forest of root comments with
nested replies. Nodes live in an id -> node index; child lists hold
references into that index, so no node owns another.
"""

from dataclasses import dataclass, field
from typing import Iterable

from social.domain.model.comment import Comment
from social.domain.value import CommentId, CommentSort


@dataclass
class CommentTreeNode:
    """Node in a post's reply tree."""

    comment: Comment
    replies: list["CommentTreeNode"] = field(default_factory=list)


def build_comment_tree(
    comments: Iterable[Comment], sort: CommentSort = CommentSort.OLDEST
) -> list[CommentTreeNode]:
    """Build a reply forest from a flat list of comments.

    Algorithm:
    1. Index every comment by ID with an empty replies list
    2. Attach each comment to its parent's replies when the parent is in
       the working set, otherwise treat it as a root
    3. Sort every level of the forest by creation time

    A comment whose parent is not in the working set (filtered out or on
    another page) shows up as a root instead of being dropped.

    Args:
        comments: Working set, in any order
        sort: Creation-time ordering applied at every level

    Returns:
        Root nodes with replies populated
    """
    index: dict[CommentId, CommentTreeNode] = {}
    for comment in comments:
        index[comment.id] = CommentTreeNode(comment=comment)

    roots: list[CommentTreeNode] = []
    for node in index.values():
        parent_id = node.comment.parent_id
        parent = index.get(parent_id) if parent_id is not None else None
        if parent is None or parent is node:
            roots.append(node)
        else:
            parent.replies.append(node)

    sort_comment_tree(roots, sort)
    return roots


def sort_comment_tree(nodes: list[CommentTreeNode], sort: CommentSort) -> None:
    """Sort a forest in place, siblings ordered by creation time at every level.

    Ties on created_at are broken by ID so sibling order is deterministic.
    """
    pending = [nodes]
    while pending:
        siblings = pending.pop()
        siblings.sort(
            key=lambda node: (node.comment.created_at, node.comment.id),
            reverse=sort.descending,
        )
        pending.extend(node.replies for node in siblings if node.replies)


def flatten_comment_tree(nodes: list[CommentTreeNode]) -> list[Comment]:
    """Pre-order traversal: every parent appears before its replies."""
    flat: list[Comment] = []
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        flat.append(node.comment)
        stack.extend(reversed(node.replies))
    return flat
