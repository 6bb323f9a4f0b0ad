# mentions/pipeline/filters/__init__.py

from .markdown import markdown_filter
from .mention import (
    IGNORE_PARENTS,
    MENTION_CLASS,
    MENTION_PATTERN,
    MentionMatch,
    iter_mentions,
    mention_filter,
    mentioned_usernames_in,
)

__all__ = (
    "IGNORE_PARENTS",
    "MENTION_CLASS",
    "MENTION_PATTERN",
    "MentionMatch",
    "iter_mentions",
    "markdown_filter",
    "mention_filter",
    "mentioned_usernames_in",
)
