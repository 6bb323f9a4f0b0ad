# mentions/pipeline/filters/mention.py
"""
Filter that turns @username mentions into profile links.

    <p>@kneath: check it out.</p>
        → <p><a href="/kneath" class="user-mention">@kneath</a>: check it out.</p>

Only text content is scanned. Text inside links, preformatted blocks and
code (and script/style bodies) is left alone, so running the filter over
its own output changes nothing.

Every candidate is checked with the ``user_resolver`` from the context; a
name the resolver does not know stays plain text. Linked usernames are
collected in ``result["mentioned_users"]`` in first-occurrence order.
"""

import logging
import re
from typing import Iterator, List, NamedTuple, Optional

from bs4 import NavigableString

from ..utils import has_ancestor, is_text_node, tag_factory, to_document
from ...config import DEFAULT_BASE_URL, DEFAULT_USERNAME_MAX_LENGTH

logger = logging.getLogger(__name__)

# Mentions inside these elements are never linked
IGNORE_PARENTS = frozenset({"a", "pre", "code", "script", "style"})

MENTION_CLASS = "user-mention"

MENTION_PATTERN = re.compile(
    r"""
    (?<!\w)                      # not part of a word (rules out emails)
    @([a-z0-9][a-z0-9-]*)        # @username
    (?![a-z0-9-])                # take the whole name, never a shorter prefix
    (?!/)                        # not an @org/team mention
    (?=
        \.+[ \t\W]               # dots followed by space or non-word character
        |\.+$                    # dots at end of line
        |[^0-9a-z_.]             # non-word character except dot
        |$                       # end of line
    )
    """,
    re.ASCII | re.IGNORECASE | re.MULTILINE | re.VERBOSE,
)


class MentionMatch(NamedTuple):
    """A mention found in one text node. ``start``/``end`` cover ``text``."""

    text: str
    username: str
    start: int
    end: int


def iter_mentions(
    text: str, max_length: Optional[int] = DEFAULT_USERNAME_MAX_LENGTH
) -> Iterator[MentionMatch]:
    """
    Yield every syntactically valid mention in ``text``.

    Names are not validated against any user store. Trailing hyphens are
    not part of a username and are left outside the match.
    """
    for match in MENTION_PATTERN.finditer(text):
        username = match.group(1).rstrip("-")
        if max_length is not None and len(username) > max_length:
            logger.debug("Ignoring over-long mention %r", username)
            continue
        start = match.start()
        end = match.start(1) + len(username)
        yield MentionMatch(text[start:end], username, start, end)


def mentioned_usernames_in(
    text: str, max_length: Optional[int] = DEFAULT_USERNAME_MAX_LENGTH
) -> List[str]:
    """Distinct mentioned names in ``text``, in order of first appearance."""
    usernames = []
    for mention in iter_mentions(text, max_length):
        if mention.username not in usernames:
            usernames.append(mention.username)
    return usernames


def _mention_link(soup, username: str, base_url: str):
    link = soup.new_tag("a", href=f"{base_url}{username}")
    link["class"] = MENTION_CLASS
    link.string = f"@{username}"
    return link


def _replace_mentions(text_node, soup, resolver, base_url, max_length, mentioned):
    """
    Split one text node around its resolvable mentions.

    Returns True when the node was replaced.
    """
    text = str(text_node)
    new_nodes = []
    position = 0

    for mention in iter_mentions(text, max_length):
        if resolver is None or not resolver(mention.username):
            continue

        if mention.start > position:
            new_nodes.append(NavigableString(text[position:mention.start]))
        new_nodes.append(_mention_link(soup, mention.username, base_url))
        position = mention.end

        if mention.username not in mentioned:
            mentioned.append(mention.username)

    if not new_nodes:
        return False

    if position < len(text):
        new_nodes.append(NavigableString(text[position:]))

    # Insert all new nodes before the original, then drop it
    for node in new_nodes:
        text_node.insert_before(node)
    text_node.extract()
    return True


def mention_filter(doc, context=None, result=None):
    """
    Link @mentions of known users.

    Args:
        doc: Fragment to rewrite in place, or an HTML string to parse
        context: Reads ``base_url``, ``user_resolver`` and
            ``username_max_length``. The resolver may return a user or a
            bool; a falsy answer means the name is not linked.
        result: Shared result dict; ``mentioned_users`` is extended with
            each linked name as written. Duplicates are collapsed by exact
            spelling, so ``@kneath @KNEATH`` records both forms.

    Returns:
        The rewritten fragment. A fragment argument is returned as is.
    """
    context = context or {}
    if result is None:
        result = {}

    doc = to_document(doc)
    soup = tag_factory(doc)

    base_url = context.get("base_url", DEFAULT_BASE_URL)
    resolver = context.get("user_resolver")
    max_length = context.get("username_max_length", DEFAULT_USERNAME_MAX_LENGTH)
    mentioned = result.setdefault("mentioned_users", [])

    # Collect first: replacing nodes while walking descendants breaks the walk
    text_nodes = [
        node
        for node in doc.descendants
        if is_text_node(node) and "@" in node and not has_ancestor(node, IGNORE_PARENTS)
    ]

    replaced = 0
    for text_node in text_nodes:
        if _replace_mentions(text_node, soup, resolver, base_url, max_length, mentioned):
            replaced += 1

    logger.debug("Linked mentions in %d of %d candidate text nodes", replaced, len(text_nodes))
    return doc
