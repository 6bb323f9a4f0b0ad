"""
Username resolvers for the mention filter.

A resolver is any callable taking a candidate username and returning the
matching user (any truthy identity) or None. Plain predicates returning
True/False work too. The mention filter only links names with a truthy
answer.
"""

import logging
from typing import Any, Iterable, Optional, Protocol

from django.contrib.auth import get_user_model

logger = logging.getLogger(__name__)


class UsernameResolver(Protocol):
    def __call__(self, username: str) -> Optional[Any]: ...


class StaticUserResolver:
    """
    Resolve names against a fixed collection of usernames.

    Returns the username as stored, so ``@KNEATH`` resolves to ``kneath``
    unless ``case_sensitive`` is set.
    """

    def __init__(self, usernames: Iterable[str], case_sensitive: bool = False):
        self.case_sensitive = case_sensitive
        self._usernames = {}
        for username in usernames:
            self._usernames.setdefault(self._key(username), username)

    def _key(self, username: str) -> str:
        return username if self.case_sensitive else username.lower()

    def __call__(self, username: str) -> Optional[str]:
        return self._usernames.get(self._key(username))

    def __contains__(self, username: str) -> bool:
        return self(username) is not None

    def __len__(self):
        return len(self._usernames)


def model_user_resolver(username: str):
    """
    Look ``username`` up in the project's user model.

    Matches ``USERNAME_FIELD`` case-insensitively and ignores inactive
    accounts. Database errors propagate.
    """
    User = get_user_model()
    lookup = {f"{User.USERNAME_FIELD}__iexact": username, "is_active": True}
    user = User.objects.filter(**lookup).first()
    if user is None:
        logger.debug("No user found for mention %r", username)
    return user
