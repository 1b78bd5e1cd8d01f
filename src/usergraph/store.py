"""
Process-local user store shared by every request
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from .logging import get_logger

logger = get_logger(__name__)


class UserValidationError(ValueError):
    """Raised when a user record is built with a missing field."""


@dataclass(frozen=True)
class UserRecord:
    """A single entry of the user directory."""

    id: str
    name: str
    email: str

    def __post_init__(self) -> None:
        for field_name in ("id", "name", "email"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value:
                raise UserValidationError(f"User {field_name} must be a non-empty string")


class UserStore:
    """Thread-safe mapping from user id to user record.

    Records are immutable, so handing one out never exposes the store's
    internal state. Inserts overwrite any previous record with the same id.
    """

    def __init__(self) -> None:
        self._users: dict[str, UserRecord] = {}
        self._lock = threading.Lock()

    def insert(self, user: UserRecord) -> None:
        """Record ``user`` under ``user.id``, replacing any prior value."""
        with self._lock:
            replaced = user.id in self._users
            self._users[user.id] = user

        logger.debug("User stored", user_id=user.id, replaced=replaced)

    def lookup(self, user_id: str) -> UserRecord | None:
        """Return the record stored under ``user_id``, or None when absent."""
        with self._lock:
            return self._users.get(user_id)
