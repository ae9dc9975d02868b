"""In-memory user repository for prototyping and tests."""

import logging
import threading
from typing import Dict, List, Optional
from uuid import uuid4

from ...core.entities import StoredUser
from ...core.exceptions import StorageConflict, UserNotFound, mask_username

logger = logging.getLogger(__name__)


class InMemoryUserRepository:
    """Dict-backed implementation of the ``UserRepository`` protocol.

    Usernames are unique and case-sensitive. Ids are UUID4 strings.
    Thread-safe; contents are lost with the process.
    """

    def __init__(self) -> None:
        self._users_by_username: Dict[str, StoredUser] = {}
        self._users_by_id: Dict[str, StoredUser] = {}
        self._lock = threading.Lock()

    def find_by_username(self, username: str) -> StoredUser:
        """Look up a user by login name.

        Raises:
            UserNotFound: If no user has this username
        """
        with self._lock:
            user = self._users_by_username.get(username)
        if user is None:
            raise UserNotFound(username=username)
        return user

    def find_by_id(self, user_id: str) -> Optional[StoredUser]:
        """Look up a user by identity, ``None`` if absent."""
        with self._lock:
            return self._users_by_id.get(user_id)

    def create_user(self, username: str, password_hash: str) -> StoredUser:
        """Store a new user.

        Raises:
            StorageConflict: If the username is taken or the record is invalid
        """
        try:
            user = StoredUser(id=str(uuid4()), username=username, password_hash=password_hash)
        except ValueError as e:
            raise StorageConflict(str(e), username=username, reason="invalid_record") from e

        with self._lock:
            if username in self._users_by_username:
                raise StorageConflict.duplicate_username(username)
            self._users_by_username[username] = user
            self._users_by_id[user.id] = user

        logger.info(f"Created user {mask_username(username)} ({user.id})")
        return user

    def list_all(self) -> List[StoredUser]:
        with self._lock:
            return list(self._users_by_username.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._users_by_username)
