"""Reference user record satisfying the ``AuthUser`` protocol."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class StoredUser:
    """Immutable user record kept by ``InMemoryUserRepository``."""

    id: str
    username: str
    password_hash: str = field(repr=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("User id cannot be empty")
        if not self.username:
            raise ValueError("Username cannot be empty")
        if not self.password_hash:
            raise ValueError("Password hash cannot be empty")
