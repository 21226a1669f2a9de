"""User repository interface and its in-memory implementation."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from grantdesk.accounts.models import User


class UserRepository(ABC):
    """Read access to user records. Records are returned by reference."""

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        ...

    @abstractmethod
    def list_users(self) -> list[User]:
        ...


class InMemoryUserRepository(UserRepository):
    """Repository over a fixed list of users held for the process lifetime."""

    def __init__(self, users: Iterable[User]):
        self._users = list(users)
        seen: set[str] = set()
        for user in self._users:
            if user.id in seen:
                raise ValueError(f"Duplicate user id: {user.id!r}")
            seen.add(user.id)

    def find_by_id(self, user_id: str) -> Optional[User]:
        # Linear scan; the store only ever holds a handful of users.
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def list_users(self) -> list[User]:
        return list(self._users)

    def __len__(self) -> int:
        return len(self._users)
