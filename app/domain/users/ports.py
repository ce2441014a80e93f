"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Optional

from app.domain.users.entities import User


class UserRepository(ABC):
    """Port for storing and retrieving user records."""

    @abstractmethod
    def find_all(self) -> list[User]:
        """Return every stored user."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        """Return the user with the given id, or None."""
        raise NotImplementedError

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """Return the user owning the given email, or None."""
        raise NotImplementedError

    @abstractmethod
    def find_many_by_id(self, user_ids: Iterable[str]) -> list[User]:
        """Return the stored users whose id is in `user_ids`."""
        raise NotImplementedError

    @abstractmethod
    def create(self, fields: dict[str, Any]) -> User:
        """Insert a new user and return the stored record.

        Args:
            fields: name, email and password of the new user.

        Raises:
            DuplicateEmailError: If the store rejects the email as taken.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, user_id: str, fields: dict[str, Any]) -> User:
        """Apply `fields` to an existing user and return the stored record.

        Raises:
            UserNotFoundError: If no user has `user_id`.
            DuplicateEmailError: If the store rejects the email as taken.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, user_id: str) -> None:
        """Permanently delete a user.

        Raises:
            UserNotFoundError: If no user has `user_id`.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_many(self, user_ids: Iterable[str]) -> int:
        """Delete every user whose id is in `user_ids`.

        Returns:
            Number of rows deleted.
        """
        raise NotImplementedError
