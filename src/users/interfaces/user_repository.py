from abc import ABC, abstractmethod
from typing import List, Optional

from src.users.domain.exceptions import InvalidUserError
from src.users.domain.user import User


class UserRepository(ABC):
    """
    Storage contract for users, keyed by User.id.
    Callers must not depend on which backend sits behind it.
    """

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Return the stored user with this id.
        Returns None if no such user exists; never raises for an unknown id.
        """
        pass

    @abstractmethod
    def find_all(self) -> List[User]:
        """
        Return every stored user as a new list.
        Order is defined by the backend. The returned list is a snapshot.
        """
        pass

    @abstractmethod
    def save(self, user: User) -> None:
        """
        Insert the user, or fully replace the stored user with the same id.
        """
        pass

    @abstractmethod
    def delete(self, user_id: int) -> None:
        """
        Remove the user with this id. No-op if absent.
        """
        pass

    @staticmethod
    def _require_user(user: User) -> User:
        if not isinstance(user, User):
            raise InvalidUserError(f"Expected User, got {type(user).__name__}")
        return user
