from typing import List, Optional

from src.users.domain.user import User
from src.users.interfaces.user_repository import UserRepository


class InMemoryListUserRepository(UserRepository):
    """
    List-backed repository scanned linearly.
    find_all returns users in append order. Saving an existing id drops the
    old record and appends the new one, so a replaced user moves to the end.
    """

    def __init__(self):
        self._storage: List[User] = []

    def save(self, user: User) -> None:
        user = self._require_user(user)
        self._remove(user.id)
        self._storage.append(user)

    def find_by_id(self, user_id: int) -> Optional[User]:
        return next((u for u in self._storage if u.id == user_id), None)

    def find_all(self) -> List[User]:
        return list(self._storage)

    def delete(self, user_id: int) -> None:
        self._remove(user_id)

    def _remove(self, user_id: int) -> None:
        self._storage = [u for u in self._storage if u.id != user_id]
