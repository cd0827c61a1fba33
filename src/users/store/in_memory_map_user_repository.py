from typing import Dict, List, Optional

from src.users.domain.user import User
from src.users.interfaces.user_repository import UserRepository


class InMemoryMapUserRepository(UserRepository):
    """
    Dict-backed repository keyed by user id.
    find_all order follows the dict and is not part of the contract.
    Not suitable for persistence across process restarts.
    """

    def __init__(self):
        self._storage: Dict[int, User] = {}

    def save(self, user: User) -> None:
        user = self._require_user(user)
        self._storage[user.id] = user

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self._storage.get(user_id)

    def find_all(self) -> List[User]:
        return list(self._storage.values())

    def delete(self, user_id: int) -> None:
        self._storage.pop(user_id, None)
