from threading import Lock
from typing import List, Optional

from src.users.domain.user import User
from src.users.interfaces.user_repository import UserRepository


class SynchronizedUserRepository(UserRepository):
    """
    Serialises every operation on the wrapped repository under one lock.
    The in-memory backends are single-threaded; wrap them with this when
    several threads share an instance.
    """

    def __init__(self, inner: UserRepository):
        self._inner = inner
        self._lock = Lock()

    def save(self, user: User) -> None:
        with self._lock:
            self._inner.save(user)

    def find_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._inner.find_by_id(user_id)

    def find_all(self) -> List[User]:
        with self._lock:
            return self._inner.find_all()

    def delete(self, user_id: int) -> None:
        with self._lock:
            self._inner.delete(user_id)
