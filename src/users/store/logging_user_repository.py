from typing import List, Optional

from src.users.domain.user import User
from src.users.interfaces.user_repository import UserRepository
from src.users.logging.structured_repository_logger import StructuredRepositoryLogger


class LoggingUserRepository(UserRepository):
    """
    Delegates to another repository and emits one structured event per call.
    Every event carries the backend name.
    """

    def __init__(
        self,
        inner: UserRepository,
        logger: Optional[StructuredRepositoryLogger] = None,
        backend_name: Optional[str] = None,
    ):
        self._inner = inner
        base = logger or StructuredRepositoryLogger()
        self._logger = base.bind(backend=backend_name or type(inner).__name__)

    def save(self, user: User) -> None:
        self._inner.save(user)
        self._logger.emit("user_saved", user_id=user.id)

    def find_by_id(self, user_id: int) -> Optional[User]:
        user = self._inner.find_by_id(user_id)
        self._logger.emit("user_lookup", user_id=user_id, found=user is not None)
        return user

    def find_all(self) -> List[User]:
        users = self._inner.find_all()
        self._logger.emit("user_listed", count=len(users))
        return users

    def delete(self, user_id: int) -> None:
        self._inner.delete(user_id)
        self._logger.emit("user_deleted", user_id=user_id)
