from enum import Enum
from typing import Union

from src.users.domain.exceptions import UnknownRepositoryBackendError
from src.users.interfaces.user_repository import UserRepository
from src.users.store.in_memory_list_user_repository import InMemoryListUserRepository
from src.users.store.in_memory_map_user_repository import InMemoryMapUserRepository


class RepositoryBackend(Enum):
    MAP = "map"
    LIST = "list"

    @classmethod
    def parse(cls, value: Union[str, "RepositoryBackend"]) -> "RepositoryBackend":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            known = ", ".join(b.value for b in cls)
            raise UnknownRepositoryBackendError(
                f"Unknown repository backend {value!r} (expected one of: {known})"
            ) from None


def build_user_repository(backend: Union[str, RepositoryBackend]) -> UserRepository:
    """
    Construct a fresh, empty repository for the selected backend.
    Selection happens once at construction; there is no runtime switch.
    """
    selected = RepositoryBackend.parse(backend)
    if selected is RepositoryBackend.MAP:
        return InMemoryMapUserRepository()
    return InMemoryListUserRepository()
