import pytest

from src.users.domain.exceptions import UnknownRepositoryBackendError
from src.users.domain.user import User
from src.users.services.repository_factory import RepositoryBackend, build_user_repository
from src.users.store.in_memory_list_user_repository import InMemoryListUserRepository
from src.users.store.in_memory_map_user_repository import InMemoryMapUserRepository


@pytest.mark.parametrize(
    "value, expected",
    [
        ("map", InMemoryMapUserRepository),
        ("LIST", InMemoryListUserRepository),
        (" List ", InMemoryListUserRepository),
        (RepositoryBackend.MAP, InMemoryMapUserRepository),
    ],
)
def test_build_user_repository_selects_backend(value, expected):
    repo = build_user_repository(value)
    assert type(repo) is expected
    assert repo.find_all() == []


def test_each_build_returns_fresh_instance():
    first = build_user_repository("map")
    first.save(User(1, "jack"))

    second = build_user_repository("map")
    assert second.find_by_id(1) is None


def test_unknown_backend_rejected():
    with pytest.raises(UnknownRepositoryBackendError):
        RepositoryBackend.parse("postgres")
    with pytest.raises(ValueError):
        build_user_repository("")
