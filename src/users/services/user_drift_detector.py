import hashlib
import json
from dataclasses import dataclass
from typing import Iterable, List

from src.users.domain.user import User
from src.users.interfaces.user_repository import UserRepository


@dataclass(frozen=True)
class DriftReport:
    entity: str
    left_count: int
    right_count: int
    left_checksum: str
    right_checksum: str

    @property
    def clean(self) -> bool:
        return self.left_count == self.right_count and self.left_checksum == self.right_checksum


def _checksum(lines: Iterable[str]) -> str:
    h = hashlib.sha256()
    for line in lines:
        h.update(line.encode("utf-8"))
        h.update(b"\n")
    return h.hexdigest()


def _user_key(item: User) -> str:
    return json.dumps([item.id, item.name], ensure_ascii=True)


def detect_user_drift(left: UserRepository, right: UserRepository) -> DriftReport:
    """
    Compare the contents of two repositories, ignoring enumeration order.
    """
    left_keys = sorted(_user_key(x) for x in left.find_all())
    right_keys = sorted(_user_key(x) for x in right.find_all())
    return DriftReport(
        entity="users:all",
        left_count=len(left_keys),
        right_count=len(right_keys),
        left_checksum=_checksum(left_keys),
        right_checksum=_checksum(right_keys),
    )


def compare_lookups(left: UserRepository, right: UserRepository, user_ids: Iterable[int]) -> List[int]:
    """
    Return the ids for which find_by_id disagrees between the two repositories.
    """
    return [i for i in user_ids if left.find_by_id(i) != right.find_by_id(i)]
