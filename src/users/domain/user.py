from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """
    Stored user record.
    Immutable: replacing a user means saving a new value under the same id.
    """
    id: int
    name: str
