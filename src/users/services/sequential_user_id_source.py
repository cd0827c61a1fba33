from threading import Lock

from src.users.interfaces.user_id_source import UserIdSource


class SequentialUserIdSource(UserIdSource):
    """
    Monotonic integer sequence: new_id() increments, then returns.
    """
    def __init__(self, start: int = 0):
        self._value = start
        self._lock = Lock()

    def new_id(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    def current(self) -> int:
        # Last issued id (or the start value before the first new_id).
        with self._lock:
            return self._value
