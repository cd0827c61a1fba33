from abc import ABC, abstractmethod

class UserIdSource(ABC):
    """
    Abstract source of caller-assigned user ids.
    Repositories never allocate ids themselves.
    """
    @abstractmethod
    def new_id(self) -> int:
        pass

    @abstractmethod
    def current(self) -> int:
        """
        Last issued id, without advancing the sequence.
        """
        pass
