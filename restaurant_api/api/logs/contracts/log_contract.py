from abc import ABC, abstractmethod


class ILogPersister(ABC):
    """Destination for activity entries produced by AppLogger."""

    @abstractmethod
    def persist(self, entry: dict) -> None:
        raise NotImplementedError
