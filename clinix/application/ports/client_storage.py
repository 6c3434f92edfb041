from abc import ABC, abstractmethod


class ClientStoragePort(ABC):
    """String key/value storage that outlives a single page session."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        raise NotImplementedError

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def remove_item(self, key: str) -> None:
        raise NotImplementedError
