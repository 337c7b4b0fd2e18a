from abc import ABC, abstractmethod
from typing import Optional


class BaseRateSource(ABC):
    @abstractmethod
    def fetch(self) -> bytes:
        """Return the raw rates document or raise ExternalSourceError."""
        pass


class BaseSnapshotStore(ABC):
    @abstractmethod
    def is_valid(self) -> bool:
        pass

    @abstractmethod
    def read(self) -> Optional[bytes]:
        pass

    @abstractmethod
    def write(self, body: bytes) -> bool:
        pass
