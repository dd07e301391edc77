"""Logger interface.

Any object implementing these methods can stand in for the shared logger.
Keyword arguments are structured fields attached to the record.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract structured logger"""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        pass
