"""
Strategy
========

A family of interchangeable algorithms, one of which is chosen at run time.
Here the algorithm decides how a file name becomes a saved path.
"""

from abc import ABC, abstractmethod

from behavioral.core.logger import get_logger

logger = get_logger(__name__)


class Strategy(ABC):
    @abstractmethod
    def save(self, file_name: str) -> str:
        """Return the path ``file_name`` is saved under."""
        ...


class DocFileStrategy(Strategy):
    def save(self, file_name: str) -> str:
        return f"{file_name}.doc"


class TextFileStrategy(Strategy):
    def save(self, file_name: str) -> str:
        return f"{file_name}.txt"


class SaveFileDialog:
    def __init__(self, strategy: Strategy):
        self._strategy = strategy

    def save(self, file_name: str) -> str:
        path = self._strategy.save(file_name)
        logger.info(f"Saved in {path}")
        return path
