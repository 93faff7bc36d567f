"""
Template
========

A fixed algorithm whose individual phases are supplied by a delegate.
BoardGameController.play() always opens the box first, then runs the
delegate's initialize() and start() phases in that order.
"""

from abc import ABC, abstractmethod
from typing import List

from behavioral.core.logger import get_logger

logger = get_logger(__name__)


class BoardGamePhases(ABC):
    @abstractmethod
    def initialize(self) -> str:
        ...

    @abstractmethod
    def start(self) -> str:
        ...


class BoardGameController:
    """Plays a board game through its delegate's phases."""

    def __init__(self, delegate: BoardGamePhases):
        self._delegate = delegate

    def _open_box(self) -> str:
        message = "BoardGameController open_box() executed"
        logger.info(message)
        return message

    def play(self) -> List[str]:
        """
        Run every phase of the game.

        Returns:
            Messages of the executed phases, in execution order
        """
        return [
            self._open_box(),
            self._delegate.initialize(),
            self._delegate.start(),
        ]


class _LoggedPhases(BoardGamePhases):
    def _phase(self, phase: str) -> str:
        message = f"{type(self).__name__} {phase}() executed"
        logger.info(message)
        return message

    def initialize(self) -> str:
        return self._phase("initialize")

    def start(self) -> str:
        return self._phase("start")


class Monopoly(_LoggedPhases):
    pass


class Battleship(_LoggedPhases):
    pass
