# commands/base.py
"""
Command Pattern Infrastructure
==============================

Base class for reversible commands and the cursor-based history that
replays them backward and forward.

The command pattern encapsulates a request as an object, so it can be
executed immediately and later reversed or re-applied:
- Undo/redo over a linear history
- Multi-level undo/redo that clamps silently at either end
- Choice between truncating or keeping the redo tail when new work is recorded

Usage:
    from behavioral.commands import Command, CommandHistory

    class IncrementCommand(Command):
        def __init__(self, counter):
            self.counter = counter

        @property
        def name(self) -> str:
            return "Increment"

        @property
        def description(self) -> str:
            return "Add one to the counter"

        def execute(self) -> None:
            self.counter.value += 1

        def unexecute(self) -> None:
            self.counter.value -= 1

    history = CommandHistory()
    cmd = IncrementCommand(counter)
    cmd.execute()
    history.record(cmd)
    history.undo(1)  # Reverts the increment
    history.redo(1)  # Applies it again
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Tuple, TypeVar

from behavioral.core.logger import get_logger

logger = get_logger(__name__)


class Command(ABC):
    """
    Abstract base class for reversible commands.

    Subclasses must implement:
        - execute(): Perform the command operation
        - unexecute(): Reverse the effect of execute()
        - name: Human-readable command name
        - description: What the command does
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this command."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Description of what this command does."""
        ...

    @abstractmethod
    def execute(self) -> None:
        """Execute the command."""
        ...

    @abstractmethod
    def unexecute(self) -> None:
        """Reverse the effect of execute()."""
        ...


C = TypeVar("C", bound=Command)


class CommandHistory(Generic[C]):
    """
    Ordered list of executed commands with a movable cursor.

    Commands at an index below the cursor are applied; commands at or above
    it have been undone and may be redone. The cursor always satisfies
    ``0 <= cursor <= len(history)``.

    Args:
        truncate_on_record: Drop the undone tail when a new command is
            recorded. When False, new commands are appended after the undone
            tail and a later redo replays that stale tail first.
    """

    def __init__(self, truncate_on_record: bool = True):
        self._commands: List[C] = []
        self._cursor = 0
        self.truncate_on_record = truncate_on_record

    def __len__(self) -> int:
        return len(self._commands)

    @property
    def cursor(self) -> int:
        """Number of commands currently applied."""
        return self._cursor

    @property
    def commands(self) -> Tuple[C, ...]:
        """All recorded commands, applied and undone, oldest first."""
        return tuple(self._commands)

    @property
    def can_undo(self) -> bool:
        """Check if there are commands to undo."""
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        """Check if there are commands to redo."""
        return self._cursor < len(self._commands)

    def record(self, command: C) -> None:
        """
        Record a command that has already been executed.

        Args:
            command: The executed command
        """
        if self.truncate_on_record and self._cursor < len(self._commands):
            dropped = len(self._commands) - self._cursor
            del self._commands[self._cursor:]
            logger.debug(f"Discarded {dropped} undone command(s)")
        self._commands.append(command)
        self._cursor += 1

    def undo(self, levels: int) -> None:
        """
        Undo up to ``levels`` commands, most recently applied first.

        Stops silently once nothing is left to undo. If a command fails to
        unexecute, the error propagates and the cursor stays on that command.

        Args:
            levels: Maximum number of commands to undo
        """
        for _ in range(levels):
            if not self.can_undo:
                break
            self._commands[self._cursor - 1].unexecute()
            self._cursor -= 1

    def redo(self, levels: int) -> None:
        """
        Redo up to ``levels`` commands, oldest undone command first.

        Stops silently once nothing is left to redo. If a command fails to
        execute, the error propagates and the cursor stays before that command.

        Args:
            levels: Maximum number of commands to redo
        """
        for _ in range(levels):
            if not self.can_redo:
                break
            self._commands[self._cursor].execute()
            self._cursor += 1

    def clear(self) -> None:
        """Forget all recorded commands without reversing them."""
        self._commands.clear()
        self._cursor = 0
