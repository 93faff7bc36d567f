"""
Unit tests for the Command base class and CommandHistory.
"""

import pytest

from behavioral.commands.base import Command, CommandHistory


class Counter:
    def __init__(self):
        self.value = 0
        self.log = []


class AddCommand(Command):
    """Adds a fixed amount to a Counter and records what it did."""

    def __init__(self, counter: Counter, amount: int):
        self.counter = counter
        self.amount = amount

    @property
    def name(self) -> str:
        return f"add {self.amount}"

    @property
    def description(self) -> str:
        return f"Add {self.amount} to the counter"

    def execute(self) -> None:
        self.counter.value += self.amount
        self.counter.log.append(("execute", self.amount))

    def unexecute(self) -> None:
        self.counter.value -= self.amount
        self.counter.log.append(("unexecute", self.amount))


class FailingUndoCommand(AddCommand):
    def unexecute(self) -> None:
        raise RuntimeError("cannot undo")


def run(history: CommandHistory, command: Command) -> None:
    command.execute()
    history.record(command)


@pytest.fixture
def counter():
    return Counter()


@pytest.fixture
def history(counter):
    """History holding add 1, add 2, add 3 (counter at 6)."""
    history = CommandHistory()
    for amount in (1, 2, 3):
        run(history, AddCommand(counter, amount))
    return history


class TestCommand:
    """Tests for the abstract Command base."""

    def test_cannot_instantiate_abstract_command(self):
        """Test that Command requires the abstract methods."""
        with pytest.raises(TypeError):
            Command()


class TestCommandHistory:
    """Tests for CommandHistory cursor movement."""

    def test_new_history_is_empty(self):
        """Test the initial state."""
        history = CommandHistory()

        assert len(history) == 0
        assert history.cursor == 0
        assert not history.can_undo
        assert not history.can_redo

    def test_record_advances_cursor(self, history):
        """Test that each recorded command is applied."""
        assert len(history) == 3
        assert history.cursor == 3
        assert history.can_undo
        assert not history.can_redo

    def test_undo_most_recent_first(self, history, counter):
        """Test that undo walks backwards through the history."""
        counter.log.clear()

        history.undo(2)

        assert counter.log == [("unexecute", 3), ("unexecute", 2)]
        assert counter.value == 1
        assert history.cursor == 1

    def test_redo_oldest_undone_first(self, history, counter):
        """Test that redo walks forward from the first undone command."""
        history.undo(3)
        counter.log.clear()

        history.redo(2)

        assert counter.log == [("execute", 1), ("execute", 2)]
        assert counter.value == 3
        assert history.cursor == 2

    def test_undo_clamps_at_start(self, history, counter):
        """Test that undoing past the start stops silently."""
        history.undo(10)

        assert history.cursor == 0
        assert counter.value == 0

    def test_redo_clamps_at_end(self, history, counter):
        """Test that redoing past the end stops silently."""
        history.undo(1)
        history.redo(10)

        assert history.cursor == 3
        assert counter.value == 6

    @pytest.mark.parametrize("levels", [0, -1, -100])
    def test_non_positive_levels_do_nothing(self, history, counter, levels):
        """Test that zero or negative levels perform no steps."""
        counter.log.clear()

        history.undo(levels)
        history.redo(levels)

        assert counter.log == []
        assert history.cursor == 3

    def test_commands_is_a_snapshot(self, history):
        """Test that callers cannot mutate the history through commands."""
        commands = history.commands

        assert isinstance(commands, tuple)
        assert [c.name for c in commands] == ["add 1", "add 2", "add 3"]

    def test_record_truncates_undone_tail(self, history, counter):
        """Test that recording after an undo drops the redo tail."""
        history.undo(2)

        run(history, AddCommand(counter, 10))

        assert [c.name for c in history.commands] == ["add 1", "add 10"]
        assert history.cursor == 2
        assert not history.can_redo

    def test_record_can_keep_undone_tail(self, counter):
        """Test the append-after-tail policy."""
        history = CommandHistory(truncate_on_record=False)
        for amount in (1, 2, 3):
            run(history, AddCommand(counter, amount))
        history.undo(2)

        run(history, AddCommand(counter, 10))

        assert [c.name for c in history.commands] == ["add 1", "add 2", "add 3", "add 10"]
        assert history.cursor == 2
        assert history.can_redo

    def test_failed_undo_keeps_cursor(self, counter):
        """Test that the cursor does not move past a command that failed to undo."""
        history = CommandHistory()
        run(history, AddCommand(counter, 1))
        run(history, FailingUndoCommand(counter, 2))

        with pytest.raises(RuntimeError):
            history.undo(2)

        assert history.cursor == 2
        assert counter.value == 3

    def test_clear(self, history):
        """Test that clear() forgets everything."""
        history.clear()

        assert len(history) == 0
        assert history.cursor == 0
