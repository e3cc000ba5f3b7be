"""Command pattern: a light remote control with undo.

Each button press is an object that knows its receiver and how to reverse
itself, so the invoker can keep a history without knowing what any command does.
"""

from __future__ import annotations

import abc
import logging

from .errors import PatternError

logger = logging.getLogger(__name__)


class NothingToUndoError(PatternError):
    """Raised when undo is requested with an empty history."""

    def __init__(self) -> None:
        super().__init__("There is no command to undo.")


class Light:
    """Receiver: the thing the commands act on."""

    def __init__(self, room: str) -> None:
        self.room = room
        self.brightness = 0

    @property
    def is_on(self) -> bool:
        return self.brightness > 0

    def set_brightness(self, level: int) -> None:
        self.brightness = max(0, min(100, level))


class Command(abc.ABC):
    """A reversible action."""

    @abc.abstractmethod
    def execute(self) -> None:
        """Perform the action."""

    @abc.abstractmethod
    def undo(self) -> None:
        """Reverse the action."""


class _LightCommand(Command):
    """Shared undo: remembers the light's brightness before executing."""

    def __init__(self, light: Light) -> None:
        self.light = light
        self._previous = 0

    def undo(self) -> None:
        self.light.set_brightness(self._previous)

    def _remember(self) -> None:
        self._previous = self.light.brightness


class TurnOn(_LightCommand):
    def execute(self) -> None:
        self._remember()
        self.light.set_brightness(100)


class TurnOff(_LightCommand):
    def execute(self) -> None:
        self._remember()
        self.light.set_brightness(0)


class Dim(_LightCommand):
    """Set the light to a given brightness (0-100)."""

    def __init__(self, light: Light, level: int) -> None:
        super().__init__(light)
        self.level = level

    def execute(self) -> None:
        self._remember()
        self.light.set_brightness(self.level)


class RemoteControl:
    """Invoker: runs commands and remembers them for undo."""

    def __init__(self) -> None:
        self._history: list[Command] = []

    @property
    def history(self) -> tuple[Command, ...]:
        return tuple(self._history)

    def press(self, command: Command) -> None:
        logger.debug("Executing %s", type(command).__name__)
        command.execute()
        self._history.append(command)

    def undo(self) -> Command:
        """Undo the most recent command and return it.

        Raises:
            NothingToUndoError: If no command has been executed.
        """
        if not self._history:
            raise NothingToUndoError
        command = self._history.pop()
        logger.debug("Undoing %s", type(command).__name__)
        command.undo()
        return command


def demo() -> list[str]:
    """Press a few buttons, then undo them one by one."""
    light = Light("kitchen")
    remote = RemoteControl()
    lines = []
    for command in (TurnOn(light), Dim(light, 40), TurnOff(light)):
        remote.press(command)
        lines.append(f"{type(command).__name__}: {light.brightness}%")
    while remote.history:
        undone = remote.undo()
        lines.append(f"undo {type(undone).__name__}: {light.brightness}%")
    return lines
