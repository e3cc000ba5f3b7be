"""Memento pattern: a text editor with undo snapshots.

The editor (originator) produces opaque snapshots of its own state; the
history (caretaker) stores them without looking inside. `FileSnapshotStore`
shows the same idea persisted to a plain text file.
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from .errors import PatternError

logger = logging.getLogger(__name__)


class EmptyHistoryError(PatternError):
    """Raised when popping a snapshot from an empty history."""

    def __init__(self) -> None:
        super().__init__("No snapshot left to restore.")


@dataclass(frozen=True, slots=True)
class EditorMemento:
    """Immutable snapshot of an editor's state."""

    content: str
    cursor: int
    taken_at: datetime


class Editor:
    """Originator."""

    def __init__(self) -> None:
        self.content = ""
        self.cursor = 0

    def type(self, text: str) -> None:
        self.content = self.content[: self.cursor] + text + self.content[self.cursor :]
        self.cursor += len(text)

    def move_cursor(self, position: int) -> None:
        self.cursor = max(0, min(len(self.content), position))

    def save(self) -> EditorMemento:
        return EditorMemento(
            content=self.content,
            cursor=self.cursor,
            taken_at=datetime.now(timezone.utc),
        )

    def restore(self, memento: EditorMemento) -> None:
        self.content = memento.content
        self.cursor = memento.cursor


class History:
    """Caretaker: a stack of snapshots."""

    def __init__(self) -> None:
        self._snapshots: list[EditorMemento] = []

    def __len__(self) -> int:
        return len(self._snapshots)

    def push(self, memento: EditorMemento) -> None:
        self._snapshots.append(memento)

    def pop(self) -> EditorMemento:
        """Remove and return the newest snapshot.

        Raises:
            EmptyHistoryError: If there is nothing to pop.
        """
        if not self._snapshots:
            raise EmptyHistoryError
        return self._snapshots.pop()


class FileSnapshotStore:
    """Persist one editor snapshot's content to a text file.

    The write goes to a temporary file in the same directory and is then moved
    into place, so a crash never leaves a half-written snapshot behind.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def save(self, memento: EditorMemento) -> Path:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps "\r\n" and "\r" byte-for-byte
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", newline="", dir=self.path.parent, delete=False
        ) as tmp:
            tmp_path = Path(tmp.name)
            try:
                tmp.write(memento.content)
            except BaseException:
                tmp.close()
                tmp_path.unlink(missing_ok=True)
                raise
        os.replace(tmp_path, self.path)
        logger.debug("Saved snapshot (%d chars) to %s", len(memento.content), self.path)
        return self.path

    def restore(self) -> EditorMemento:
        """Read the snapshot back; the cursor is placed at the end of the text.

        Line endings come back exactly as they were saved.

        Raises:
            FileNotFoundError: If no snapshot has been saved at this path.
        """
        try:
            with self.path.open(encoding="utf-8", newline="") as fh:
                content = fh.read()
        except FileNotFoundError:
            raise FileNotFoundError(f"No snapshot saved at {self.path}") from None
        return EditorMemento(
            content=content,
            cursor=len(content),
            taken_at=datetime.fromtimestamp(self.path.stat().st_mtime, timezone.utc),
        )


def demo() -> list[str]:
    """Type, snapshot, keep typing, then roll back."""
    editor = Editor()
    history = History()

    editor.type("Hello")
    history.push(editor.save())
    editor.type(", world")
    history.push(editor.save())
    editor.type("!!! typo")

    lines = [f"now: {editor.content!r}"]
    while history:
        editor.restore(history.pop())
        lines.append(f"restored: {editor.content!r}")
    return lines
