"""In-memory text buffer backed by an optional file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


def _split_lines(text: str) -> list[str]:
    """Split text into lines, dropping one trailing newline and any CR before LF."""
    if text.endswith("\n"):
        text = text[:-1]
    if not text:
        return []
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


@dataclass
class Buffer:
    """Lines of text, optionally associated with a file on disk."""

    file: str | None = None
    lines: list[str] = field(default_factory=list)

    @classmethod
    def from_file(cls, file: str | None) -> Buffer:
        """Load a buffer from ``file``, or create an empty one when ``file`` is None."""
        if file is None:
            return cls(file=None, lines=[])
        text = Path(file).read_text(encoding="utf-8")
        return cls(file=file, lines=_split_lines(text))

    def get(self, line: int) -> str | None:
        """Return the text of ``line``, or None when it does not exist."""
        if 0 <= line < len(self.lines):
            return self.lines[line]
        return None

    def __len__(self) -> int:
        return len(self.lines)

    def insert(self, x: int, y: int, c: str) -> None:
        """Insert ``c`` at column ``x`` of line ``y``.

        A line shorter than ``x`` is padded with spaces first. When line ``y``
        does not exist, a new line holding ``c`` at column ``x`` is appended.
        """
        if 0 <= y < len(self.lines):
            line = self.lines[y]
            if len(line) < x:
                line += " " * (x - len(line))
            self.lines[y] = line[:x] + c + line[x:]
        else:
            self.lines.append(" " * max(x, 0) + c)

    def remove(self, x: int, y: int) -> None:
        """Delete the character at column ``x`` of line ``y`` if it exists."""
        if 0 <= y < len(self.lines):
            line = self.lines[y]
            if 0 <= x < len(line):
                self.lines[y] = line[:x] + line[x + 1:]

    def save(self) -> None:
        """Write the lines back to the associated file, if there is one."""
        if self.file is not None:
            Path(self.file).write_text("\n".join(self.lines), encoding="utf-8")

    def remove_line(self, y: int) -> None:
        """Delete line ``y`` if it exists."""
        if 0 <= y < len(self.lines):
            del self.lines[y]