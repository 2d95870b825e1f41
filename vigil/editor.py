"""Modal editing state: viewport, cursor, modes and key handling."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple, Union

from .buffer import Buffer


class Mode(Enum):
    """Editing mode."""

    NORMAL = auto()
    INSERT = auto()


class CursorStyle(Enum):
    """Shape the terminal cursor should take."""

    DEFAULT_USER_SHAPE = auto()
    STEADY_BAR = auto()
    STEADY_UNDERSCORE = auto()


class KeyCode(Enum):
    """Kinds of keys the editor distinguishes."""

    CHAR = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    HOME = auto()
    END = auto()
    ESC = auto()
    BACKSPACE = auto()
    ENTER = auto()
    TAB = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press; ``char`` is set for ``KeyCode.CHAR``."""

    code: KeyCode
    char: Optional[str] = None
    ctrl: bool = False


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal changed size."""

    width: int
    height: int


Event = Union[KeyEvent, ResizeEvent]


class ActionKind(Enum):
    """What an action does to the editor."""

    QUIT = auto()
    SAVE = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_TO_LINE_END = auto()
    MOVE_TO_LINE_START = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    INSERT_CHAR = auto()
    DELETE_CHAR = auto()
    DELETE_CURRENT_LINE = auto()
    SET_WAITING_COMMAND = auto()
    NEW_LINE = auto()
    ENTER_MODE = auto()


@dataclass(frozen=True)
class Action:
    """An editor action, with its character or target mode where relevant."""

    kind: ActionKind
    char: Optional[str] = None
    mode: Optional[Mode] = None


_NORMAL_KEYS = {
    KeyCode.UP: Action(ActionKind.MOVE_UP),
    KeyCode.DOWN: Action(ActionKind.MOVE_DOWN),
    KeyCode.LEFT: Action(ActionKind.MOVE_LEFT),
    KeyCode.RIGHT: Action(ActionKind.MOVE_RIGHT),
    KeyCode.HOME: Action(ActionKind.MOVE_TO_LINE_START),
    KeyCode.END: Action(ActionKind.MOVE_TO_LINE_END),
}

_NORMAL_CHARS = {
    "q": Action(ActionKind.QUIT),
    "k": Action(ActionKind.MOVE_UP),
    "j": Action(ActionKind.MOVE_DOWN),
    "h": Action(ActionKind.MOVE_LEFT),
    "l": Action(ActionKind.MOVE_RIGHT),
    "i": Action(ActionKind.ENTER_MODE, mode=Mode.INSERT),
    "0": Action(ActionKind.MOVE_TO_LINE_START),
    "$": Action(ActionKind.MOVE_TO_LINE_END),
    "d": Action(ActionKind.SET_WAITING_COMMAND, char="d"),
}

_CTRL_CHARS = {
    "b": Action(ActionKind.PAGE_UP),
    "f": Action(ActionKind.PAGE_DOWN),
    "s": Action(ActionKind.SAVE),
}


class Editor:
    """Cursor, viewport and mode over a buffer, driven by events and actions."""

    def __init__(self, buffer: Buffer, size: Tuple[int, int]) -> None:
        self.buffer = buffer
        self.size = tuple(size)
        self.mode = Mode.NORMAL
        self.vtop = 0
        self.vleft = 0
        self.cx = 0
        self.cy = 0
        self.waiting_command: Optional[str] = None
        self.quit_requested = False

    def vwidth(self) -> int:
        """Width of the text area."""
        return self.size[0]

    def vheight(self) -> int:
        """Height of the text area, leaving room for the status line."""
        return max(self.size[1] - 2, 0)

    def line_length(self) -> int:
        """Length of the line under the cursor, 0 past the end of the buffer."""
        line = self.viewport_line(self.cy)
        return len(line) if line is not None else 0

    def buffer_line(self) -> int:
        """Buffer index of the line under the cursor."""
        return self.vtop + self.cy

    def viewport_line(self, n: int) -> Optional[str]:
        """Text shown on viewport row ``n``, or None past the end of the buffer."""
        return self.buffer.get(self.vtop + n)

    def cursor_style(self) -> CursorStyle:
        """Cursor shape for the current mode and pending command."""
        if self.waiting_command is not None:
            return CursorStyle.STEADY_UNDERSCORE
        if self.mode is Mode.INSERT:
            return CursorStyle.STEADY_BAR
        return CursorStyle.DEFAULT_USER_SHAPE

    def viewport_lines(self) -> list[str]:
        """Rows of the text area, each padded to the viewport width."""
        width = self.vwidth()
        return [(self.viewport_line(row) or "").ljust(width) for row in range(self.vheight())]

    def statusline_parts(self) -> Tuple[str, str, str]:
        """Mode label, padded file name and cursor position of the status line."""
        mode = f" {self.mode.name} ".upper()
        name = self.buffer.file if self.buffer.file is not None else "No Name"
        file = f" {name}"
        pos = f" {self.cx + 1}:{self.cy + 1} "
        file_width = max(self.size[0] - len(mode) - len(pos) - 2, 0)
        return mode, file.ljust(file_width), pos

    def check_bounds(self) -> None:
        """Clamp the cursor to the current line, the viewport and the buffer."""
        line_length = self.line_length()
        if self.cx >= line_length:
            self.cx = line_length
        if self.cx >= self.vwidth():
            self.cx = self.vwidth()
        if self.cy + self.vtop >= len(self.buffer):
            self.cy = max(len(self.buffer) - self.vtop, 0)

    def handle_event(self, event: Event) -> Optional[Action]:
        """Translate an event into an action for the current mode."""
        if isinstance(event, ResizeEvent):
            self.size = (event.width, event.height)
            return None
        if self.mode is Mode.INSERT:
            return self._handle_insert(event)
        return self._handle_normal(event)

    def _handle_normal(self, event: KeyEvent) -> Optional[Action]:
        if self.waiting_command is not None:
            command, self.waiting_command = self.waiting_command, None
            return self._handle_waiting(event, command)
        if event.code is not KeyCode.CHAR:
            return _NORMAL_KEYS.get(event.code)
        if event.char in _CTRL_CHARS:
            return _CTRL_CHARS[event.char] if event.ctrl else None
        return _NORMAL_CHARS.get(event.char)

    @staticmethod
    def _handle_waiting(event: KeyEvent, command: str) -> Optional[Action]:
        if command != "d":
            return None
        if event.code is KeyCode.CHAR and event.char == "d":
            return Action(ActionKind.DELETE_CURRENT_LINE)
        if event.code is KeyCode.ESC:
            return Action(ActionKind.ENTER_MODE, mode=Mode.NORMAL)
        return None

    @staticmethod
    def _handle_insert(event: KeyEvent) -> Optional[Action]:
        if event.code is KeyCode.ESC:
            return Action(ActionKind.ENTER_MODE, mode=Mode.NORMAL)
        if event.code is KeyCode.CHAR:
            return Action(ActionKind.INSERT_CHAR, char=event.char)
        if event.code is KeyCode.BACKSPACE:
            return Action(ActionKind.DELETE_CHAR)
        if event.code is KeyCode.ENTER:
            return Action(ActionKind.NEW_LINE)
        return None

    def apply(self, action: Action) -> None:
        """Carry out ``action``."""
        kind = action.kind
        if kind is ActionKind.QUIT:
            self.quit_requested = True
        elif kind is ActionKind.SAVE:
            self.buffer.save()
        elif kind is ActionKind.MOVE_UP:
            if self.cy == 0:
                if self.vtop > 0:
                    self.vtop -= 1
            else:
                self.cy -= 1
        elif kind is ActionKind.MOVE_DOWN:
            self.cy += 1
            if self.cy > self.vheight():
                self.vtop += 1
                self.cy -= 1
        elif kind is ActionKind.MOVE_LEFT:
            self.cx = max(self.cx - 1, 0)
            if self.cx < self.vleft:
                self.cx = self.vleft
        elif kind is ActionKind.MOVE_RIGHT:
            self.cx += 1
        elif kind is ActionKind.MOVE_TO_LINE_END:
            self.cx = max(self.line_length() - 1, 0)
        elif kind is ActionKind.MOVE_TO_LINE_START:
            self.cx = 0
        elif kind is ActionKind.PAGE_UP:
            if self.vtop > 0:
                self.vtop = max(self.vtop - self.vheight(), 0)
        elif kind is ActionKind.PAGE_DOWN:
            if len(self.buffer) > self.vtop + self.vheight():
                self.vtop += self.vheight()
        elif kind is ActionKind.ENTER_MODE:
            self.mode = action.mode
        elif kind is ActionKind.INSERT_CHAR:
            self.buffer.insert(self.cx, self.buffer_line(), action.char)
            self.cx += 1
        elif kind is ActionKind.DELETE_CHAR:
            if self.cx > 0:
                self.cx -= 1
            else:
                self.cy = max(self.cy - 1, 0)
                self.cx = max(self.size[0] - 1, 0)
            self.buffer.remove(self.cx, self.buffer_line())
        elif kind is ActionKind.NEW_LINE:
            self.cy += 1
            self.cx = 0
        elif kind is ActionKind.SET_WAITING_COMMAND:
            self.waiting_command = action.char
        elif kind is ActionKind.DELETE_CURRENT_LINE:
            self.buffer.remove_line(self.buffer_line())
            if self.cy > 0:
                self.cy -= 1
            if self.vtop > 0:
                self.vtop -= 1