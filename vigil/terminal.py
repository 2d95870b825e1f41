"""Terminal front end: key translation, drawing and the main loop."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, Tuple

from blessed import Terminal

from .buffer import Buffer
from .editor import CursorStyle, Editor, KeyCode, KeyEvent, ResizeEvent

CURSOR_SEQUENCES = {
    CursorStyle.DEFAULT_USER_SHAPE: "\x1b[0 q",
    CursorStyle.STEADY_UNDERSCORE: "\x1b[4 q",
    CursorStyle.STEADY_BAR: "\x1b[6 q",
}

_ACCENT = (184, 144, 243)
_DARK = (67, 70, 89)
_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)

_NAMED_KEYS = {
    "KEY_UP": KeyCode.UP,
    "KEY_DOWN": KeyCode.DOWN,
    "KEY_LEFT": KeyCode.LEFT,
    "KEY_RIGHT": KeyCode.RIGHT,
    "KEY_HOME": KeyCode.HOME,
    "KEY_END": KeyCode.END,
    "KEY_ESCAPE": KeyCode.ESC,
    "KEY_BACKSPACE": KeyCode.BACKSPACE,
    "KEY_ENTER": KeyCode.ENTER,
    "KEY_TAB": KeyCode.TAB,
}

_RAW_KEYS = {
    "\x1b": KeyCode.ESC,
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
    "\r": KeyCode.ENTER,
    "\n": KeyCode.ENTER,
    "\t": KeyCode.TAB,
}


def translate_key(keystroke) -> Optional[KeyEvent]:
    """Turn a blessed keystroke into a key event, or None if it has no meaning here."""
    if keystroke.is_sequence:
        code = _NAMED_KEYS.get(keystroke.name)
        return KeyEvent(code) if code is not None else None
    text = str(keystroke)
    if len(text) != 1:
        return None
    if text in _RAW_KEYS:
        return KeyEvent(_RAW_KEYS[text])
    if "\x01" <= text <= "\x1a":
        return KeyEvent(KeyCode.CHAR, chr(ord(text) + 0x60), ctrl=True)
    if text < " ":
        return None
    return KeyEvent(KeyCode.CHAR, text)


class TerminalSession:
    """Draws an editor on a terminal and feeds it keyboard and resize events."""

    def __init__(self, editor: Editor, term: Terminal) -> None:
        self.editor = editor
        self.term = term
        self._last_size: Tuple[int, int] = (term.width, term.height)

    def _styled(self, text: str, fg, bg, bold: bool = False) -> str:
        if bold:
            text = self.term.bold(text)
        return self.term.on_color_rgb(*bg)(self.term.color_rgb(*fg)(text))

    def _statusline(self) -> str:
        mode, file, pos = self.editor.statusline_parts()
        row = max(self.editor.size[1] - 2, 0)
        return (
            self.term.move_xy(0, row)
            + self._styled(mode, _BLACK, _ACCENT)
            + self._styled(file, _WHITE, _DARK)
            + self._styled(pos, _BLACK, _ACCENT, bold=True)
        )

    def draw(self) -> None:
        """Render the viewport, status line and cursor."""
        editor = self.editor
        parts = [CURSOR_SEQUENCES[editor.cursor_style()]]
        parts.extend(
            self.term.move_xy(0, row) + line
            for row, line in enumerate(editor.viewport_lines())
        )
        parts.append(self._statusline())
        parts.append(self.term.move_xy(editor.cx, editor.cy))
        stream = self.term.stream
        stream.write("".join(parts))
        stream.flush()

    def _next_event(self):
        while True:
            size = (self.term.width, self.term.height)
            if size != self._last_size:
                self._last_size = size
                return ResizeEvent(*size)
            keystroke = self.term.inkey(timeout=0.1)
            if keystroke:
                event = translate_key(keystroke)
                if event is not None:
                    return event

    def run(self) -> None:
        """Run the edit loop until the editor asks to quit."""
        stream = self.term.stream
        with self.term.fullscreen(), self.term.raw():
            stream.write(self.term.clear)
            try:
                while not self.editor.quit_requested:
                    self.editor.check_bounds()
                    self.draw()
                    action = self.editor.handle_event(self._next_event())
                    if action is not None:
                        self.editor.apply(action)
            finally:
                stream.write(CURSOR_SEQUENCES[CursorStyle.DEFAULT_USER_SHAPE])
                stream.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the file named by the first argument, or an empty buffer, for editing."""
    args = list(sys.argv[1:] if argv is None else argv)
    buffer = Buffer.from_file(args[0] if args else None)
    term = Terminal()
    editor = Editor(buffer, (term.width, term.height))
    TerminalSession(editor, term).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())