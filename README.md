# vigil

A small modal text editor for the terminal with vi-style key bindings.

## Installation

```
pip install .
```

## Usage

Open a file:

```
vigil notes.txt
```

Start without a file:

```
vigil
```

The same entry point can be started with `python -m vigil.terminal`.

When no file is given, the buffer has no name and saving does nothing.
Saving writes the lines joined by newlines, without a trailing newline.

The bottom of the screen shows a status line. It holds the current mode
(`NORMAL` or `INSERT`), the file name (or `No Name`) and the cursor's screen
position as `column:row`.

## Keys

### Normal mode

| Key                 | Action                           |
|---------------------|----------------------------------|
| `q`                 | quit                             |
| `k` / Up            | move up                          |
| `j` / Down          | move down                        |
| `h` / Left          | move left                        |
| `l` / Right         | move right                       |
| `0` / Home          | move to start of line            |
| `$` / End           | move to last character of line   |
| Ctrl-b              | page up                          |
| Ctrl-f              | page down                        |
| Ctrl-s              | save the file                    |
| `i`                 | enter insert mode                |
| `dd`                | delete the current line          |

After you press `d`, the cursor turns into an underscore until the next key.
Any key other than a second `d` cancels the pending `d`.

### Insert mode

| Key       | Action                                                   |
|-----------|----------------------------------------------------------|
| any char  | insert it at the cursor                                  |
| Backspace | delete the character before the cursor                   |
| Enter     | move the cursor to the start of the next line            |
| Esc       | return to normal mode                                    |

Enter only moves the cursor; it does not split the current line. Backspace
at the start of a line moves the cursor up one row to the right edge of the
screen and deletes the character there, if any.

## Library use

The editing core works without a terminal. `vigil.buffer.Buffer` holds the
lines, and `vigil.editor.Editor` turns `KeyEvent` and `ResizeEvent` values
into `Action` values with `handle_event` and carries them out with `apply`:

```python
from vigil.buffer import Buffer
from vigil.editor import Editor, KeyEvent, KeyCode

buf = Buffer.from_file(None)
editor = Editor(buf, (80, 24))
editor.apply(editor.handle_event(KeyEvent(KeyCode.CHAR, "i")))
editor.apply(editor.handle_event(KeyEvent(KeyCode.CHAR, "x")))
print(buf.get(0))  # "x"
```

`vigil.terminal.TerminalSession` draws an editor on a `blessed.Terminal`
and runs the key loop; `vigil.terminal.translate_key` converts a blessed
keystroke into a `KeyEvent`.

## Limitations

There is no undo, no search, no line splitting or joining, and no debug
log file.

## Development

```
pip install -e ".[test]"
pytest
```