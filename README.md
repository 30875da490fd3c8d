# termwidgets

Widgets for terminal user interfaces. Everything draws into an in-memory
`Buffer` of styled cells, so you can render and test widgets without a
terminal.

- **`ScrollView`** (`termwidgets.scroll_view`) renders content into an
  off-screen buffer that is larger than the area it is shown in. You scroll it
  with a `ScrollViewState` (`termwidgets.scroll_state`), and it draws
  scrollbars when they are needed.
- **`TextPrompt`** (`termwidgets.text_prompt`) is a text input made of a status
  symbol, a message and an editable value. Its state lives in a `TextState`
  (`termwidgets.text_state`), which handles the usual readline-style keys.

Supporting modules:

- `termwidgets.geometry`: `Position`, `Size` and `Rect`.
- `termwidgets.style`: `Color`, `Modifier` and `Style`.
- `termwidgets.text`: `Span`, `Line` and `wrap_line`, which wraps by character.
- `termwidgets.buffer`: `Cell`, `Buffer` and `Frame`.
- `termwidgets.widgets`: `Block`, `Borders`, `Paragraph`, `Scrollbar`,
  `ScrollbarState` and `ScrollbarOrientation`.
- `termwidgets.prompt`: `PromptState`, `FocusState`, `KeyEvent`, `KeyCode`,
  `KeyModifiers` and `KeyEventKind`.
- `termwidgets.status`: `Status` and `Symbols`.

## Installation

```
pip install termwidgets
```

To also install the test dependencies:

```
pip install "termwidgets[test]"
```

## Scroll view

```python
from termwidgets.buffer import Buffer
from termwidgets.geometry import Rect, Size
from termwidgets.scroll_state import ScrollViewState
from termwidgets.scroll_view import ScrollView
from termwidgets.widgets import Paragraph

view = ScrollView(Size(40, 100))
view.render_widget(Paragraph("Hello, world!"), Rect(0, 0, 40, 1))

state = ScrollViewState()
state.scroll_down()
state.scroll_page_down()

screen = Buffer.empty(Rect(0, 0, 20, 10))
view.render(screen.area, screen, state)
print("\n".join(screen.text_lines()))
```

The content buffer always starts at (0, 0). You can also draw into it
directly through `view.buf`.

Scrollbars are shown automatically when the content does not fit. This
includes the case where one scrollbar takes a row or column and so makes the
other direction overflow. To override this, pass `ScrollbarVisibility.ALWAYS`
or `ScrollbarVisibility.NEVER` to `vertical_scrollbar_visibility`,
`horizontal_scrollbar_visibility` or `scrollbars_visibility`. Each of these
returns the view, so calls can be chained.

Rendering clamps the offset and records the content size and page size in the
state. This means `scroll_to_bottom()` and repeated `scroll_down()` calls never
move past the end of the content. Page scrolling keeps one row of overlap.
Rendering a scrollbar into an empty area raises `ValueError("Scrollbar area is
empty")`, so a view rendered with zero width or height raises that error.

## Text prompt

```python
from termwidgets.buffer import Buffer
from termwidgets.geometry import Rect
from termwidgets.prompt import KeyCode, KeyEvent, KeyModifiers
from termwidgets.text_prompt import TextPrompt
from termwidgets.text_state import TextState

state = TextState().with_value("hello")
state.focus()
state.handle_key_event(KeyEvent(KeyCode.END))
state.handle_key_event(KeyEvent("!"))
state.handle_key_event(KeyEvent("a", KeyModifiers.CONTROL))  # move to start

prompt = TextPrompt("Name")
buf = Buffer.empty(Rect(0, 0, 30, 1))
prompt.render(buf.area, buf, state)
print(buf.text_lines()[0], state.cursor)
```

A `KeyEvent` takes either a `KeyCode` or a one-character string, then optional
modifiers and an optional `KeyEventKind`. Plain characters are inserted when
no modifier or only Shift is held.

### Key bindings

| Key                  | Action                          |
|----------------------|---------------------------------|
| Enter                | complete                        |
| Esc, Ctrl+C          | abort                           |
| Left, Ctrl+B         | move left                       |
| Right, Ctrl+F        | move right                      |
| Home, Ctrl+A         | move to start                   |
| End, Ctrl+E          | move to end                     |
| Backspace, Ctrl+H    | delete character before cursor  |
| Delete, Ctrl+D       | delete character at cursor      |
| Ctrl+K               | delete from cursor to end       |
| Ctrl+U               | clear the whole value           |

Key release events are ignored, as are keys that have no binding. Text is
edited by character, so characters such as `ä` are handled correctly.

The line is wrapped by character to the width of the area, and only as many
rows as fit are drawn. `state.cursor` is set to the cell of the input
position, which is kept inside the area. `TextRenderStyle.PASSWORD` shows one
`*` per character, and `TextRenderStyle.INVISIBLE` shows nothing.
`TextPrompt.with_block` wraps the prompt in a `Block`. Rendering into an empty
area raises `ValueError`.

`TextPrompt.draw(frame, area, state)` renders into a `Frame`. When the state is
focused, it also sets the frame's `cursor_position`.

## Status

A prompt's `Status` is `PENDING`, `ABORTED` or `DONE`. It is shown as a cyan
`?`, a red `✘` or a green `✔`. `TextState.is_finished()` is true once the
prompt is done or aborted.

## What this package does not do

termwidgets only draws into `Buffer` objects. It does not:

- talk to a real terminal (no raw mode, alternate screen or output of escape
  sequences);
- read keyboard input or run an event loop, so you build `KeyEvent` values
  yourself from whatever input library you use;
- provide a command-line program;
- provide layout helpers.

`Paragraph` does not wrap text. It draws one line per row and clips lines at
the right edge.