"""Keyboard input and the editing state shared by prompts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag

from termwidgets.geometry import Position
from termwidgets.status import Status


class FocusState(Enum):
    """Whether a prompt has keyboard focus."""

    UNFOCUSED = "unfocused"
    FOCUSED = "focused"


class KeyCode(Enum):
    """Non-character keys; character keys are given as one-character strings."""

    BACKSPACE = "backspace"
    ENTER = "enter"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    TAB = "tab"
    BACK_TAB = "back_tab"
    DELETE = "delete"
    INSERT = "insert"
    ESC = "esc"


class KeyModifiers(IntFlag):
    """Modifier keys held during a key event."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4
    SUPER = 8
    HYPER = 16
    META = 32


class KeyEventKind(Enum):
    """Whether a key was pressed, repeated or released."""

    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    """A key event: a ``KeyCode`` or a one-character string, plus modifiers."""

    code: KeyCode | str
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS


@dataclass
class PromptState:
    """The editable state of a prompt.

    Keybindings:
    Enter completes; Esc or Ctrl+C aborts; Left/Ctrl+B and Right/Ctrl+F move the cursor;
    Home/Ctrl+A and End/Ctrl+E jump to the start and end; Backspace/Ctrl+H deletes before
    the cursor, Delete/Ctrl+D after it; Ctrl+K deletes to the end; Ctrl+U clears the value.

    ``position`` counts characters into ``value``; ``cursor`` is the screen cell set on render.
    """

    status: Status = Status.PENDING
    focus_state: FocusState = FocusState.UNFOCUSED
    position: int = 0
    cursor: Position = Position(0, 0)
    value: str = ""

    def focus(self) -> None:
        self.focus_state = FocusState.FOCUSED

    def blur(self) -> None:
        self.focus_state = FocusState.UNFOCUSED

    def is_focused(self) -> bool:
        return self.focus_state is FocusState.FOCUSED

    def handle_key_event(self, key_event: KeyEvent) -> None:
        """Apply a key event to the state; releases and unbound keys are ignored."""
        if key_event.kind is KeyEventKind.RELEASE:
            return
        ctrl = KeyModifiers.CONTROL
        match key_event.code, key_event.modifiers:
            case KeyCode.ENTER, _:
                self.complete()
            case (KeyCode.ESC, _) | ("c", ctrl.CONTROL):
                self.abort()
            case (KeyCode.LEFT, _) | ("b", ctrl.CONTROL):
                self.move_left()
            case (KeyCode.RIGHT, _) | ("f", ctrl.CONTROL):
                self.move_right()
            case (KeyCode.HOME, _) | ("a", ctrl.CONTROL):
                self.move_start()
            case (KeyCode.END, _) | ("e", ctrl.CONTROL):
                self.move_end()
            case (KeyCode.BACKSPACE, _) | ("h", ctrl.CONTROL):
                self.backspace()
            case (KeyCode.DELETE, _) | ("d", ctrl.CONTROL):
                self.delete()
            case "k", ctrl.CONTROL:
                self.kill()
            case "u", ctrl.CONTROL:
                self.truncate()
            case str() as char, (KeyModifiers.NONE | KeyModifiers.SHIFT) if len(char) == 1:
                self.push(char)
            case _:
                pass

    def complete(self) -> None:
        self.status = Status.DONE

    def abort(self) -> None:
        self.status = Status.ABORTED

    def delete(self) -> None:
        """Remove the character after the cursor."""
        position = self.position
        if position == len(self.value):
            return
        self.value = self.value[:position] + self.value[position + 1 :]

    def backspace(self) -> None:
        """Remove the character before the cursor."""
        position = self.position
        if position == 0:
            return
        self.value = self.value[: position - 1] + self.value[position:]
        self.position = position - 1

    def move_right(self) -> None:
        if self.position == len(self.value):
            return
        self.position += 1

    def move_left(self) -> None:
        self.position = max(self.position - 1, 0)

    def move_end(self) -> None:
        self.position = len(self.value)

    def move_start(self) -> None:
        self.position = 0

    def kill(self) -> None:
        """Remove everything from the cursor to the end."""
        self.value = self.value[: self.position]

    def truncate(self) -> None:
        """Clear the whole value."""
        self.value = ""
        self.position = 0

    def push(self, c: str) -> None:
        """Insert ``c`` at the cursor and move past it."""
        position = self.position
        self.value = self.value[:position] + c + self.value[position:]
        self.position = position + 1