"""Terminal input events and the raw-event wrapper fed to edit modes."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Any, Optional, Union


class KeyModifiers(enum.Flag):
    """Modifier keys held during a key press."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()
    SUPER = enum.auto()
    HYPER = enum.auto()
    META = enum.auto()


class KeyKind(enum.Enum):
    """The key that was pressed, without its payload."""

    BACKSPACE = "Backspace"
    ENTER = "Enter"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    TAB = "Tab"
    BACK_TAB = "BackTab"
    DELETE = "Delete"
    INSERT = "Insert"
    F = "F"
    CHAR = "Char"
    NULL = "Null"
    ESC = "Esc"


@dataclass(frozen=True)
class KeyCode:
    """A key; ``value`` is the character for ``CHAR`` and the number for ``F``."""

    kind: KeyKind
    value: Any = None

    def __post_init__(self) -> None:
        if self.kind is KeyKind.CHAR:
            if not (isinstance(self.value, str) and len(self.value) == 1):
                raise ValueError("a character key holds exactly one character")
        elif self.kind is KeyKind.F:
            if not isinstance(self.value, int) or isinstance(self.value, bool) or self.value < 1:
                raise ValueError("a function key holds a positive number")
        elif self.value is not None:
            raise ValueError(f"{self.kind.value} key carries no value")

    @classmethod
    def char(cls, c: str) -> "KeyCode":
        """A character key."""
        return cls(KeyKind.CHAR, c)

    @classmethod
    def function(cls, number: int) -> "KeyCode":
        """A function key such as F1."""
        return cls(KeyKind.F, number)


class KeyEventKind(enum.Enum):
    PRESS = "Press"
    REPEAT = "Repeat"
    RELEASE = "Release"


@dataclass(frozen=True)
class KeyEvent:
    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS


@dataclass(frozen=True)
class MouseEvent:
    column: int = 0
    row: int = 0
    modifiers: KeyModifiers = KeyModifiers.NONE


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


@dataclass(frozen=True)
class FocusEvent:
    gained: bool


@dataclass(frozen=True)
class PasteEvent:
    text: str


Event = Union[KeyEvent, MouseEvent, ResizeEvent, FocusEvent, PasteEvent]

_EVENT_TYPES = (KeyEvent, MouseEvent, ResizeEvent, FocusEvent, PasteEvent)


@dataclass(frozen=True)
class ReedlineRawEvent:
    """A terminal event guaranteed not to be a key release.

    Repeated key presses are normalised to plain presses.
    """

    event: Event

    @classmethod
    def convert_from(cls, evt: Event) -> Optional["ReedlineRawEvent"]:
        """Wrap ``evt``, or return None when it is a key release."""
        if not isinstance(evt, _EVENT_TYPES):
            raise TypeError(f"not a terminal event: {evt!r}")
        if isinstance(evt, KeyEvent):
            if evt.kind is KeyEventKind.RELEASE:
                return None
            if evt.kind is KeyEventKind.REPEAT:
                return cls(replace(evt, kind=KeyEventKind.PRESS))
        return cls(evt)

    def into(self) -> Event:
        """The wrapped terminal event."""
        return self.event