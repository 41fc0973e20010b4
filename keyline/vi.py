"""The vi edit mode, with separate normal and insert key tables."""

from __future__ import annotations

import enum
from typing import List, Optional

from keyline.emacs import EditMode
from keyline.enums import EditCommand, EditCommandKind, EventKind, ReedlineEvent
from keyline.events import (
    FocusEvent,
    KeyCode,
    KeyEvent,
    KeyKind,
    KeyModifiers,
    MouseEvent,
    PasteEvent,
    ReedlineRawEvent,
    ResizeEvent,
)
from keyline.keybindings import (
    Keybindings,
    default_vi_insert_keybindings,
    default_vi_normal_keybindings,
    edit_bind,
)
from keyline.vi_motion import ViCharSearch
from keyline.vi_parser import parse

KM = KeyModifiers

_INSERTING_MODIFIERS = (
    KM.NONE,
    KM.SHIFT,
    KM.CONTROL | KM.ALT,
    KM.CONTROL | KM.ALT | KM.SHIFT,
)


class ViMode(enum.Enum):
    """The two vi modes."""

    NORMAL = "Normal"
    INSERT = "Insert"


def _ascii_lower(c: str) -> str:
    return c.lower() if "A" <= c <= "Z" else c


def _ascii_upper(c: str) -> str:
    return c.upper() if "a" <= c <= "z" else c


def _none() -> ReedlineEvent:
    return ReedlineEvent(EventKind.NONE)


class Vi(EditMode):
    """Parses input the way a vi-style editor does.

    Starts in insert mode. In normal mode, unbound characters are collected
    until they form a complete vi sequence.
    """

    def __init__(
        self,
        insert_keybindings: Optional[Keybindings] = None,
        normal_keybindings: Optional[Keybindings] = None,
    ) -> None:
        self.insert_keybindings = (
            insert_keybindings
            if insert_keybindings is not None
            else default_vi_insert_keybindings()
        )
        self.normal_keybindings = (
            normal_keybindings
            if normal_keybindings is not None
            else default_vi_normal_keybindings()
        )
        self.cache: List[str] = []
        self.mode = ViMode.INSERT
        self.previous: Optional[ReedlineEvent] = None
        # The last f, F, t or T search, replayed by ; and ,
        self.last_char_search: Optional[ViCharSearch] = None

    def parse_event(self, event: ReedlineRawEvent) -> ReedlineEvent:
        inner = event.into()
        if isinstance(inner, KeyEvent):
            return self._parse_key(inner.modifiers, inner.code)
        if isinstance(inner, MouseEvent):
            return ReedlineEvent(EventKind.MOUSE)
        if isinstance(inner, ResizeEvent):
            return ReedlineEvent(EventKind.RESIZE, (inner.width, inner.height))
        if isinstance(inner, PasteEvent):
            text = inner.text.replace("\r\n", "\n").replace("\r", "\n")
            return edit_bind(EditCommand(EditCommandKind.INSERT_STRING, text))
        if isinstance(inner, FocusEvent):
            return _none()
        raise TypeError(f"not a terminal event: {inner!r}")

    def _parse_key(self, modifier: KeyModifiers, code: KeyCode) -> ReedlineEvent:
        if code.kind is KeyKind.CHAR:
            if self.mode is ViMode.NORMAL:
                return self._normal_char(modifier, code.value)
            return self._insert_char(modifier, code.value)
        if modifier == KM.NONE and code.kind is KeyKind.ESC:
            self.cache.clear()
            self.mode = ViMode.NORMAL
            return ReedlineEvent(
                EventKind.MULTIPLE,
                (ReedlineEvent(EventKind.ESC), ReedlineEvent(EventKind.REPAINT)),
            )
        if modifier == KM.NONE and code.kind is KeyKind.ENTER:
            self.mode = ViMode.INSERT
            return ReedlineEvent(EventKind.ENTER)
        table = (
            self.normal_keybindings
            if self.mode is ViMode.NORMAL
            else self.insert_keybindings
        )
        found = table.find_binding(modifier, code)
        return found if found is not None else _none()

    def _normal_char(self, modifier: KeyModifiers, char: str) -> ReedlineEvent:
        c = _ascii_lower(char)
        found = self.normal_keybindings.find_binding(modifier, KeyCode.char(c))
        if found is not None:
            return found
        if modifier not in (KM.NONE, KM.SHIFT):
            return _none()

        self.cache.append(_ascii_upper(c) if modifier == KM.SHIFT else c)
        sequence = parse(self.cache)
        if not sequence.is_valid():
            self.cache.clear()
            return _none()
        if not sequence.is_complete():
            return _none()
        if sequence.enters_insert_mode():
            self.mode = ViMode.INSERT
        result = sequence.to_reedline_event(self)
        self.cache.clear()
        return result

    def _insert_char(self, modifier: KeyModifiers, char: str) -> ReedlineEvent:
        # Mixed modifiers such as Ctrl+Alt come from AltGr on non-US keyboards.
        c = char if modifier == KM.NONE else _ascii_lower(char)
        found = self.insert_keybindings.find_binding(modifier, KeyCode.char(c))
        if found is not None:
            return found
        if modifier in _INSERTING_MODIFIERS:
            inserted = _ascii_upper(c) if modifier == KM.SHIFT else c
            return edit_bind(EditCommand(EditCommandKind.INSERT_CHAR, inserted))
        return _none()