"""The edit-mode interface, cursor shape settings and the Emacs edit mode."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass
from typing import Optional

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
    add_common_control_bindings,
    add_common_edit_bindings,
    add_common_navigation_bindings,
    edit_bind,
)

KM = KeyModifiers
EC = EditCommandKind


class CursorShape(enum.Enum):
    """Terminal cursor styles."""

    DEFAULT_USER_SHAPE = "DefaultUserShape"
    BLINKING_BLOCK = "BlinkingBlock"
    STEADY_BLOCK = "SteadyBlock"
    BLINKING_UNDERSCORE = "BlinkingUnderScore"
    STEADY_UNDERSCORE = "SteadyUnderScore"
    BLINKING_BAR = "BlinkingBar"
    STEADY_BAR = "SteadyBar"


@dataclass
class CursorConfig:
    """Cursor shape per edit mode; None leaves the cursor unchanged."""

    vi_insert: Optional[CursorShape] = None
    vi_normal: Optional[CursorShape] = None
    emacs: Optional[CursorShape] = None


class EditMode(abc.ABC):
    """Translates raw terminal input into editor events."""

    @abc.abstractmethod
    def parse_event(self, event: ReedlineRawEvent) -> ReedlineEvent:
        """The editor event for the given input event."""


_INSERTING_MODIFIERS = (
    KM.NONE,
    KM.SHIFT,
    KM.CONTROL | KM.ALT,
    KM.CONTROL | KM.ALT | KM.SHIFT,
)


def _ascii_lower(c: str) -> str:
    return c.lower() if "A" <= c <= "Z" else c


def _ascii_upper(c: str) -> str:
    return c.upper() if "a" <= c <= "z" else c


def _edit(kind: EditCommandKind) -> ReedlineEvent:
    return edit_bind(EditCommand(kind))


def _until_found(*events: ReedlineEvent) -> ReedlineEvent:
    return ReedlineEvent(EventKind.UNTIL_FOUND, events)


def default_emacs_keybindings() -> Keybindings:
    """The default Emacs key table."""
    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    add_common_edit_bindings(kb)

    kb.add_binding(KM.NONE, KeyCode(KeyKind.ENTER), ReedlineEvent(EventKind.ENTER))

    kb.add_binding(
        KM.CONTROL,
        KeyCode.char("b"),
        _until_found(ReedlineEvent(EventKind.MENU_LEFT), ReedlineEvent(EventKind.LEFT)),
    )
    kb.add_binding(
        KM.CONTROL,
        KeyCode.char("f"),
        _until_found(
            ReedlineEvent(EventKind.HISTORY_HINT_COMPLETE),
            ReedlineEvent(EventKind.MENU_RIGHT),
            ReedlineEvent(EventKind.RIGHT),
        ),
    )
    kb.add_binding(KM.CONTROL, KeyCode.char("g"), _edit(EC.REDO))
    kb.add_binding(KM.CONTROL, KeyCode.char("z"), _edit(EC.UNDO))
    kb.add_binding(KM.CONTROL, KeyCode.char("y"), _edit(EC.PASTE_CUT_BUFFER_BEFORE))
    kb.add_binding(KM.CONTROL, KeyCode.char("w"), _edit(EC.CUT_WORD_LEFT))
    kb.add_binding(KM.CONTROL, KeyCode.char("k"), _edit(EC.CUT_TO_END))
    kb.add_binding(KM.CONTROL, KeyCode.char("u"), _edit(EC.CUT_FROM_START))
    kb.add_binding(KM.CONTROL, KeyCode.char("t"), _edit(EC.SWAP_GRAPHEMES))

    word_right = _until_found(
        ReedlineEvent(EventKind.HISTORY_HINT_WORD_COMPLETE), _edit(EC.MOVE_WORD_RIGHT)
    )
    kb.add_binding(KM.ALT, KeyCode(KeyKind.LEFT), _edit(EC.MOVE_WORD_LEFT))
    kb.add_binding(KM.ALT, KeyCode(KeyKind.RIGHT), word_right)
    kb.add_binding(KM.ALT, KeyCode.char("b"), _edit(EC.MOVE_WORD_LEFT))
    kb.add_binding(KM.ALT, KeyCode.char("f"), word_right)
    kb.add_binding(KM.ALT, KeyCode(KeyKind.DELETE), _edit(EC.DELETE_WORD))
    kb.add_binding(KM.ALT, KeyCode(KeyKind.BACKSPACE), _edit(EC.BACKSPACE_WORD))
    kb.add_binding(KM.ALT, KeyCode.char("m"), _edit(EC.BACKSPACE_WORD))
    kb.add_binding(KM.ALT, KeyCode.char("d"), _edit(EC.CUT_WORD_RIGHT))
    kb.add_binding(KM.ALT, KeyCode.char("u"), _edit(EC.UPPERCASE_WORD))
    kb.add_binding(KM.ALT, KeyCode.char("l"), _edit(EC.LOWERCASE_WORD))
    kb.add_binding(KM.ALT, KeyCode.char("c"), _edit(EC.CAPITALIZE_CHAR))
    return kb


def _paste_event(text: str) -> ReedlineEvent:
    normalised = text.replace("\r\n", "\n").replace("\r", "\n")
    return edit_bind(EditCommand(EC.INSERT_STRING, normalised))


class Emacs(EditMode):
    """Parses input the way an Emacs-style editor does."""

    def __init__(self, keybindings: Optional[Keybindings] = None) -> None:
        self.keybindings = (
            keybindings if keybindings is not None else default_emacs_keybindings()
        )

    def parse_event(self, event: ReedlineRawEvent) -> ReedlineEvent:
        inner = event.into()
        if isinstance(inner, KeyEvent):
            return self._parse_key(inner.modifiers, inner.code)
        if isinstance(inner, MouseEvent):
            return ReedlineEvent(EventKind.MOUSE)
        if isinstance(inner, ResizeEvent):
            return ReedlineEvent(EventKind.RESIZE, (inner.width, inner.height))
        if isinstance(inner, PasteEvent):
            return _paste_event(inner.text)
        if isinstance(inner, FocusEvent):
            return ReedlineEvent(EventKind.NONE)
        raise TypeError(f"not a terminal event: {inner!r}")

    def _parse_key(self, modifier: KeyModifiers, code: KeyCode) -> ReedlineEvent:
        if code.kind is not KeyKind.CHAR:
            found = self.keybindings.find_binding(modifier, code)
            return found if found is not None else ReedlineEvent(EventKind.NONE)

        # Mixed modifiers such as Ctrl+Alt come from AltGr on non-US keyboards.
        c = code.value if modifier == KM.NONE else _ascii_lower(code.value)
        found = self.keybindings.find_binding(modifier, KeyCode.char(c))
        if found is not None:
            return found
        if modifier in _INSERTING_MODIFIERS:
            inserted = _ascii_upper(c) if modifier == KM.SHIFT else c
            return edit_bind(EditCommand(EC.INSERT_CHAR, inserted))
        return ReedlineEvent(EventKind.NONE)