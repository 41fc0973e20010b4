"""Key-to-event tables and the default binding sets shared by edit modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from keyline.enums import EditCommand, EditCommandKind, EventKind, ReedlineEvent
from keyline.events import KeyCode, KeyKind, KeyModifiers

KM = KeyModifiers
EC = EditCommandKind


@dataclass(frozen=True)
class KeyCombination:
    """A key together with the modifiers held while pressing it."""

    modifier: KeyModifiers
    key_code: KeyCode


@dataclass
class Keybindings:
    """A table mapping key combinations to editor events."""

    bindings: Dict[KeyCombination, ReedlineEvent] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "Keybindings":
        """A table without any bindings."""
        return cls()

    def add_binding(
        self, modifier: KeyModifiers, key_code: KeyCode, command: ReedlineEvent
    ) -> None:
        """Bind a key combination, replacing any earlier binding."""
        if command.kind is EventKind.UNTIL_FOUND and not command.payload:
            raise ValueError(
                "UntilFound should contain a series of potential events to handle"
            )
        self.bindings[KeyCombination(modifier, key_code)] = command

    def find_binding(
        self, modifier: KeyModifiers, key_code: KeyCode
    ) -> Optional[ReedlineEvent]:
        """The event bound to the combination, or None."""
        return self.bindings.get(KeyCombination(modifier, key_code))

    def remove_binding(
        self, modifier: KeyModifiers, key_code: KeyCode
    ) -> Optional[ReedlineEvent]:
        """Unbind the combination, returning what it was bound to."""
        return self.bindings.pop(KeyCombination(modifier, key_code), None)

    def get_keybindings(self) -> Dict[KeyCombination, ReedlineEvent]:
        """The table of bindings."""
        return self.bindings


def edit_bind(command: EditCommand) -> ReedlineEvent:
    """An event running a single edit command."""
    return ReedlineEvent(EventKind.EDIT, (command,))


def _edit(kind: EditCommandKind) -> ReedlineEvent:
    return edit_bind(EditCommand(kind))


def _event(kind: EventKind) -> ReedlineEvent:
    return ReedlineEvent(kind)


def _until_found(*events: ReedlineEvent) -> ReedlineEvent:
    return ReedlineEvent(EventKind.UNTIL_FOUND, events)


def _key(kind: KeyKind) -> KeyCode:
    return KeyCode(kind)


def add_common_control_bindings(kb: Keybindings) -> None:
    """Esc and the Ctrl-C, Ctrl-D, Ctrl-L, Ctrl-R and Ctrl-O controls."""
    kb.add_binding(KM.NONE, _key(KeyKind.ESC), _event(EventKind.ESC))
    kb.add_binding(KM.CONTROL, KeyCode.char("c"), _event(EventKind.CTRL_C))
    kb.add_binding(KM.CONTROL, KeyCode.char("d"), _event(EventKind.CTRL_D))
    kb.add_binding(KM.CONTROL, KeyCode.char("l"), _event(EventKind.CLEAR_SCREEN))
    kb.add_binding(KM.CONTROL, KeyCode.char("r"), _event(EventKind.SEARCH_HISTORY))
    kb.add_binding(KM.CONTROL, KeyCode.char("o"), _event(EventKind.OPEN_EDITOR))


def add_common_navigation_bindings(kb: Keybindings) -> None:
    """Arrow keys, Home/End and their Ctrl variants."""
    up = _until_found(_event(EventKind.MENU_UP), _event(EventKind.UP))
    down = _until_found(_event(EventKind.MENU_DOWN), _event(EventKind.DOWN))
    kb.add_binding(KM.NONE, _key(KeyKind.UP), up)
    kb.add_binding(KM.NONE, _key(KeyKind.DOWN), down)
    kb.add_binding(
        KM.NONE,
        _key(KeyKind.LEFT),
        _until_found(_event(EventKind.MENU_LEFT), _event(EventKind.LEFT)),
    )
    kb.add_binding(
        KM.NONE,
        _key(KeyKind.RIGHT),
        _until_found(
            _event(EventKind.HISTORY_HINT_COMPLETE),
            _event(EventKind.MENU_RIGHT),
            _event(EventKind.RIGHT),
        ),
    )

    kb.add_binding(KM.CONTROL, _key(KeyKind.LEFT), _edit(EC.MOVE_WORD_LEFT))
    kb.add_binding(
        KM.CONTROL,
        _key(KeyKind.RIGHT),
        _until_found(
            _event(EventKind.HISTORY_HINT_WORD_COMPLETE), _edit(EC.MOVE_WORD_RIGHT)
        ),
    )

    line_end = _until_found(
        _event(EventKind.HISTORY_HINT_COMPLETE), _edit(EC.MOVE_TO_LINE_END)
    )
    kb.add_binding(KM.NONE, _key(KeyKind.HOME), _edit(EC.MOVE_TO_LINE_START))
    kb.add_binding(KM.CONTROL, KeyCode.char("a"), _edit(EC.MOVE_TO_LINE_START))
    kb.add_binding(KM.NONE, _key(KeyKind.END), line_end)
    kb.add_binding(KM.CONTROL, KeyCode.char("e"), line_end)

    kb.add_binding(KM.CONTROL, _key(KeyKind.HOME), _edit(EC.MOVE_TO_START))
    kb.add_binding(KM.CONTROL, _key(KeyKind.END), _edit(EC.MOVE_TO_END))

    kb.add_binding(KM.CONTROL, KeyCode.char("p"), up)
    kb.add_binding(KM.CONTROL, KeyCode.char("n"), down)


def add_common_edit_bindings(kb: Keybindings) -> None:
    """Delete, Backspace and their word-deleting variants."""
    kb.add_binding(KM.NONE, _key(KeyKind.BACKSPACE), _edit(EC.BACKSPACE))
    kb.add_binding(KM.NONE, _key(KeyKind.DELETE), _edit(EC.DELETE))
    kb.add_binding(KM.CONTROL, _key(KeyKind.BACKSPACE), _edit(EC.BACKSPACE_WORD))
    kb.add_binding(KM.CONTROL, _key(KeyKind.DELETE), _edit(EC.DELETE_WORD))
    # These must not touch the cut buffer.
    kb.add_binding(KM.CONTROL, KeyCode.char("h"), _edit(EC.BACKSPACE))
    kb.add_binding(KM.CONTROL, KeyCode.char("w"), _edit(EC.BACKSPACE_WORD))


def default_vi_normal_keybindings() -> Keybindings:
    """Default bindings for vi normal mode."""
    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    kb.add_binding(KM.NONE, _key(KeyKind.BACKSPACE), _edit(EC.MOVE_LEFT))
    kb.add_binding(KM.NONE, _key(KeyKind.DELETE), _edit(EC.DELETE))
    return kb


def default_vi_insert_keybindings() -> Keybindings:
    """Default bindings for vi insert mode."""
    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    add_common_edit_bindings(kb)
    return kb