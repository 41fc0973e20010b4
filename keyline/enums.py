"""Signals, edit commands, undo behaviour and editor events."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional


class SignalKind(enum.Enum):
    """The ways reading a line can end."""

    SUCCESS = "Success"
    CTRL_C = "CtrlC"
    CTRL_D = "CtrlD"


@dataclass(frozen=True)
class Signal:
    """How reading a line ended; ``content`` holds the entered text on success."""

    kind: SignalKind
    content: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is SignalKind.SUCCESS:
            if not isinstance(self.content, str):
                raise TypeError("a successful signal carries the entered text")
        elif self.content is not None:
            raise ValueError(f"{self.kind.value} carries no content")


class EditType(enum.Enum):
    """Coarse grouping of edit commands, used for undo tracking."""

    MOVE_CURSOR = "MoveCursor"
    UNDO_REDO = "UndoRedo"
    EDIT_TEXT = "EditText"


class EditCommandKind(enum.Enum):
    """Every editing action that can be bound to a key."""

    MOVE_TO_START = "MoveToStart"
    MOVE_TO_LINE_START = "MoveToLineStart"
    MOVE_TO_END = "MoveToEnd"
    MOVE_TO_LINE_END = "MoveToLineEnd"
    MOVE_LEFT = "MoveLeft"
    MOVE_RIGHT = "MoveRight"
    MOVE_WORD_LEFT = "MoveWordLeft"
    MOVE_BIG_WORD_LEFT = "MoveBigWordLeft"
    MOVE_WORD_RIGHT = "MoveWordRight"
    MOVE_WORD_RIGHT_START = "MoveWordRightStart"
    MOVE_BIG_WORD_RIGHT_START = "MoveBigWordRightStart"
    MOVE_WORD_RIGHT_END = "MoveWordRightEnd"
    MOVE_BIG_WORD_RIGHT_END = "MoveBigWordRightEnd"
    MOVE_TO_POSITION = "MoveToPosition"
    INSERT_CHAR = "InsertChar"
    INSERT_STRING = "InsertString"
    INSERT_NEWLINE = "InsertNewline"
    REPLACE_CHAR = "ReplaceChar"
    REPLACE_CHARS = "ReplaceChars"
    BACKSPACE = "Backspace"
    DELETE = "Delete"
    CUT_CHAR = "CutChar"
    BACKSPACE_WORD = "BackspaceWord"
    DELETE_WORD = "DeleteWord"
    CLEAR = "Clear"
    CLEAR_TO_LINE_END = "ClearToLineEnd"
    COMPLETE = "Complete"
    CUT_CURRENT_LINE = "CutCurrentLine"
    CUT_FROM_START = "CutFromStart"
    CUT_FROM_LINE_START = "CutFromLineStart"
    CUT_TO_END = "CutToEnd"
    CUT_TO_LINE_END = "CutToLineEnd"
    CUT_WORD_LEFT = "CutWordLeft"
    CUT_BIG_WORD_LEFT = "CutBigWordLeft"
    CUT_WORD_RIGHT = "CutWordRight"
    CUT_BIG_WORD_RIGHT = "CutBigWordRight"
    CUT_WORD_RIGHT_TO_NEXT = "CutWordRightToNext"
    CUT_BIG_WORD_RIGHT_TO_NEXT = "CutBigWordRightToNext"
    PASTE_CUT_BUFFER_BEFORE = "PasteCutBufferBefore"
    PASTE_CUT_BUFFER_AFTER = "PasteCutBufferAfter"
    UPPERCASE_WORD = "UppercaseWord"
    LOWERCASE_WORD = "LowercaseWord"
    CAPITALIZE_CHAR = "CapitalizeChar"
    SWITCHCASE_CHAR = "SwitchcaseChar"
    SWAP_WORDS = "SwapWords"
    SWAP_GRAPHEMES = "SwapGraphemes"
    UNDO = "Undo"
    REDO = "Redo"
    CUT_RIGHT_UNTIL = "CutRightUntil"
    CUT_RIGHT_BEFORE = "CutRightBefore"
    MOVE_RIGHT_UNTIL = "MoveRightUntil"
    MOVE_RIGHT_BEFORE = "MoveRightBefore"
    CUT_LEFT_UNTIL = "CutLeftUntil"
    CUT_LEFT_BEFORE = "CutLeftBefore"
    MOVE_LEFT_UNTIL = "MoveLeftUntil"
    MOVE_LEFT_BEFORE = "MoveLeftBefore"


_EK = EditCommandKind

_CHAR_COMMANDS = frozenset(
    {
        _EK.INSERT_CHAR,
        _EK.REPLACE_CHAR,
        _EK.CUT_RIGHT_UNTIL,
        _EK.CUT_RIGHT_BEFORE,
        _EK.MOVE_RIGHT_UNTIL,
        _EK.MOVE_RIGHT_BEFORE,
        _EK.CUT_LEFT_UNTIL,
        _EK.CUT_LEFT_BEFORE,
        _EK.MOVE_LEFT_UNTIL,
        _EK.MOVE_LEFT_BEFORE,
    }
)

_MOVE_COMMANDS = frozenset(
    {
        _EK.MOVE_TO_START,
        _EK.MOVE_TO_END,
        _EK.MOVE_TO_LINE_START,
        _EK.MOVE_TO_LINE_END,
        _EK.MOVE_TO_POSITION,
        _EK.MOVE_LEFT,
        _EK.MOVE_RIGHT,
        _EK.MOVE_WORD_LEFT,
        _EK.MOVE_BIG_WORD_LEFT,
        _EK.MOVE_WORD_RIGHT,
        _EK.MOVE_WORD_RIGHT_START,
        _EK.MOVE_BIG_WORD_RIGHT_START,
        _EK.MOVE_WORD_RIGHT_END,
        _EK.MOVE_BIG_WORD_RIGHT_END,
        _EK.MOVE_RIGHT_UNTIL,
        _EK.MOVE_RIGHT_BEFORE,
        _EK.MOVE_LEFT_UNTIL,
        _EK.MOVE_LEFT_BEFORE,
    }
)

_COMMAND_LABELS = {
    _EK.MOVE_TO_POSITION: "MoveToPosition  Value: <int>",
    _EK.INSERT_CHAR: "InsertChar  Value: <char>",
    _EK.INSERT_STRING: "InsertString Value: <string>",
    _EK.REPLACE_CHAR: "ReplaceChar <char>",
    _EK.REPLACE_CHARS: "ReplaceChars <int> <string>",
    _EK.CUT_RIGHT_UNTIL: "CutRightUntil Value: <char>",
    _EK.CUT_RIGHT_BEFORE: "CutRightBefore Value: <char>",
    _EK.MOVE_RIGHT_UNTIL: "MoveRightUntil Value: <char>",
    _EK.MOVE_RIGHT_BEFORE: "MoveRightBefore Value: <char>",
    _EK.CUT_LEFT_UNTIL: "CutLeftUntil Value: <char>",
    _EK.CUT_LEFT_BEFORE: "CutLeftBefore Value: <char>",
    _EK.MOVE_LEFT_UNTIL: "MoveLeftUntil Value: <char>",
    _EK.MOVE_LEFT_BEFORE: "MoveLeftBefore Value: <char>",
}


def _is_char(value: Any) -> bool:
    return isinstance(value, str) and len(value) == 1


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass(frozen=True)
class EditCommand:
    """An editing action.

    ``value`` holds the payload: a character, the inserted string, a position,
    or the number of characters replaced by ``REPLACE_CHARS``, whose
    replacement string goes in ``text``.
    """

    kind: EditCommandKind
    value: Any = None
    text: Optional[str] = None

    def __post_init__(self) -> None:
        kind = self.kind
        if kind in _CHAR_COMMANDS:
            if not _is_char(self.value):
                raise ValueError(f"{kind.value} needs a single character")
        elif kind is _EK.INSERT_STRING:
            if not isinstance(self.value, str):
                raise ValueError(f"{kind.value} needs a string")
        elif kind is _EK.MOVE_TO_POSITION:
            if not _is_count(self.value):
                raise ValueError(f"{kind.value} needs a non-negative position")
        elif kind is _EK.REPLACE_CHARS:
            if not _is_count(self.value) or not isinstance(self.text, str):
                raise ValueError(f"{kind.value} needs a count and a string")
            return
        elif self.value is not None:
            raise ValueError(f"{kind.value} takes no value")
        if self.text is not None:
            raise ValueError(f"{kind.value} takes no text")

    def edit_type(self) -> EditType:
        """Classify the command for undo grouping."""
        if self.kind in _MOVE_COMMANDS:
            return EditType.MOVE_CURSOR
        if self.kind in (_EK.UNDO, _EK.REDO):
            return EditType.UNDO_REDO
        return EditType.EDIT_TEXT

    def __str__(self) -> str:
        return _COMMAND_LABELS.get(self.kind, self.kind.value)


class UndoKind(enum.Enum):
    """The kinds of line change tracked on the undo stack."""

    INSERT_CHARACTER = "InsertCharacter"
    BACKSPACE = "Backspace"
    DELETE = "Delete"
    MOVE_CURSOR = "MoveCursor"
    HISTORY_NAVIGATION = "HistoryNavigation"
    CREATE_UNDO_POINT = "CreateUndoPoint"
    UNDO_REDO = "UndoRedo"


_NEWLINES = ("\n", "\r")


@dataclass(frozen=True)
class UndoBehavior:
    """Tag on a line change telling how it is reflected on the undo stack."""

    kind: UndoKind
    char: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is UndoKind.INSERT_CHARACTER:
            if not _is_char(self.char):
                raise ValueError("character insertion tracks the inserted character")
        elif self.kind in (UndoKind.BACKSPACE, UndoKind.DELETE):
            if self.char is not None and not _is_char(self.char):
                raise ValueError("deletions track at most one character")
        elif self.char is not None:
            raise ValueError(f"{self.kind.value} tracks no character")

    def create_undo_point_after(self, previous: "UndoBehavior") -> bool:
        """Whether this change starts a new undo set after ``previous``."""
        prev, new = previous.kind, self.kind
        if new is UndoKind.MOVE_CURSOR:
            return False
        if prev is new is UndoKind.HISTORY_NAVIGATION:
            return False
        if prev is new is UndoKind.INSERT_CHARACTER:
            return previous.char in _NEWLINES or (
                not previous.char.isspace() and self.char.isspace()
            )
        if prev is new and new in (UndoKind.BACKSPACE, UndoKind.DELETE):
            if previous.char is None or self.char is None:
                return False
            return self.char in _NEWLINES or (
                previous.char.isspace() and not self.char.isspace()
            )
        return True


class EventKind(enum.Enum):
    """Every action the line editor engine understands."""

    NONE = "None"
    HISTORY_HINT_COMPLETE = "HistoryHintComplete"
    HISTORY_HINT_WORD_COMPLETE = "HistoryHintWordComplete"
    CTRL_D = "CtrlD"
    CTRL_C = "CtrlC"
    CLEAR_SCREEN = "ClearScreen"
    CLEAR_SCROLLBACK = "ClearScrollback"
    ENTER = "Enter"
    SUBMIT = "Submit"
    SUBMIT_OR_NEWLINE = "SubmitOrNewline"
    ESC = "Esc"
    MOUSE = "Mouse"
    RESIZE = "Resize"
    EDIT = "Edit"
    REPAINT = "Repaint"
    PREVIOUS_HISTORY = "PreviousHistory"
    UP = "Up"
    DOWN = "Down"
    RIGHT = "Right"
    LEFT = "Left"
    NEXT_HISTORY = "NextHistory"
    SEARCH_HISTORY = "SearchHistory"
    MULTIPLE = "Multiple"
    UNTIL_FOUND = "UntilFound"
    MENU = "Menu"
    MENU_NEXT = "MenuNext"
    MENU_PREVIOUS = "MenuPrevious"
    MENU_UP = "MenuUp"
    MENU_DOWN = "MenuDown"
    MENU_LEFT = "MenuLeft"
    MENU_RIGHT = "MenuRight"
    MENU_PAGE_NEXT = "MenuPageNext"
    MENU_PAGE_PREVIOUS = "MenuPagePrevious"
    EXECUTE_HOST_COMMAND = "ExecuteHostCommand"
    OPEN_EDITOR = "OpenEditor"


_EVENT_LABELS = {
    EventKind.RESIZE: "Resize <int> <int>",
    EventKind.EDIT: "Edit: <EditCommand> or Edit: <EditCommand> value: <string>",
    EventKind.MULTIPLE: "Multiple[ { ReedLineEvents, } ]",
    EventKind.UNTIL_FOUND: "UntilFound [ { ReedLineEvents, } ]",
    EventKind.MENU: "Menu Name: <string>",
}


@dataclass(frozen=True)
class ReedlineEvent:
    """An editor action.

    ``payload`` holds a tuple of edit commands (``EDIT``), a tuple of events
    (``MULTIPLE``, ``UNTIL_FOUND``), a ``(width, height)`` pair (``RESIZE``)
    or a name (``MENU``, ``EXECUTE_HOST_COMMAND``). Sequences are stored as
    tuples.
    """

    kind: EventKind
    payload: Any = None

    def __post_init__(self) -> None:
        kind, payload = self.kind, self.payload
        if kind is EventKind.EDIT:
            commands = tuple(payload or ())
            if not all(isinstance(c, EditCommand) for c in commands):
                raise TypeError("an edit event holds edit commands")
            object.__setattr__(self, "payload", commands)
        elif kind in (EventKind.MULTIPLE, EventKind.UNTIL_FOUND):
            events = tuple(payload or ())
            if not all(isinstance(e, ReedlineEvent) for e in events):
                raise TypeError(f"{kind.value} holds events")
            object.__setattr__(self, "payload", events)
        elif kind is EventKind.RESIZE:
            size = tuple(payload or ())
            if len(size) != 2 or not all(_is_count(v) for v in size):
                raise ValueError("a resize event holds a width and a height")
            object.__setattr__(self, "payload", size)
        elif kind in (EventKind.MENU, EventKind.EXECUTE_HOST_COMMAND):
            if not isinstance(payload, str):
                raise TypeError(f"{kind.value} holds a name")
        elif payload is not None:
            raise ValueError(f"{kind.value} carries no payload")

    def __str__(self) -> str:
        return _EVENT_LABELS.get(self.kind, self.kind.value)


@dataclass(frozen=True)
class EventStatus:
    """Outcome of handling one event: handled, inapplicable, or exiting with a signal."""

    handled: bool
    signal: Optional[Signal] = None

    @property
    def exits(self) -> bool:
        return self.signal is not None

    @classmethod
    def exit_with(cls, signal: Signal) -> "EventStatus":
        return cls(True, signal)


EventStatus.HANDLED = EventStatus(True)
EventStatus.INAPPLICABLE = EventStatus(False)