"""Vi motions: parsing them from typed characters and turning them into events."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

from keyline.enums import EditCommand, EditCommandKind, EventKind, ReedlineEvent
from keyline.keybindings import edit_bind

T = TypeVar("T")
EC = EditCommandKind


class CharStream:
    """An iterator over characters that can look one character ahead."""

    _END = object()

    def __init__(self, chars: Iterable[str]) -> None:
        self._iter: Iterator[str] = iter(chars)
        self._ahead: Any = self._END

    def __iter__(self) -> "CharStream":
        return self

    def peek(self) -> Optional[str]:
        """The next character without consuming it, or None at the end."""
        if self._ahead is self._END:
            self._ahead = next(self._iter, self._END)
        return None if self._ahead is self._END else self._ahead

    def __next__(self) -> str:
        if self._ahead is not self._END:
            value, self._ahead = self._ahead, self._END
            return value
        return next(self._iter)


class ParseStatus(enum.Enum):
    VALID = "Valid"
    INCOMPLETE = "Incomplete"
    INVALID = "Invalid"


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of parsing part of a vi sequence; ``value`` is set when valid."""

    status: ParseStatus
    value: Optional[T] = None

    @classmethod
    def valid(cls, value: T) -> "ParseResult[T]":
        return cls(ParseStatus.VALID, value)

    @classmethod
    def incomplete(cls) -> "ParseResult[T]":
        return cls(ParseStatus.INCOMPLETE)

    @classmethod
    def invalid(cls) -> "ParseResult[T]":
        return cls(ParseStatus.INVALID)

    @property
    def is_valid(self) -> bool:
        return self.status is ParseStatus.VALID

    @property
    def is_incomplete(self) -> bool:
        return self.status is ParseStatus.INCOMPLETE

    @property
    def is_invalid(self) -> bool:
        return self.status is ParseStatus.INVALID


@dataclass(frozen=True)
class ReedlineOption:
    """An editor event, a single edit command, or a marker for an unfinished command."""

    event: Optional[ReedlineEvent] = None
    edit: Optional[EditCommand] = None

    def __post_init__(self) -> None:
        if self.event is not None and self.edit is not None:
            raise ValueError("an option holds either an event or an edit, not both")

    @classmethod
    def of_event(cls, event: ReedlineEvent) -> "ReedlineOption":
        return cls(event=event)

    @classmethod
    def of_edit(cls, edit: EditCommand) -> "ReedlineOption":
        return cls(edit=edit)

    @classmethod
    def incomplete(cls) -> "ReedlineOption":
        return cls()

    @property
    def is_incomplete(self) -> bool:
        return self.event is None and self.edit is None

    def into_reedline_event(self) -> Optional[ReedlineEvent]:
        """The editor event for this option, or None when it is incomplete."""
        if self.event is not None:
            return self.event
        if self.edit is not None:
            return edit_bind(self.edit)
        return None


class MotionKind(enum.Enum):
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    NEXT_WORD = "NextWord"
    NEXT_BIG_WORD = "NextBigWord"
    NEXT_WORD_END = "NextWordEnd"
    NEXT_BIG_WORD_END = "NextBigWordEnd"
    PREVIOUS_WORD = "PreviousWord"
    PREVIOUS_BIG_WORD = "PreviousBigWord"
    LINE = "Line"
    START = "Start"
    END = "End"
    RIGHT_UNTIL = "RightUntil"
    RIGHT_BEFORE = "RightBefore"
    LEFT_UNTIL = "LeftUntil"
    LEFT_BEFORE = "LeftBefore"
    REPLAY_CHAR_SEARCH = "ReplayCharSearch"
    REVERSE_CHAR_SEARCH = "ReverseCharSearch"


_MK = MotionKind


class CharSearchKind(enum.Enum):
    """The f, F, t and T searches."""

    TO_RIGHT = "ToRight"
    TO_LEFT = "ToLeft"
    TILL_RIGHT = "TillRight"
    TILL_LEFT = "TillLeft"


_CK = CharSearchKind

_REVERSED = {
    _CK.TO_RIGHT: _CK.TO_LEFT,
    _CK.TO_LEFT: _CK.TO_RIGHT,
    _CK.TILL_RIGHT: _CK.TILL_LEFT,
    _CK.TILL_LEFT: _CK.TILL_RIGHT,
}

_SEARCH_MOVES = {
    _CK.TO_RIGHT: EC.MOVE_RIGHT_UNTIL,
    _CK.TO_LEFT: EC.MOVE_LEFT_UNTIL,
    _CK.TILL_RIGHT: EC.MOVE_RIGHT_BEFORE,
    _CK.TILL_LEFT: EC.MOVE_LEFT_BEFORE,
}

_SEARCH_CUTS = {
    _CK.TO_RIGHT: EC.CUT_RIGHT_UNTIL,
    _CK.TO_LEFT: EC.CUT_LEFT_UNTIL,
    _CK.TILL_RIGHT: EC.CUT_RIGHT_BEFORE,
    _CK.TILL_LEFT: EC.CUT_LEFT_BEFORE,
}


@dataclass(frozen=True)
class ViCharSearch:
    """A left or right motion to or till a character, kept for ``;`` and ``,``."""

    kind: CharSearchKind
    char: str

    def __post_init__(self) -> None:
        if not (isinstance(self.char, str) and len(self.char) == 1):
            raise ValueError("a character search targets exactly one character")

    def reverse(self) -> "ViCharSearch":
        """The same search in the opposite direction."""
        return ViCharSearch(_REVERSED[self.kind], self.char)

    def to_move(self) -> EditCommand:
        """The edit command moving the cursor by this search."""
        return EditCommand(_SEARCH_MOVES[self.kind], self.char)

    def to_cut(self) -> EditCommand:
        """The edit command cutting text covered by this search."""
        return EditCommand(_SEARCH_CUTS[self.kind], self.char)


_CHAR_MOTIONS = {
    _MK.RIGHT_UNTIL: (_CK.TO_RIGHT, EC.MOVE_RIGHT_UNTIL),
    _MK.RIGHT_BEFORE: (_CK.TILL_RIGHT, EC.MOVE_RIGHT_BEFORE),
    _MK.LEFT_UNTIL: (_CK.TO_LEFT, EC.MOVE_LEFT_UNTIL),
    _MK.LEFT_BEFORE: (_CK.TILL_LEFT, EC.MOVE_LEFT_BEFORE),
}


def _event(kind: EventKind) -> ReedlineEvent:
    return ReedlineEvent(kind)


def _until_found(*kinds: EventKind) -> ReedlineOption:
    return ReedlineOption.of_event(
        ReedlineEvent(EventKind.UNTIL_FOUND, tuple(_event(k) for k in kinds))
    )


def _edit(kind: EditCommandKind) -> ReedlineOption:
    return ReedlineOption.of_edit(EditCommand(kind))


_PLAIN_MOTIONS = {
    _MK.LEFT: lambda: [_until_found(EventKind.MENU_LEFT, EventKind.LEFT)],
    _MK.RIGHT: lambda: [
        _until_found(
            EventKind.HISTORY_HINT_COMPLETE, EventKind.MENU_RIGHT, EventKind.RIGHT
        )
    ],
    _MK.UP: lambda: [_until_found(EventKind.MENU_UP, EventKind.UP)],
    _MK.DOWN: lambda: [_until_found(EventKind.MENU_DOWN, EventKind.DOWN)],
    _MK.NEXT_WORD: lambda: [_edit(EC.MOVE_WORD_RIGHT_START)],
    _MK.NEXT_BIG_WORD: lambda: [_edit(EC.MOVE_BIG_WORD_RIGHT_START)],
    _MK.NEXT_WORD_END: lambda: [_edit(EC.MOVE_WORD_RIGHT_END)],
    _MK.NEXT_BIG_WORD_END: lambda: [_edit(EC.MOVE_BIG_WORD_RIGHT_END)],
    _MK.PREVIOUS_WORD: lambda: [_edit(EC.MOVE_WORD_LEFT)],
    _MK.PREVIOUS_BIG_WORD: lambda: [_edit(EC.MOVE_BIG_WORD_LEFT)],
    # A whole-line motion only makes sense after a command.
    _MK.LINE: lambda: [],
    _MK.START: lambda: [_edit(EC.MOVE_TO_LINE_START)],
    _MK.END: lambda: [_edit(EC.MOVE_TO_LINE_END)],
}


@dataclass(frozen=True)
class Motion:
    """A vi motion; ``char`` is the target of the f, t, F and T motions."""

    kind: MotionKind
    char: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind in _CHAR_MOTIONS:
            if not (isinstance(self.char, str) and len(self.char) == 1):
                raise ValueError(f"{self.kind.value} needs a single character")
        elif self.char is not None:
            raise ValueError(f"{self.kind.value} takes no character")

    def to_reedline(self, vi_state: Any) -> List[ReedlineOption]:
        """The options performing this motion; records character searches on ``vi_state``."""
        if self.kind in _PLAIN_MOTIONS:
            return _PLAIN_MOTIONS[self.kind]()
        if self.kind in _CHAR_MOTIONS:
            search_kind, move_kind = _CHAR_MOTIONS[self.kind]
            vi_state.last_char_search = ViCharSearch(search_kind, self.char)
            return [ReedlineOption.of_edit(EditCommand(move_kind, self.char))]
        search = vi_state.last_char_search
        if search is None:
            return []
        if self.kind is _MK.REVERSE_CHAR_SEARCH:
            search = search.reverse()
        return [ReedlineOption.of_edit(search.to_move())]


_SIMPLE_KEYS = {
    "h": _MK.LEFT,
    "l": _MK.RIGHT,
    "j": _MK.DOWN,
    "k": _MK.UP,
    "b": _MK.PREVIOUS_WORD,
    "B": _MK.PREVIOUS_BIG_WORD,
    "w": _MK.NEXT_WORD,
    "W": _MK.NEXT_BIG_WORD,
    "e": _MK.NEXT_WORD_END,
    "E": _MK.NEXT_BIG_WORD_END,
    "0": _MK.START,
    "^": _MK.START,
    "$": _MK.END,
    ";": _MK.REPLAY_CHAR_SEARCH,
    ",": _MK.REVERSE_CHAR_SEARCH,
}

_SEARCH_KEYS = {
    "f": _MK.RIGHT_UNTIL,
    "t": _MK.RIGHT_BEFORE,
    "F": _MK.LEFT_UNTIL,
    "T": _MK.LEFT_BEFORE,
}


def parse_motion(
    stream: CharStream, command_char: Optional[str] = None
) -> ParseResult[Motion]:
    """Parse a motion from ``stream``.

    ``command_char`` is the key that, typed again, makes a whole-line motion
    (as in ``dd``).
    """
    c = stream.peek()
    if c is None:
        return ParseResult.incomplete()
    if c in _SIMPLE_KEYS:
        next(stream)
        return ParseResult.valid(Motion(_SIMPLE_KEYS[c]))
    if c in _SEARCH_KEYS:
        next(stream)
        target = stream.peek()
        if target is None:
            return ParseResult.incomplete()
        next(stream)
        return ParseResult.valid(Motion(_SEARCH_KEYS[c], target))
    if command_char is not None and c == command_char:
        next(stream)
        return ParseResult.valid(Motion(_MK.LINE))
    return ParseResult.invalid()