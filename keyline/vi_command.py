"""Vi commands: parsing them from typed characters and turning them into events."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, List, Optional

from keyline.enums import EditCommand, EditCommandKind, EventKind, ReedlineEvent
from keyline.vi_motion import (
    CharSearchKind,
    CharStream,
    Motion,
    MotionKind,
    ReedlineOption,
    ViCharSearch,
)

EC = EditCommandKind
_MK = MotionKind
_CK = CharSearchKind


class CommandKind(enum.Enum):
    INCOMPLETE = "Incomplete"
    DELETE = "Delete"
    DELETE_CHAR = "DeleteChar"
    REPLACE_CHAR = "ReplaceChar"
    SUBSTITUTE_CHAR_WITH_INSERT = "SubstituteCharWithInsert"
    PASTE_AFTER = "PasteAfter"
    PASTE_BEFORE = "PasteBefore"
    ENTER_VI_APPEND = "EnterViAppend"
    ENTER_VI_INSERT = "EnterViInsert"
    UNDO = "Undo"
    CHANGE_TO_LINE_END = "ChangeToLineEnd"
    DELETE_TO_END = "DeleteToEnd"
    APPEND_TO_END = "AppendToEnd"
    PREPEND_TO_START = "PrependToStart"
    REWRITE_CURRENT_LINE = "RewriteCurrentLine"
    CHANGE = "Change"
    HISTORY_SEARCH = "HistorySearch"
    SWITCHCASE = "Switchcase"
    REPEAT_LAST_ACTION = "RepeatLastAction"


_CMD = CommandKind

_COMMAND_KEYS = {
    "d": _CMD.DELETE,
    "p": _CMD.PASTE_AFTER,
    "P": _CMD.PASTE_BEFORE,
    "i": _CMD.ENTER_VI_INSERT,
    "a": _CMD.ENTER_VI_APPEND,
    "u": _CMD.UNDO,
    "c": _CMD.CHANGE,
    "x": _CMD.DELETE_CHAR,
    "s": _CMD.SUBSTITUTE_CHAR_WITH_INSERT,
    "?": _CMD.HISTORY_SEARCH,
    "C": _CMD.CHANGE_TO_LINE_END,
    "D": _CMD.DELETE_TO_END,
    "I": _CMD.PREPEND_TO_START,
    "A": _CMD.APPEND_TO_END,
    "S": _CMD.REWRITE_CURRENT_LINE,
    "~": _CMD.SWITCHCASE,
    ".": _CMD.REPEAT_LAST_ACTION,
}

_SIMPLE_EDITS = {
    _CMD.ENTER_VI_APPEND: EC.MOVE_RIGHT,
    _CMD.PASTE_AFTER: EC.PASTE_CUT_BUFFER_AFTER,
    _CMD.PASTE_BEFORE: EC.PASTE_CUT_BUFFER_BEFORE,
    _CMD.UNDO: EC.UNDO,
    _CMD.CHANGE_TO_LINE_END: EC.CLEAR_TO_LINE_END,
    _CMD.DELETE_TO_END: EC.CUT_TO_LINE_END,
    _CMD.APPEND_TO_END: EC.MOVE_TO_LINE_END,
    _CMD.PREPEND_TO_START: EC.MOVE_TO_LINE_START,
    _CMD.REWRITE_CURRENT_LINE: EC.CUT_CURRENT_LINE,
    _CMD.DELETE_CHAR: EC.CUT_CHAR,
    _CMD.SUBSTITUTE_CHAR_WITH_INSERT: EC.CUT_CHAR,
    _CMD.SWITCHCASE: EC.SWITCHCASE_CHAR,
}

_COMMON_MOTION_EDITS = {
    _MK.NEXT_WORD_END: [EC.CUT_WORD_RIGHT],
    _MK.NEXT_BIG_WORD_END: [EC.CUT_BIG_WORD_RIGHT],
    _MK.PREVIOUS_WORD: [EC.CUT_WORD_LEFT],
    _MK.PREVIOUS_BIG_WORD: [EC.CUT_BIG_WORD_LEFT],
    _MK.START: [EC.CUT_FROM_LINE_START],
    _MK.LEFT: [EC.BACKSPACE],
    _MK.RIGHT: [EC.DELETE],
}

_DELETE_MOTION_EDITS = {
    **_COMMON_MOTION_EDITS,
    _MK.END: [EC.CUT_TO_LINE_END],
    _MK.LINE: [EC.CUT_CURRENT_LINE],
    _MK.NEXT_WORD: [EC.CUT_WORD_RIGHT_TO_NEXT],
    _MK.NEXT_BIG_WORD: [EC.CUT_BIG_WORD_RIGHT_TO_NEXT],
}

_CHANGE_MOTION_EDITS = {
    **_COMMON_MOTION_EDITS,
    _MK.END: [EC.CLEAR_TO_LINE_END],
    _MK.LINE: [EC.MOVE_TO_START, EC.CLEAR_TO_LINE_END],
    _MK.NEXT_WORD: [EC.CUT_WORD_RIGHT],
    _MK.NEXT_BIG_WORD: [EC.CUT_BIG_WORD_RIGHT],
}

_CHAR_MOTION_SEARCHES = {
    _MK.RIGHT_UNTIL: _CK.TO_RIGHT,
    _MK.RIGHT_BEFORE: _CK.TILL_RIGHT,
    _MK.LEFT_UNTIL: _CK.TO_LEFT,
    _MK.LEFT_BEFORE: _CK.TILL_LEFT,
}


def _edit(kind: EditCommandKind) -> ReedlineOption:
    return ReedlineOption.of_edit(EditCommand(kind))


@dataclass(frozen=True)
class Command:
    """A vi command; ``char`` is the replacement character of ``r``."""

    kind: CommandKind
    char: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is _CMD.REPLACE_CHAR:
            if not (isinstance(self.char, str) and len(self.char) == 1):
                raise ValueError("ReplaceChar needs a single character")
        elif self.char is not None:
            raise ValueError(f"{self.kind.value} takes no character")

    def whole_line_char(self) -> Optional[str]:
        """The key that, repeated, applies this command to the whole line."""
        if self.kind is _CMD.DELETE:
            return "d"
        if self.kind is _CMD.CHANGE:
            return "c"
        return None

    def requires_motion(self) -> bool:
        """Whether the command needs a motion to be complete."""
        return self.kind in (_CMD.DELETE, _CMD.CHANGE)

    def to_reedline(self, vi_state: Any) -> List[ReedlineOption]:
        """The options this command performs on its own."""
        kind = self.kind
        if kind is _CMD.ENTER_VI_INSERT:
            return [ReedlineOption.of_event(ReedlineEvent(EventKind.REPAINT))]
        if kind is _CMD.HISTORY_SEARCH:
            return [ReedlineOption.of_event(ReedlineEvent(EventKind.SEARCH_HISTORY))]
        if kind is _CMD.REPLACE_CHAR:
            return [ReedlineOption.of_edit(EditCommand(EC.REPLACE_CHAR, self.char))]
        if kind in _SIMPLE_EDITS:
            return [_edit(_SIMPLE_EDITS[kind])]
        if kind is _CMD.REPEAT_LAST_ACTION:
            previous = vi_state.previous
            return [] if previous is None else [ReedlineOption.of_event(previous)]
        # Delete, Change and Incomplete wait for a motion.
        return [ReedlineOption.incomplete()]

    def to_reedline_with_motion(
        self, motion: Motion, vi_state: Any
    ) -> Optional[List[ReedlineOption]]:
        """The options performing this command over ``motion``, or None if it cannot."""
        if self.kind is _CMD.DELETE:
            return self._with_motion(motion, vi_state, _DELETE_MOTION_EDITS)
        if self.kind is _CMD.CHANGE:
            options = self._with_motion(motion, vi_state, _CHANGE_MOTION_EDITS)
            if options is None:
                return None
            # Repaint so that the switch to insert mode is shown.
            return options + [ReedlineOption.of_event(ReedlineEvent(EventKind.REPAINT))]
        return None

    @staticmethod
    def _with_motion(
        motion: Motion, vi_state: Any, table: dict
    ) -> Optional[List[ReedlineOption]]:
        kind = motion.kind
        if kind in table:
            return [_edit(k) for k in table[kind]]
        if kind in _CHAR_MOTION_SEARCHES:
            search = ViCharSearch(_CHAR_MOTION_SEARCHES[kind], motion.char)
            vi_state.last_char_search = search
            return [ReedlineOption.of_edit(search.to_cut())]
        if kind in (_MK.REPLAY_CHAR_SEARCH, _MK.REVERSE_CHAR_SEARCH):
            search = vi_state.last_char_search
            if search is None:
                return None
            if kind is _MK.REVERSE_CHAR_SEARCH:
                search = search.reverse()
            return [ReedlineOption.of_edit(search.to_cut())]
        return None


def parse_command(stream: CharStream) -> Optional[Command]:
    """Parse a command from ``stream``, or return None when none starts here."""
    c = stream.peek()
    if c is None:
        return None
    if c == "r":
        next(stream)
        target = next(stream, None)
        if target is None:
            return Command(_CMD.INCOMPLETE)
        return Command(_CMD.REPLACE_CHAR, target)
    kind = _COMMAND_KEYS.get(c)
    if kind is None:
        return None
    next(stream)
    return Command(kind)