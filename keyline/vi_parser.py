"""Parsing whole vi key sequences: count, command, count and motion."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain, repeat
from typing import Any, Iterable, List, Optional, Union

from keyline.enums import EventKind, ReedlineEvent
from keyline.vi_command import Command, CommandKind, parse_command
from keyline.vi_motion import CharStream, Motion, ParseResult, ReedlineOption, parse_motion

_CMD = CommandKind

_INSERTING_WITHOUT_MOTION = frozenset(
    {
        _CMD.ENTER_VI_INSERT,
        _CMD.ENTER_VI_APPEND,
        _CMD.CHANGE_TO_LINE_END,
        _CMD.APPEND_TO_END,
        _CMD.PREPEND_TO_START,
        _CMD.REWRITE_CURRENT_LINE,
        _CMD.SUBSTITUTE_CHAR_WITH_INSERT,
        _CMD.HISTORY_SEARCH,
    }
)


@dataclass(frozen=True)
class ParsedViSequence:
    """A parsed vi key sequence."""

    multiplier: Optional[int]
    command: Optional[Command]
    count: Optional[int]
    motion: ParseResult[Motion]

    def is_valid(self) -> bool:
        return not self.motion.is_invalid

    def is_complete(self) -> bool:
        command, motion = self.command, self.motion
        if command is None:
            return motion.is_valid
        if command.kind is _CMD.INCOMPLETE:
            return False
        if motion.is_valid:
            return True
        if motion.is_incomplete:
            return not command.requires_motion()
        return False

    def _total_multiplier(self) -> int:
        # Vim multiplies the count before and after the command.
        return (self.multiplier or 1) * (self.count or 1)

    def _apply_multiplier(
        self, raw_events: Optional[List[ReedlineOption]]
    ) -> ReedlineEvent:
        if raw_events is None:
            return ReedlineEvent(EventKind.NONE)
        options = chain.from_iterable(repeat(raw_events, self._total_multiplier()))
        events = [
            event
            for event in (option.into_reedline_event() for option in options)
            if event is not None
        ]
        none = ReedlineEvent(EventKind.NONE)
        if not events or none in events:
            return none
        return ReedlineEvent(EventKind.MULTIPLE, events)

    def enters_insert_mode(self) -> bool:
        command = self.command
        if command is None:
            return False
        if self.motion.is_incomplete:
            return command.kind in _INSERTING_WITHOUT_MOTION
        return command.kind is _CMD.CHANGE and self.motion.is_valid

    def to_reedline_event(self, vi_state: Any) -> ReedlineEvent:
        """The editor event for this sequence; remembers commands on ``vi_state``."""
        command, motion = self.command, self.motion
        if command is not None:
            if self.count is None and motion.is_incomplete:
                event = self._apply_multiplier(command.to_reedline(vi_state))
            elif motion.is_valid:
                event = self._apply_multiplier(
                    command.to_reedline_with_motion(motion.value, vi_state)
                )
            else:
                return ReedlineEvent(EventKind.NONE)
            if event.kind is not EventKind.NONE:
                vi_state.previous = event
            return event
        if motion.is_valid:
            return self._apply_multiplier(motion.value.to_reedline(vi_state))
        return ReedlineEvent(EventKind.NONE)


def _parse_number(stream: CharStream) -> Optional[int]:
    c = stream.peek()
    if c is None or c == "0" or not ("0" <= c <= "9"):
        return None
    digits = []
    while True:
        c = stream.peek()
        if c is None or not ("0" <= c <= "9"):
            break
        digits.append(next(stream))
    return int("".join(digits))


def parse(chars: Union[CharStream, Iterable[str]]) -> ParsedViSequence:
    """Parse typed characters into a vi sequence."""
    stream = chars if isinstance(chars, CharStream) else CharStream(chars)
    multiplier = _parse_number(stream)
    command = parse_command(stream)
    count = _parse_number(stream)
    motion = parse_motion(
        stream, command.whole_line_char() if command is not None else None
    )
    return ParsedViSequence(multiplier, command, count, motion)