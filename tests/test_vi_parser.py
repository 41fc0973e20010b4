from dataclasses import dataclass
from typing import Optional

import pytest

from keyline.enums import EditCommand, EditCommandKind, EventKind, ReedlineEvent
from keyline.vi_command import Command, CommandKind
from keyline.vi_motion import Motion, MotionKind, ParseResult, ViCharSearch
from keyline.vi_parser import ParsedViSequence, parse

EC = EditCommandKind


@dataclass
class _ViState:
    previous: Optional[ReedlineEvent] = None
    last_char_search: Optional[ViCharSearch] = None


def _ev(kind):
    return ReedlineEvent(kind)


def _edit(kind):
    return ReedlineEvent(EventKind.EDIT, (EditCommand(kind),))


def _multiple(*events):
    return ReedlineEvent(EventKind.MULTIPLE, events)


def _until_found(*kinds):
    return ReedlineEvent(EventKind.UNTIL_FOUND, tuple(_ev(k) for k in kinds))


UP = _until_found(EventKind.MENU_UP, EventKind.UP)
RIGHT = _until_found(EventKind.HISTORY_HINT_COMPLETE, EventKind.MENU_RIGHT, EventKind.RIGHT)


def test_delete_word():
    output = parse(["d", "w"])
    assert output == ParsedViSequence(
        None, Command(CommandKind.DELETE), None, ParseResult.valid(Motion(MotionKind.NEXT_WORD))
    )
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_two_delete_word():
    output = parse(["2", "d", "w"])
    assert output == ParsedViSequence(
        2, Command(CommandKind.DELETE), None, ParseResult.valid(Motion(MotionKind.NEXT_WORD))
    )
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_two_delete_two_word():
    output = parse(["2", "d", "2", "w"])
    assert output == ParsedViSequence(
        2, Command(CommandKind.DELETE), 2, ParseResult.valid(Motion(MotionKind.NEXT_WORD))
    )
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_two_delete_twenty_word():
    output = parse(["2", "d", "2", "0", "w"])
    assert output == ParsedViSequence(
        2, Command(CommandKind.DELETE), 20, ParseResult.valid(Motion(MotionKind.NEXT_WORD))
    )
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_two_delete_two_lines():
    output = parse(["2", "d", "d"])
    assert output == ParsedViSequence(
        2, Command(CommandKind.DELETE), None, ParseResult.valid(Motion(MotionKind.LINE))
    )
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_find_action():
    output = parse(["d", "t", "d"])
    assert output == ParsedViSequence(
        None,
        Command(CommandKind.DELETE),
        None,
        ParseResult.valid(Motion(MotionKind.RIGHT_BEFORE, "d")),
    )
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_has_garbage():
    output = parse(["2", "d", "m"])
    assert output == ParsedViSequence(
        2, Command(CommandKind.DELETE), None, ParseResult.invalid()
    )
    assert output.is_valid() is False


def test_partial_action():
    output = parse(["r"])
    assert output == ParsedViSequence(
        None, Command(CommandKind.INCOMPLETE), None, ParseResult.incomplete()
    )
    assert output.is_valid() is True
    assert output.is_complete() is False


def test_partial_motion():
    output = parse(["f"])
    assert output == ParsedViSequence(None, None, None, ParseResult.incomplete())
    assert output.is_valid() is True
    assert output.is_complete() is False


def test_two_char_action_replace():
    output = parse(["r", "k"])
    assert output == ParsedViSequence(
        None, Command(CommandKind.REPLACE_CHAR, "k"), None, ParseResult.incomplete()
    )
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_find_motion():
    output = parse(["2", "f", "f"])
    assert output == ParsedViSequence(
        2, None, None, ParseResult.valid(Motion(MotionKind.RIGHT_UNTIL, "f"))
    )
    assert output.is_valid() is True
    assert output.is_complete() is True


def test_two_up():
    output = parse(["2", "k"])
    assert output == ParsedViSequence(2, None, None, ParseResult.valid(Motion(MotionKind.UP)))
    assert output.is_valid() is True
    assert output.is_complete() is True


@pytest.mark.parametrize(
    "chars,expected",
    [
        (["2", "k"], _multiple(UP, UP)),
        (["k"], _multiple(UP)),
        (["w"], _multiple(_edit(EC.MOVE_WORD_RIGHT_START))),
        (["W"], _multiple(_edit(EC.MOVE_BIG_WORD_RIGHT_START))),
        (["2", "l"], _multiple(RIGHT, RIGHT)),
        (["l"], _multiple(RIGHT)),
        (["0"], _multiple(_edit(EC.MOVE_TO_LINE_START))),
        (["$"], _multiple(_edit(EC.MOVE_TO_LINE_END))),
        (["i"], _multiple(_ev(EventKind.REPAINT))),
        (["p"], _multiple(_edit(EC.PASTE_CUT_BUFFER_AFTER))),
        (["2", "p"], _multiple(_edit(EC.PASTE_CUT_BUFFER_AFTER), _edit(EC.PASTE_CUT_BUFFER_AFTER))),
        (["u"], _multiple(_edit(EC.UNDO))),
        (["2", "u"], _multiple(_edit(EC.UNDO), _edit(EC.UNDO))),
        (["d", "d"], _multiple(_edit(EC.CUT_CURRENT_LINE))),
        (["d", "w"], _multiple(_edit(EC.CUT_WORD_RIGHT_TO_NEXT))),
        (["d", "W"], _multiple(_edit(EC.CUT_BIG_WORD_RIGHT_TO_NEXT))),
        (["d", "e"], _multiple(_edit(EC.CUT_WORD_RIGHT))),
        (["d", "b"], _multiple(_edit(EC.CUT_WORD_LEFT))),
        (["d", "B"], _multiple(_edit(EC.CUT_BIG_WORD_LEFT))),
    ],
)
def test_reedline_move(chars, expected):
    assert parse(chars).to_reedline_event(_ViState()) == expected


def test_command_event_is_remembered_but_motion_is_not():
    state = _ViState()
    event = parse(["d", "d"]).to_reedline_event(state)
    assert state.previous == event
    parse(["w"]).to_reedline_event(state)
    assert state.previous == event


def test_unfinished_delete_gives_none_event():
    state = _ViState()
    assert parse(["d"]).to_reedline_event(state) == _ev(EventKind.NONE)
    assert state.previous is None


def test_enters_insert_mode():
    assert parse(["i"]).enters_insert_mode() is True
    assert parse(["c", "w"]).enters_insert_mode() is True
    assert parse(["d", "w"]).enters_insert_mode() is False
    assert parse(["w"]).enters_insert_mode() is False


def test_parse_accepts_string():
    assert parse("2dw") == parse(["2", "d", "w"])