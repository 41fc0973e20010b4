import pytest

from keyline.enums import (
    EditCommand,
    EditCommandKind as EK,
    EditType,
    EventKind,
    EventStatus,
    ReedlineEvent,
    Signal,
    SignalKind,
    UndoBehavior,
    UndoKind,
)


def test_signal_success_holds_content():
    sig = Signal(SignalKind.SUCCESS, "ls -la")
    assert sig.content == "ls -la"


def test_signal_success_requires_content():
    with pytest.raises(TypeError):
        Signal(SignalKind.SUCCESS)


def test_signal_ctrl_c_rejects_content():
    with pytest.raises(ValueError):
        Signal(SignalKind.CTRL_C, "x")


@pytest.mark.parametrize(
    "command, label",
    [
        (EditCommand(EK.MOVE_TO_START), "MoveToStart"),
        (EditCommand(EK.MOVE_TO_POSITION, 3), "MoveToPosition  Value: <int>"),
        (EditCommand(EK.INSERT_CHAR, "a"), "InsertChar  Value: <char>"),
        (EditCommand(EK.INSERT_STRING, "abc"), "InsertString Value: <string>"),
        (EditCommand(EK.REPLACE_CHAR, "z"), "ReplaceChar <char>"),
        (EditCommand(EK.REPLACE_CHARS, 2, "xy"), "ReplaceChars <int> <string>"),
        (EditCommand(EK.CUT_LEFT_BEFORE, "q"), "CutLeftBefore Value: <char>"),
        (EditCommand(EK.SWITCHCASE_CHAR), "SwitchcaseChar"),
    ],
)
def test_edit_command_display(command, label):
    assert str(command) == label


def test_every_payloadless_command_displays_its_name():
    for kind in (EK.UNDO, EK.REDO, EK.CLEAR, EK.CUT_TO_END):
        assert str(EditCommand(kind)) == kind.value


@pytest.mark.parametrize(
    "command, expected",
    [
        (EditCommand(EK.MOVE_LEFT), EditType.MOVE_CURSOR),
        (EditCommand(EK.MOVE_TO_POSITION, 0), EditType.MOVE_CURSOR),
        (EditCommand(EK.MOVE_RIGHT_UNTIL, "x"), EditType.MOVE_CURSOR),
        (EditCommand(EK.INSERT_CHAR, "x"), EditType.EDIT_TEXT),
        (EditCommand(EK.CUT_RIGHT_UNTIL, "x"), EditType.EDIT_TEXT),
        (EditCommand(EK.COMPLETE), EditType.EDIT_TEXT),
        (EditCommand(EK.UNDO), EditType.UNDO_REDO),
        (EditCommand(EK.REDO), EditType.UNDO_REDO),
    ],
)
def test_edit_type(command, expected):
    assert command.edit_type() is expected


def test_move_commands_are_named_move():
    for kind in EK:
        if kind.value.startswith("Move"):
            value = 0 if kind is EK.MOVE_TO_POSITION else None
            if kind.value.endswith(("Until", "Before")):
                value = "c"
            assert EditCommand(kind, value).edit_type() is EditType.MOVE_CURSOR


@pytest.mark.parametrize(
    "kind, value, text",
    [
        (EK.INSERT_CHAR, "ab", None),
        (EK.INSERT_CHAR, None, None),
        (EK.MOVE_TO_POSITION, -1, None),
        (EK.REPLACE_CHARS, 1, None),
        (EK.CLEAR, "x", None),
        (EK.UNDO, None, "x"),
    ],
)
def test_edit_command_payload_checked(kind, value, text):
    with pytest.raises(ValueError):
        EditCommand(kind, value, text)


def test_edit_commands_compare_by_value():
    assert EditCommand(EK.INSERT_CHAR, "l") == EditCommand(EK.INSERT_CHAR, "l")
    assert EditCommand(EK.INSERT_CHAR, "l") != EditCommand(EK.INSERT_CHAR, "L")


def _ins(c):
    return UndoBehavior(UndoKind.INSERT_CHARACTER, c)


def test_move_cursor_never_creates_undo_point():
    move = UndoBehavior(UndoKind.MOVE_CURSOR)
    assert not move.create_undo_point_after(_ins("a"))
    assert not move.create_undo_point_after(UndoBehavior(UndoKind.CREATE_UNDO_POINT))


def test_history_navigation_groups():
    nav = UndoBehavior(UndoKind.HISTORY_NAVIGATION)
    assert not nav.create_undo_point_after(nav)
    assert nav.create_undo_point_after(_ins("a"))


def test_insert_groups_by_word():
    assert not _ins("b").create_undo_point_after(_ins("a"))
    assert _ins(" ").create_undo_point_after(_ins("a"))
    assert not _ins("a").create_undo_point_after(_ins(" "))
    assert _ins("a").create_undo_point_after(_ins("\n"))


@pytest.mark.parametrize("kind", [UndoKind.BACKSPACE, UndoKind.DELETE])
def test_deletions_group_by_word(kind):
    def ub(c):
        return UndoBehavior(kind, c)

    assert not ub("b").create_undo_point_after(ub("a"))
    assert ub("a").create_undo_point_after(ub(" "))
    assert not ub(" ").create_undo_point_after(ub("a"))
    assert ub("\r").create_undo_point_after(ub("a"))
    assert not ub(None).create_undo_point_after(ub("a"))
    assert not ub("a").create_undo_point_after(ub(None))


def test_mixed_kinds_create_undo_point():
    assert UndoBehavior(UndoKind.BACKSPACE, "a").create_undo_point_after(_ins("a"))
    assert UndoBehavior(UndoKind.DELETE, "a").create_undo_point_after(
        UndoBehavior(UndoKind.BACKSPACE, "a")
    )


def test_undo_behavior_checks_char():
    with pytest.raises(ValueError):
        UndoBehavior(UndoKind.INSERT_CHARACTER)
    with pytest.raises(ValueError):
        UndoBehavior(UndoKind.MOVE_CURSOR, "x")


def test_event_sequences_become_tuples_and_compare_equal():
    a = ReedlineEvent(EventKind.EDIT, [EditCommand(EK.INSERT_CHAR, "l")])
    b = ReedlineEvent(EventKind.EDIT, (EditCommand(EK.INSERT_CHAR, "l"),))
    assert a == b
    assert a.payload == (EditCommand(EK.INSERT_CHAR, "l"),)


def test_nested_events():
    inner = [ReedlineEvent(EventKind.MENU_UP), ReedlineEvent(EventKind.UP)]
    ev = ReedlineEvent(EventKind.UNTIL_FOUND, inner)
    assert list(ev.payload) == inner


@pytest.mark.parametrize(
    "kind, payload, error",
    [
        (EventKind.EDIT, [ReedlineEvent(EventKind.UP)], TypeError),
        (EventKind.MULTIPLE, [EditCommand(EK.UNDO)], TypeError),
        (EventKind.RESIZE, (1,), ValueError),
        (EventKind.MENU, None, TypeError),
        (EventKind.ENTER, "x", ValueError),
    ],
)
def test_event_payload_checked(kind, payload, error):
    with pytest.raises(error):
        ReedlineEvent(kind, payload)


@pytest.mark.parametrize(
    "event, label",
    [
        (ReedlineEvent(EventKind.NONE), "None"),
        (ReedlineEvent(EventKind.RESIZE, (80, 24)), "Resize <int> <int>"),
        (
            ReedlineEvent(EventKind.EDIT, []),
            "Edit: <EditCommand> or Edit: <EditCommand> value: <string>",
        ),
        (ReedlineEvent(EventKind.MULTIPLE, []), "Multiple[ { ReedLineEvents, } ]"),
        (ReedlineEvent(EventKind.UNTIL_FOUND, []), "UntilFound [ { ReedLineEvents, } ]"),
        (ReedlineEvent(EventKind.MENU, "completion"), "Menu Name: <string>"),
        (ReedlineEvent(EventKind.EXECUTE_HOST_COMMAND, "ls"), "ExecuteHostCommand"),
        (ReedlineEvent(EventKind.OPEN_EDITOR), "OpenEditor"),
    ],
)
def test_event_display(event, label):
    assert str(event) == label


def test_event_status():
    sig = Signal(SignalKind.CTRL_D)
    status = EventStatus.exit_with(sig)
    assert status.exits and status.signal == sig
    assert EventStatus.HANDLED.handled and not EventStatus.HANDLED.exits
    assert not EventStatus.INAPPLICABLE.handled