# keyline

`keyline` turns terminal input events (key presses, mouse, resize, focus and
paste) into line-editing events. It provides an Emacs edit mode, a vi edit
mode with normal and insert key tables, configurable keybindings, a parser
for vi key sequences, and a small thread-safe queue for messages that arrive
while a line is being edited.

## Installation

```
pip install keyline
```

The package has no dependencies outside the standard library.

## What the package does not do

`keyline` decides *what* a key means; it does not edit text. There is no
line buffer, no reading from the terminal, no screen painting, no history,
no completion menus, no hints and no `read_line` loop. The `EditCommand`
and `ReedlineEvent` values it produces are meant to be carried out by an
editor engine built on top of it.

## Modules

- `keyline.events` – terminal input: `KeyModifiers` (a flag enum),
  `KeyKind`, `KeyCode` (`KeyCode.char("a")`, `KeyCode.function(1)`),
  `KeyEventKind`, `KeyEvent`, `MouseEvent`, `ResizeEvent`, `FocusEvent`,
  `PasteEvent`, and `ReedlineRawEvent`.
- `keyline.enums` – `Signal`/`SignalKind`, `EditCommand`/`EditCommandKind`,
  `EditType`, `UndoBehavior`/`UndoKind`, `ReedlineEvent`/`EventKind` and
  `EventStatus`.
- `keyline.keybindings` – `KeyCombination`, `Keybindings`, `edit_bind` and
  the default binding sets.
- `keyline.emacs` – the `EditMode` base class, `CursorShape`,
  `CursorConfig`, `default_emacs_keybindings` and `Emacs`.
- `keyline.vi` – `ViMode` and `Vi`.
- `keyline.vi_parser`, `keyline.vi_command`, `keyline.vi_motion` – the vi
  sequence parser and its parts.
- `keyline.external_printer` – `ExternalPrinter`.

## Raw events

`ReedlineRawEvent.convert_from` wraps a terminal event for an edit mode. It
returns `None` for key releases and turns key repeats into presses; anything
that is not a terminal event raises `TypeError`.

```python
from keyline.events import KeyCode, KeyEvent, KeyEventKind, ReedlineRawEvent

ReedlineRawEvent.convert_from(KeyEvent(KeyCode.char("a"), kind=KeyEventKind.RELEASE))  # None
```

## Emacs mode

```python
from keyline.emacs import Emacs
from keyline.events import KeyCode, KeyEvent, KeyModifiers, ReedlineRawEvent

emacs = Emacs()  # uses default_emacs_keybindings()
raw = ReedlineRawEvent.convert_from(KeyEvent(KeyCode.char("l"), KeyModifiers.CONTROL))
print(emacs.parse_event(raw))  # ClearScreen
```

A character key that has no binding becomes an `EDIT` event holding one
`INSERT_CHAR` command when it is typed with no modifier, with Shift (ASCII
letters are upper-cased), or with Ctrl+Alt (with or without Shift, as AltGr
produces); with any other modifier it becomes a `NONE` event. Pasted text
becomes an `INSERT_STRING` command with `\r\n` and `\r` turned into `\n`.
Mouse events give `MOUSE`, resizes give `RESIZE` with `(width, height)`,
and focus changes give `NONE`.

## Keybindings

```python
from keyline.enums import EventKind, ReedlineEvent
from keyline.events import KeyCode, KeyModifiers
from keyline.keybindings import Keybindings

kb = Keybindings.empty()
kb.add_binding(KeyModifiers.CONTROL, KeyCode.char("l"),
               ReedlineEvent(EventKind.HISTORY_HINT_COMPLETE))
kb.find_binding(KeyModifiers.CONTROL, KeyCode.char("l"))    # the event
kb.remove_binding(KeyModifiers.CONTROL, KeyCode.char("l"))  # the event, now unbound
kb.find_binding(KeyModifiers.CONTROL, KeyCode.char("l"))    # None
```

Adding an `UNTIL_FOUND` event with no events inside raises `ValueError`.
`add_common_control_bindings`, `add_common_navigation_bindings` and
`add_common_edit_bindings` fill a table with the shared defaults;
`default_emacs_keybindings`, `default_vi_insert_keybindings` and
`default_vi_normal_keybindings` build complete tables. `edit_bind(command)`
wraps one `EditCommand` in an `EDIT` event.

## Vi mode

```python
from keyline.events import KeyCode, KeyEvent, KeyKind, ReedlineRawEvent
from keyline.vi import Vi, ViMode

vi = Vi()  # default insert and normal key tables
vi.parse_event(ReedlineRawEvent.convert_from(KeyEvent(KeyCode(KeyKind.ESC))))
vi.mode  # ViMode.NORMAL

for ch in "dw":
    event = vi.parse_event(ReedlineRawEvent.convert_from(KeyEvent(KeyCode.char(ch))))
# event is MULTIPLE holding one EDIT event with CUT_WORD_RIGHT_TO_NEXT
```

`Vi` starts in insert mode. `Esc` clears any pending keys, switches to
normal mode and gives `MULTIPLE(ESC, REPAINT)`; `Enter` switches back to
insert mode and gives `ENTER`. In normal mode, unbound characters are
collected until they form a complete sequence such as `2dw`, `dd`, `ft`,
`;` or `.`; an invalid sequence is dropped. Commands such as `i`, `a`, `A`,
`I`, `C`, `S`, `s`, `?` and `c` with a motion switch to insert mode. The
last command event is kept for `.`, and the last `f`/`F`/`t`/`T` search for
`;` and `,`.

The parser can be used on its own:

```python
from keyline.vi_parser import parse

seq = parse("2d2w")
seq.multiplier, seq.count       # 2, 2
seq.is_valid(), seq.is_complete()  # True, True
```

## Undo grouping

`UndoBehavior.create_undo_point_after` tells whether a change starts a new
undo set after the previous one; typing a space after a letter does:

```python
from keyline.enums import UndoBehavior, UndoKind

UndoBehavior(UndoKind.INSERT_CHARACTER, " ").create_undo_point_after(
    UndoBehavior(UndoKind.INSERT_CHARACTER, "a"))  # True
```

## External printer

```python
from keyline.external_printer import ExternalPrinter

printer = ExternalPrinter(20)
printer.print("background job finished")
printer.get_line()     # "background job finished"
printer.get_line()     # None
list(printer.lines())  # every waiting line, oldest first
```

`print` blocks while `max_cap` lines are waiting; `get_line` never blocks.
The capacity must be a positive integer.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.