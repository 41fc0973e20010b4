"""Emacs and vi edit modes, keybindings and vi sequence parsing for line editors."""

__version__ = "0.1.0"

__all__ = [
    "emacs",
    "enums",
    "events",
    "external_printer",
    "keybindings",
    "vi",
    "vi_command",
    "vi_motion",
    "vi_parser",
]