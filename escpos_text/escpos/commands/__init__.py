"""
ESC/POS command constants for Bixolon SRP-350plus receipt printers.

Module Structure:
    commands/
    ├── __init__.py             # This file (public API exports)
    ├── text_formatting.py      # Bold, underline, double-strike, reverse, rotation
    ├── positioning.py          # LF, CR, HT, FF
    └── hardware.py             # Printer initialization

Usage:
    >>> from escpos_text.escpos.commands import ESC_BOLD_ON, ESC_BOLD_OFF
    >>> command = ESC_BOLD_ON + b"Bold text" + ESC_BOLD_OFF
    >>> printer.send(command)
"""

from escpos_text.escpos.commands.hardware import ESC_INIT_PRINTER
from escpos_text.escpos.commands.positioning import CR, CRLF, FF, HT, LF
from escpos_text.escpos.commands.text_formatting import (
    ESC_BOLD_OFF,
    ESC_BOLD_ON,
    ESC_DOUBLE_STRIKE_OFF,
    ESC_DOUBLE_STRIKE_ON,
    ESC_ROTATE_90_OFF,
    ESC_ROTATE_90_ON,
    ESC_UNDERLINE_DOUBLE,
    ESC_UNDERLINE_OFF,
    ESC_UNDERLINE_ON,
    ESC_UPSIDE_DOWN_OFF,
    ESC_UPSIDE_DOWN_ON,
    GS_REVERSE_OFF,
    GS_REVERSE_ON,
    set_double_strike,
    set_emphasized,
    set_reverse,
    set_rotation,
    set_underline,
    set_upside_down,
)

__all__ = [
    # Hardware
    "ESC_INIT_PRINTER",
    # Control characters
    "CR",
    "CRLF",
    "FF",
    "HT",
    "LF",
    # Text formatting
    "ESC_BOLD_OFF",
    "ESC_BOLD_ON",
    "ESC_DOUBLE_STRIKE_OFF",
    "ESC_DOUBLE_STRIKE_ON",
    "ESC_ROTATE_90_OFF",
    "ESC_ROTATE_90_ON",
    "ESC_UNDERLINE_DOUBLE",
    "ESC_UNDERLINE_OFF",
    "ESC_UNDERLINE_ON",
    "ESC_UPSIDE_DOWN_OFF",
    "ESC_UPSIDE_DOWN_ON",
    "GS_REVERSE_OFF",
    "GS_REVERSE_ON",
    "set_double_strike",
    "set_emphasized",
    "set_reverse",
    "set_rotation",
    "set_underline",
    "set_upside_down",
]
