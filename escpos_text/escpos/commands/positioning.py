"""
Basic control characters for ESC/POS receipt printers.

Reference: Bixolon SRP-350plus Command Manual, "Print Commands"
"""

from typing import Final

__all__ = [
    "LF",
    "CR",
    "HT",
    "FF",
    "CRLF",
]

LF: Final[bytes] = b"\n"
"""
Line Feed.

Command: LF
Hex: 0A
Effect: Prints the data in the buffer and feeds one line
Note: Character modes (bold, underline, ...) are NOT reset by LF,
      except upside-down/rotation which only take effect at line start
"""

CR: Final[bytes] = b"\r"
"""
Carriage Return.

Command: CR
Hex: 0D
Effect: Ignored by the SRP-350plus when auto line feed is disabled
"""

HT: Final[bytes] = b"\t"
"""
Horizontal Tab.

Command: HT
Hex: 09
Effect: Moves the print position to the next tab stop
"""

FF: Final[bytes] = b"\x0c"
"""
Form Feed (page mode: print and return to standard mode).

Command: FF
Hex: 0C
"""

CRLF: Final[bytes] = CR + LF
"""Carriage return followed by line feed."""
