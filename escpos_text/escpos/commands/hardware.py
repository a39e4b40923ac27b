"""
Printer control commands for ESC/POS receipt printers.

Reference: Bixolon SRP-350plus Command Manual, "Printer Control"
"""

from typing import Final

__all__ = ["ESC_INIT_PRINTER"]

ESC_INIT_PRINTER: Final[bytes] = b"\x1b@"
"""
Initialize printer.

Command: ESC @
Hex: 1B 40
Effect: Clears the print buffer and resets every mode to its power-on default
Note: Does not clear the receive buffer or NV memory

Example:
    >>> printer.send(ESC_INIT_PRINTER)
"""
