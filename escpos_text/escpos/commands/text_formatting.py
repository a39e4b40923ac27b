"""
Character formatting ESC/POS commands for Bixolon SRP-350plus.

Contains commands for emphasized (bold), underline, double-strike,
white/black reverse, upside-down and 90-degree rotation modes. Every mode
is persistent: it stays active until the matching OFF command or ESC @.

Reference: Bixolon SRP-350plus Command Manual, "Character Commands"
Compatibility: SRP-350plus, SRP-350III, Epson TM-T88 family (ESC/POS)
"""

from typing import Final

__all__ = [
    "ESC_BOLD_ON",
    "ESC_BOLD_OFF",
    "ESC_UNDERLINE_ON",
    "ESC_UNDERLINE_DOUBLE",
    "ESC_UNDERLINE_OFF",
    "ESC_DOUBLE_STRIKE_ON",
    "ESC_DOUBLE_STRIKE_OFF",
    "GS_REVERSE_ON",
    "GS_REVERSE_OFF",
    "ESC_UPSIDE_DOWN_ON",
    "ESC_UPSIDE_DOWN_OFF",
    "ESC_ROTATE_90_ON",
    "ESC_ROTATE_90_OFF",
    "set_emphasized",
    "set_underline",
    "set_double_strike",
    "set_reverse",
    "set_upside_down",
    "set_rotation",
]

# =============================================================================
# EMPHASIZED (BOLD) MODE
# =============================================================================

ESC_BOLD_ON: Final[bytes] = b"\x1bE\x01"
"""
Enable emphasized (bold) printing.

Command: ESC E 1
Hex: 1B 45 01
Effect: Prints characters with increased weight
Mode: Can combine with underline, reverse, double-strike
Reset: Cancelled by ESC E 0 or ESC @

Example:
    >>> printer.send(ESC_BOLD_ON + b"Bold text" + ESC_BOLD_OFF)
"""

ESC_BOLD_OFF: Final[bytes] = b"\x1bE\x00"
"""
Disable emphasized (bold) printing.

Command: ESC E 0
Hex: 1B 45 00
Effect: Returns to normal print weight
"""

# =============================================================================
# UNDERLINE
# =============================================================================

ESC_UNDERLINE_ON: Final[bytes] = b"\x1b-\x01"
"""
Enable 1-dot underline.

Command: ESC - 1
Hex: 1B 2D 01
Effect: Prints a 1-dot line below text
Note: Not applied to characters rotated 90 degrees or to reverse-mode text
Reset: Cancelled by ESC - 0 or ESC @

Example:
    >>> printer.send(ESC_UNDERLINE_ON + b"Underlined text" + ESC_UNDERLINE_OFF)
"""

ESC_UNDERLINE_DOUBLE: Final[bytes] = b"\x1b-\x02"
"""
Enable 2-dot (double thickness) underline.

Command: ESC - 2
Hex: 1B 2D 02
Effect: Prints a 2-dot line below text
Reset: Cancelled by ESC - 0 or ESC @
"""

ESC_UNDERLINE_OFF: Final[bytes] = b"\x1b-\x00"
"""
Disable underline.

Command: ESC - 0
Hex: 1B 2D 00
Note: Cancels both 1-dot and 2-dot underline
"""

# =============================================================================
# DOUBLE-STRIKE
# =============================================================================

ESC_DOUBLE_STRIKE_ON: Final[bytes] = b"\x1bG\x01"
"""
Enable double-strike printing.

Command: ESC G 1
Hex: 1B 47 01
Effect: Characters are printed twice for darker output
Reset: Cancelled by ESC G 0 or ESC @
"""

ESC_DOUBLE_STRIKE_OFF: Final[bytes] = b"\x1bG\x00"
"""
Disable double-strike printing.

Command: ESC G 0
Hex: 1B 47 00
"""

# =============================================================================
# WHITE/BLACK REVERSE
# =============================================================================

GS_REVERSE_ON: Final[bytes] = b"\x1dB\x01"
"""
Enable white/black reverse printing.

Command: GS B 1
Hex: 1D 42 01
Effect: Characters printed white on a black background
Note: Takes precedence over underline on the device
Reset: Cancelled by GS B 0 or ESC @
"""

GS_REVERSE_OFF: Final[bytes] = b"\x1dB\x00"
"""
Disable white/black reverse printing.

Command: GS B 0
Hex: 1D 42 00
"""

# =============================================================================
# UPSIDE-DOWN
# =============================================================================

ESC_UPSIDE_DOWN_ON: Final[bytes] = b"\x1b{\x01"
"""
Enable upside-down printing.

Command: ESC { 1
Hex: 1B 7B 01
Effect: Characters rotated 180 degrees
Note: Only effective when sent at the beginning of a line
Reset: Cancelled by ESC { 0 or ESC @
"""

ESC_UPSIDE_DOWN_OFF: Final[bytes] = b"\x1b{\x00"
"""
Disable upside-down printing.

Command: ESC { 0
Hex: 1B 7B 00
"""

# =============================================================================
# 90-DEGREE ROTATION
# =============================================================================

ESC_ROTATE_90_ON: Final[bytes] = b"\x1bV\x01"
"""
Enable 90-degree clockwise rotation.

Command: ESC V 1
Hex: 1B 56 01
Effect: Characters rotated 90 degrees clockwise
Reset: Cancelled by ESC V 0 or ESC @
"""

ESC_ROTATE_90_OFF: Final[bytes] = b"\x1bV\x00"
"""
Disable 90-degree clockwise rotation.

Command: ESC V 0
Hex: 1B 56 00
"""

# =============================================================================
# PARAMETERISED FORMS
# =============================================================================


def set_emphasized(enabled: bool) -> bytes:
    """
    Turn emphasized mode on or off.

    Command: ESC E n
    Hex: 1B 45 n
    """
    return ESC_BOLD_ON if enabled else ESC_BOLD_OFF


def set_underline(thickness: int) -> bytes:
    """
    Select underline thickness.

    Command: ESC - n
    Hex: 1B 2D n

    Args:
        thickness: 0 = off, 1 = 1-dot, 2 = 2-dot.

    Returns:
        ESC/POS command bytes.

    Raises:
        ValueError: If thickness is out of range.

    Example:
        >>> set_underline(2) == ESC_UNDERLINE_DOUBLE
        True
    """
    if not (0 <= thickness <= 2):
        raise ValueError(f"Underline thickness must be 0-2, got {thickness}")

    return b"\x1b-" + bytes([thickness])


def set_double_strike(enabled: bool) -> bytes:
    """Command: ESC G n"""
    return ESC_DOUBLE_STRIKE_ON if enabled else ESC_DOUBLE_STRIKE_OFF


def set_reverse(enabled: bool) -> bytes:
    """Command: GS B n"""
    return GS_REVERSE_ON if enabled else GS_REVERSE_OFF


def set_upside_down(enabled: bool) -> bytes:
    """Command: ESC { n"""
    return ESC_UPSIDE_DOWN_ON if enabled else ESC_UPSIDE_DOWN_OFF


def set_rotation(enabled: bool) -> bytes:
    """Command: ESC V n"""
    return ESC_ROTATE_90_ON if enabled else ESC_ROTATE_90_OFF


# =============================================================================
# USAGE EXAMPLES
# =============================================================================

"""
COMBINING MULTIPLE FORMATS:
    Modes are independent and can be stacked:

    >>> cmd = ESC_BOLD_ON + ESC_UNDERLINE_ON
    >>> cmd += b"Bold Underlined"
    >>> cmd += ESC_BOLD_OFF + ESC_UNDERLINE_OFF
    >>> printer.send(cmd)

    For nested styling prefer escpos_text.model.styled_text, which emits
    only the commands needed at each scope boundary.

RESETTING ALL FORMATTING:
    >>> from escpos_text.escpos.commands.hardware import ESC_INIT_PRINTER
    >>> printer.send(ESC_INIT_PRINTER)  # Resets ALL modes
"""
