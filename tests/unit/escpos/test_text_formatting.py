import pytest

from escpos_text.escpos.commands import (
    CRLF,
    ESC_BOLD_OFF,
    ESC_BOLD_ON,
    ESC_DOUBLE_STRIKE_OFF,
    ESC_DOUBLE_STRIKE_ON,
    ESC_INIT_PRINTER,
    ESC_ROTATE_90_OFF,
    ESC_ROTATE_90_ON,
    ESC_UNDERLINE_DOUBLE,
    ESC_UNDERLINE_OFF,
    ESC_UNDERLINE_ON,
    ESC_UPSIDE_DOWN_OFF,
    ESC_UPSIDE_DOWN_ON,
    GS_REVERSE_OFF,
    GS_REVERSE_ON,
    LF,
    set_double_strike,
    set_emphasized,
    set_reverse,
    set_rotation,
    set_underline,
    set_upside_down,
)


def test_command_bytes() -> None:
    assert ESC_BOLD_ON == bytes([0x1B, 0x45, 0x01])
    assert ESC_BOLD_OFF == bytes([0x1B, 0x45, 0x00])
    assert ESC_UNDERLINE_OFF == bytes([0x1B, 0x2D, 0x00])
    assert ESC_UNDERLINE_ON == bytes([0x1B, 0x2D, 0x01])
    assert ESC_UNDERLINE_DOUBLE == bytes([0x1B, 0x2D, 0x02])
    assert ESC_DOUBLE_STRIKE_ON == bytes([0x1B, 0x47, 0x01])
    assert ESC_DOUBLE_STRIKE_OFF == bytes([0x1B, 0x47, 0x00])
    assert GS_REVERSE_ON == bytes([0x1D, 0x42, 0x01])
    assert GS_REVERSE_OFF == bytes([0x1D, 0x42, 0x00])
    assert ESC_UPSIDE_DOWN_ON == bytes([0x1B, 0x7B, 0x01])
    assert ESC_UPSIDE_DOWN_OFF == bytes([0x1B, 0x7B, 0x00])
    assert ESC_ROTATE_90_ON == bytes([0x1B, 0x56, 0x01])
    assert ESC_ROTATE_90_OFF == bytes([0x1B, 0x56, 0x00])


def test_control_characters() -> None:
    assert LF == b"\x0a"
    assert CRLF == b"\x0d\x0a"
    assert ESC_INIT_PRINTER == b"\x1b\x40"


def test_boolean_setters() -> None:
    assert set_emphasized(True) == ESC_BOLD_ON
    assert set_emphasized(False) == ESC_BOLD_OFF
    assert set_double_strike(True) == ESC_DOUBLE_STRIKE_ON
    assert set_reverse(False) == GS_REVERSE_OFF
    assert set_upside_down(True) == ESC_UPSIDE_DOWN_ON
    assert set_rotation(False) == ESC_ROTATE_90_OFF


@pytest.mark.parametrize(
    "thickness, expected",
    [(0, ESC_UNDERLINE_OFF), (1, ESC_UNDERLINE_ON), (2, ESC_UNDERLINE_DOUBLE)],
)
def test_set_underline(thickness: int, expected: bytes) -> None:
    assert set_underline(thickness) == expected


@pytest.mark.parametrize("thickness", [-1, 3, 48])
def test_set_underline_out_of_range(thickness: int) -> None:
    with pytest.raises(ValueError):
        set_underline(thickness)
