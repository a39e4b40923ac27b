import pytest

from escpos_text.escpos.commands import text_formatting as tf
from escpos_text.escpos.encoder import StyleCommand, encode
from escpos_text.model.enums import StyleAttribute, Underline


@pytest.mark.parametrize(
    "attribute, on, off",
    [
        (StyleAttribute.BOLD, tf.ESC_BOLD_ON, tf.ESC_BOLD_OFF),
        (StyleAttribute.DOUBLE_STRIKE, tf.ESC_DOUBLE_STRIKE_ON, tf.ESC_DOUBLE_STRIKE_OFF),
        (StyleAttribute.REVERSE, tf.GS_REVERSE_ON, tf.GS_REVERSE_OFF),
        (StyleAttribute.UPSIDE_DOWN, tf.ESC_UPSIDE_DOWN_ON, tf.ESC_UPSIDE_DOWN_OFF),
        (StyleAttribute.ROTATED, tf.ESC_ROTATE_90_ON, tf.ESC_ROTATE_90_OFF),
    ],
)
def test_encode_boolean_attributes(attribute: StyleAttribute, on: bytes, off: bytes) -> None:
    assert encode(attribute, True) == on
    assert encode(attribute, False) == off


def test_encode_underline_levels() -> None:
    assert encode(StyleAttribute.UNDERLINE, Underline.NONE) == tf.ESC_UNDERLINE_OFF
    assert encode(StyleAttribute.UNDERLINE, Underline.SINGLE) == tf.ESC_UNDERLINE_ON
    assert encode(StyleAttribute.UNDERLINE, Underline.DOUBLE) == tf.ESC_UNDERLINE_DOUBLE


def test_encode_rejects_mismatched_state() -> None:
    with pytest.raises(TypeError):
        encode(StyleAttribute.UNDERLINE, True)
    with pytest.raises(TypeError):
        encode(StyleAttribute.BOLD, Underline.SINGLE)


def test_style_command() -> None:
    enable = StyleCommand(StyleAttribute.BOLD, True)
    disable = StyleCommand(StyleAttribute.UNDERLINE, Underline.NONE)
    assert enable.is_enable
    assert not disable.is_enable
    assert StyleCommand(StyleAttribute.UNDERLINE, Underline.DOUBLE).is_enable
    assert enable.encode() == tf.ESC_BOLD_ON
    assert disable.encode() == tf.ESC_UNDERLINE_OFF
    assert enable == StyleCommand(StyleAttribute.BOLD, True)
