"""
Command encoder: maps (attribute, target state) to ESC/POS bytes.

The lookup is total over valid pairs and each result is self-contained, so
the encodings of different attributes can be concatenated in any order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Mapping

from escpos_text.escpos.commands import text_formatting as tf
from escpos_text.model.enums import StyleAttribute, Underline
from escpos_text.model.style import AttributeState

__all__ = ["StyleCommand", "encode"]

_BOOLEAN_COMMANDS: Final[Mapping[StyleAttribute, tuple[bytes, bytes]]] = {
    # attribute: (off, on)
    StyleAttribute.BOLD: (tf.ESC_BOLD_OFF, tf.ESC_BOLD_ON),
    StyleAttribute.DOUBLE_STRIKE: (tf.ESC_DOUBLE_STRIKE_OFF, tf.ESC_DOUBLE_STRIKE_ON),
    StyleAttribute.REVERSE: (tf.GS_REVERSE_OFF, tf.GS_REVERSE_ON),
    StyleAttribute.UPSIDE_DOWN: (tf.ESC_UPSIDE_DOWN_OFF, tf.ESC_UPSIDE_DOWN_ON),
    StyleAttribute.ROTATED: (tf.ESC_ROTATE_90_OFF, tf.ESC_ROTATE_90_ON),
}

_UNDERLINE_COMMANDS: Final[Mapping[Underline, bytes]] = {
    Underline.NONE: tf.ESC_UNDERLINE_OFF,
    Underline.SINGLE: tf.ESC_UNDERLINE_ON,
    Underline.DOUBLE: tf.ESC_UNDERLINE_DOUBLE,
}


def encode(attribute: StyleAttribute, state: AttributeState) -> bytes:
    """
    Return the command that puts ``attribute`` into ``state``.

    Args:
        attribute: Attribute to change.
        state: bool for on/off attributes, Underline for UNDERLINE.

    Raises:
        TypeError: If the state type does not match the attribute.

    Example:
        >>> encode(StyleAttribute.BOLD, True)
        b'\\x1bE\\x01'
    """
    if attribute is StyleAttribute.UNDERLINE:
        if not isinstance(state, Underline):
            raise TypeError(f"Underline state must be Underline, got {type(state).__name__}")
        return _UNDERLINE_COMMANDS[state]
    if not isinstance(state, bool):
        raise TypeError(f"{attribute.value} state must be bool, got {type(state).__name__}")
    off, on = _BOOLEAN_COMMANDS[attribute]
    return on if state else off


@dataclass(frozen=True, slots=True)
class StyleCommand:
    """Request to put one attribute into a target state."""

    attribute: StyleAttribute
    state: AttributeState

    @property
    def is_enable(self) -> bool:
        if isinstance(self.state, Underline):
            return self.state.is_active
        return bool(self.state)

    def encode(self) -> bytes:
        return encode(self.attribute, self.state)
