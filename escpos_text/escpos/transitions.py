"""
Style transitions: the commands needed to move the printer between two
effective styles.

Only attributes whose value changes produce a command, and attributes are
always visited in CANONICAL_ATTRIBUTE_ORDER, so equal inputs give
byte-identical output.
"""

from __future__ import annotations

from escpos_text.escpos.encoder import StyleCommand
from escpos_text.model.enums import CANONICAL_ATTRIBUTE_ORDER, StyleAttribute
from escpos_text.model.style import StyleSet

__all__ = ["style_transition_commands", "encode_transition"]


def style_transition_commands(before: StyleSet, after: StyleSet) -> list[StyleCommand]:
    """
    Compute the ordered commands taking the printer from ``before`` to ``after``.

    Underline collapses both SINGLE and DOUBLE to one "off" command when the
    target is NONE; there is no step-down command from DOUBLE to SINGLE, the
    SINGLE command is sent directly.

    Example:
        >>> base = StyleSet.default()
        >>> [c.attribute.value for c in style_transition_commands(base, base.with_bold())]
        ['bold']
    """
    commands: list[StyleCommand] = []
    for attribute in CANONICAL_ATTRIBUTE_ORDER:
        old = before.value_of(attribute)
        new = after.value_of(attribute)
        if old == new:
            continue
        commands.append(StyleCommand(attribute, new if attribute is StyleAttribute.UNDERLINE else bool(new)))
    return commands


def encode_transition(before: StyleSet, after: StyleSet) -> bytes:
    """Concatenated bytes of ``style_transition_commands(before, after)``."""
    return b"".join(cmd.encode() for cmd in style_transition_commands(before, after))
