"""
Document model for styled receipt text.

NO protocol/ESC/POS command logic here: see escpos_text.escpos.
"""

from escpos_text.model.enums import CANONICAL_ATTRIBUTE_ORDER, StyleAttribute, Underline
from escpos_text.model.style import StyleSet
from escpos_text.model.styled_text import Group, StyledNode, Text, as_node, sequence, styled, text

__all__ = [
    "CANONICAL_ATTRIBUTE_ORDER",
    "StyleAttribute",
    "Underline",
    "StyleSet",
    "StyledNode",
    "Text",
    "Group",
    "as_node",
    "sequence",
    "styled",
    "text",
]
