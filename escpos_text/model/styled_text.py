"""
Styled text tree: leaf text segments and style-scoped groups.

Nodes are immutable. Every builder returns a new node; rendering never
modifies the tree, so the same tree can be rendered any number of times.

Example:
    >>> from escpos_text.model.styled_text import text
    >>> node = text("Total").bold().append(text("  $25.00"))
    >>> node.plain_text()
    'Total  $25.00'

Module: escpos_text/model/styled_text.py
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Union

from .style import StyleSet

__all__ = [
    "StyledNode",
    "Text",
    "Group",
    "NodeLike",
    "text",
    "styled",
    "as_node",
    "bold",
    "underlined",
    "double_underlined",
    "reversed_text",
    "double_strike",
    "upside_down",
    "rotated",
    "sequence",
]


class StyledNode:
    """Common builder surface shared by Text and Group."""

    __slots__ = ()

    def with_style(self, style: StyleSet) -> "Group":
        """Wrap this node in a new scope carrying ``style``."""
        return Group(style, (self,))

    def bold(self) -> "Group":
        return self.with_style(StyleSet.default().with_bold(True))

    def underlined(self) -> "Group":
        return self.with_style(StyleSet.default().with_underline(True))

    def double_underlined(self) -> "Group":
        return self.with_style(StyleSet.default().with_double_underline(True))

    def reversed(self) -> "Group":
        return self.with_style(StyleSet.default().with_reverse(True))

    def double_strike(self) -> "Group":
        return self.with_style(StyleSet.default().with_double_strike(True))

    def upside_down(self) -> "Group":
        return self.with_style(StyleSet.default().with_upside_down(True))

    def rotated(self) -> "Group":
        return self.with_style(StyleSet.default().with_rotated(True))

    def append(self, other: "NodeLike") -> "Group":
        """
        Sequence ``other`` after this node.

        Always creates a neutral (default style) wrapper, never merges either
        side's style into it, so siblings cannot leak style into each other.
        """
        return Group(StyleSet.default(), (self, as_node(other)))

    def iter_text(self) -> Iterator[str]:
        """Yield leaf contents in document order."""
        stack: list[StyledNode] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Text):
                yield node.content
            elif isinstance(node, Group):
                stack.extend(reversed(node.children))

    def plain_text(self) -> str:
        return "".join(self.iter_text())

    def render(self, encoding: str = "utf-8") -> bytes:
        """Render to printer bytes, ending in the baseline style."""
        from escpos_text.escpos.renderer import StyledTextRenderer

        return StyledTextRenderer(encoding=encoding).render(self)

    def render_line(self, encoding: str = "utf-8") -> bytes:
        """Render to printer bytes followed by a line feed."""
        from escpos_text.escpos.renderer import StyledTextRenderer

        return StyledTextRenderer(encoding=encoding).render_line(self)


@dataclass(frozen=True, slots=True)
class Text(StyledNode):
    """Leaf text; emitted verbatim (no escaping of control bytes)."""

    content: str

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            raise TypeError(f"Text content must be str, got {type(self.content).__name__}")


@dataclass(frozen=True, slots=True)
class Group(StyledNode):
    """Style scope surrounding the rendered output of its children."""

    style: StyleSet = field(default_factory=StyleSet)
    children: tuple[StyledNode, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.style, StyleSet):
            raise TypeError(f"Group style must be StyleSet, got {type(self.style).__name__}")
        object.__setattr__(self, "children", tuple(as_node(child) for child in self.children))


NodeLike = Union[StyledNode, str]


def as_node(value: NodeLike) -> StyledNode:
    """
    Coerce ``value`` into a node.

    Raises:
        TypeError: If value is neither str nor StyledNode.
    """
    if isinstance(value, StyledNode):
        return value
    if isinstance(value, str):
        return Text(value)
    raise TypeError(f"Expected str or StyledNode, got {type(value).__name__}")


def text(content: str) -> Text:
    return Text(content)


def styled(style: StyleSet, content: NodeLike, *more: NodeLike) -> Group:
    """Create a group with ``style`` around one or more children."""
    return Group(style, (content,) + more)


def _wrap(value: NodeLike, style: StyleSet) -> Group:
    return as_node(value).with_style(style)


def bold(value: NodeLike) -> Group:
    return _wrap(value, StyleSet.default().with_bold(True))


def underlined(value: NodeLike) -> Group:
    return _wrap(value, StyleSet.default().with_underline(True))


def double_underlined(value: NodeLike) -> Group:
    return _wrap(value, StyleSet.default().with_double_underline(True))


def reversed_text(value: NodeLike) -> Group:
    return _wrap(value, StyleSet.default().with_reverse(True))


def double_strike(value: NodeLike) -> Group:
    return _wrap(value, StyleSet.default().with_double_strike(True))


def upside_down(value: NodeLike) -> Group:
    return _wrap(value, StyleSet.default().with_upside_down(True))


def rotated(value: NodeLike) -> Group:
    return _wrap(value, StyleSet.default().with_rotated(True))


def sequence(items: Iterable[NodeLike]) -> StyledNode:
    """
    Chain items with ``append`` from left to right.

    Raises:
        ValueError: If items is empty.
    """
    nodes = [as_node(item) for item in items]
    if not nodes:
        raise ValueError("sequence() requires at least one item")
    result = nodes[0]
    for node in nodes[1:]:
        result = result.append(node)
    return result
