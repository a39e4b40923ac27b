"""
Renderer: walks a styled text tree and produces the printer byte stream.

Traversal is depth-first. Entering a Group pushes the combination of
the enclosing effective style and its own style, then emits the transition
to it; leaving it pops that entry and emits the transition back. After the
walk a final transition to the baseline makes the output self-contained.

The walk uses an explicit work stack instead of recursion, so long
``append`` chains (one nesting level per append) render without hitting the
interpreter recursion limit.
"""

from __future__ import annotations

import logging
from typing import Final, Union

from escpos_text.escpos.commands.positioning import LF
from escpos_text.escpos.transitions import encode_transition
from escpos_text.model.style import StyleSet
from escpos_text.model.styled_text import Group, NodeLike, StyledNode, Text, as_node

__all__ = ["StyledTextRenderer", "render", "render_line"]

logger: Final = logging.getLogger(__name__)

_BASELINE: Final[StyleSet] = StyleSet.default()

# Work stack marker for "leave this group"
_EXIT: Final[object] = object()

_WorkItem = Union[StyledNode, object]


class StyledTextRenderer:
    """
    Render styled text trees to ESC/POS bytes.

    Args:
        encoding: Codec used for Text contents.
        line_terminator: Bytes appended by ``render_line``.

    Example:
        >>> from escpos_text.model.styled_text import text
        >>> StyledTextRenderer().render(text("Hi").bold())
        b'\\x1bE\\x01Hi\\x1bE\\x00'
    """

    def __init__(self, encoding: str = "utf-8", line_terminator: bytes = LF) -> None:
        self.encoding = encoding
        self.line_terminator = line_terminator

    def render(self, node: NodeLike) -> bytes:
        """Render ``node``; the output always ends in the baseline style."""
        root = as_node(node)
        output = bytearray()

        # effective[i] folds the baseline with the styles of the i outermost open
        # groups; effective[-1] is the style in force
        effective: list[StyleSet] = [_BASELINE]
        current = effective[-1]

        work: list[_WorkItem] = [root]
        while work:
            item = work.pop()

            if item is _EXIT:
                effective.pop()
                popped = effective[-1]
                output += encode_transition(current, popped)
                current = popped

            elif isinstance(item, Text):
                output += item.content.encode(self.encoding)

            elif isinstance(item, Group):
                entered = effective[-1].combine(item.style)
                effective.append(entered)
                output += encode_transition(current, entered)
                current = entered

                work.append(_EXIT)
                work.extend(reversed(item.children))

        # Normally a no-op: every scope has already been closed
        output += encode_transition(current, _BASELINE)

        logger.debug("Rendered styled text: %d bytes", len(output))
        return bytes(output)

    def render_line(self, node: NodeLike) -> bytes:
        """Render ``node`` followed by the line terminator."""
        return self.render(node) + self.line_terminator


_default_renderer: Final[StyledTextRenderer] = StyledTextRenderer()


def render(node: NodeLike) -> bytes:
    return _default_renderer.render(node)


def render_line(node: NodeLike) -> bytes:
    return _default_renderer.render_line(node)
