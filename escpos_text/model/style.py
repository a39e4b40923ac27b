"""
Attribute set (StyleSet) and the style combination rule.

A StyleSet is an immutable record of the character formatting modes that can
be toggled independently on the printer. Nested scopes are folded into one
effective style: boolean modes are OR-ed, underline takes the strongest
requested level. Inner scopes can only add attributes; turning one off
happens only when its scope closes.

Module: escpos_text/model/style.py
Project: ESC/POS Styled Text
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import reduce
from typing import Any, Final, Iterable, Literal, Union

from .enums import CANONICAL_ATTRIBUTE_ORDER, DEFAULT_UNDERLINE, StyleAttribute, Underline, parse_underline

logger: Final = logging.getLogger(__name__)

AttributeState = Union[bool, Underline]


@dataclass(frozen=True, slots=True)
class StyleSet:
    """
    Set of character formatting attributes.

    Instances are values: every ``with_*`` builder returns a new StyleSet and
    leaves the original unchanged, so sets can be shared freely.

    Attributes:
        bold: Emphasized mode (ESC E).
        double_strike: Double-strike mode (ESC G).
        reverse: White-on-black mode (GS B).
        upside_down: 180-degree rotation (ESC {).
        rotated: 90-degree clockwise rotation (ESC V).
        underline: Underline level (ESC -).

    Example:
        >>> style = StyleSet.default().with_bold().with_underline()
        >>> style.bold, style.underline
        (True, <Underline.SINGLE: 'single'>)
    """

    bold: bool = False
    double_strike: bool = False
    reverse: bool = False
    upside_down: bool = False
    rotated: bool = False
    underline: Underline = DEFAULT_UNDERLINE

    @classmethod
    def default(cls) -> "StyleSet":
        """Baseline style: every attribute off, no underline."""
        return cls()

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def with_bold(self, enabled: bool = True) -> "StyleSet":
        return replace(self, bold=bool(enabled))

    def with_underline(self, enabled: bool = True) -> "StyleSet":
        return replace(self, underline=Underline.SINGLE if enabled else Underline.NONE)

    def with_double_underline(self, enabled: bool = True) -> "StyleSet":
        return replace(self, underline=Underline.DOUBLE if enabled else Underline.NONE)

    def with_underline_level(self, level: Underline) -> "StyleSet":
        return replace(self, underline=parse_underline(level))

    def with_double_strike(self, enabled: bool = True) -> "StyleSet":
        return replace(self, double_strike=bool(enabled))

    def with_reverse(self, enabled: bool = True) -> "StyleSet":
        return replace(self, reverse=bool(enabled))

    def with_upside_down(self, enabled: bool = True) -> "StyleSet":
        return replace(self, upside_down=bool(enabled))

    def with_rotated(self, enabled: bool = True) -> "StyleSet":
        return replace(self, rotated=bool(enabled))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_default(self) -> bool:
        return self == _DEFAULT_STYLE

    def value_of(self, attribute: StyleAttribute) -> AttributeState:
        """Return the state of a single attribute."""
        return getattr(self, attribute.value)

    def active_attributes(self) -> list[StyleAttribute]:
        """Attributes that differ from the baseline, in canonical order."""
        return [attr for attr in CANONICAL_ATTRIBUTE_ORDER if self.value_of(attr) != _DEFAULT_STYLE.value_of(attr)]

    # ------------------------------------------------------------------
    # Combination rule
    # ------------------------------------------------------------------

    def combine(self, inner: "StyleSet") -> "StyleSet":
        """
        Combine this (outer) style with an inner scope's style.

        Booleans are OR-ed; underline keeps the strongest level.
        """
        underline = self.underline if self.underline.level >= inner.underline.level else inner.underline
        return StyleSet(
            bold=self.bold or inner.bold,
            double_strike=self.double_strike or inner.double_strike,
            reverse=self.reverse or inner.reverse,
            upside_down=self.upside_down or inner.upside_down,
            rotated=self.rotated or inner.rotated,
            underline=underline,
        )

    @staticmethod
    def from_stack(stack: Iterable["StyleSet"]) -> "StyleSet":
        """
        Fold a scope stack (outermost first) into the effective style.

        An empty stack yields the default style.
        """
        return reduce(StyleSet.combine, stack, _DEFAULT_STYLE)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "bold": self.bold,
            "double_strike": self.double_strike,
            "reverse": self.reverse,
            "upside_down": self.upside_down,
            "rotated": self.rotated,
            "underline": self.underline.value,
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "StyleSet":
        """
        Build a StyleSet from a dict produced by ``to_dict``.

        Missing keys take their default; unknown keys are ignored.

        Raises:
            ValueError: If the underline value is not recognised.
        """
        unknown = set(data) - {attr.value for attr in StyleAttribute}
        if unknown:
            logger.debug("Ignoring unknown style keys: %s", sorted(unknown))
        return StyleSet(
            bold=bool(data.get("bold", False)),
            double_strike=bool(data.get("double_strike", False)),
            reverse=bool(data.get("reverse", False)),
            upside_down=bool(data.get("upside_down", False)),
            rotated=bool(data.get("rotated", False)),
            underline=parse_underline(data.get("underline", DEFAULT_UNDERLINE)),
        )

    def describe(self, lang: Literal["ru", "en"] = "ru") -> list[str]:
        """Human-readable names of the active attributes."""
        result = []
        for attr in self.active_attributes():
            if attr is StyleAttribute.UNDERLINE:
                result.append(self.underline.localized_name(lang))
            else:
                result.append(attr.localized_name(lang))
        return result


_DEFAULT_STYLE: Final[StyleSet] = StyleSet()
