"""
model/enums.py

(Краткое RU: Перечисления атрибутов стиля текста для чекового принтера.)

EN: Domain enums for styled receipt text (character formatting attributes of
Bixolon SRP-350plus and compatible ESC/POS printers).
NO protocol/ESC/POS command logic here!

- Only attributes with an independent on/off (or leveled) printer mode.
- Fixed canonical attribute order used when emitting transitions.

See Also:
    - escpos_text/escpos/commands (for protocol logic)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final, Literal, Tuple

_logger: Final[logging.Logger] = logging.getLogger(__name__)


class Underline(str, Enum):
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"

    @property
    def level(self) -> int:
        """Strength used when several scopes request underline (DOUBLE wins)."""
        mapping = {
            Underline.NONE: 0,
            Underline.SINGLE: 1,
            Underline.DOUBLE: 2,
        }
        return mapping[self]

    @property
    def is_active(self) -> bool:
        return self is not Underline.NONE

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            Underline.NONE: "Без подчеркивания",
            Underline.SINGLE: "Подчеркивание",
            Underline.DOUBLE: "Двойное подчеркивание",
        }
        names_en = {
            Underline.NONE: "No underline",
            Underline.SINGLE: "Underline",
            Underline.DOUBLE: "Double underline",
        }
        return names_ru[self] if lang == "ru" else names_en[self]


class StyleAttribute(str, Enum):
    BOLD = "bold"
    UNDERLINE = "underline"
    DOUBLE_STRIKE = "double_strike"
    REVERSE = "reverse"
    UPSIDE_DOWN = "upside_down"
    ROTATED = "rotated"

    @property
    def is_boolean(self) -> bool:
        return self is not StyleAttribute.UNDERLINE

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            StyleAttribute.BOLD: "Жирный",
            StyleAttribute.UNDERLINE: "Подчеркивание",
            StyleAttribute.DOUBLE_STRIKE: "Двойной удар",
            StyleAttribute.REVERSE: "Инверсия",
            StyleAttribute.UPSIDE_DOWN: "Вверх ногами",
            StyleAttribute.ROTATED: "Поворот на 90°",
        }
        names_en = {
            StyleAttribute.BOLD: "Bold",
            StyleAttribute.UNDERLINE: "Underline",
            StyleAttribute.DOUBLE_STRIKE: "Double-strike",
            StyleAttribute.REVERSE: "Reverse",
            StyleAttribute.UPSIDE_DOWN: "Upside-down",
            StyleAttribute.ROTATED: "Rotated 90°",
        }
        return names_ru[self] if lang == "ru" else names_en[self]


# Transitions are always emitted in this order, independent of field order.
CANONICAL_ATTRIBUTE_ORDER: Final[Tuple[StyleAttribute, ...]] = (
    StyleAttribute.BOLD,
    StyleAttribute.UNDERLINE,
    StyleAttribute.DOUBLE_STRIKE,
    StyleAttribute.REVERSE,
    StyleAttribute.UPSIDE_DOWN,
    StyleAttribute.ROTATED,
)

DEFAULT_UNDERLINE: Final[Underline] = Underline.NONE


def parse_underline(value: object) -> Underline:
    """
    Convert a serialized underline value into Underline.

    Accepts an Underline, its string value or a numeric level (0/1/2).

    Raises:
        ValueError: If the value names no underline level.
    """
    if isinstance(value, Underline):
        return value
    if isinstance(value, bool):
        return Underline.SINGLE if value else Underline.NONE
    if isinstance(value, int):
        for underline in Underline:
            if underline.level == value:
                return underline
        raise ValueError(f"Underline level must be 0-2, got {value}")
    if isinstance(value, str):
        try:
            return Underline(value.lower())
        except ValueError:
            _logger.debug("Unknown underline value: %r", value)
            raise ValueError(f"Unknown underline value: {value!r}") from None
    raise ValueError(f"Unsupported underline value type: {type(value).__name__}")
