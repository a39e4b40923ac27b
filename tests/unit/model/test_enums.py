import pytest

from escpos_text.model.enums import (
    CANONICAL_ATTRIBUTE_ORDER,
    DEFAULT_UNDERLINE,
    StyleAttribute,
    Underline,
    parse_underline,
)


def test_underline_levels_are_ordered() -> None:
    assert Underline.NONE.level < Underline.SINGLE.level < Underline.DOUBLE.level
    assert [u.level for u in Underline] == [0, 1, 2]


def test_underline_is_active() -> None:
    assert not Underline.NONE.is_active
    assert Underline.SINGLE.is_active
    assert Underline.DOUBLE.is_active


def test_underline_localized_name() -> None:
    assert Underline.DOUBLE.localized_name("en") == "Double underline"
    assert Underline.SINGLE.localized_name("ru") == "Подчеркивание"
    for underline in Underline:
        assert isinstance(underline.localized_name("ru"), str)
        assert isinstance(underline.localized_name("en"), str)


def test_default_underline_is_none() -> None:
    assert DEFAULT_UNDERLINE is Underline.NONE


def test_style_attribute_is_boolean() -> None:
    for attr in StyleAttribute:
        assert attr.is_boolean == (attr is not StyleAttribute.UNDERLINE)
    assert StyleAttribute.BOLD.localized_name("en") == "Bold"
    assert StyleAttribute.REVERSE.localized_name("ru") == "Инверсия"


def test_canonical_order_covers_every_attribute_once() -> None:
    assert len(CANONICAL_ATTRIBUTE_ORDER) == len(StyleAttribute)
    assert set(CANONICAL_ATTRIBUTE_ORDER) == set(StyleAttribute)
    assert CANONICAL_ATTRIBUTE_ORDER == (
        StyleAttribute.BOLD,
        StyleAttribute.UNDERLINE,
        StyleAttribute.DOUBLE_STRIKE,
        StyleAttribute.REVERSE,
        StyleAttribute.UPSIDE_DOWN,
        StyleAttribute.ROTATED,
    )


@pytest.mark.parametrize(
    "value, expected",
    [
        (Underline.DOUBLE, Underline.DOUBLE),
        ("single", Underline.SINGLE),
        ("DOUBLE", Underline.DOUBLE),
        ("none", Underline.NONE),
        (0, Underline.NONE),
        (2, Underline.DOUBLE),
        (True, Underline.SINGLE),
        (False, Underline.NONE),
    ],
)
def test_parse_underline_accepts_serialized_forms(value: object, expected: Underline) -> None:
    assert parse_underline(value) is expected


@pytest.mark.parametrize("value", ["wavy", 3, -1, 1.5, None])
def test_parse_underline_rejects_unknown(value: object) -> None:
    with pytest.raises(ValueError):
        parse_underline(value)
