"""
Tests for escpos_text/model/style.py

Covers StyleSet builders, immutability, the combination rule and
serialization helpers.
"""

import dataclasses

import pytest

from escpos_text.model.enums import StyleAttribute, Underline
from escpos_text.model.style import StyleSet


class TestStyleSetBuilders:
    """Builder methods return new values and never mutate."""

    def test_default_is_baseline(self) -> None:
        style = StyleSet.default()
        assert not style.bold
        assert not style.double_strike
        assert not style.reverse
        assert not style.upside_down
        assert not style.rotated
        assert style.underline is Underline.NONE
        assert style.is_default

    def test_with_bold_returns_new_instance(self) -> None:
        base = StyleSet.default()
        bold = base.with_bold(True)
        assert bold.bold
        assert not base.bold
        assert bold is not base

    def test_builders_touch_only_their_field(self) -> None:
        base = StyleSet.default()
        assert base.with_double_strike() == StyleSet(double_strike=True)
        assert base.with_reverse() == StyleSet(reverse=True)
        assert base.with_upside_down() == StyleSet(upside_down=True)
        assert base.with_rotated() == StyleSet(rotated=True)
        assert base.with_underline() == StyleSet(underline=Underline.SINGLE)
        assert base.with_double_underline() == StyleSet(underline=Underline.DOUBLE)

    def test_builders_chain(self) -> None:
        style = StyleSet.default().with_bold().with_reverse().with_double_underline()
        assert style == StyleSet(bold=True, reverse=True, underline=Underline.DOUBLE)

    def test_builder_can_set_false(self) -> None:
        style = StyleSet(bold=True, underline=Underline.DOUBLE)
        assert not style.with_bold(False).bold
        assert style.with_underline(False).underline is Underline.NONE
        assert style.with_double_underline(False).underline is Underline.NONE

    def test_with_underline_level(self) -> None:
        assert StyleSet.default().with_underline_level(Underline.DOUBLE).underline is Underline.DOUBLE
        assert StyleSet.default().with_underline_level("single").underline is Underline.SINGLE  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        style = StyleSet.default()
        with pytest.raises(dataclasses.FrozenInstanceError):
            style.bold = True  # type: ignore[misc]

    def test_structural_equality_and_hash(self) -> None:
        a = StyleSet.default().with_bold().with_underline()
        b = StyleSet.default().with_underline().with_bold()
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_value_of(self) -> None:
        style = StyleSet(rotated=True, underline=Underline.SINGLE)
        assert style.value_of(StyleAttribute.ROTATED) is True
        assert style.value_of(StyleAttribute.BOLD) is False
        assert style.value_of(StyleAttribute.UNDERLINE) is Underline.SINGLE

    def test_active_attributes_in_canonical_order(self) -> None:
        style = StyleSet(rotated=True, bold=True, underline=Underline.DOUBLE)
        assert style.active_attributes() == [
            StyleAttribute.BOLD,
            StyleAttribute.UNDERLINE,
            StyleAttribute.ROTATED,
        ]
        assert StyleSet.default().active_attributes() == []


class TestCombinationRule:
    """Nested scopes are additive: OR for flags, strongest underline wins."""

    def test_empty_stack_is_default(self) -> None:
        assert StyleSet.from_stack([]) == StyleSet.default()

    def test_single_entry(self) -> None:
        style = StyleSet(reverse=True)
        assert StyleSet.from_stack([style]) == style

    def test_flags_are_ored(self) -> None:
        stack = [StyleSet(bold=True), StyleSet(reverse=True), StyleSet.default()]
        assert StyleSet.from_stack(stack) == StyleSet(bold=True, reverse=True)

    def test_inner_scope_cannot_turn_off(self) -> None:
        outer = StyleSet(bold=True, underline=Underline.DOUBLE)
        inner = StyleSet.default().with_bold(False).with_underline(False)
        assert StyleSet.from_stack([outer, inner]) == outer

    def test_underline_strongest_wins(self) -> None:
        single = StyleSet(underline=Underline.SINGLE)
        double = StyleSet(underline=Underline.DOUBLE)
        assert StyleSet.from_stack([single, double]).underline is Underline.DOUBLE
        assert StyleSet.from_stack([double, single]).underline is Underline.DOUBLE
        assert StyleSet.from_stack([single, StyleSet.default()]).underline is Underline.SINGLE

    def test_default_entries_are_neutral(self) -> None:
        style = StyleSet(upside_down=True, underline=Underline.SINGLE)
        default = StyleSet.default()
        assert StyleSet.from_stack([default, style, default]) == style

    def test_combine_matches_from_stack(self) -> None:
        a = StyleSet(bold=True)
        b = StyleSet(underline=Underline.SINGLE)
        c = StyleSet(rotated=True, underline=Underline.DOUBLE)
        assert a.combine(b).combine(c) == StyleSet.from_stack([a, b, c])
        assert a.combine(b.combine(c)) == StyleSet.from_stack([a, b, c])

    def test_from_stack_accepts_any_iterable(self) -> None:
        styles = (StyleSet(bold=True), StyleSet(double_strike=True))
        assert StyleSet.from_stack(iter(styles)) == StyleSet(bold=True, double_strike=True)


class TestSerialization:
    def test_to_dict(self) -> None:
        data = StyleSet(bold=True, underline=Underline.DOUBLE).to_dict()
        assert data == {
            "bold": True,
            "double_strike": False,
            "reverse": False,
            "upside_down": False,
            "rotated": False,
            "underline": "double",
        }

    def test_from_dict_restores_style(self) -> None:
        style = StyleSet(reverse=True, rotated=True, underline=Underline.SINGLE)
        assert StyleSet.from_dict(style.to_dict()) == style

    def test_from_dict_defaults_and_unknown_keys(self) -> None:
        assert StyleSet.from_dict({}) == StyleSet.default()
        assert StyleSet.from_dict({"bold": True, "italic": True}) == StyleSet(bold=True)

    def test_from_dict_bad_underline(self) -> None:
        with pytest.raises(ValueError):
            StyleSet.from_dict({"underline": "wavy"})

    def test_describe(self) -> None:
        style = StyleSet(bold=True, underline=Underline.DOUBLE)
        assert style.describe("en") == ["Bold", "Double underline"]
        assert style.describe("ru") == ["Жирный", "Двойное подчеркивание"]
        assert StyleSet.default().describe() == []
