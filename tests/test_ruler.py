"""Tests for the height/weight ruler math."""

import math

import pytest

from app.modules.measurements.ruler import (
    CM_PER_INCH, LB_PER_KG, RULER_ITEM_WIDTH, RulerState, convert, display_value,
    feet_inches, format_input, get_ruler, offset_for_value, parse_input,
    round_half_up, should_update, value_for_offset,
)


class TestOffsets:
    def test_cm_offset_is_ten_pixels_per_centimeter(self):
        assert offset_for_value(170, "cm") == 1700

    def test_ft_offset_counts_inches(self):
        assert offset_for_value(170, "ft") == pytest.approx(170 / CM_PER_INCH * RULER_ITEM_WIDTH)

    def test_lb_offset_counts_pounds(self):
        assert offset_for_value(70, "lb") == pytest.approx(70 * LB_PER_KG * RULER_ITEM_WIDTH)

    def test_negative_value_maps_to_zero(self):
        assert offset_for_value(-5, "kg") == 0

    def test_value_snaps_to_nearest_mark(self):
        assert value_for_offset(1704, "cm") == 170
        assert value_for_offset(1705, "cm") == 171

    def test_value_is_clamped_to_ruler(self):
        assert value_for_offset(-50, "cm") == 0
        assert value_for_offset(99999, "cm") == 250
        assert value_for_offset(99999, "kg") == 300

    def test_non_finite_offset_is_clamped(self):
        assert value_for_offset(math.inf, "cm") == 250
        assert value_for_offset(-math.inf, "lb") == 0
        assert value_for_offset(math.nan, "kg") == 0

    def test_non_finite_value_is_clamped(self):
        assert offset_for_value(math.inf, "kg") == 300 * RULER_ITEM_WIDTH
        assert offset_for_value(math.nan, "cm") == 0
        assert format_input(math.inf, "cm") == ""

    def test_ft_offset_to_centimeters(self):
        assert value_for_offset(700, "ft") == pytest.approx(70 * CM_PER_INCH)

    def test_lb_offset_to_kilograms(self):
        assert value_for_offset(1543, "lb") == pytest.approx(154 / LB_PER_KG)

    def test_unknown_unit(self):
        with pytest.raises(ValueError):
            get_ruler("stone")


class TestRoundTrip:
    @pytest.mark.parametrize("cm", range(1, 251))
    def test_cm_ft_cm(self, cm):
        assert convert(convert(cm, "cm", "ft"), "ft", "cm") == pytest.approx(cm)

    @pytest.mark.parametrize("kg", range(1, 301))
    def test_kg_lb_kg(self, kg):
        assert convert(convert(kg, "kg", "lb"), "lb", "kg") == pytest.approx(kg)

    @pytest.mark.parametrize("cm", range(0, 251, 7))
    def test_toggle_through_ft_ruler_stays_within_half_a_mark(self, cm):
        back = value_for_offset(offset_for_value(cm, "ft"), "ft")
        assert abs(back - cm) <= CM_PER_INCH / 2 + 1e-9

    @pytest.mark.parametrize("kg", range(0, 301, 11))
    def test_toggle_through_lb_ruler_stays_within_half_a_mark(self, kg):
        back = value_for_offset(offset_for_value(kg, "lb"), "lb")
        assert abs(back - kg) <= 0.5 / LB_PER_KG + 1e-9

    def test_cannot_convert_height_to_weight(self):
        with pytest.raises(ValueError):
            convert(170, "cm", "kg")


class TestInputText:
    def test_parse_decimal_feet(self):
        assert parse_input("5.8", "ft") == pytest.approx(5.8 * 12 * CM_PER_INCH)

    def test_parse_pounds(self):
        assert parse_input("154", "lb") == pytest.approx(154 / LB_PER_KG)

    @pytest.mark.parametrize("text", ["", "abc", "-3", "nan"])
    def test_parse_rejects_invalid(self, text):
        assert parse_input(text, "cm") is None

    def test_parse_clamps_to_max(self):
        assert parse_input("400", "cm") == 250
        assert parse_input("12", "ft") == 250

    def test_format_input(self):
        assert format_input(170.4, "cm") == "170"
        assert format_input(5.8 * 12 * CM_PER_INCH, "ft") == "5.8"
        assert format_input(70, "lb") == "154.3"
        assert format_input(0, "kg") == ""

    def test_feet_inches(self):
        assert feet_inches(175) == (5, 9)
        assert display_value(175, "ft") == "5'9\""

    def test_round_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2

    def test_should_update_needs_a_full_unit(self):
        assert not should_update(170.5, 170)
        assert should_update(171, 170)
        assert should_update(169, 170)


class TestRulerState:
    def test_toggle_keeps_value_and_moves_offset(self):
        state = RulerState(unit="cm")
        state.load(170, "cm")
        assert state.toggle_unit("ft") is True
        assert state.unit == "ft"
        assert state.value == 170
        assert state.offset == pytest.approx(offset_for_value(170, "ft"))
        assert state.input_text == "5.6"

    def test_toggle_to_same_unit_is_noop(self):
        state = RulerState(unit="kg", value=70)
        assert state.toggle_unit("kg") is False

    def test_toggle_ignored_while_scrolling(self):
        state = RulerState(unit="kg", value=70)
        state.begin_scroll()
        assert state.toggle_unit("lb") is False
        assert state.unit == "kg"
        state.end_scroll()
        assert state.toggle_unit("lb") is True

    def test_toggle_to_other_quantity_raises(self):
        state = RulerState(unit="cm", value=170)
        with pytest.raises(ValueError):
            state.toggle_unit("kg")

    def test_small_scroll_does_not_change_value(self):
        state = RulerState(unit="cm", value=170)
        assert state.scroll_to(1700) is False
        assert state.scroll_to(1712) is True
        assert state.value == 171

    def test_load_uses_saved_unit(self):
        state = RulerState(unit="kg")
        state.load(80, "lb")
        assert state.unit == "lb"
        assert state.offset == pytest.approx(80 * LB_PER_KG * RULER_ITEM_WIDTH)

    def test_typed_value(self):
        state = RulerState(unit="cm")
        assert state.type_value("x") is False
        assert state.type_value("180") is True
        assert state.value == 180
        assert state.is_valid
        assert not math.isnan(state.offset)
