#
# numstyle - Rounding Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from fractions import Fraction

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numstyle.options import RoundingRule
from numstyle.rounding import increment_fraction_digits, round_half_away, round_with_rule, scale10


# Tests ----------------------------------------------------------------------------------------------------------------

class TestRoundWithRule:
    @pytest.mark.parametrize(
        "rule, values",
        [
            pytest.param(RoundingRule.TOWARD_ZERO, {2.7: 2, -2.7: -2, 2.5: 2}, id="toward-zero"),
            pytest.param(RoundingRule.AWAY_FROM_ZERO, {2.1: 3, -2.1: -3, 2.0: 2}, id="away"),
            pytest.param(RoundingRule.UP, {2.1: 3, -2.7: -2}, id="up"),
            pytest.param(RoundingRule.DOWN, {2.7: 2, -2.1: -3}, id="down"),
            pytest.param(RoundingRule.TO_NEAREST_OR_EVEN, {2.5: 2, 3.5: 4, -2.5: -2, 2.6: 3}, id="even"),
            pytest.param(RoundingRule.TO_NEAREST_OR_AWAY_FROM_ZERO, {2.5: 3, -2.5: -3, 2.4: 2}, id="half-away"),
        ],
    )
    def test_rules(self, rule, values):
        for value, expected in values.items():
            assert round_with_rule(value, rule) == expected

    def test_accepts_rule_name(self):
        assert round_with_rule(2.5, "to_nearest_or_even") == 2.0

    def test_returns_float(self):
        assert isinstance(round_with_rule(2.5, RoundingRule.UP), float)

    def test_keeps_negative_zero(self):
        assert math.copysign(1.0, round_with_rule(-0.4, RoundingRule.TOWARD_ZERO)) == -1.0

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_infinity_passes_through(self, value):
        assert round_with_rule(value, RoundingRule.DOWN) == value

    def test_nan_passes_through(self):
        assert math.isnan(round_with_rule(math.nan, RoundingRule.UP))


class TestRoundHalfAway:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(0.5, 1, id="half"),
            pytest.param(2.5, 3, id="two-and-half"),
            pytest.param(-2.5, -3, id="negative-half"),
            pytest.param(0.49999999999999994, 0, id="just-below-half"),
            pytest.param(1e20, 10 ** 20, id="large"),
            pytest.param(Fraction(5, 2), 3, id="fraction-half"),
            pytest.param(Fraction(-5, 2), -3, id="fraction-negative-half"),
            pytest.param(Fraction(0.1) * 10 ** 25, 1000000000000000055511151, id="fraction-exact-scaled"),
        ],
    )
    def test_round_half_away(self, value, expected):
        result = round_half_away(value)
        assert result == expected
        assert isinstance(result, int)


class TestScale10:
    def test_small_exponents(self):
        assert scale10(1.5, 2) == 150.0
        assert scale10(1234.0, -3) == 1.234

    def test_beyond_double_power(self):
        assert 4.9 < scale10(5e-324, 324) < 5.0
        assert 1.7 < scale10(1.7976931348623157e308, -308) < 1.8

    def test_overflow_is_inf(self):
        assert scale10(1e300, 100) == math.inf


class TestIncrementFractionDigits:
    @pytest.mark.parametrize(
        "increment, expected",
        [
            pytest.param(0.05, 2, id="nickel"),
            pytest.param(0.5, 1, id="half"),
            pytest.param(0.25, 2, id="quarter"),
            pytest.param(0.001, 3, id="thousandth"),
            pytest.param(5.0, None, id="whole"),
            pytest.param(25, None, id="int"),
            pytest.param(1.5, 1, id="mixed"),
        ],
    )
    def test_digits(self, increment, expected):
        assert increment_fraction_digits(increment) == expected

    def test_capped(self):
        assert increment_fraction_digits(1 / 3) == 15
