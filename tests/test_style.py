#
# numstyle - NumberStyle Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import dataclasses
import pickle
import warnings
from pathlib import Path

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numstyle.options import DecimalSeparatorDisplay, Grouping, Notation, Precision, RoundingRule, SignDisplay
from numstyle.style import DEFAULT_STYLE, NumberStyle


# Tests ----------------------------------------------------------------------------------------------------------------

class TestDefaults:
    def test_default_fields(self):
        style = DEFAULT_STYLE
        assert style.scale == 1.0
        assert style.notation is Notation.AUTOMATIC
        assert style.sign_display == SignDisplay.automatic()
        assert style.decimal_separator_display is DecimalSeparatorDisplay.AUTOMATIC
        assert style.decimal_separator == "."
        assert style.grouping_separator is None
        assert style.max_fraction_digits is None
        assert style.min_fraction_digits is None
        assert style.significant_digits is None
        assert style.integer_length is None
        assert style.rounding_rule is None
        assert style.rounding_increment is None

    def test_default_equals_fresh_instance(self):
        assert DEFAULT_STYLE == NumberStyle()
        assert hash(DEFAULT_STYLE) == hash(NumberStyle())


class TestImmutability:
    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_STYLE.scale = 2.0

    @pytest.mark.parametrize(
        "setter",
        [
            pytest.param(lambda s: s.with_precision(Precision.fraction_length(2)), id="precision"),
            pytest.param(lambda s: s.with_grouping(Grouping.ALWAYS), id="grouping"),
            pytest.param(lambda s: s.with_decimal_separator(","), id="decimal-separator"),
            pytest.param(lambda s: s.with_decimal_separator_display("always"), id="separator-display"),
            pytest.param(lambda s: s.with_notation(Notation.SCIENTIFIC), id="notation"),
            pytest.param(lambda s: s.with_sign(SignDisplay.always()), id="sign"),
            pytest.param(lambda s: s.with_scale(100), id="scale"),
            pytest.param(lambda s: s.with_rounding(RoundingRule.UP), id="rounding"),
        ],
    )
    def test_setters_return_new_style(self, setter):
        original = NumberStyle()
        updated = setter(original)
        assert updated is not original
        assert updated != original
        assert original == NumberStyle()

    def test_template_reuse(self):
        base = DEFAULT_STYLE.with_grouping(Grouping.ALWAYS)
        money = base.with_precision(Precision.fraction_length(2))
        assert base.format(1234.5) == "1,234.5"
        assert money.format(1234.5) == "1,234.50"

    def test_pickle_round_trip(self):
        style = DEFAULT_STYLE.with_grouping("always").with_rounding("down", increment=0.5)
        assert pickle.loads(pickle.dumps(style)) == style


class TestMerge:
    def test_unset_keeps_current(self):
        style = NumberStyle(grouping_separator=",", scale=2)
        assert style.merge() == style

    def test_none_clears(self):
        style = NumberStyle(grouping_separator=",")
        assert style.merge(grouping_separator=None).grouping_separator is None

    def test_coerces_strings(self):
        style = DEFAULT_STYLE.merge(notation="compact_name", rounding_rule="up", sign_display="never")
        assert style.notation is Notation.COMPACT_NAME
        assert style.rounding_rule is RoundingRule.UP
        assert style.sign_display == SignDisplay.never()


class TestSetters:
    def test_precision_layers(self):
        style = (DEFAULT_STYLE
                 .with_precision(Precision.fraction_length(2))
                 .with_precision(Precision.integer_length(3)))
        assert (style.min_fraction_digits, style.max_fraction_digits) == (2, 2)
        assert style.integer_length == (3, 3)
        assert style.format(4.5) == "004.50"

    def test_precision_replaces_same_kind(self):
        style = (DEFAULT_STYLE
                 .with_precision(Precision.fraction_length(2))
                 .with_precision(Precision.fraction_length(max_length=4)))
        assert (style.min_fraction_digits, style.max_fraction_digits) == (None, 4)

    def test_precision_type_checked(self):
        with pytest.raises(TypeError, match=r"precision must be Precision"):
            DEFAULT_STYLE.with_precision(2)

    @pytest.mark.parametrize(
        "policy, expected",
        [
            pytest.param(Grouping.ALWAYS, ",", id="always"),
            pytest.param(Grouping.AUTOMATIC, ",", id="automatic"),
            pytest.param("never", None, id="never"),
        ],
    )
    def test_grouping_policy(self, policy, expected):
        assert DEFAULT_STYLE.with_grouping(policy).grouping_separator == expected

    def test_grouping_custom_separator(self):
        assert DEFAULT_STYLE.with_grouping("always", separator=" ").format(1234567) == "1 234 567"

    def test_rounding_cleared_by_none(self):
        style = DEFAULT_STYLE.with_rounding(RoundingRule.DOWN, increment=0.25).with_rounding(None)
        assert style.rounding_rule is None
        assert style.rounding_increment is None

    def test_rounding_increment_normalized_to_float(self):
        style = DEFAULT_STYLE.with_rounding("to_nearest_or_even", increment=5)
        assert style.rounding_increment == 5.0
        assert isinstance(style.rounding_increment, float)


class TestValidation:
    @pytest.mark.parametrize(
        "options, match",
        [
            pytest.param({"max_fraction_digits": -1}, r"fraction digits must be >= 0", id="negative-max"),
            pytest.param({"min_fraction_digits": 3, "max_fraction_digits": 1}, r"must not exceed", id="min-gt-max"),
            pytest.param({"significant_digits": (0, 3)}, r"significant digits must be >= 1", id="zero-significant"),
            pytest.param({"integer_length": (5, 2)}, r"must not exceed", id="integer-min-gt-max"),
            pytest.param({"notation": "scientifc"}, r"notation expected one of", id="unknown-notation"),
            pytest.param({"rounding_rule": "half_up"}, r"rounding_rule expected one of", id="unknown-rule"),
            pytest.param({"sign_display": "sometimes"}, r"sign strategy expected one of", id="unknown-sign"),
            pytest.param({"rounding_rule": "up", "rounding_increment": 0}, r"finite number > 0", id="zero-increment"),
            pytest.param({"rounding_rule": "up", "rounding_increment": -0.5}, r"finite number > 0",
                         id="negative-increment"),
            pytest.param({"rounding_rule": "up", "rounding_increment": float("inf")}, r"finite number > 0",
                         id="inf-increment"),
        ],
    )
    def test_value_errors(self, options, match):
        with pytest.raises(ValueError, match=match):
            NumberStyle(**options)

    @pytest.mark.parametrize(
        "options",
        [
            pytest.param({"max_fraction_digits": 2.0}, id="float-digits"),
            pytest.param({"max_fraction_digits": True}, id="bool-digits"),
            pytest.param({"grouping_separator": 44}, id="int-separator"),
            pytest.param({"decimal_separator": None}, id="none-decimal-separator"),
            pytest.param({"scale": "100"}, id="str-scale"),
            pytest.param({"scale": True}, id="bool-scale"),
            pytest.param({"notation": 1}, id="int-notation"),
            pytest.param({"sign_display": 1}, id="int-sign"),
            pytest.param({"significant_digits": 3}, id="bare-int-bounds"),
            pytest.param({"rounding_rule": "up", "rounding_increment": "0.5"}, id="str-increment"),
        ],
    )
    def test_type_errors(self, options):
        with pytest.raises(TypeError):
            NumberStyle(**options)

    def test_increment_without_rule_warns(self):
        with pytest.warns(UserWarning, match=r"has no effect without a rounding_rule"):
            style = NumberStyle(rounding_increment=0.5)
        assert style.format(1.23) == "1.23"

    @pytest.mark.parametrize(
        "build",
        [
            pytest.param(lambda: NumberStyle(rounding_increment=0.5), id="constructor"),
            pytest.param(lambda: DEFAULT_STYLE.merge(rounding_increment=0.5), id="merge"),
            pytest.param(lambda: DEFAULT_STYLE.with_rounding("up", 0.5).merge(rounding_rule=None), id="rule-cleared"),
        ],
    )
    def test_increment_warning_points_at_caller(self, build):
        with pytest.warns(UserWarning, match=r"has no effect without a rounding_rule") as record:
            build()
        assert Path(record[0].filename).name == Path(__file__).name

    def test_increment_with_rule_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            DEFAULT_STYLE.with_rounding(RoundingRule.UP, increment=0.5)

    def test_bounds_normalized_to_tuple(self):
        style = NumberStyle(significant_digits=[2, 4])
        assert style.significant_digits == (2, 4)
        hash(style)
