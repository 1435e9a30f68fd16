"""
CLI interface for formatting numbers.

Usage:
    python -m numstyle 1234567.891 --grouping always --fraction-length 2
    python -m numstyle 1500 2000000 --notation compact_name
    python -m numstyle --help
"""

import sys
import argparse
from .engine import format_number
from .options import DecimalSeparatorDisplay, Grouping, Notation, Precision, RoundingRule, SignDisplay
from .style import DEFAULT_STYLE


def main(argv=None) -> int:
    """Main CLI entry point; returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    values = [_parse_value(parser, text) for text in args.values]

    try:
        style = _build_style(args)
    except (TypeError, ValueError) as e:
        parser.error(f"invalid style: {e}")

    for value in values:
        print(format_number(value, style))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Format numbers as text", prog="python -m numstyle"
    )
    parser.add_argument("values", nargs="+", help="Numbers to format (int, float, inf, nan)")

    precision = parser.add_argument_group("precision")
    precision.add_argument("--fraction-length", type=int, metavar="N", help="Exactly N fraction digits")
    precision.add_argument("--min-fraction", type=int, metavar="N", help="At least N fraction digits")
    precision.add_argument("--max-fraction", type=int, metavar="N", help="At most N fraction digits")
    precision.add_argument("--significant", type=int, metavar="N", help="N significant digits")
    precision.add_argument("--integer-length", type=int, metavar="N", help="Zero-pad the integer part to N digits")

    separators = parser.add_argument_group("separators")
    separators.add_argument(
        "--grouping", choices=[g.value for g in Grouping], default=Grouping.NEVER.value,
        help="Thousands grouping policy (default: never)"
    )
    separators.add_argument("--separator", default=",", help="Grouping separator (default: ',')")
    separators.add_argument("--decimal-separator", default=".", help="Decimal separator (default: '.')")
    separators.add_argument(
        "--always-separator", action="store_true", help="Show the decimal separator for whole values"
    )

    display = parser.add_argument_group("display")
    display.add_argument(
        "--notation", choices=[n.value for n in Notation], default=Notation.AUTOMATIC.value,
        help="Notation (default: automatic)"
    )
    display.add_argument(
        "--sign", choices=["automatic", "never", "always"], default="automatic",
        help="Sign display (default: automatic)"
    )
    display.add_argument("--sign-zero", action="store_true", help="With --sign always, also sign zero")
    display.add_argument("--scale", type=float, default=1.0, help="Multiply values before formatting")

    rounding = parser.add_argument_group("rounding")
    rounding.add_argument("--rounding", choices=[r.value for r in RoundingRule], help="Rounding rule")
    rounding.add_argument("--increment", type=float, help="Rounding increment, requires --rounding")

    return parser


def _parse_value(parser: argparse.ArgumentParser, text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        parser.error(f"not a number: {text!r}")


def _build_style(args: argparse.Namespace):
    if args.increment is not None and args.rounding is None:
        raise ValueError("--increment requires --rounding")

    style = DEFAULT_STYLE
    if args.fraction_length is not None:
        if args.min_fraction is not None or args.max_fraction is not None:
            raise ValueError("--fraction-length cannot be combined with --min-fraction/--max-fraction")
        style = style.with_precision(Precision.fraction_length(args.fraction_length))
    elif args.min_fraction is not None or args.max_fraction is not None:
        style = style.with_precision(
            Precision.fraction_length(min_length=args.min_fraction, max_length=args.max_fraction)
        )
    if args.significant is not None:
        style = style.with_precision(Precision.significant_digits(args.significant))
    if args.integer_length is not None:
        style = style.with_precision(Precision.integer_length(min_length=args.integer_length))

    style = style.with_grouping(args.grouping, separator=args.separator)
    style = style.with_decimal_separator(args.decimal_separator)
    if args.always_separator:
        style = style.with_decimal_separator_display(DecimalSeparatorDisplay.ALWAYS)

    style = style.with_notation(args.notation)
    style = style.with_sign(SignDisplay(strategy=args.sign, include_zero=args.sign_zero))
    style = style.with_scale(args.scale)
    if args.rounding is not None:
        style = style.with_rounding(args.rounding, increment=args.increment)
    return style


if __name__ == "__main__":
    sys.exit(main())
