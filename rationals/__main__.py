"""Command line demonstration of :mod:`rationals`."""

import argparse
import logging
import operator
import sys
from typing import Callable, Dict, List, Optional, Tuple

from . import Rational, RationalError, RationalRange, div_by, parse

module_logger = logging.getLogger(__name__)

OPERATORS: Dict[str, Callable[[Rational, Rational], object]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "==": operator.eq,
}


def demo_checks() -> List[Tuple[str, bool]]:
    half = div_by(1, 2)
    third = div_by(1, 3)
    two_thirds = div_by(2, 3)

    return [
        ("1/2 + 1/3 == 5/6", div_by(5, 6) == half + third),
        ("1/2 - 1/3 == 1/6", div_by(1, 6) == half - third),
        ("1/2 * 1/3 == 1/6", div_by(1, 6) == half * third),
        ("1/2 / 1/3 == 3/2", div_by(3, 2) == half / third),
        ("-(1/2) == -1/2", div_by(-1, 2) == -half),
        ("str(2/1) == '2'", str(div_by(2, 1)) == "2"),
        ("str(-2/4) == '-1/2'", str(div_by(-2, 4)) == "-1/2"),
        ("str(parse('117/1098')) == '13/122'", str(parse("117/1098")) == "13/122"),
        ("1/2 < 2/3", half < two_thirds),
        ("1/2 in 1/3..2/3", half in RationalRange(third, two_thirds)),
        ("2000000000/4000000000 == 1/2", div_by(2000000000, 4000000000) == half),
        (
            "912016490186296920119201192141970416029/"
            "1824032980372593840238402384283940832058 == 1/2",
            div_by(
                912016490186296920119201192141970416029,
                1824032980372593840238402384283940832058,
            )
            == half,
        ),
    ]


def run_demo(args: argparse.Namespace) -> int:
    failures = 0
    for label, result in demo_checks():
        module_logger.debug("%s -> %s", label, result)
        if args.labels:
            print(f"{result}\t{label}")
        else:
            print(result)
        if not result:
            failures += 1
    return 1 if failures else 0


def run_eval(args: argparse.Namespace) -> int:
    op = OPERATORS[args.op]
    try:
        left = parse(args.left)
        right = parse(args.right)
        result = op(left, right)
    except RationalError as exc:
        module_logger.error("%s: %s", type(exc).__name__, exc)
        return 2
    print(result)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m rationals",
        description="Exercise exact rational arithmetic from the command line.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    demo = subparsers.add_parser("demo", help="Print the built-in example checks")
    demo.add_argument("--labels", action="store_true", help="Show a label next to each result")
    demo.set_defaults(func=run_demo)

    evaluate = subparsers.add_parser("eval", help="Evaluate LEFT OP RIGHT")
    evaluate.add_argument("left", help="Rational literal such as 1/2")
    evaluate.add_argument("op", choices=sorted(OPERATORS), help="Operator")
    evaluate.add_argument("right", help="Rational literal such as 1/3")
    evaluate.set_defaults(func=run_eval)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
