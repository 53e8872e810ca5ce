"""
Stop runaway recursion with the max-depth guard.

Usage
-----
    python examples/max_depth.py
"""

import parsetrace as pt
from combinators import alt, digit1, many0, map_value, tag, tuple_of

TAG = "expr_parser"


def nested_expression(input: str):
    return pt.wrap(
        "nested_expression",
        alt(
            map_value(
                tuple_of(digit1, tag("("), nested_expression, tag(")")),
                lambda p: f"{p[0]}({p[2]})",
            ),
            digit1,
        ),
        tag=TAG,
        context="Parsing nested expression",
    )(input)


parse_expression = pt.wrap("parse_expression", many0(nested_expression), tag=TAG)


def run(title: str, input: str, limit) -> None:
    print(title)
    pt.reset(TAG)
    pt.set_max_depth(TAG, limit)
    try:
        result = parse_expression(input)
    except pt.MaxDepthExceeded as exc:
        print(f"Parser aborted: {exc}")
    else:
        print("Result:", result)
    pt.print_trace(TAG)
    print()


def main() -> None:
    run("1. No max depth:", "1(2(3(4)))", None)
    run("2. Max depth 3:", "1(2(3(4)))", 3)
    run("3. Max depth 6, deeper input:", "1(2(3(4(5(6(7(8(9(10)))))))))", 6)
    run("4. Limit removed:", "1(2(3(4(5(6(7(8(9(10)))))))))", None)


if __name__ == "__main__":
    main()
