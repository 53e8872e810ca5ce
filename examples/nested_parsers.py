"""
Nested parsers on two tags.

Usage
-----
    python examples/nested_parsers.py
"""

import parsetrace as pt
from combinators import alpha1, digit1, map_value, tag, tuple_of


def key_value(input: str):
    return pt.wrap(
        "key_value",
        map_value(
            tuple_of(
                pt.wrap("key", alpha1, context="identifier"),
                pt.wrap("equals", tag("=")),
                pt.wrap("value", digit1, tag="numbers"),
            ),
            lambda parts: (parts[0], int(parts[2])),
        ),
    )(input)


def main() -> None:
    print("Result:", key_value("width=42"))

    print("\nTrace for the default tag:")
    pt.print_trace()

    print("\nTrace for the 'numbers' tag:")
    pt.print_trace("numbers")


if __name__ == "__main__":
    main()
