"""
Hide the inside of each list item while keeping the separators visible.

Usage
-----
    python examples/silence_tree.py
"""

import parsetrace as pt
from combinators import alpha1, digit1, many1, tag, tuple_of


def parse_item(input: str):
    return pt.wrap(
        "parse_item",
        tuple_of(pt.wrap("name", alpha1), tag(":"), pt.wrap("quantity", digit1)),
        context="Parsing item",
    )(input)


parse_shopping_list = pt.wrap(
    "parse_shopping_list",
    many1(
        tuple_of(
            pt.silence("parse_item", parse_item, context="Parsing list item (silenced)"),
            pt.wrap("separator", tag(","), context="Parsing item separator"),
        )
    ),
    context="Parsing shopping list",
)


def main() -> None:
    result = parse_shopping_list("apple:3,banana:2,orange:5,")
    print("Parse result:", result)

    print("\nVisible trace:")
    pt.print_trace()

    print("\nSilenced subtrees:")
    print(pt.get_silenced_trace(), end="")


if __name__ == "__main__":
    main()
