"""
Context labels add breadcrumbs to errors on their way out.

Usage
-----
    python examples/error_handling.py
"""

import parsetrace as pt
from combinators import alpha1, digit1, map_value, tag, tuple_of


parse_user_info = pt.wrap(
    "parse_user_info",
    map_value(
        tuple_of(
            pt.wrap("name", alpha1, context="Parsing name"),
            pt.wrap("separator", tag("-"), context="Parsing separator"),
            pt.wrap("age", digit1, context="Parsing age"),
        ),
        lambda parts: (parts[0], parts[2]),
    ),
    context="Parsing user info (format: name-age)",
)


def main() -> None:
    tracer = pt.Tracer(pt.TracerConfig(render=pt.RenderConfig(color=True)))

    with pt.use_tracer(tracer):
        print("Parsing valid input:")
        print("Result:", parse_user_info("john-30"))
        pt.print_trace()

        pt.reset()
        print("\nParsing invalid input:")
        result = parse_user_info("john30")
        if isinstance(result, (pt.RecoverableError, pt.FatalError)):
            for input, kind in result.error.entries:
                if isinstance(kind, pt.Breadcrumb):
                    print(f"Error in {kind.location} [{kind.context}]: {input!r}")
                else:
                    print(f"{kind} at {input!r}")
        pt.print_trace()


if __name__ == "__main__":
    main()
