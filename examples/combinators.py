"""
Minimal parser combinators used by the example scripts.

Every parser is a plain callable ``str -> Outcome``; nothing here knows about
tracing.  The examples wrap these with :func:`parsetrace.wrap` and friends.
"""

from typing import Callable

from parsetrace import (
    FatalError,
    Incomplete,
    Needed,
    RecoverableError,
    Success,
    VerboseError,
)

Parser = Callable[[str], object]


def tag(expected: str) -> Parser:
    def parse(input: str):
        if input.startswith(expected):
            return Success(input[len(expected):], expected)
        return RecoverableError(VerboseError.expected(input, expected))

    return parse


def streaming_tag(expected: str) -> Parser:
    def parse(input: str):
        if input.startswith(expected):
            return Success(input[len(expected):], expected)
        if expected.startswith(input):
            return Incomplete(Needed(len(expected) - len(input)))
        return RecoverableError(VerboseError.expected(input, expected))

    return parse


def take_while1(pred: Callable[[str], bool], what: str) -> Parser:
    def parse(input: str):
        end = 0
        while end < len(input) and pred(input[end]):
            end += 1
        if end == 0:
            return RecoverableError(VerboseError.expected(input, what))
        return Success(input[end:], input[:end])

    return parse


digit1 = take_while1(str.isdigit, "digit")
alpha1 = take_while1(str.isalpha, "alpha")


def tuple_of(*parsers: Parser) -> Parser:
    def parse(input: str):
        values = []
        rest = input
        for p in parsers:
            out = p(rest)
            if not isinstance(out, Success):
                return out
            rest = out.remaining
            values.append(out.value)
        return Success(rest, tuple(values))

    return parse


def alt(*parsers: Parser) -> Parser:
    """First success wins; a fatal error stops the search."""

    def parse(input: str):
        out = RecoverableError(VerboseError.expected(input, "alternative"))
        for p in parsers:
            out = p(input)
            if not isinstance(out, RecoverableError):
                return out
        return out

    return parse


def map_value(parser: Parser, fn: Callable) -> Parser:
    def parse(input: str):
        out = parser(input)
        if isinstance(out, Success):
            return Success(out.remaining, fn(out.value))
        return out

    return parse


def many0(parser: Parser) -> Parser:
    def parse(input: str):
        values = []
        rest = input
        while rest:
            out = parser(rest)
            if isinstance(out, RecoverableError):
                break
            if not isinstance(out, Success):
                return out
            values.append(out.value)
            rest = out.remaining
        return Success(rest, values)

    return parse


def many1(parser: Parser) -> Parser:
    def parse(input: str):
        out = many0(parser)(input)
        if isinstance(out, Success) and not out.value:
            return RecoverableError(VerboseError.expected(input, "at least one item"))
        return out

    return parse


def cut(parser: Parser) -> Parser:
    def parse(input: str):
        out = parser(input)
        if isinstance(out, RecoverableError):
            return FatalError(out.error)
        return out

    return parse
