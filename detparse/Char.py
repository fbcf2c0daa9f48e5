from typing import Callable, TypeVar

from .Parser import FAILURE, Outcome, Parser, Success
from .Prim import alt, bind, empty, fmap, lift_as, many, pure

A = TypeVar('A')

WHITESPACE = " \t\n"


def _take(inp: str) -> Outcome[str]:
    if not inp:
        return FAILURE
    return Success(inp[0], inp[1:])


def _peek(inp: str) -> Outcome[str]:
    # Never consumes; an exhausted input reads as ""
    return Success(inp[:1], inp)


# Consumes exactly one character, failing on empty input
take: Parser[str] = Parser(_take)

# Reads the next character without consuming it
peek: Parser[str] = Parser(_peek)


def eq(x: A) -> Callable[[A], bool]:
    """Curried equality predicate."""
    return lambda y: x == y


# Core function: Succeeds if the character satisfies a predicate
def sat(pred: Callable[[str], bool]) -> Parser[str]:
    """Consume one character if `pred` holds for it, else fail."""
    return bind(take, lambda c: pure(c) if pred(c) else empty())


def char(c: str) -> Parser[str]:
    """Parses the single character c and returns it."""
    if len(c) != 1:
        raise ValueError(f"char: expected a single character, got {c!r}")
    return sat(eq(c))


def sentence(literal: str) -> Parser[str]:
    """Parses the exact (case-sensitive) string literal and returns it."""
    size = len(literal)

    def parse(inp: str) -> Outcome[str]:
        if len(inp) < size:
            return FAILURE
        head, rest = inp[:size], inp[size:]
        if head != literal:
            return FAILURE
        return Success(head, rest)
    return Parser(parse)


alpha: Parser[str] = sat(lambda c: ("a" <= c <= "z") or ("A" <= c <= "Z"))
numeric: Parser[str] = sat(lambda c: "0" <= c <= "9")
alpha_numeric: Parser[str] = alt(alpha, lambda: numeric)
space: Parser[str] = sat(eq(" "))

# One ASCII digit as an int
take_digit: Parser[int] = fmap(int, numeric)

whitespace: Parser[str] = sat(lambda c: c in WHITESPACE)


def token(parser: Parser[A]) -> Parser[A]:
    """Strips whitespace, tabs and newlines around `parser`, keeping its value."""
    return lift_as(
        lambda _: lambda res: lambda _: res,
        many(whitespace),
        parser,
        many(whitespace),
    )
