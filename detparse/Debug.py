from typing import Callable

from .Parser import Outcome, Parser, Success, T

Observer = Callable[[str], None]


def tap(observer: Observer) -> Parser[None]:
    """
    A parser that hands the remaining input to `observer`.

    Always succeeds with None and consumes nothing, so it can be dropped
    anywhere into a sequence to see what input reaches that point.
    """
    def parse(inp: str) -> Outcome[None]:
        observer(inp)
        return Success(None, inp)
    return Parser(parse)


def log_input(parser: Parser[T], observer: Observer = print) -> Parser[T]:
    """Report the input `parser` is about to see, then run it unchanged."""
    def parse(inp: str) -> Outcome[T]:
        observer(inp)
        return parser(inp)
    return Parser(parse)
