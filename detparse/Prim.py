from dataclasses import dataclass
from enum import Enum, auto
from functools import reduce
from typing import Any, Callable, List, Optional, Tuple

from .Parser import FAILURE, Failure, Lazy, Outcome, Parser, Success, T, U, force


def pure(value: T) -> Parser[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(inp: str) -> Outcome[T]:
        return Success(value, inp)
    return Parser(parse)


def empty() -> Parser[Any]:
    """A parser that always fails without consuming input."""
    def parse(inp: str) -> Outcome[Any]:
        return FAILURE
    return Parser(parse)


def bind(parser: Parser[T], f: Callable[[T], Parser[U]]) -> Parser[U]:
    """Run `parser`, then the parser `f` builds from its value, on the rest."""
    return parser.bind(f)


def fmap(fn: Callable[[T], U], parser: Parser[T]) -> Parser[U]:
    return parser.map(fn)


def ap(parser_fn: Parser[Callable[[T], U]], parser_arg: Parser[T]) -> Parser[U]:
    """Apply the function produced by `parser_fn` to the value of `parser_arg`."""
    return bind(parser_fn, lambda fn: fmap(fn, parser_arg))


def lift_as(fn: Any, *parsers: Parser[Any]) -> Parser[Any]:
    """
    Lift a curried function over a sequence of parsers.

    `fn` takes one argument per parser; the parsers run left to right and
    each value is fed to the next curried application. With no parsers,
    `fn` is returned unchanged and is expected to already be a parser.
    """
    # fn
    if not parsers:
        return fn
    # fn <$> p0
    if len(parsers) == 1:
        return fmap(fn, parsers[0])
    # fn <$> p0 <*> p1 <*> ... <*> pn
    return reduce(ap, parsers[1:], fmap(fn, parsers[0]))


def alt(first: Parser[T], second: Lazy[T]) -> Parser[T]:
    """
    Parse with `first` if possible, else with `second` on the same input.

    `second` may be a zero-argument function; it is only called when
    `first` fails.
    """
    return first | second


def alts(*parsers: Lazy[T]) -> Parser[T]:
    """
    Try each alternative in order, committing to the first that succeeds.

    Every alternative may be deferred, and none is forced until the
    alternatives before it have failed on the current input.
    """
    if len(parsers) < 2:
        raise ValueError("alts: at least two alternatives are required")

    def parse(inp: str) -> Outcome[T]:
        for ref in parsers:
            res = force(ref)(inp)
            if res:
                return res
        return FAILURE
    return Parser(parse)


def lazy(thunk: Callable[[], Parser[T]]) -> Parser[T]:
    """A parser that builds its underlying parser only when run."""
    def parse(inp: str) -> Outcome[T]:
        return force(thunk)(inp)
    return Parser(parse)


def many(parser: Parser[T]) -> Parser[List[T]]:
    """
    Parse zero or more occurrences of `parser`. Never fails.

    `parser` must consume input whenever it succeeds, otherwise this
    loops forever.
    """
    def parse(inp: str) -> Outcome[List[T]]:
        results: List[T] = []
        current = inp
        res = parser(current)
        while res:
            results.append(res.value)
            current = res.remainder
            res = parser(current)
        return Success(results, current)
    return Parser(parse)


def some(parser: Parser[T]) -> Parser[List[T]]:
    """Parse one or more occurrences of `parser`."""
    repeated = many(parser)

    def parse(inp: str) -> Outcome[List[T]]:
        res = repeated(inp)
        if not res.value:
            return FAILURE
        return res
    return Parser(parse)


def unpack(parser: Parser[T]) -> Callable[[str], Optional[T]]:
    """
    Turn a parser into a function returning its value, or None.

    A value is only returned when the whole input was consumed; a failed
    parse and a partial parse both give None.
    """
    def run(inp: str) -> Optional[T]:
        res = parser(inp)
        if not res:
            return None
        # Leftover input means the parse did not account for everything
        if res.remainder != "":
            return None
        return res.value
    return run


class ErrorKind(Enum):
    NO_PARSE = auto()
    INCOMPLETE = auto()


@dataclass(frozen=True)
class ParseError:
    """Why `run_parser` produced no value."""
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"Parse error: {self.message}"


def run_parser(parser: Parser[T], inp: str) -> Tuple[Optional[T], Optional[ParseError]]:
    """
    Run `parser` on the complete input.

    Returns (value, None) on a full parse. Otherwise returns
    (None, error), where the error tells a failed parse apart from one
    that left input unconsumed.
    """
    res = parser(inp)
    if isinstance(res, Failure):
        return None, ParseError(ErrorKind.NO_PARSE, "parser failed on input")
    if res.remainder != "":
        return None, ParseError(
            ErrorKind.INCOMPLETE,
            "parser succeeded but input was left unconsumed",
        )
    return res.value, None
