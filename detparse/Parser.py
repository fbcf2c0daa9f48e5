from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')


@dataclass(frozen=True)
class Success(Generic[T]):
    """A successful parse: the produced value and the unconsumed input."""
    value: T
    remainder: str

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """The parser could not interpret the input. Carries no diagnostics."""

    def __bool__(self) -> bool:
        return False


FAILURE = Failure()

Outcome = Union[Success[T], Failure]
# At most one outcome per parse; there is never a second interpretation.


class Parser(Generic[T]):
    """A pure function from an input string to an Outcome."""
    def __init__(self, parse_fn: Callable[[str], Outcome[T]]):
        self.parse_fn = parse_fn

    def __call__(self, inp: str) -> Outcome[T]:
        return self.parse_fn(inp)

    # Monadic bind (>>=)
    def bind(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        def parse(inp: str) -> Outcome[U]:
            res = self(inp)
            if not res:
                # Short-circuit: f is never invoked on failure
                return FAILURE
            return f(res.value)(res.remainder)
        return Parser(parse)

    # Functor (<$>)
    def map(self, fn: Callable[[T], U]) -> 'Parser[U]':
        def parse(inp: str) -> Outcome[U]:
            res = self(inp)
            if not res:
                return FAILURE
            return Success(fn(res.value), res.remainder)
        return Parser(parse)

    # Ordered choice (<|>)
    def __or__(self, other: 'Lazy[T]') -> 'Parser[T]':
        def parse(inp: str) -> Outcome[T]:
            res = self(inp)
            if res:
                return res
            # The second branch always sees the original input
            return force(other)(inp)
        return Parser(parse)

    # Sequence (*>)
    def __gt__(self, other: 'Parser[U]') -> 'Parser[U]':
        return self.bind(lambda _: other)

    # Sequence (<*)
    def __lt__(self, other: 'Parser[Any]') -> 'Parser[T]':
        return self.bind(lambda x: other.map(lambda _: x))

    # Monadic bind also available as >>
    def __rshift__(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        return self.bind(f)


Lazy = Union[Parser[T], Callable[[], Parser[T]]]
# A parser, or a zero-argument function building one on demand.


def force(ref: Lazy[T]) -> Parser[T]:
    """Evaluate a deferred parser reference."""
    if isinstance(ref, Parser):
        return ref
    return ref()
