# Core
from .Parser import Parser, Success, Failure, FAILURE, Outcome, Lazy, force
from .Prim import (
    pure, empty, bind, fmap, ap, lift_as,
    alt, alts, lazy, many, some,
    unpack, run_parser, ParseError, ErrorKind
)

# Characters
from .Char import (
    take, peek, sat, char, sentence, whitespace, token,
    alpha, numeric, alpha_numeric, space, take_digit, eq, WHITESPACE
)

# Debugging
from .Debug import tap, log_input
