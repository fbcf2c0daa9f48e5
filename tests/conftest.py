# tests/conftest.py
import pytest

from detparse.Parser import Failure, Success


def assert_success(res, value, remainder):
    """The outcome succeeded with exactly this value and remainder."""
    assert isinstance(res, Success), f"Expected Success, got {res!r}"
    assert res.value == value
    assert res.remainder == remainder


def assert_failure(res):
    assert isinstance(res, Failure), f"Expected Failure, got {res!r}"


@pytest.fixture
def probe():
    """
    Build a deferred reference that records every time it is forced.

    probe(parser) returns (thunk, calls); len(calls) is the force count.
    """
    def _make(parser):
        calls = []

        def thunk():
            calls.append(parser)
            return parser

        return thunk, calls

    return _make
