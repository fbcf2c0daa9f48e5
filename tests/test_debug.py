from detparse.Char import char, sentence, take
from detparse.Debug import log_input, tap
from detparse.Prim import bind, empty, pure


def test_tap_reports_input_without_consuming():
    seen = []
    res = tap(seen.append)("<p>")

    assert seen == ["<p>"]
    assert res.value is None
    assert res.remainder == "<p>"


def test_tap_inside_a_sequence():
    seen = []
    p = bind(take, lambda x: bind(tap(seen.append), lambda _: take >> (lambda y: pure(x + y))))

    assert p("abc").value == "ab"
    assert seen == ["bc"]


def test_log_input_passes_outcome_through():
    seen = []
    p = log_input(sentence("<p>"), seen.append)

    assert p("<p>x") == sentence("<p>")("<p>x")
    assert p("<q>") == sentence("<p>")("<q>")
    assert seen == ["<p>x", "<q>"]


def test_log_input_prints_by_default(capsys):
    log_input(char("a"))("abc")
    assert capsys.readouterr().out == "abc\n"


def test_log_input_observes_failures():
    seen = []
    assert not log_input(empty(), seen.append)("xyz")
    assert seen == ["xyz"]
