import random

from responder.defaults import FALLBACK_RESPONSE, DefaultResponseList, parse_paragraphs
from responder.sources import FileSource, TextSource


def test_paragraphs_joined():
    lines = ["Tell", "me", "more.", "", "Go on."]

    assert parse_paragraphs(lines) == ["Tell me more.", "Go on."]


def test_blank_runs_do_not_create_empty_entries():
    lines = ["", "  ", "one", "", "", "\t", "two", ""]

    assert parse_paragraphs(lines) == ["one", "two"]


def test_empty_source_gets_fallback():
    defaults = DefaultResponseList.load(TextSource(""))

    assert defaults.responses() == (FALLBACK_RESPONSE,)
    assert defaults.diagnostic is None


def test_blank_only_source_gets_fallback():
    defaults = DefaultResponseList.load(TextSource("\n   \n\n"))

    assert len(defaults) == 1
    assert defaults[0] == FALLBACK_RESPONSE


def test_unreadable_source_gets_fallback(tmp_path, caplog):
    defaults = DefaultResponseList.load(FileSource(tmp_path / "nope.txt"))

    assert defaults.responses() == (FALLBACK_RESPONSE,)
    assert defaults.diagnostic
    assert "Error reading default responses" in caplog.text


def test_bad_encoding_is_soft(tmp_path):
    sample = tmp_path / "default.txt"
    sample.write_bytes(b"caf\xe9\n")

    defaults = DefaultResponseList.load(FileSource(sample, encoding="utf-8"))

    assert defaults.responses() == (FALLBACK_RESPONSE,)
    assert "default.txt" in defaults.diagnostic


def test_pick_is_uniform_index_from_rng():
    defaults = DefaultResponseList(["a", "b", "c", "d"])
    expected_index = random.Random(7).randrange(4)

    index, response = defaults.pick(random.Random(7))

    assert index == expected_index
    assert response == defaults[expected_index]
