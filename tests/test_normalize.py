"""Tests for whitespace normalization around direct-speech delimiters."""

from caesura._normalize import normalize_whitespace


def test_nothing_to_do():
    text = 'Dixit "veni" et abiit.'
    assert normalize_whitespace(text) is text


def test_spaced_quotes():
    assert normalize_whitespace('He said " hello " today.') == 'He said "hello" today.'


def test_closing_quote_at_end_of_string():
    assert normalize_whitespace('Dixit " veni vidi vici "') == 'Dixit "veni vidi vici"'


def test_only_opening_spaced():
    assert normalize_whitespace('Dixit " veni" et abiit.') == 'Dixit "veni" et abiit.'


def test_only_closing_spaced():
    """The toggle flips on the unspaced opening quote, so the next one closes."""
    text = 'Dixit "veni " et " abiit.'
    assert normalize_whitespace(text) == 'Dixit "veni" et "abiit.'


def test_entities():
    text = "Dixit &quot; veni &quot; et abiit."
    assert normalize_whitespace(text) == "Dixit &quot;veni&quot; et abiit."


def test_curly_and_single_quotes():
    assert normalize_whitespace("Ait ” salve ” iterum.") == "Ait ”salve” iterum."
    assert normalize_whitespace("Ait ' salve ' iterum.") == "Ait 'salve' iterum."


def test_state_does_not_leak_between_calls():
    first = normalize_whitespace('a " b')
    second = normalize_whitespace('a " b')
    assert first == second == 'a "b'


def test_does_not_mutate_input():
    text = 'He said " hello " today.'
    normalize_whitespace(text)
    assert text == 'He said " hello " today.'
