"""Tests for Sentence and SentenceFactory."""

import dataclasses
import io
import logging

import pytest

from caesura._sentence import SentenceFactory
from caesura._types import Sentence


def test_sequential_ids():
    factory = SentenceFactory(indexing=True)
    first = factory.create("Veni.")
    second = factory.create("Vidi.")
    assert (first.id, second.id) == (1, 2)


def test_no_indexing():
    factory = SentenceFactory(indexing=False)
    assert factory.create("Veni.").id is None
    assert factory.create("Vidi.").id is None


def test_fresh_factory_restarts_ids():
    SentenceFactory().create("Veni.")
    assert SentenceFactory().create("Vidi.").id == 1


def test_sentence_is_immutable():
    sentence = Sentence("Veni.", 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        sentence.text = "Vidi."


def test_str():
    assert str(Sentence("Veni.", 1)) == "Veni."


def test_logs_each_sentence(caplog):
    factory = SentenceFactory()
    with caplog.at_level(logging.DEBUG, logger="caesura"):
        factory.create("Veni.")
        factory.create("Vidi.")
    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["Segmented 1 Veni.", "Segmented 2 Vidi."]


def test_broken_log_handler_does_not_abort():
    class BrokenStream(io.StringIO):
        def write(self, s):
            raise OSError("sink gone")

    logger = logging.getLogger("caesura")
    handler = logging.StreamHandler(BrokenStream())
    logger.addHandler(handler)
    old_level = logger.level
    logger.setLevel(logging.DEBUG)
    old_raise = logging.raiseExceptions
    logging.raiseExceptions = False
    try:
        assert SentenceFactory().create("Veni.").text == "Veni."
    finally:
        logging.raiseExceptions = old_raise
        logger.removeHandler(handler)
        logger.setLevel(old_level)
