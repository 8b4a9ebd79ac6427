"""Sentence construction with per-call sequential ids."""

from __future__ import annotations

import logging

from ._types import Sentence

logger = logging.getLogger(__name__)


class SentenceFactory:
    """Wrap trimmed spans into Sentence objects.

    Ids start at 1 and are only consumed by sentences actually created.
    """

    __slots__ = ("_indexing", "_last_id")

    def __init__(self, indexing: bool = True) -> None:
        self._indexing = indexing
        self._last_id = 0

    def create(self, text: str) -> Sentence:
        sentence_id = None
        if self._indexing:
            self._last_id += 1
            sentence_id = self._last_id
        sentence = Sentence(text, sentence_id)
        logger.debug("Segmented %s %s", sentence_id, text)
        return sentence
