"""Segmenter: the public entry point tying rules, normalization and scan together."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import TYPE_CHECKING, Any

from ._normalize import normalize_whitespace
from ._rules import build_boundary_rule, build_newline_rule
from ._scanner import ScanContext, scan
from ._types import SegmenterOptions

if TYPE_CHECKING:
    from ._abbreviations import AbbreviationSet
    from ._types import Sentence


class Segmenter:
    """Split classical-language prose into sentences.

    Holds only immutable data (abbreviations, default options); every call
    to :meth:`segment` builds its own rule, cursor and id counter, so one
    instance can be shared between threads.
    """

    DEFAULT_OPTIONS: dict[str, Any] = {
        "indexing": True,
        "newline_boundary": 2,
        "semicolon_delimiter": True,
        "xml": False,
    }

    __slots__ = ("_abbreviations", "_defaults")

    def __init__(
        self,
        abbreviations: AbbreviationSet | None = None,
        **defaults: Any,
    ) -> None:
        if abbreviations is None:
            from ._loader import load_abbreviations

            abbreviations = load_abbreviations()
        self._abbreviations = abbreviations
        self._defaults = {**self.DEFAULT_OPTIONS, **defaults}
        # fail on bad defaults at construction, not on first use
        SegmenterOptions.from_mapping(self._defaults, {})

    @classmethod
    def default_options(cls) -> dict[str, Any]:
        return dict(cls.DEFAULT_OPTIONS)

    @property
    def abbreviations(self) -> AbbreviationSet:
        return self._abbreviations

    def options(self, **overrides: Any) -> SegmenterOptions:
        """Resolve the options a call with these overrides would use."""
        return SegmenterOptions.from_mapping(self._defaults, overrides)

    def segment(
        self,
        text: str,
        add_to: MutableSequence[Sentence] | None = None,
        **options: Any,
    ) -> list[Sentence]:
        """Segment `text` into an ordered list of sentences.

        Args:
            text: Raw prose, optionally containing markup.
            add_to: If given, the sentences are also appended to it.
            **options: Per-call overrides of ``indexing``,
                ``newline_boundary``, ``semicolon_delimiter`` and ``xml``.
        """
        opts = self.options(**options)
        # dump whitespace at the beginning and end
        text = normalize_whitespace(text.strip())

        ctx = ScanContext.start(
            text,
            opts,
            build_boundary_rule(opts, self._abbreviations),
            build_newline_rule(self._abbreviations),
        )
        sentences = scan(ctx)
        if add_to is not None:
            add_to.extend(sentences)
        return sentences
