"""Abbreviation table and word-bounded abbreviation scan (Aho-Corasick)."""

from __future__ import annotations

import re
from collections.abc import Iterable

import ahocorasick

# How far back a regex fragment may reach from a candidate period.
_PATTERN_WINDOW = 64


def _bounded(text: str, start: int) -> bool:
    """True if an abbreviation starting at `start` begins a word."""
    if start == 0:
        return True
    prev = text[start - 1]
    return prev.isspace() or prev == ">"


class AbbreviationSet:
    """Known abbreviations, stored without their trailing period.

    Literals are matched with an Aho-Corasick automaton. Patterns are
    regex fragments, for entries a literal cannot express.
    """

    __slots__ = ("_literals", "_patterns", "_ac", "_pattern_re")

    def __init__(
        self, literals: Iterable[str], patterns: Iterable[str] = ()
    ) -> None:
        self._literals = frozenset(a for a in literals if a)
        self._patterns = tuple(patterns)

        self._ac: ahocorasick.Automaton | None = None
        if self._literals:
            ac = ahocorasick.Automaton()
            for abbr in self._literals:
                ac.add_word(abbr, len(abbr))
            ac.make_automaton()
            self._ac = ac

        self._pattern_re: re.Pattern[str] | None = None
        if self._patterns:
            alternation = "|".join(f"(?:{p})" for p in self._patterns)
            self._pattern_re = re.compile(
                rf"(?:(?<=[\s>])|^)(?:{alternation})\Z"
            )

    def __len__(self) -> int:
        return len(self._literals) + len(self._patterns)

    def __contains__(self, abbr: object) -> bool:
        return abbr in self._literals

    def __iter__(self):
        return iter(sorted(self._literals))

    @property
    def patterns(self) -> tuple[str, ...]:
        return self._patterns

    def union(
        self, literals: Iterable[str], patterns: Iterable[str] = ()
    ) -> AbbreviationSet:
        """Return a new set extended with extra literals and patterns."""
        return AbbreviationSet(
            self._literals | frozenset(literals),
            self._patterns + tuple(patterns),
        )

    def scan_ends(self, text: str) -> frozenset[int]:
        """Offsets in `text` at which a word-bounded literal abbreviation ends.

        A period at offset p directly follows an abbreviation iff p is in
        the returned set.
        """
        if self._ac is None:
            return frozenset()
        ends: set[int] = set()
        for end_inclusive, length in self._ac.iter(text):
            start = end_inclusive + 1 - length
            if _bounded(text, start):
                ends.add(end_inclusive + 1)
        return frozenset(ends)

    def pattern_ends_at(self, text: str, pos: int) -> bool:
        """True if a regex-fragment abbreviation ends exactly at `pos`."""
        if self._pattern_re is None:
            return False
        lo = max(0, pos - _PATTERN_WINDOW)
        return self._pattern_re.search(text, lo, pos) is not None
