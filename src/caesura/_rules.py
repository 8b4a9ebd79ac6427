"""Boundary rules: ordered closer predicates and their composition.

A boundary is found by walking candidate punctuation positions left to
right and trying each closer in priority order at every position. The
first closer that accepts a position decides where the sentence ends.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._abbreviations import AbbreviationSet
    from ._types import SegmenterOptions

# Roman numeral letters. M. and L. double as praenomina; they are listed in
# the abbreviation table too, so both checks suppress them.
NUMERALS = frozenset("IVXLCDM")

MARKS = "?!:·"

# A ; closing a partial character reference is not a closer: "&amp;"
ENTITY_PREFIXES = ("&amp", "&quot", "&apos", "&lt", "&gt")

_CAPITAL_AHEAD_RE = re.compile(r"\s(?:<.*?>\s)?[A-Z]")
_INITIALISM_AHEAD_RE = re.compile(r"\s[A-Z]\w+\.", re.ASCII)


@dataclass(slots=True)
class Probe:
    """One input string plus the abbreviation ends found in it."""

    text: str
    abbr_ends: frozenset[int]
    abbreviations: AbbreviationSet

    def after_abbreviation(self, pos: int) -> bool:
        return pos in self.abbr_ends or self.abbreviations.pattern_ends_at(
            self.text, pos
        )

    def after_numeral(self, pos: int) -> bool:
        return pos > 0 and self.text[pos - 1] in NUMERALS


@dataclass(slots=True, frozen=True)
class Closer:
    name: str
    triggers: str
    # Returns the end offset of the boundary at pos, or None.
    accept: Callable[[Probe, int], int | None]


def _period(probe: Probe, pos: int) -> int | None:
    if probe.after_abbreviation(pos) or probe.after_numeral(pos):
        return None
    if probe.text.startswith(".", pos + 1):
        return None
    return pos + 1


def _mark(probe: Probe, pos: int) -> int | None:
    return pos + 1


def _semicolon(probe: Probe, pos: int) -> int | None:
    text = probe.text
    for prefix in ENTITY_PREFIXES:
        if text.endswith(prefix, 0, pos):
            return None
    return pos + 1


def _capital(probe: Probe, pos: int) -> int | None:
    if probe.after_abbreviation(pos):
        return None
    text = probe.text
    if not _CAPITAL_AHEAD_RE.match(text, pos + 1):
        return None
    if _INITIALISM_AHEAD_RE.match(text, pos + 1):
        return None
    return pos + 1


def _newlines(minimum: int) -> Callable[[Probe, int], int | None]:
    def accept(probe: Probe, pos: int) -> int | None:
        text = probe.text
        end = pos
        while end < len(text) and text[end] == "\n":
            end += 1
        return end if end - pos >= minimum else None
    return accept


PERIOD = Closer("period", ".", _period)
MARK = Closer("mark", MARKS, _mark)
SEMICOLON = Closer("semicolon", ";", _semicolon)
CAPITAL = Closer("capital", ".", _capital)


def newline_closer(minimum: int) -> Closer:
    return Closer(f"newline{{{minimum},}}", "\n", _newlines(minimum))


class BoundaryRule:
    """An ordered, immutable list of closers."""

    __slots__ = ("_closers", "_abbreviations", "_candidate_re")

    def __init__(
        self, closers: Sequence[Closer], abbreviations: AbbreviationSet
    ) -> None:
        if not closers:
            raise ValueError("BoundaryRule needs at least one closer")
        self._closers = tuple(closers)
        self._abbreviations = abbreviations
        triggers = sorted({c for closer in self._closers for c in closer.triggers})
        self._candidate_re = re.compile(
            "[" + "".join(re.escape(c) for c in triggers) + "]"
        )

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(closer.name for closer in self._closers)

    def probe(self, text: str) -> Probe:
        """Prepare `text` for repeated searches."""
        return Probe(text, self._abbreviations.scan_ends(text), self._abbreviations)

    def search(self, probe: Probe, pos: int) -> int | None:
        """End offset of the earliest boundary at or after pos, or None."""
        for m in self._candidate_re.finditer(probe.text, pos):
            at = m.start()
            char = probe.text[at]
            for closer in self._closers:
                if char not in closer.triggers:
                    continue
                end = closer.accept(probe, at)
                if end is not None:
                    return end
        return None


def build_boundary_rule(
    options: SegmenterOptions, abbreviations: AbbreviationSet
) -> BoundaryRule:
    """Compose the primary boundary rule for one segmentation call."""
    closers = [PERIOD, MARK]
    if options.semicolon_delimiter:
        closers.append(SEMICOLON)
    closers.append(CAPITAL)
    # Markup structure is authoritative in xml mode.
    if not options.xml:
        closers.append(newline_closer(options.newline_boundary))
    return BoundaryRule(closers, abbreviations)


def build_newline_rule(abbreviations: AbbreviationSet) -> BoundaryRule:
    """The bare single-newline rule used by the no-boundary fallback."""
    return BoundaryRule([newline_closer(1)], abbreviations)
