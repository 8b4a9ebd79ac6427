"""Cursor-based scan loop turning normalized text into sentences."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ._errors import ScanStalledError
from ._normalize import DIRECT_SPEECH_DELIMITER
from ._sentence import SentenceFactory
from ._types import ScanMode

if TYPE_CHECKING:
    from ._rules import BoundaryRule, Probe
    from ._types import SegmenterOptions, Sentence

logger = logging.getLogger(__name__)

# One direct-speech delimiter, then closing parens and closing tags.
_TRAILERS_RE = re.compile(
    rf"(?:{DIRECT_SPEECH_DELIMITER})?(?:\)|\s*</.*?>)*"
)
_CLOSING_TAGS_ONLY_RE = re.compile(r"\s*(?:(?:</[^>]*>|<[^>]*/>)\s*)+")
_MARKUP_ONLY_RE = re.compile(r"\s*(?:<[^>]*>\s*)*")


@dataclass(slots=True)
class ScanContext:
    """All mutable state of one segmentation call."""

    text: str
    options: SegmenterOptions
    rule: BoundaryRule
    newline_rule: BoundaryRule
    probe: Probe
    factory: SentenceFactory
    pos: int = 0
    mode: ScanMode = ScanMode.PRIMARY
    sentences: list[Sentence] = field(default_factory=list)

    @classmethod
    def start(
        cls,
        text: str,
        options: SegmenterOptions,
        rule: BoundaryRule,
        newline_rule: BoundaryRule,
    ) -> ScanContext:
        return cls(
            text=text,
            options=options,
            rule=rule,
            newline_rule=newline_rule,
            probe=rule.probe(text),
            factory=SentenceFactory(options.indexing),
        )

    @property
    def eos(self) -> bool:
        return self.pos >= len(self.text)

    @property
    def active_rule(self) -> BoundaryRule:
        if self.mode is ScanMode.NEWLINE_FALLBACK:
            return self.newline_rule
        return self.rule

    def advance_to(self, end: int) -> str:
        chunk = self.text[self.pos:end]
        self.pos = end
        return chunk

    def take_rest(self) -> str:
        return self.advance_to(len(self.text))


def _has_open_chevron(span: str) -> bool:
    return span.count("<") > span.count(">")


def _rescue_no_delimiters(ctx: ScanContext, pending: str) -> str:
    """Fallback when no boundary lies ahead of the cursor."""
    if ctx.sentences or pending or ctx.mode is ScanMode.NEWLINE_FALLBACK:
        # broken off text at the end
        return ctx.take_rest()

    if ctx.options.xml:
        # Never force a split in markup. Markup-only input leaves nothing.
        if _MARKUP_ONLY_RE.fullmatch(ctx.text, ctx.pos):
            ctx.take_rest()
            return ""
        return ctx.take_rest()

    logger.debug("No sentence boundary found, retrying with newlines")
    ctx.pos = 0
    ctx.mode = ScanMode.NEWLINE_FALLBACK
    end = ctx.newline_rule.search(ctx.probe, 0)
    if end is None:
        # not even a newline: the whole input is one sentence
        return ctx.take_rest()
    return ctx.advance_to(end)


def _do_scan(ctx: ScanContext, pending: str = "") -> str:
    end = ctx.active_rule.search(ctx.probe, ctx.pos)
    if end is None:
        return _rescue_no_delimiters(ctx, pending)
    return ctx.advance_to(end)


def _scan_until_next_sentence(ctx: ScanContext) -> str:
    span = _do_scan(ctx)
    if ctx.options.xml:
        while _has_open_chevron(span) and not ctx.eos:
            step = _do_scan(ctx, span)
            span += step or ctx.take_rest()
    return span


def _take_all_closing_tags(ctx: ScanContext) -> str:
    if _CLOSING_TAGS_ONLY_RE.fullmatch(ctx.text, ctx.pos):
        return ctx.take_rest()
    return ""


def _trailing_delimiters(ctx: ScanContext) -> str:
    m = _TRAILERS_RE.match(ctx.text, ctx.pos)
    return ctx.advance_to(m.end())


def _markup_only_lead(ctx: ScanContext, span: str) -> bool:
    """True for a tags-only span in xml mode before any sentence exists.

    Periods inside attribute values (``<pb n="1."/>``) can cut such spans.
    """
    return (
        ctx.options.xml
        and not ctx.sentences
        and _MARKUP_ONLY_RE.fullmatch(span) is not None
    )


def scan(ctx: ScanContext) -> list[Sentence]:
    """Run the scan loop to the end of input and return the sentences."""
    while not ctx.eos:
        loop_guard = ctx.pos

        span = _scan_until_next_sentence(ctx)

        if ctx.pos == loop_guard:
            raise ScanStalledError(
                f"Cursor stuck at offset {loop_guard} "
                f"(mode={ctx.mode.value}, rule={ctx.active_rule.names})"
            )

        if ctx.options.xml:
            span += _take_all_closing_tags(ctx)
        span += _trailing_delimiters(ctx)

        span = span.strip()
        if not span or _markup_only_lead(ctx, span):
            continue
        ctx.sentences.append(ctx.factory.create(span))
    return ctx.sentences
