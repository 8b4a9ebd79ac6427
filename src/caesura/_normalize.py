"""Whitespace normalization around direct-speech delimiters."""

from __future__ import annotations

import re

DIRECT_SPEECH_DELIMITER = r"""['"”]|&(?:apos|quot);"""

_DELIMITER_RE = re.compile(DIRECT_SPEECH_DELIMITER)
_SPACED_DELIMITER_RE = re.compile(f" (?:{DIRECT_SPEECH_DELIMITER}) ")


def _surrounded_by_space(text: str, start: int, end: int) -> bool:
    # End of string counts as a space on the right.
    return (
        start > 0
        and text[start - 1] == " "
        and (end == len(text) or text[end] == " ")
    )


def normalize_whitespace(text: str) -> str:
    """Glue free-floating quotation delimiters to the speech they bound.

    ``say " hello " now`` becomes ``say "hello" now``: an opening
    delimiter loses the space after it, a closing one the space before it.
    Delimiters alternate between opening and closing, starting closed.
    """
    # In most texts there is nothing to do.
    if not _SPACED_DELIMITER_RE.search(text):
        return text

    pieces: list[str] = []
    copied = 0
    direct_speech = False
    for m in _DELIMITER_RE.finditer(text):
        start, end = m.span()
        if not _surrounded_by_space(text, start, end):
            pieces.append(text[copied:end])
            copied = end
        elif direct_speech:
            # closing: drop the space in front
            pieces.append(text[copied:start - 1])
            pieces.append(m.group())
            copied = end
        else:
            # opening: hop over the space behind
            pieces.append(text[copied:end])
            copied = min(end + 1, len(text))
        direct_speech = not direct_speech
    pieces.append(text[copied:])
    return "".join(pieces)
