"""Caesura: sentence segmentation for classical-language prose and markup."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ._abbreviations import AbbreviationSet
from ._errors import (
    CaesuraChecksumError,
    CaesuraError,
    CaesuraOptionError,
    CaesuraVersionError,
    ScanStalledError,
)
from ._normalize import normalize_whitespace
from ._segmenter import Segmenter
from ._types import SegmenterOptions, Sentence

if TYPE_CHECKING:
    from pathlib import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "load_abbreviations",
    "segment",
    "AbbreviationSet",
    "CaesuraChecksumError",
    "CaesuraError",
    "CaesuraOptionError",
    "CaesuraVersionError",
    "ScanStalledError",
    "Segmenter",
    "SegmenterOptions",
    "Sentence",
    "normalize_whitespace",
]

_default: Segmenter | None = None


def load_abbreviations(data_dir: Path | str | None = None) -> AbbreviationSet:
    """Load the abbreviation table.

    Args:
        data_dir: Path to data directory. If None, uses bundled package data.
    """
    from ._loader import load_abbreviations as _load

    return _load(data_dir)


def load(data_dir: Path | str | None = None, **defaults: Any) -> Segmenter:
    """Load data and return a ready-to-use Segmenter.

    Args:
        data_dir: Path to data directory. If None, uses bundled package data.
        **defaults: Default segmentation options for the returned instance.
    """
    return Segmenter(load_abbreviations(data_dir), **defaults)


def segment(text: str, **options: Any) -> list[Sentence]:
    """Segment text with a shared Segmenter built from the bundled data."""
    global _default
    if _default is None:
        _default = load()
    return _default.segment(text, **options)
