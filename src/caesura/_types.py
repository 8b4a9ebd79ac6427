"""Data structures for caesura."""

from __future__ import annotations

import enum
from dataclasses import dataclass, fields
from typing import Any

from ._errors import CaesuraOptionError


@dataclass(slots=True, frozen=True)
class Sentence:
    text: str
    id: int | None = None   # 1-based ordinal, None when indexing is off

    def __str__(self) -> str:
        return self.text


@dataclass(slots=True, frozen=True)
class SegmenterOptions:
    indexing: bool = True
    newline_boundary: int = 2       # consecutive \n forming a boundary
    semicolon_delimiter: bool = True
    xml: bool = False               # markup-aware, disables newline boundaries

    def __post_init__(self) -> None:
        for name in ("indexing", "semicolon_delimiter", "xml"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise CaesuraOptionError(
                    f"{name} must be a bool, got {value!r}"
                )
        nl = self.newline_boundary
        if isinstance(nl, bool) or not isinstance(nl, int) or nl < 1:
            raise CaesuraOptionError(
                f"newline_boundary must be a positive integer, got {nl!r}"
            )

    @classmethod
    def from_mapping(
        cls, defaults: dict[str, Any], overrides: dict[str, Any]
    ) -> SegmenterOptions:
        """Merge per-call overrides onto defaults, rejecting unknown names."""
        known = {f.name for f in fields(cls)}
        for name in (*defaults, *overrides):
            if name not in known:
                raise CaesuraOptionError(f"Unknown option: {name!r}")
        return cls(**{**defaults, **overrides})


class ScanMode(enum.Enum):
    PRIMARY = "primary"
    NEWLINE_FALLBACK = "newline_fallback"
