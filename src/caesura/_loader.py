"""Abbreviation table loading with manifest version and checksum checks."""

from __future__ import annotations

import hashlib
import json
from importlib import resources
from pathlib import Path
from typing import Any

import msgpack

from ._abbreviations import AbbreviationSet
from ._errors import CaesuraChecksumError, CaesuraError, CaesuraVersionError

_EXPECTED_VERSION = "1.0"
_TABLE = "abbreviations.bin"


def _default_data_dir() -> Path:
    return Path(str(resources.files("caesura") / "data"))


def _expected_checksum(data_dir: Path) -> str:
    """Read manifest.json and return the recorded SHA-256 of the table."""
    manifest_path = data_dir / "manifest.json"
    if not manifest_path.exists():
        raise CaesuraError(f"manifest.json not found in {data_dir}")
    manifest = json.loads(manifest_path.read_text())

    version = manifest.get("version")
    if version != _EXPECTED_VERSION:
        raise CaesuraVersionError(
            f"Expected data version {_EXPECTED_VERSION!r}, got {version!r}"
        )
    checksum = manifest.get("files", {}).get(_TABLE)
    if checksum is None:
        raise CaesuraError(f"No checksum in manifest for {_TABLE}")
    return checksum


def _read_table(data_dir: Path) -> bytes:
    """Table bytes, verified against the manifest before anything is parsed."""
    expected = _expected_checksum(data_dir)
    table_path = data_dir / _TABLE
    if not table_path.exists():
        raise CaesuraError(f"Missing data file: {table_path}")
    raw = table_path.read_bytes()
    actual = hashlib.sha256(raw).hexdigest()
    if actual != expected:
        raise CaesuraChecksumError(
            f"Checksum mismatch for {_TABLE}: "
            f"expected {expected[:16]}..., got {actual[:16]}..."
        )
    return raw


def load_data(data_dir: Path | str | None = None) -> dict[str, Any]:
    """Load and validate the abbreviation table.

    Returns a dict with ``categories`` (category name to a tuple of
    abbreviations, stored without their period) and ``abbreviations``
    (all of them as one AbbreviationSet).
    """
    data_dir = _default_data_dir() if data_dir is None else Path(data_dir)

    table = msgpack.unpackb(_read_table(data_dir), raw=False)
    categories: dict[str, tuple[str, ...]] = {
        name: tuple(entries) for name, entries in table.items()
    }

    return {
        "categories": categories,
        "abbreviations": AbbreviationSet(
            abbr for entries in categories.values() for abbr in entries
        ),
    }


def load_abbreviations(data_dir: Path | str | None = None) -> AbbreviationSet:
    """Load the abbreviation table as an AbbreviationSet."""
    return load_data(data_dir)["abbreviations"]
