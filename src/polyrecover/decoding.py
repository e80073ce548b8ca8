"""Decoding of share documents into validated points."""
from __future__ import annotations

import json
import string
from pathlib import Path
from typing import Any, Dict, List, Mapping

import structlog
import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import DecodingError
from .models import Point, ShareProblem

logger = structlog.get_logger(__name__)

_DIGITS = {ch: index for index, ch in enumerate(string.digits + string.ascii_lowercase)}
MIN_BASE = 2
MAX_BASE = 36


class ShareKeys(BaseModel):
    n: int = Field(ge=1, description="Declared number of shares")
    k: int = Field(ge=1, description="Threshold: points needed to fix the polynomial")


class EncodedShare(BaseModel):
    """One share entry; ``value`` must be a string so leading zeros and letters survive."""

    base: int = Field(ge=MIN_BASE, le=MAX_BASE)
    value: str = Field(min_length=1)


class ShareDocument(BaseModel):
    keys: ShareKeys
    shares: Dict[int, EncodedShare] = Field(default_factory=dict)


def decode_value(text: str, base: int) -> int:
    """Decode ``text`` written in ``base`` (2..36) into an integer.

    Digits are ``0-9`` then ``a-z``, case-insensitive. Surrounding whitespace
    is ignored; anything else that is not a valid digit for ``base`` raises
    ``DecodingError``.
    """

    if not MIN_BASE <= base <= MAX_BASE:
        raise DecodingError(f"Base {base} outside supported range {MIN_BASE}..{MAX_BASE}")
    digits = text.strip().lower()
    if not digits:
        raise DecodingError("Empty value")
    for ch in digits:
        digit = _DIGITS.get(ch)
        if digit is None:
            raise DecodingError(f"Invalid digit '{ch}'")
        if digit >= base:
            raise DecodingError(f"Digit '{ch}' not valid for base {base}")
    return int(digits, base)


def parse_x_key(key: str) -> int:
    """Parse a share key such as ``"3"`` or ``"-3"`` into its x-coordinate."""

    candidate = key.strip()
    magnitude = candidate[1:] if candidate.startswith("-") else candidate
    if not magnitude or not (magnitude.isascii() and magnitude.isdigit()):
        raise DecodingError(f"Share key '{key}' is not an integer")
    return int(candidate)


def parse_share_document(raw: Mapping[str, Any]) -> ShareProblem:
    """Validate a raw ``{"keys": {...}, "<x>": {"base", "value"}}`` mapping.

    Entries that do not look like shares are skipped, as are shares whose
    ``value`` is not a string (an unquoted YAML number loses its digits).
    Two keys naming the same x, such as ``1`` and ``"01"``, raise
    ``DecodingError``. Points come back sorted by ``x``.
    """

    if not isinstance(raw, Mapping):
        raise DecodingError("Share document must be a mapping")
    shares: Dict[int, Any] = {}
    names: Dict[int, str] = {}
    for key, entry in raw.items():
        name = str(key)
        if name == "keys":
            continue
        if not isinstance(entry, Mapping) or "base" not in entry or "value" not in entry:
            logger.debug("decode.skip_entry", key=name)
            continue
        if not isinstance(entry["value"], str):
            logger.warning("decode.skip_unquoted_value", key=name, value=repr(entry["value"]))
            continue
        x = parse_x_key(name)
        if x in shares:
            raise DecodingError(f"Duplicate share x = {x} (keys '{names[x]}' and '{name}')")
        shares[x] = entry
        names[x] = name

    try:
        document = ShareDocument.model_validate({"keys": raw.get("keys"), "shares": shares})
    except ValidationError as exc:
        raise DecodingError(f"Invalid share document: {exc}") from exc
    return _to_problem(document)


def _to_problem(document: ShareDocument) -> ShareProblem:
    points: List[Point] = []
    for x, share in document.shares.items():
        try:
            y = decode_value(share.value, share.base)
        except DecodingError as exc:
            raise DecodingError(f"Share {x}: {exc}") from exc
        points.append(Point(x=x, y=y))
    points.sort(key=lambda point: point.x)

    n, k = document.keys.n, document.keys.k
    if len(points) != n:
        logger.warning("decode.share_count_mismatch", declared=n, decoded=len(points))
    if len(points) < k:
        raise DecodingError(f"Threshold k={k} exceeds the {len(points)} decoded shares")
    return ShareProblem(n=n, k=k, points=points)


def load_share_file(path: Path) -> ShareProblem:
    """Read a JSON or YAML share document from ``path``."""

    try:
        with path.open("r", encoding="utf-8") as handle:
            if path.suffix.lower() in {".yaml", ".yml"}:
                raw = yaml.safe_load(handle)
            else:
                raw = json.load(handle)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DecodingError(f"Cannot parse {path}: {exc}") from exc
    return parse_share_document(raw or {})


def parse_pick(text: str) -> List[int]:
    """Turn ``"1,3,4"`` into ``[1, 3, 4]``."""

    keys = [part for part in (piece.strip() for piece in text.split(",")) if part]
    if not keys:
        raise DecodingError("Pick list is empty")
    return [parse_x_key(part) for part in keys]


__all__ = [
    "ShareKeys",
    "EncodedShare",
    "ShareDocument",
    "decode_value",
    "parse_x_key",
    "parse_share_document",
    "load_share_file",
    "parse_pick",
]
