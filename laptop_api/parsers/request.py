from __future__ import annotations

import re

from pydantic import ValidationError

from laptop_api.schemas.laptop import LaptopCreate


# Optional sign plus ASCII digits; int() alone would also take "1_000" or " 7 ".
ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# Range of the SERIAL / INTEGER id column
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1


class RequestParseError(ValueError):
    """Raised when a path id or a request body cannot be decoded."""


def extract_id_segment(path: str) -> str:
    """Return the id segment of ``/laptops/{id}``.

    The path is split on ``/`` and the third piece is cut at the first
    whitespace, so a trailing ``HTTP/1.1`` on a raw request line is dropped.
    Returns an empty string when there is no such segment.
    """
    parts = path.split("/")
    if len(parts) < 3:
        return ""
    tokens = parts[2].split()
    return tokens[0] if tokens else ""


def parse_laptop_id(path: str) -> int:
    segment = extract_id_segment(path)
    if not ID_PATTERN.fullmatch(segment):
        raise RequestParseError(f"invalid laptop id {segment!r}")
    laptop_id = int(segment)
    if not ID_MIN <= laptop_id <= ID_MAX:
        raise RequestParseError(f"laptop id out of range {segment!r}")
    return laptop_id


def parse_laptop_body(raw: bytes | str) -> LaptopCreate:
    try:
        return LaptopCreate.model_validate_json(raw)
    except ValidationError as exc:
        raise RequestParseError(f"invalid laptop body: {exc.error_count()} error(s)") from exc
