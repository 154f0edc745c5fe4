"""Response header lookup and rate-limit information."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone

RATE_LIMIT_LIMIT_HEADER_KEY = "X-Rate-Limit-Limit"
RATE_LIMIT_REMAINING_HEADER_KEY = "X-Rate-Limit-Remaining"
RATE_LIMIT_RESET_HEADER_KEY = "X-Rate-Limit-Reset"

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass
class RateLimitInformation:
    """Rate-limit state reported by the API in response headers."""

    limit: int = 0
    remaining: int = 0
    reset_at: datetime | None = None


def header_values(key: str, headers: Mapping[str, Sequence[str]]) -> list[str]:
    """Return the values stored under ``key`` exactly, or an empty list."""
    return list(headers.get(key, ()))


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer header value: {text!r}")
    return int(text)


def _first_int(key: str, headers: Mapping[str, Sequence[str]]) -> int | None:
    values = header_values(key, headers)
    if not values:
        return None
    return _parse_int(values[0])


def get_rate_limit_information(
    headers: Mapping[str, Sequence[str]],
) -> RateLimitInformation:
    """Read rate-limit headers; missing headers give defaults, malformed ones raise ValueError."""
    limit = _first_int(RATE_LIMIT_LIMIT_HEADER_KEY, headers)
    remaining = _first_int(RATE_LIMIT_REMAINING_HEADER_KEY, headers)
    reset = _first_int(RATE_LIMIT_RESET_HEADER_KEY, headers)
    return RateLimitInformation(
        limit=limit or 0,
        remaining=remaining or 0,
        reset_at=None if reset is None else datetime.fromtimestamp(reset, tz=timezone.utc),
    )