"""Request parameter protocol and query-string helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Container, Iterable, Mapping
from typing import IO
from urllib.parse import urlencode


class Parameters(ABC):
    """Input for an API call: endpoint resolution, body and query parameters."""

    access_token: str = ""

    @abstractmethod
    def resolve_endpoint(self, endpoint_base: str) -> str:
        """Return the full endpoint URL, or an empty string if required values are missing."""

    @abstractmethod
    def body(self) -> IO[str] | None:
        """Return a readable request body, or None when the request has none."""

    @abstractmethod
    def parameter_map(self) -> dict[str, str]:
        """Return the query parameters of this input."""


def query_value(params: Iterable[str] | None) -> str:
    """Join parameter values with commas; an empty or missing list gives ''."""
    if not params:
        return ""
    return ",".join(params)


def query_string(params_map: Mapping[str, str], includes: Container[str]) -> str:
    """Encode the entries of ``params_map`` whose keys are in ``includes``, sorted by key."""
    selected = sorted(
        (key, value) for key, value in params_map.items() if key in includes
    )
    return urlencode(selected)