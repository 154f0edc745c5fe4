"""Inputs and outputs of the batch compliance job endpoints."""

from __future__ import annotations

import io
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import quote_plus

from tweetkit.params import Parameters, query_string

LIST_JOBS_ENDPOINT = "https://api.twitter.com/2/compliance/jobs"
GET_JOB_ENDPOINT = "https://api.twitter.com/2/compliance/jobs/:id"
CREATE_JOB_ENDPOINT = "https://api.twitter.com/2/compliance/jobs"

_LIST_JOBS_QUERY_PARAMETERS = frozenset({"type", "status"})


class ComplianceType(str, Enum):
    TWEETS = "tweets"
    USERS = "users"

    def __str__(self) -> str:
        return self.value


class ComplianceStatus(str, Enum):
    CREATED = "created"
    IN_PROGRESS = "in_progress"
    FAILED = "failed"
    COMPLETE = "complete"

    def __str__(self) -> str:
        return self.value


@dataclass
class ListJobsInput(Parameters):
    """Query for recent compliance jobs; ``type`` is required."""

    type: ComplianceType | str = ""
    status: ComplianceStatus | str = ""
    access_token: str = ""

    def resolve_endpoint(self, endpoint_base: str) -> str:
        if not self.type:
            return ""
        return f"{endpoint_base}?{query_string(self.parameter_map(), _LIST_JOBS_QUERY_PARAMETERS)}"

    def body(self) -> None:
        return None

    def parameter_map(self) -> dict[str, str]:
        params = {"type": str(self.type)}
        if self.status:
            params["status"] = str(self.status)
        return params


@dataclass
class GetJobInput(Parameters):
    """Lookup of one compliance job by ID."""

    id: str = ""
    access_token: str = ""

    def resolve_endpoint(self, endpoint_base: str) -> str:
        if not self.id:
            return ""
        return endpoint_base.replace(":id", quote_plus(self.id), 1)

    def body(self) -> None:
        return None

    def parameter_map(self) -> dict[str, str]:
        return {}


@dataclass
class CreateJobInput(Parameters):
    """Creation of a compliance job; sent as a JSON body."""

    type: ComplianceType | str = ""
    name: str | None = None
    resumable: bool | None = None
    access_token: str = ""

    def resolve_endpoint(self, endpoint_base: str) -> str:
        return endpoint_base

    def body(self) -> io.StringIO:
        payload: dict[str, Any] = {}
        if self.type:
            payload["type"] = str(self.type)
        if self.name is not None:
            payload["name"] = self.name
        if self.resumable is not None:
            payload["resumable"] = self.resumable
        return io.StringIO(json.dumps(payload, separators=(",", ":")))

    def parameter_map(self) -> dict[str, str]:
        return {}


@dataclass
class ListJobsOutput:
    """Response listing compliance jobs."""

    data: list[dict[str, Any]] = field(default_factory=list)
    errors: list[dict[str, Any]] = field(default_factory=list)

    def has_partial_error(self) -> bool:
        return bool(self.errors)


@dataclass
class GetJobOutput:
    """Response holding one compliance job."""

    data: dict[str, Any] = field(default_factory=dict)
    errors: list[dict[str, Any]] = field(default_factory=list)

    def has_partial_error(self) -> bool:
        return bool(self.errors)


@dataclass
class CreateJobOutput:
    """Response holding a newly created compliance job."""

    data: dict[str, Any] = field(default_factory=dict)
    errors: list[dict[str, Any]] = field(default_factory=list)

    def has_partial_error(self) -> bool:
        return bool(self.errors)