"""Shared constants and helpers for carbonsink tests."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import httpx

BATCH_TIMESTAMP = datetime(2023, 12, 11, 13, 6, 40, tzinfo=UTC)
BATCH_EPOCH = 1702300000

SINK_URL = "https://collectors.example.com/receiver/v1/http/TOKEN"


@dataclass
class RecordedRequests:
    """Requests seen by a MockTransport, plus the status to answer with."""

    requests: list[httpx.Request] = field(default_factory=list)
    status_code: int = 200
    response_body: str = ""

    @property
    def bodies(self) -> list[str]:
        return [r.content.decode() for r in self.requests]
