"""Shared test fixtures for all test modules."""

from collections.abc import Callable, Iterator

import httpx
import pytest
from tests.helpers import BATCH_TIMESTAMP, RecordedRequests

from carbonsink.adapters.transport import HttpTransport
from carbonsink.core.models import DataBatch, MetricSet


@pytest.fixture
def recorded() -> RecordedRequests:
    """Fresh request recorder for each test."""
    return RecordedRequests()


@pytest.fixture
def mock_transport(recorded: RecordedRequests) -> Iterator[HttpTransport]:
    """HttpTransport whose client answers from an httpx.MockTransport.

    Every request is appended to the ``recorded`` fixture.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        recorded.requests.append(request)
        return httpx.Response(recorded.status_code, text=recorded.response_body)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    yield HttpTransport(client=client)
    client.close()


@pytest.fixture
def make_batch() -> Callable[..., DataBatch]:
    """Factory fixture for creating batches at a fixed timestamp.

    Usage:
        batch = make_batch({"node:n1": MetricSet(labels={...})})
    """

    def _batch(metric_sets: dict[str, MetricSet] | None = None) -> DataBatch:
        return DataBatch(timestamp=BATCH_TIMESTAMP, metric_sets=metric_sets or {})

    return _batch
