"""Port interfaces for sinks and transports.

A host drives a DataSinkPort once per export cycle, and the sink hands the
encoded payload to a TransportPort for the single HTTP exchange.
"""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from carbonsink.core.models import DataBatch


@runtime_checkable
class DataSinkPort(Protocol):
    """Port for sinks driven by a metric collection pipeline.

    The host calls export_data once per export cycle and stop on shutdown.
    Examples: SumoLogicSink.
    """

    @property
    def name(self) -> str:
        """Human readable sink name for diagnostics."""
        ...

    def export_data(self, batch: DataBatch) -> None:
        """Export one batch of metric sets."""
        ...

    def stop(self) -> None:
        """Signal shutdown to the sink."""
        ...


@runtime_checkable
class TransportPort(Protocol):
    """Port for the single request/response exchange of an export.

    Examples: HttpTransport.
    """

    def post(
        self, url: str, body: bytes, headers: Mapping[str, str]
    ) -> tuple[int, str]:
        """POST body to url.

        Returns:
            Tuple of (status code, response body text).

        Raises:
            TransportError: If the request cannot be built or sent.
        """
        ...

    def close(self) -> None:
        """Close any underlying client."""
        ...
