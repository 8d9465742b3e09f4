"""Sumo Logic sink exporting metric batches as Carbon2 over HTTP."""

import logging
import threading

from carbonsink.adapters.config import SinkConfig, parse_sink_uri
from carbonsink.adapters.transport import HttpTransport
from carbonsink.core.encoding.carbon2 import CONTENT_TYPE, encode_metrics
from carbonsink.core.models import Carbon2Metric, DataBatch
from carbonsink.core.ports import TransportPort
from carbonsink.core.tags import MetricReading

logger = logging.getLogger(__name__)


class SumoLogicSink:
    """DataSinkPort implementation posting Carbon2 lines to a Sumo Logic source.

    Exports are serialized by a lock owned by the sink, so at most one
    export (and one HTTP request) runs at a time per sink.

    Example:
        ```python
        sink = SumoLogicSink.from_uri(
            "https://collectors.sumologic.com/receiver/v1/http/TOKEN"
            "?dimensions=cluster=prod"
        )
        sink.export_data(batch)
        sink.stop()
        ```
    """

    def __init__(
        self,
        config: SinkConfig,
        transport: TransportPort | None = None,
    ) -> None:
        """Initialize the sink.

        Args:
            config: Endpoint and static tags.
            transport: Transport used for the POST. Defaults to a new
                HttpTransport.
        """
        self._config = config
        self._transport = transport if transport is not None else HttpTransport()
        self._lock = threading.Lock()

    @classmethod
    def from_uri(
        cls, uri: str, transport: TransportPort | None = None
    ) -> "SumoLogicSink":
        """Create a sink from a sink URI.

        Raises:
            ConfigurationError: If the URI query is malformed.
        """
        return cls(parse_sink_uri(uri), transport=transport)

    @property
    def name(self) -> str:
        return "Sumo Logic Sink"

    @property
    def config(self) -> SinkConfig:
        return self._config

    def stop(self) -> None:
        """Log shutdown. Exports after stop still work.

        The transport is left open; every request already closes its
        connection.
        """
        logger.info("stopping Sumo Logic Sink")

    def build_metrics(self, batch: DataBatch) -> list[Carbon2Metric]:
        """Turn every metric of a batch into a Carbon2 record.

        Labeled metrics without a value are skipped. Labeled metric labels
        override the labels of their metric set.

        Args:
            batch: Batch to convert.

        Returns:
            Records in batch iteration order.
        """
        timestamp = int(batch.timestamp.timestamp())
        dimensions = self._config.dimensions
        metrics: list[Carbon2Metric] = []
        for metric_set in batch.metric_sets.values():
            for name, value in metric_set.metric_values.items():
                reading = MetricReading(
                    name=name,
                    value=value,
                    labels=metric_set.labels,
                    timestamp=timestamp,
                )
                metrics.append(reading.metric(dimensions))
            for labeled_metric in metric_set.labeled_metrics:
                if labeled_metric.get_value() is None:
                    continue
                reading = MetricReading(
                    name=labeled_metric.name,
                    value=labeled_metric.value,
                    labels={**metric_set.labels, **labeled_metric.labels},
                    timestamp=timestamp,
                )
                metrics.append(reading.metric(dimensions))
        return metrics

    def export_data(self, batch: DataBatch) -> None:
        """Export a batch as one Carbon2 POST.

        A non-200 response is logged and otherwise ignored.

        Raises:
            TransportError: If the request cannot be built or sent.
        """
        with self._lock:
            metrics = self.build_metrics(batch)
            logger.info("Sending %d metrics to Sumo Logic", len(metrics))
            self._send(metrics)

    def _send(self, metrics: list[Carbon2Metric]) -> None:
        payload = encode_metrics(metrics).encode()
        status_code, body = self._transport.post(
            self._config.url, payload, {"Content-Type": CONTENT_TYPE}
        )
        if status_code != 200:
            logger.error(
                "unable to send data to Sumo Logic, got back status code %d. "
                "response:%s",
                status_code,
                body,
            )


def create_sink(uri: str, transport: TransportPort | None = None) -> SumoLogicSink:
    """Create a Sumo Logic sink from its URI.

    Raises:
        ConfigurationError: If the URI query is malformed.
    """
    return SumoLogicSink.from_uri(uri, transport=transport)
