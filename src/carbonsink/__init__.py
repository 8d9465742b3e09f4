"""carbonsink - export metric batches to Sumo Logic as Carbon2."""

from carbonsink.adapters.config import SinkConfig, parse_sink_uri
from carbonsink.adapters.host import export_or_exit
from carbonsink.adapters.sinks.sumologic import SumoLogicSink, create_sink
from carbonsink.adapters.transport import HttpTransport
from carbonsink.core.exceptions import (
    CarbonSinkError,
    ConfigurationError,
    TransportError,
)
from carbonsink.core.models import (
    Carbon2Metric,
    DataBatch,
    LabeledMetric,
    MetricSet,
    MetricValue,
    ValueType,
)
from carbonsink.core.tags import MetricReading

__all__ = [
    "CarbonSinkError",
    "Carbon2Metric",
    "ConfigurationError",
    "DataBatch",
    "HttpTransport",
    "LabeledMetric",
    "MetricReading",
    "MetricSet",
    "MetricValue",
    "SinkConfig",
    "SumoLogicSink",
    "TransportError",
    "ValueType",
    "create_sink",
    "export_or_exit",
    "parse_sink_uri",
]
