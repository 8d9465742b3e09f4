"""Core domain models for metric batches and Carbon2 records."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class ValueType(Enum):
    """Kind of number carried by a MetricValue."""

    INT64 = "int64"
    FLOAT = "float"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class MetricValue:
    """A single numeric observation as produced by the collection pipeline.

    Attributes:
        value_type: Which of the value fields is meaningful.
        int_value: The value when value_type is INT64.
        float_value: The value when value_type is FLOAT.
        metric_type: Free-form kind of metric (e.g., gauge, cumulative).
    """

    value_type: ValueType
    int_value: int = 0
    float_value: float = 0.0
    metric_type: str = ""

    def get_value(self) -> int | float | None:
        """Return the meaningful value, or None for an unknown value type."""
        if self.value_type is ValueType.INT64:
            return self.int_value
        if self.value_type is ValueType.FLOAT:
            return self.float_value
        return None


@dataclass(frozen=True)
class LabeledMetric:
    """A metric carrying its own labels on top of its metric set's labels.

    Attributes:
        name: Metric name (e.g., filesystem/usage).
        value: The observed value.
        labels: Per-metric labels, overriding metric set labels on collision.
    """

    name: str
    value: MetricValue
    labels: dict[str, str] = field(default_factory=dict)

    def get_value(self) -> int | float | None:
        return self.value.get_value()


@dataclass(frozen=True)
class MetricSet:
    """All readings collected for one monitored entity.

    Attributes:
        labels: Labels describing the entity (type, hostname, pod_name, ...).
        metric_values: Simple metrics keyed by metric name.
        labeled_metrics: Metrics that carry additional labels.
    """

    labels: dict[str, str] = field(default_factory=dict)
    metric_values: dict[str, MetricValue] = field(default_factory=dict)
    labeled_metrics: list[LabeledMetric] = field(default_factory=list)


@dataclass(frozen=True)
class DataBatch:
    """One export cycle worth of metric sets sharing a timestamp.

    Attributes:
        timestamp: Collection time of every metric in the batch.
        metric_sets: Metric sets keyed by entity key.
    """

    timestamp: datetime
    metric_sets: dict[str, MetricSet] = field(default_factory=dict)


@dataclass(frozen=True)
class Carbon2Metric:
    """A single Carbon2 wire record.

    Attributes:
        intrinsic_tags: Tags identifying what is measured.
        meta_tags: Descriptive tags, keyed independently of intrinsic_tags.
        value: Formatted value string (may be empty).
        timestamp: Unix timestamp in seconds.
    """

    intrinsic_tags: dict[str, str]
    meta_tags: dict[str, str]
    value: str
    timestamp: int
