"""Metric helper functions for creating MetricValue and LabeledMetric objects."""

from carbonsink.core.models import LabeledMetric, MetricValue, ValueType


def int_value(value: int, metric_type: str = "") -> MetricValue:
    """Create an integer metric value.

    Args:
        value: Observed value
        metric_type: Optional metric kind (e.g., "cumulative")

    Returns:
        MetricValue of type INT64
    """
    return MetricValue(
        value_type=ValueType.INT64,
        int_value=value,
        metric_type=metric_type,
    )


def float_value(value: float, metric_type: str = "") -> MetricValue:
    """Create a floating-point metric value.

    Args:
        value: Observed value
        metric_type: Optional metric kind (e.g., "gauge")

    Returns:
        MetricValue of type FLOAT
    """
    return MetricValue(
        value_type=ValueType.FLOAT,
        float_value=value,
        metric_type=metric_type,
    )


def labeled(
    name: str,
    value: int | float | MetricValue,
    labels: dict[str, str] | None = None,
) -> LabeledMetric:
    """Create a labeled metric.

    Plain ints become INT64 values and plain floats become FLOAT values.

    Args:
        name: Metric name (e.g., "filesystem/usage")
        value: Observed value or a prebuilt MetricValue
        labels: Optional per-metric labels

    Returns:
        LabeledMetric wrapping the value
    """
    if isinstance(value, MetricValue):
        metric_value = value
    elif isinstance(value, int):
        metric_value = int_value(value)
    else:
        metric_value = float_value(value)
    return LabeledMetric(name=name, value=metric_value, labels=labels or {})
