"""Tag extraction from a single metric reading.

Splits the labels of a monitored entity into intrinsic tags, which identify
what a metric measures, and meta tags, which describe it.
"""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field

from carbonsink.core import labels as lbl
from carbonsink.core.models import Carbon2Metric, MetricValue, ValueType

logger = logging.getLogger(__name__)

_META_TYPES = {
    lbl.METRIC_SET_TYPE_POD_CONTAINER: "container",
    lbl.METRIC_SET_TYPE_SYSTEM_CONTAINER: "sys-container",
    lbl.METRIC_SET_TYPE_POD: "pod",
    lbl.METRIC_SET_TYPE_NAMESPACE: "namespace",
    lbl.METRIC_SET_TYPE_NODE: "node",
    lbl.METRIC_SET_TYPE_CLUSTER: "cluster",
}


@dataclass(frozen=True)
class MetricReading:
    """One named, timestamped value plus the labels of its entity.

    Attributes:
        name: Metric name, possibly "/"-separated (e.g., cpu/usage).
        value: The observed value.
        labels: Labels of the entity the metric was measured on.
        timestamp: Unix timestamp in seconds.
    """

    name: str
    value: MetricValue
    labels: Mapping[str, str] = field(default_factory=dict)
    timestamp: int = 0

    def _label(self, key: str) -> str:
        return self.labels.get(key, "")

    def metric_path(self) -> str:
        """Return the dotted metric path, with resourceId spliced in if present."""
        if lbl.LABEL_RESOURCE_ID in self.labels:
            section, *parts = self.name.split("/")
            path = ".".join([section, self.labels[lbl.LABEL_RESOURCE_ID], *parts])
        else:
            path = self.name
        return path.replace("/", ".")

    def intrinsic_tags(self) -> dict[str, str]:
        """Derive the tags identifying this metric.

        Returns:
            Mapping with a "metric" key and the identity tags of the
            entity's resource type. Missing labels yield empty values.
        """
        tags = {"metric": self.metric_path()}
        if lbl.LABEL_METRIC_SET_TYPE not in self.labels:
            return tags

        set_type = self.labels[lbl.LABEL_METRIC_SET_TYPE]
        if set_type == lbl.METRIC_SET_TYPE_POD_CONTAINER:
            tags["node"] = self._label(lbl.LABEL_HOSTNAME)
            tags["namespace"] = self._label(lbl.LABEL_NAMESPACE_NAME)
            tags["pod"] = self._label(lbl.LABEL_POD_NAME)
            tags["container"] = self._label(lbl.LABEL_CONTAINER_NAME)
        elif set_type == lbl.METRIC_SET_TYPE_SYSTEM_CONTAINER:
            tags["node"] = self._label(lbl.LABEL_HOSTNAME)
            tags["sys-containers"] = self._label(lbl.LABEL_CONTAINER_NAME)
        elif set_type == lbl.METRIC_SET_TYPE_POD:
            tags["node"] = self._label(lbl.LABEL_HOSTNAME)
            tags["namespace"] = self._label(lbl.LABEL_NAMESPACE_NAME)
            tags["pod"] = self._label(lbl.LABEL_POD_NAME)
        elif set_type == lbl.METRIC_SET_TYPE_NAMESPACE:
            tags["namespace"] = self._label(lbl.LABEL_NAMESPACE_NAME)
        elif set_type == lbl.METRIC_SET_TYPE_NODE:
            tags["node"] = self._label(lbl.LABEL_HOSTNAME)
        elif set_type != lbl.METRIC_SET_TYPE_CLUSTER:
            logger.info("Unknown metric type %s", set_type)
        return tags

    def meta_tags(self) -> dict[str, str]:
        """Derive descriptive tags from the label blob and the resource type.

        The "labels" label is read as "key:value" pairs separated by commas.
        Pairs that do not split into exactly two parts, or whose value is
        empty, are skipped.
        """
        tags: dict[str, str] = {}
        for pair in self._label(lbl.LABEL_LABELS).split(","):
            parts = pair.split(":")
            if len(parts) == 2 and parts[1] != "":
                tags[parts[0]] = parts[1]

        if lbl.LABEL_METRIC_SET_TYPE in self.labels:
            set_type = self.labels[lbl.LABEL_METRIC_SET_TYPE]
            if set_type in _META_TYPES:
                tags["type"] = _META_TYPES[set_type]
            else:
                logger.info("Unknown metric type %s", set_type)
        return tags

    def formatted_value(self) -> str:
        """Format the value: plain integer, fixed-point float, or empty."""
        if self.value.value_type is ValueType.INT64:
            return "%d" % self.value.int_value
        if self.value.value_type is ValueType.FLOAT:
            return _format_float(self.value.float_value)
        return ""

    def metric(self, dimensions: Mapping[str, str] | None = None) -> Carbon2Metric:
        """Assemble the Carbon2 record for this reading.

        Args:
            dimensions: Static tags overlaid onto both tag maps. They win
                over derived tags with the same key.

        Returns:
            Carbon2Metric with merged tags, formatted value and timestamp.
        """
        intrinsic = self.intrinsic_tags()
        meta = self.meta_tags()
        if dimensions:
            intrinsic.update(dimensions)
            meta.update(dimensions)
        return Carbon2Metric(
            intrinsic_tags=intrinsic,
            meta_tags=meta,
            value=self.formatted_value(),
            timestamp=self.timestamp,
        )


def _format_float(value: float) -> str:
    # Non-finite values are written as +Inf, -Inf and NaN.
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return "%f" % value
