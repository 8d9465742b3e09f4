"""Carbon2 encoder for metric records."""

from collections.abc import Iterable

from carbonsink.core.models import Carbon2Metric

CONTENT_TYPE = "application/vnd.sumologic.carbon2"


def encode_metric(metric: Carbon2Metric) -> str:
    """Encode one record as a Carbon2 line, without the trailing newline.

    Every tag pair is followed by a space, and an extra space separates
    intrinsic tags from meta tags. An empty value leaves two adjacent
    spaces before the timestamp.

    Args:
        metric: The record to encode.

    Returns:
        Line such as "metric=cpu.usage node=n1  type=node 42 1702300000".
    """
    parts = [f"{k}={v} " for k, v in metric.intrinsic_tags.items()]
    parts.append(" ")
    parts.extend(f"{k}={v} " for k, v in metric.meta_tags.items())
    parts.append(f"{metric.value} {metric.timestamp}")
    return "".join(parts)


def encode_metrics(metrics: Iterable[Carbon2Metric]) -> str:
    """Encode records to newline-terminated Carbon2 lines.

    Args:
        metrics: An iterable of Carbon2Metric objects.

    Returns:
        Carbon2 payload with one line per record.
        Empty string if no records.
    """
    return "".join(f"{encode_metric(metric)}\n" for metric in metrics)
