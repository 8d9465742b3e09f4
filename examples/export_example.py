"""Example host driving a Sumo Logic sink on a fixed interval.

Run with:
    SUMO_URI="https://collectors.sumologic.com/receiver/v1/http/TOKEN?dimensions=cluster=dev" \
        python examples/export_example.py

Each tick builds a small batch for one node and one pod container and
exports it. A transport failure terminates the process.
"""

import logging
import os
import random
import time
from datetime import UTC, datetime

from carbonsink import DataBatch, MetricSet, create_sink, export_or_exit
from carbonsink.core.metrics import float_value, int_value, labeled


def build_batch() -> DataBatch:
    """Collect a fake batch for one node and one container."""
    node = MetricSet(
        labels={"type": "node", "hostname": "node-1"},
        metric_values={
            "cpu/usage_rate": int_value(random.randint(100, 900)),
            "memory/usage": int_value(random.randint(2**30, 2**32)),
        },
        labeled_metrics=[
            labeled(
                "filesystem/usage",
                random.randint(2**30, 2**34),
                {"resourceId": "/dev/sda1"},
            ),
        ],
    )
    container = MetricSet(
        labels={
            "type": "pod_container",
            "hostname": "node-1",
            "namespace_name": "default",
            "pod_name": "web-0",
            "container_name": "nginx",
            "labels": "app:web,tier:frontend",
        },
        metric_values={"cpu/limit": float_value(0.5)},
    )
    return DataBatch(
        timestamp=datetime.now(UTC),
        metric_sets={
            "node:node-1": node,
            "namespace:default/pod:web-0/container:nginx": container,
        },
    )


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    sink = create_sink(os.environ["SUMO_URI"])
    try:
        for _ in range(3):
            export_or_exit(sink, build_batch())
            time.sleep(10)
    finally:
        sink.stop()


if __name__ == "__main__":
    main()
