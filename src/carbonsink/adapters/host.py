"""Host-side helpers for driving a sink from a collection process.

Sinks report transport failures as TransportError. Hosts that treat a
failed export as fatal can use export_or_exit.
"""

import logging
import sys

from carbonsink.core.exceptions import TransportError
from carbonsink.core.models import DataBatch
from carbonsink.core.ports import DataSinkPort

logger = logging.getLogger(__name__)


def export_or_exit(sink: DataSinkPort, batch: DataBatch, exit_code: int = 1) -> None:
    """Export a batch, terminating the process on transport failure.

    Args:
        sink: Sink to export with.
        batch: Batch to export.
        exit_code: Process exit status used on failure.

    Raises:
        SystemExit: If the sink raised TransportError.
    """
    try:
        sink.export_data(batch)
    except TransportError as e:
        logger.critical("%s: %s", sink.name, e)
        sys.exit(exit_code)
