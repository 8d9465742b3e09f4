"""Sink adapters implementing DataSinkPort."""

from carbonsink.adapters.sinks.sumologic import SumoLogicSink, create_sink

__all__ = ["SumoLogicSink", "create_sink"]
