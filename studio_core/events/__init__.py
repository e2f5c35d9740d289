"""Calendar event aggregation."""

from .aggregator import EventAggregator, aggregate_project_events

__all__ = ["EventAggregator", "aggregate_project_events"]
