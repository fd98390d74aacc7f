"""Hospitality performance metrics calculator.

Pure functions only: no I/O, no logging, no shared state. The API and the
seed script both derive stored columns through this package.
"""

from revportal.metrics.aggregation import (
    ChannelSummary,
    ChannelTotals,
    aggregate_by_channel,
    average,
    calculate_variance,
    channel_totals,
    index_band,
)
from revportal.metrics.errors import DivisionByZeroError, InvalidInputError, MetricsError
from revportal.metrics.performance import (
    SCENARIOS,
    DerivedMetrics,
    IndexSet,
    PerformanceInputs,
    compute_indices,
    compute_revpar,
    derive_performance,
)
from revportal.metrics.rounding import round2

__all__ = [
    "SCENARIOS",
    "ChannelSummary",
    "ChannelTotals",
    "DerivedMetrics",
    "DivisionByZeroError",
    "IndexSet",
    "InvalidInputError",
    "MetricsError",
    "PerformanceInputs",
    "aggregate_by_channel",
    "average",
    "calculate_variance",
    "channel_totals",
    "compute_indices",
    "compute_revpar",
    "derive_performance",
    "index_band",
    "round2",
]
