"""
Metrics definitions for Climate Monitor.

This module defines Prometheus metrics for monitoring
the reading validation and alert evaluation pipeline.
"""

from prometheus_client import Counter, Histogram

# 카운터 메트릭
readings_received = Counter(
    "readings_received_total",
    "Number of device readings received"
)

readings_rejected = Counter(
    "readings_rejected_total",
    "Number of readings rejected by a validation gate",
    ["reason"]
)

readings_evaluated = Counter(
    "readings_evaluated_total",
    "Number of readings that reached alert evaluation"
)

alerts_raised = Counter(
    "alerts_raised_total",
    "Number of alerts produced by evaluation",
    ["kind"]
)

# 히스토그램 메트릭
evaluation_seconds = Histogram(
    "evaluation_duration_seconds",
    "Time spent validating and evaluating a reading",
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5]
)
