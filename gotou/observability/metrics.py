"""
Metrics definitions for GoToU.

This module defines Prometheus metrics for monitoring
the warning feed and the class suspension decisions.
"""

from prometheus_client import Counter, Histogram, Gauge

# 카운터 메트릭
feed_fetches = Counter(
    "warning_feed_fetches_total",
    "Number of warning feed fetches",
    ["result"]
)

clock_fallbacks = Counter(
    "clock_fallbacks_total",
    "Number of times the system clock was used instead of the time API"
)

evaluations = Counter(
    "decision_evaluations_total",
    "Number of class suspension evaluations",
    ["tier"]
)

# 히스토그램 메트릭
evaluate_seconds = Histogram(
    "evaluate_duration_seconds",
    "Time spent evaluating the decision",
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1]
)

feed_fetch_seconds = Histogram(
    "warning_feed_fetch_duration_seconds",
    "Time spent fetching the warning feed",
    buckets=[0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0]
)

# 게이지 메트릭
current_tier = Gauge(
    "current_tier",
    "Current suspension tier (0=none, 1=morning, 2=afternoon, 3=all)",
    ["university"]
)

pending = Gauge(
    "decision_pending",
    "1 if a critical warning is in force but no checkpoint is reached",
    ["university"]
)

uptime_seconds = Gauge(
    "uptime_seconds",
    "Service uptime in seconds"
)
