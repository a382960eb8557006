"""Monitoring and metrics instrumentation for the Entry Analysis Service."""

from entry_analysis.monitoring.metrics import (
    entries_processed_total,
    inference_failures_total,
    inference_latency_seconds,
    summary_fallbacks_total,
)

__all__ = [
    "inference_latency_seconds",
    "inference_failures_total",
    "summary_fallbacks_total",
    "entries_processed_total",
]
