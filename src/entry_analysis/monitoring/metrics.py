"""Custom Prometheus metrics for the Entry Analysis Service.

Exposed at /metrics. Alert rules worth configuring:
- inference_failures_total (upstream model outages, credential problems)
- summary_fallbacks_total (summary model degraded)
"""

from prometheus_client import Counter, Histogram

# === Inference Metrics ===

inference_latency_seconds = Histogram(
    "inference_latency_seconds",
    "Hosted inference call latency in seconds",
    ["model", "success"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
)
"""
Latency of a single model call.

Labels:
- model: Model identifier
- success: true (parsed JSON returned), false (InferenceError raised)

Cold models on the hosted API can take several seconds on first call.
"""

inference_failures_total = Counter(
    "inference_failures_total",
    "Failed inference calls by model and failure kind",
    ["model", "kind"],
)
"""
Labels:
- model: Model identifier
- kind: transport, malformed_response, remote_error
"""

# === Pipeline Metrics ===

summary_fallbacks_total = Counter(
    "summary_fallbacks_total",
    "Summaries replaced by truncated entry text",
    ["reason"],
)
"""
Labels:
- reason: inference_error (summary call failed), empty (no summary text in response)
"""

entries_processed_total = Counter(
    "entries_processed_total",
    "Processed entries by outcome",
    ["status"],
)
