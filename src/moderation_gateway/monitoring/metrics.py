"""Custom Prometheus metrics for the Text Moderation Gateway.

These metrics are exposed at /metrics endpoint and should be scraped by Prometheus.
Alert rules should be configured for:
- inference_errors_total (auth failures or model removal need operator action)
- inference_latency_seconds (cold starts with wait_for_model show up here)
"""

from prometheus_client import Counter, Histogram

# === Validation Metrics ===

validation_failures_total = Counter(
    "validation_failures_total",
    "Total rejected analysis payloads by validation kind",
    ["kind"],
)
"""
Validation failures counter.

Labels:
- kind: InvalidType, TooLong
"""

# === Inference Metrics ===

inference_latency_seconds = Histogram(
    "inference_latency_seconds",
    "Upstream inference call latency in seconds",
    ["model", "outcome"],
    buckets=(0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0),
)
"""
Upstream latency histogram.

Labels:
- model: configured model identifier
- outcome: success, or the InferenceErrorKind value of the failure
"""

inference_errors_total = Counter(
    "inference_errors_total",
    "Total upstream inference failures by error kind",
    ["kind"],
)
"""
Inference failures counter.

Labels:
- kind: TransportError, ModelLoading, ModelUnavailable, AuthenticationFailed,
  UpstreamError, MalformedResponse

Alert thresholds:
- CRITICAL: any AuthenticationFailed or ModelUnavailable (configuration must change)
- WARN: ModelLoading rate > 10% of requests
"""

# === Verdict Distribution ===

verdicts_total = Counter(
    "verdicts_total",
    "Total derived verdicts by value",
    ["verdict"],
)
"""
Verdict distribution counter.

Labels:
- verdict: Hate Speech, No Hate, Neutral

A sudden shift in distribution can indicate a model swap or input drift.
"""
