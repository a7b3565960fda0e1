"""Prometheus metrics for the Text Moderation Gateway."""

from moderation_gateway.monitoring.metrics import (
    inference_errors_total,
    inference_latency_seconds,
    validation_failures_total,
    verdicts_total,
)

__all__ = [
    "validation_failures_total",
    "inference_latency_seconds",
    "inference_errors_total",
    "verdicts_total",
]
