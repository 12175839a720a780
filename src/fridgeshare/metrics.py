"""Prometheus metrics definitions for FridgeShare."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "fridgeshare_http_requests_total",
    "Total number of HTTP requests processed by the FridgeShare API",
    ["method", "path", "status"],
)

REQUEST_LATENCY = Histogram(
    "fridgeshare_http_request_duration_seconds",
    "Latency of HTTP requests processed by the FridgeShare API",
    ["method", "path"],
)

CLAIMS_CREATED = Counter(
    "fridgeshare_claims_created_total",
    "Number of claims opened on available items",
)

CLAIM_DECISIONS = Counter(
    "fridgeshare_claim_decisions_total",
    "Number of claim decisions recorded by item owners",
    ["decision"],
)

GROUP_MESSAGES = Counter(
    "fridgeshare_group_messages_total",
    "Number of chat messages posted to friend groups",
)

__all__ = [
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "CLAIMS_CREATED",
    "CLAIM_DECISIONS",
    "GROUP_MESSAGES",
]
