"""Prometheus metrics for donation volume, amounts and rejections"""

from prometheus_client import Counter, Histogram

# Donation metrics
donation_counter = Counter(
    "noel_donation_total",
    "Donations accepted by the intake service",
    ["donation_type", "payment_method"],
)

donation_amount_histogram = Histogram(
    "noel_donation_amount_euros",
    "Accepted donation amounts",
    buckets=[10, 20, 50, 100, 200, 500, 1000, 5000],
)

donation_rejected_counter = Counter(
    "noel_donation_rejected_total",
    "Submissions refused at the API boundary",
    ["reason"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_donation(donation_type: str, payment_method: str, amount: float) -> None:
    """Record an accepted donation"""
    donation_counter.labels(donation_type=donation_type, payment_method=payment_method).inc()
    donation_amount_histogram.observe(amount)


def record_rejection(reason: str) -> None:
    """Record a rejected submission, labelled by the reason returned to the caller"""
    donation_rejected_counter.labels(reason=reason).inc()
