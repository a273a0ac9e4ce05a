"""Prometheus metrics for monitoring acceptance rates, rejection reasons, and bureau health"""

from prometheus_client import Counter, Histogram
from eligibility_gateway.domain import eligibility
from eligibility_gateway.domain.models import EligibilityResponse

# Decision metrics
decision_counter = Counter(
    "eligibility_decision_total",
    "Total eligibility checks completed",
    ["outcome"],  # accepted | declined
)

rejection_counter = Counter(
    "eligibility_rejection_total",
    "Eligibility errors by reason",
    ["reason"],  # missing_name | missing_address | missing_ni_number | underage | low_credit_score
)

credit_score_histogram = Histogram(
    "credit_score",
    "Credit scores returned by the bureau",
    buckets=[300, 400, 500, 600, 700, 800, 900],
)

# Credit bureau metrics
credit_bureau_failures_counter = Counter(
    "credit_bureau_failures_total",
    "Failed credit bureau calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)

_REJECTION_REASONS = {
    eligibility.NAME_EMPTY: "missing_name",
    eligibility.ADDRESS_EMPTY: "missing_address",
    eligibility.NI_NUMBER_EMPTY: "missing_ni_number",
    eligibility.CREDIT_SCORE_TOO_LOW: "low_credit_score",
}


def rejection_reason(message: str) -> str:
    """Map an error message to a low-cardinality metric label"""
    if message in _REJECTION_REASONS:
        return _REJECTION_REASONS[message]
    if message.startswith(eligibility.UNDERAGE.partition("{")[0]):
        return "underage"
    return "other"


def record_eligibility(response: EligibilityResponse) -> None:
    """Record decision metrics for monitoring acceptance rates and rejection reasons"""
    outcome = "accepted" if response.accepted else "declined"
    decision_counter.labels(outcome=outcome).inc()

    for message in response.errors:
        rejection_counter.labels(reason=rejection_reason(message)).inc()

    if response.scored:
        credit_score_histogram.observe(response.credit_score)
