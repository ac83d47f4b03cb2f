"""
Prometheus metrics for system monitoring.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

registry = CollectorRegistry()


# Job lifecycle metrics
JOBS_POSTED = Counter(
    "jobs_posted_total",
    "Total number of jobs posted by clients",
    ["trade"],
    registry=registry,
)

JOB_TRANSITIONS = Counter(
    "job_transitions_total",
    "Job lifecycle actions by outcome",
    ["action", "outcome"],
    registry=registry,
)

APPLICATIONS_SUBMITTED = Counter(
    "job_applications_submitted_total",
    "Total number of applications submitted by tradespeople",
    ["trade"],
    registry=registry,
)

REVIEWS_RECORDED = Counter(
    "job_reviews_recorded_total",
    "Total number of reviews recorded",
    ["reviewer_type", "rating"],
    registry=registry,
)

QUOTE_REQUEST_TRANSITIONS = Counter(
    "quote_request_transitions_total",
    "Quote request status changes",
    ["status"],
    registry=registry,
)

# API metrics
API_REQUESTS = Counter(
    "api_requests_total",
    "Total number of API requests",
    ["method", "endpoint", "status_code"],
    registry=registry,
)

API_REQUEST_DURATION = Histogram(
    "api_request_duration_seconds",
    "Time spent processing API requests",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0],
    registry=registry,
)

# Error metrics
ERRORS_TOTAL = Counter(
    "errors_total",
    "Total number of errors",
    ["error_type", "component"],
    registry=registry,
)

RATE_LIMIT_HITS = Counter(
    "rate_limit_hits_total",
    "Total number of rate limit hits",
    registry=registry,
)


def record_job_posted(trade: str):
    """Record job posting metric."""
    JOBS_POSTED.labels(trade=trade.lower()).inc()


def record_job_transition(action: str, outcome: str):
    """Record the outcome of a lifecycle action ("allowed" or "rejected")."""
    JOB_TRANSITIONS.labels(action=action, outcome=outcome).inc()


def record_application(trade: str):
    APPLICATIONS_SUBMITTED.labels(trade=trade.lower()).inc()


def record_review(reviewer_type: str, rating: int):
    REVIEWS_RECORDED.labels(reviewer_type=reviewer_type, rating=str(rating)).inc()


def record_quote_request_status(status: str):
    QUOTE_REQUEST_TRANSITIONS.labels(status=status).inc()


def record_api_request(method: str, endpoint: str, status_code: int, duration: float):
    """Record API request count and latency."""
    API_REQUESTS.labels(method=method, endpoint=endpoint, status_code=status_code).inc()
    API_REQUEST_DURATION.labels(method=method, endpoint=endpoint).observe(duration)


def record_error(error_type: str, component: str):
    """Record error metric."""
    ERRORS_TOTAL.labels(error_type=error_type, component=component).inc()


def record_rate_limit_hit():
    RATE_LIMIT_HITS.inc()


def get_metrics():
    """Get all metrics in Prometheus format."""
    return generate_latest(registry)


def get_metrics_content_type():
    """Get the content type for metrics."""
    return CONTENT_TYPE_LATEST
