"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Show lifecycle metrics
show_operations = Counter(
    'show_operations_total',
    'Show lifecycle operations',
    ['operation', 'result']  # create/update/delete/get/search x success/not_found/conflict/denied
)

future_booking_rejections = Counter(
    'show_future_booking_rejections_total',
    'Show mutations blocked because the show has future bookings',
    ['operation']  # update, delete
)

show_search_results = Histogram(
    'show_search_results',
    'Number of shows returned by a search',
    buckets=[0, 1, 2, 5, 10, 25, 50, 100]
)

# Booking metrics
booking_attempts = Counter(
    'booking_attempts_total',
    'Total booking attempts',
    ['status']  # success, conflict, not_found
)

# HTTP metrics
request_latency = Histogram(
    'http_request_latency_seconds',
    'HTTP request latency',
    ['method', 'status_code'],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_show_operation(operation: str, result: str):
    """Record a show lifecycle call. Result: success, not_found, conflict, denied"""
    show_operations.labels(operation=operation, result=result).inc()


def record_future_booking_rejection(operation: str):
    future_booking_rejections.labels(operation=operation).inc()


def record_booking_attempt(status: str):
    """Record booking attempt. Status: success, conflict, not_found"""
    booking_attempts.labels(status=status).inc()


def record_request(method: str, status_code: int, duration_seconds: float):
    request_latency.labels(method=method, status_code=str(status_code)).observe(duration_seconds)
