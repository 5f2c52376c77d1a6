from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response
import logging

logger = logging.getLogger("MetricsService")

REQUEST_COUNT = Counter(
    "investours_requests_total",
    "Total AI service requests",
    ["endpoint", "status"]
)

LATENCY_HISTOGRAM = Histogram(
    "investours_latency_seconds",
    "Latency of AI service components in seconds",
    ["component"]
)

ERROR_COUNT = Counter(
    "investours_errors_total",
    "Total AI service errors",
    ["component", "error_type"]
)

EXTRACTION_COUNT = Counter(
    "investours_extraction_total",
    "Model replies by extraction outcome",
    ["mode", "outcome"]
)

class MetricsService:
    @staticmethod
    def record_latency(component: str, duration: float):
        LATENCY_HISTOGRAM.labels(component=component).observe(duration)

    @staticmethod
    def record_error(component: str, error_type: str):
        ERROR_COUNT.labels(component=component, error_type=error_type).inc()

    @staticmethod
    def record_request(endpoint: str, status: int):
        REQUEST_COUNT.labels(endpoint=endpoint, status=str(status)).inc()

    @staticmethod
    def record_extraction(mode: str, outcome: str):
        EXTRACTION_COUNT.labels(mode=mode, outcome=outcome).inc()

def metrics_endpoint():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
