# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "incident_desk_requests_total",
    "Total HTTP requests to the incident desk",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "incident_desk_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "incident_desk_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
INCIDENTS_CREATED = Counter(
    "incidents_created_total",
    "Total incidents created",
)
INCIDENT_UPDATES = Counter(
    "incident_updates_total",
    "Total triage updates applied to incidents",
)
NOTES_ADDED = Counter(
    "incident_notes_added_total",
    "Total investigation notes appended",
)
INCIDENTS_TRACKED = Gauge(
    "incidents_tracked",
    "Number of incidents currently held in memory",
)
