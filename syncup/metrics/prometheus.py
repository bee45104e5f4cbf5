# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "syncup_requests_total",
    "Total HTTP requests to the kick-off service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "syncup_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "syncup_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
GROUPS_CREATED = Counter(
    "syncup_groups_created_total",
    "Total groups created",
)
MEMBERS_JOINED = Counter(
    "syncup_members_joined_total",
    "Total join attempts by outcome",
    ["outcome"],
)
QUESTIONNAIRES_SUBMITTED = Counter(
    "syncup_questionnaires_submitted_total",
    "Total questionnaires submitted (including resubmissions)",
)
GROUPS_FINALIZED = Counter(
    "syncup_groups_finalized_total",
    "Total groups finalized",
)
ALIGNMENT_COMPUTATIONS = Counter(
    "syncup_alignment_computations_total",
    "Total alignment analyses computed",
    ["conflict"],
)
ALIGNMENT_DURATION = Histogram(
    "syncup_alignment_duration_seconds",
    "Time to build a roster snapshot and run the alignment engine",
)
ACTIVE_GROUPS = Gauge(
    "syncup_active_groups",
    "Number of groups in the store",
)
SESSION_REJECTIONS = Counter(
    "syncup_session_rejections_total",
    "Requests rejected for a missing, invalid or stale session",
    ["reason"],
)
