"""Prometheus metrics for the feedback portal."""

from prometheus_client import Counter, Histogram

# Counter for submitted feedback, by assigned label
FEEDBACK_SUBMITTED_TOTAL = Counter(
    'feedback_portal_feedback_submitted_total',
    'Total number of feedback items submitted by students',
    ['sentiment']
)

# Counter for faculty summary requests
STATS_REQUESTS_TOTAL = Counter(
    'feedback_portal_stats_requests_total',
    'Total number of sentiment summary computations served'
)

# Histogram for classification latency
CLASSIFICATION_LATENCY = Histogram(
    'feedback_portal_classification_latency_seconds',
    'Latency of classifying a single feedback text',
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1]
)
