"""Prometheus metrics configuration"""

from prometheus_client import Counter, Info
from prometheus_fastapi_instrumentator import Instrumentator

from ..config import settings

# Application info
app_info = Info('locations_api', 'User Locations API Information')
app_info.info({
    'version': settings.VERSION,
    'service': 'locations-api'
})

# Registration metrics
registrations_total = Counter(
    'registrations_total',
    'User registration attempts',
    ['outcome']
)

# Location / preference metrics
user_mutations_total = Counter(
    'user_mutations_total',
    'Targeted updates applied to user records',
    ['operation', 'outcome']
)


def setup_metrics(app):
    """
    Expose request metrics on /metrics

    Instrumentation stays off unless ENABLE_METRICS=true.
    """
    instrumentator = Instrumentator(
        should_respect_env_var=True,
        env_var_name="ENABLE_METRICS",
        excluded_handlers=["/metrics"]
    )

    instrumentator.instrument(app).expose(app, endpoint="/metrics")

    return instrumentator


def record_registration(outcome: str):
    """Record a registration attempt (created, invalid, duplicate, error)"""
    registrations_total.labels(outcome=outcome).inc()


def record_mutation(operation: str, outcome: str):
    """Record a location or preference mutation"""
    user_mutations_total.labels(operation=operation, outcome=outcome).inc()
