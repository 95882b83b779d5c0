"""Infrastructure services package."""

from .health_check_service import HealthCheckService, ProbeCancelledError

__all__ = ["HealthCheckService", "ProbeCancelledError"]
