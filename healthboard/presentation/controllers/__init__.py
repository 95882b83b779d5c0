"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers are responsible for
input validation, error handling, and mapping between API DTOs
and application layer use cases.
"""

from .configuration_controller import router as configuration_router
from .health_controller import router as health_router

__all__ = ["configuration_router", "health_router"]
