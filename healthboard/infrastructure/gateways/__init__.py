"""
Gateways Package - Infrastructure Layer

This package contains concrete implementations of the transport
interfaces defined in the domain layer.
"""

from .health_http_client import DEFAULT_USER_AGENT, HttpxHealthHttpClient

__all__ = ["DEFAULT_USER_AGENT", "HttpxHealthHttpClient"]
