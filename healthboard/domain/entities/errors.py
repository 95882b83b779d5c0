"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ServiceNotFoundError(DomainError):
    """Raised when a configured service cannot be found."""

    def __init__(
        self,
        service_name: str,
        environment: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        if environment is None:
            message = f"Service '{service_name}' not found"
        else:
            message = (
                f"Service '{service_name}' in environment '{environment}' not found"
            )
        super().__init__(message, details)


class ServiceAlreadyExistsError(DomainError):
    """Raised when adding a service whose name and environment are taken."""

    def __init__(
        self,
        service_name: str,
        environment: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Service '{service_name}' already exists in environment '{environment}'"
        )
        super().__init__(message, details)


class ConfigurationValidationError(DomainError):
    """Raised when a configuration or service definition is invalid."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class HealthMetadataParseError(DomainError):
    """Raised when a health response body cannot be turned into metadata."""


class EmptyResponseBodyError(HealthMetadataParseError):
    """Raised when a health response body is empty or whitespace."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("Empty response body", details)


class InvalidHealthMetadataError(HealthMetadataParseError):
    """Raised when a health response body is not valid health metadata."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
