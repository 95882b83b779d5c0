"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Use cases orchestrate the flow of data between the
configuration store, the health check engine and the DTOs.
"""

from .configuration_use_cases import (
    AddServiceUseCase,
    DeleteServiceUseCase,
    GetConfigurationUseCase,
    UpdateConfigurationUseCase,
    UpdateServiceUseCase,
)
from .health_use_cases import GetAllHealthUseCase, GetServiceHealthUseCase

__all__ = [
    "GetAllHealthUseCase",
    "GetServiceHealthUseCase",
    "GetConfigurationUseCase",
    "UpdateConfigurationUseCase",
    "AddServiceUseCase",
    "UpdateServiceUseCase",
    "DeleteServiceUseCase",
]
