"""
Application Layer Package

This package contains the application-specific business rules
and use cases. It orchestrates the flow of data to and from
the domain entities and shapes it for the presentation layer.
"""

# Re-export submodules
from healthboard.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
