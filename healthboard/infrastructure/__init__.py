"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as HTTP transport
and configuration files.
"""

from healthboard.infrastructure import configuration, gateways, services

__all__ = ["configuration", "gateways", "services"]
