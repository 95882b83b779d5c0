"""Domain services package."""

from .health_metadata_parser import (
    parse_health_metadata,
    parse_health_status,
    parse_timestamp,
    parse_uptime,
)

__all__ = [
    "parse_health_metadata",
    "parse_health_status",
    "parse_timestamp",
    "parse_uptime",
]
