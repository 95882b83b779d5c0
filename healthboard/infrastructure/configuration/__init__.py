"""Configuration ownership and loading - Infrastructure layer."""

from .configuration_holder import ConfigurationHolder
from .dashboard_settings_loader import load_dashboard_configuration

__all__ = ["ConfigurationHolder", "load_dashboard_configuration"]
