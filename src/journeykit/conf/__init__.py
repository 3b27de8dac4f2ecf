"""Configuration helpers for journeykit."""

from .models import DEFAULTS, JourneyKitSettings
from .settings import CONFIG_ENVVAR, Settings, select_keys

__all__ = ["CONFIG_ENVVAR", "DEFAULTS", "JourneyKitSettings", "Settings", "select_keys"]
