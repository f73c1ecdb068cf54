from __future__ import annotations

from .load import load_config
from .schema import AppConfig, EnvOverrides, StationSettings

__all__ = ["AppConfig", "EnvOverrides", "StationSettings", "load_config"]
