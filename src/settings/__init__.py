"""Project configuration."""

from settings.config import (
    CONFIG_FILENAME,
    ConfigError,
    EtaCabalConfig,
    load_config,
    resolve_dist_dir,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "EtaCabalConfig",
    "load_config",
    "resolve_dist_dir",
]
