"""Core infrastructure: settings, logging and errors."""

from automl_video_explorer.core.errors import (
    ConfigError,
    ExplorerError,
    InvalidArgumentError,
    NotFoundError,
    RemoteCallError,
)
from automl_video_explorer.core.logging import setup_logging
from automl_video_explorer.core.settings import ExplorerSettings, load_settings

__all__ = [
    "ConfigError",
    "ExplorerError",
    "ExplorerSettings",
    "InvalidArgumentError",
    "NotFoundError",
    "RemoteCallError",
    "load_settings",
    "setup_logging",
]
