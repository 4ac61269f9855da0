"""Core app services for settings, page lookup, and logging."""

from .adapter import PageConfigAdapter
from .config import AppConfig, load_config, normalize_config_pages, save_config
from .logging_setup import configure_logging, get_logger, install_crash_hooks

__all__ = [
    "AppConfig",
    "PageConfigAdapter",
    "configure_logging",
    "get_logger",
    "install_crash_hooks",
    "load_config",
    "normalize_config_pages",
    "save_config",
]
