# keyboard_autocompleter/utils/__init__.py
# logging, config and metrics helpers

from .logger_utils import Log
from .config_manager import Config, ConfigError
from .metrics_tracker import Metrics

__all__ = ["Log", "Config", "ConfigError", "Metrics"]
