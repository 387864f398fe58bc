from .factory import build_log_sink, build_store
from .loader import ConfigError, load_store_config, load_yaml_config, parse_store_config
from .models import LoggingSection, StoreConfig, StoreSection

__all__ = [
    "ConfigError",
    "LoggingSection",
    "StoreConfig",
    "StoreSection",
    "build_log_sink",
    "build_store",
    "load_store_config",
    "load_yaml_config",
    "parse_store_config",
]
