from .errors import ConfigError
from .loader import load_config, resolve_config
from .models import ServiceConfig

__all__ = [
    "ConfigError",
    "ServiceConfig",
    "load_config",
    "resolve_config",
]
