from .app_config import AppConfig, get_config
from .log_config import LogConfig
from .network_config import NetworkConfig

__all__ = ["AppConfig", "get_config", "LogConfig", "NetworkConfig"]
