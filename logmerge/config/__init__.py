from .app_config import AppConfig
from .log_config import LogConfig
from .merge_config import MergeConfig

__all__ = ["AppConfig", "LogConfig", "MergeConfig"]
