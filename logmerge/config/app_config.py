#!filepath: logmerge/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .log_config import LogConfig
from .merge_config import MergeConfig


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    logmerge/config/app_config.py → logmerge/config → logmerge → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    merge: MergeConfig = MergeConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用包内 logmerge/config/base.yml
        - LOGMERGE_LOG_LEVEL / LOGMERGE_LOG_DIR 覆盖 log 段
        """
        # 1) 先加载 .env（在项目根目录下）
        load_dotenv(os.path.join(project_root(), ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) 从 env 注入 log 覆盖
        log_raw = dict(raw.get("log") or {})
        if os.getenv("LOGMERGE_LOG_LEVEL"):
            log_raw["level"] = os.getenv("LOGMERGE_LOG_LEVEL")
        if os.getenv("LOGMERGE_LOG_DIR"):
            log_raw["dir"] = os.getenv("LOGMERGE_LOG_DIR")
        raw["log"] = log_raw
        raw["merge"] = raw.get("merge") or {}

        return cls(**raw)
