#!filepath: logmerge/config/merge_config.py
from typing import Optional

from pydantic import BaseModel, Field


class MergeConfig(BaseModel):
    source_count: int = Field(default=100, ge=0)
    max_fetch_delay_ms: int = Field(default=8, ge=0)
    # None: pipelined fetch 无超时（一直等待）
    fetch_timeout: Optional[float] = Field(default=None, gt=0)
    seed: Optional[int] = None
    echo: bool = True
