#!filepath: logmerge/observability/timer.py
import time
from contextlib import contextmanager
from typing import Dict, Iterator


class Timer:
    """
    高精度计时器
    - start(name)
    - end(name) → 返回耗时秒数
    - measure(name) → with 块计时，结果写入 elapsed[name]
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._start: Dict[str, float] = {}
        self.elapsed: Dict[str, float] = {}

    def start(self, name: str):
        if not self.enabled:
            return
        self._start[name] = time.perf_counter()

    def end(self, name: str) -> float:
        if not self.enabled or name not in self._start:
            return 0.0
        elapsed = time.perf_counter() - self._start.pop(name)
        self.elapsed[name] = elapsed
        return elapsed

    @contextmanager
    def measure(self, name: str) -> Iterator[None]:
        self.start(name)
        try:
            yield
        finally:
            self.end(name)
