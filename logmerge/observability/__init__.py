from .metrics import MetricRecorder
from .timer import Timer

__all__ = ["MetricRecorder", "Timer"]
