# metrics_tracker.py

from collections import defaultdict
from typing import Dict


class Metrics:
    """Running sum/count per key, e.g. record("suggest_time", 0.0004)."""

    def __init__(self):
        self.m = defaultdict(float)
        self.n = defaultdict(int)

    def record(self, key: str, val: float) -> None:
        self.m[key] += val
        self.n[key] += 1

    def avg(self, key: str) -> float:
        if self.n[key] == 0: return 0.0
        return self.m[key] / self.n[key]

    def count(self, key: str) -> int:
        return self.n.get(key, 0)

    def summary(self) -> Dict[str, Dict[str, float]]:
        return {k: {"avg": self.avg(k), "count": self.n[k]} for k in self.m}
