"""Thread-safe usage counters for the classifier."""

import threading
from dataclasses import asdict, dataclass

from nlu.catalog import Intent


@dataclass
class StatisticsSnapshot:
    """Point-in-time copy of the counters."""

    total_queries: int = 0
    successful_queries: int = 0
    creation_queries: int = 0
    guidance_queries: int = 0
    total_time_ms: float = 0.0

    @property
    def average_time_ms(self) -> float:
        if not self.total_queries:
            return 0.0
        return self.total_time_ms / self.total_queries

    @property
    def success_rate(self) -> float:
        if not self.total_queries:
            return 0.0
        return self.successful_queries / self.total_queries

    def to_dict(self) -> dict:
        data = asdict(self)
        data["average_time_ms"] = self.average_time_ms
        data["success_rate"] = self.success_rate
        return data


class UsageStatistics:
    """Counts classifications. Each call is merged under a lock."""

    def __init__(self):
        self._lock = threading.Lock()
        self._counts = StatisticsSnapshot()

    def record(self, intent: Intent, elapsed_ms: float):
        with self._lock:
            self._counts.total_queries += 1
            self._counts.total_time_ms += elapsed_ms
            if intent is not Intent.UNKNOWN:
                self._counts.successful_queries += 1
            if intent is Intent.CREATE_CONTRACT:
                self._counts.creation_queries += 1
            elif intent is Intent.GUIDE_CONTRACT:
                self._counts.guidance_queries += 1

    def snapshot(self) -> StatisticsSnapshot:
        with self._lock:
            return StatisticsSnapshot(**asdict(self._counts))

    def reset(self):
        with self._lock:
            self._counts = StatisticsSnapshot()
