"""Bounded in-memory history of resource samples."""

import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Deque, Dict, List, Optional

from .config import HISTORY_CAPACITY, MetricName


@dataclass(frozen=True)
class Sample:
    """One snapshot of resource utilization.

    Values are trusted as given; range checks are the caller's job.
    """

    cpu_usage: float = 0.0
    memory_usage: float = 0.0
    task_queue_size: float = 0.0
    active_agents: float = 0.0
    request_rate: float = 0.0
    avg_response_time: float = 0.0
    error_rate: float = 0.0
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        # Naive timestamps are taken as UTC so window cutoffs can compare them
        if self.timestamp.tzinfo is None:
            object.__setattr__(self, "timestamp", self.timestamp.replace(tzinfo=timezone.utc))

    def value(self, metric: MetricName) -> float:
        return float(getattr(self, metric.attribute))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {m.value: self.value(m) for m in MetricName}
        data["timestamp"] = self.timestamp.isoformat()
        return data


class SampleStore:
    """Chronological sample history with FIFO eviction.

    Holds at most ``capacity`` samples; appending past that drops the
    oldest. Readers get list snapshots, never the live buffer.
    """

    def __init__(self, capacity: int = HISTORY_CAPACITY):
        self.capacity = capacity
        self._samples: Deque[Sample] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def append(self, sample: Sample) -> None:
        with self._lock:
            self._samples.append(sample)

    def latest(self) -> Optional[Sample]:
        with self._lock:
            return self._samples[-1] if self._samples else None

    def window(self, size: int) -> List[Sample]:
        """The most recent ``size`` samples, oldest first."""
        with self._lock:
            count = min(size, len(self._samples))
            return [self._samples[i] for i in range(len(self._samples) - count, len(self._samples))]

    def since(self, cutoff: datetime) -> List[Sample]:
        """Samples timestamped strictly after ``cutoff``."""
        with self._lock:
            return [s for s in self._samples if s.timestamp > cutoff]

    def snapshot(self) -> List[Sample]:
        with self._lock:
            return list(self._samples)

    def __len__(self) -> int:
        with self._lock:
            return len(self._samples)
