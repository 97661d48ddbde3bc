"""Bounded ledger of raised maintenance alerts."""

import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Deque, Dict, List, Optional

from .config import ACTIVE_ALERT_WINDOW_MINUTES, ALERT_LEDGER_CAPACITY, AlertSeverity, AlertType
from .forecaster import Prediction


@dataclass(frozen=True)
class MaintenanceAlert:
    """Record of a threshold breach with the forecast at raise time."""

    type: AlertType
    severity: AlertSeverity
    metric: str
    current_value: float
    threshold: float
    prediction: Prediction
    action: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "metric": self.metric,
            "currentValue": self.current_value,
            "threshold": self.threshold,
            "prediction": self.prediction.to_dict(),
            "timestamp": self.timestamp.isoformat(),
            "action": self.action,
        }


class AlertLedger:
    """Append-only alert history that keeps the newest ``capacity`` entries."""

    def __init__(self, capacity: int = ALERT_LEDGER_CAPACITY):
        self.capacity = capacity
        self._alerts: Deque[MaintenanceAlert] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def append(self, alert: MaintenanceAlert) -> None:
        with self._lock:
            self._alerts.append(alert)

    def all(self) -> List[MaintenanceAlert]:
        """Every retained alert, oldest first, regardless of age."""
        with self._lock:
            return list(self._alerts)

    def active(
        self,
        now: datetime,
        severity: Optional[AlertSeverity] = None,
        window_minutes: int = ACTIVE_ALERT_WINDOW_MINUTES,
    ) -> List[MaintenanceAlert]:
        """Alerts raised within the last ``window_minutes`` of ``now``.

        Args:
            now: Reference time for the window.
            severity: Optional severity to filter on.
            window_minutes: Width of the recency window.
        """
        cutoff = now - timedelta(minutes=window_minutes)
        with self._lock:
            alerts = list(self._alerts)
        if severity is not None:
            severity = AlertSeverity(severity)
            alerts = [a for a in alerts if a.severity == severity]
        return [a for a in alerts if a.timestamp > cutoff]

    def __len__(self) -> int:
        with self._lock:
            return len(self._alerts)


class AlertCooldown:
    """Optional suppression of repeat alerts for the same metric.

    Not active unless passed to the threshold monitor; without it every
    breaching sample raises its own alert.
    """

    def __init__(self, seconds: float = 300.0):
        self.seconds = seconds
        self._last_raised: Dict[str, datetime] = {}
        self._lock = threading.Lock()

    def allow(self, metric: str, now: datetime) -> bool:
        """Return True and start a new cooldown if ``metric`` may alert now."""
        with self._lock:
            last = self._last_raised.get(metric)
            if last is not None and (now - last).total_seconds() < self.seconds:
                return False
            self._last_raised[metric] = now
            return True

    def reset(self, metric: Optional[str] = None) -> None:
        with self._lock:
            if metric is None:
                self._last_raised.clear()
            else:
                self._last_raised.pop(metric, None)
