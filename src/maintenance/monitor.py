"""Immediate threshold checks on incoming samples."""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from .config import (
    CRITICAL_UTILIZATION_PCT,
    AlertSeverity,
    AlertType,
    MaintenanceConfig,
    MetricName,
)
from .forecaster import TrendForecaster
from .ledger import AlertCooldown, AlertLedger, MaintenanceAlert
from .store import Sample

logger = logging.getLogger(__name__)

CPU_ACTION = "Scale up CPU resources or optimize CPU-intensive operations"
MEMORY_ACTION = "Scale up memory or investigate memory leaks"
QUEUE_ACTION = "Scale up workers or optimize task processing"
ERROR_RATE_ACTION = "Investigate and fix errors in AI agents"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ThresholdMonitor:
    """Raises maintenance alerts when a sample breaches a configured limit.

    Each metric is checked independently, so one sample can raise several
    alerts. Sustained breaches raise one alert per sample unless a
    cooldown policy is supplied.
    """

    def __init__(
        self,
        forecaster: TrendForecaster,
        ledger: AlertLedger,
        config: Optional[MaintenanceConfig] = None,
        clock: Callable[[], datetime] = _utc_now,
        cooldown: Optional[AlertCooldown] = None,
    ):
        self.forecaster = forecaster
        self.ledger = ledger
        self.config = config or MaintenanceConfig()
        self.clock = clock
        self.cooldown = cooldown

    def evaluate(self, sample: Sample) -> List[MaintenanceAlert]:
        """Check ``sample`` against every threshold. Returns raised alerts."""
        limits = self.config.thresholds
        raised: List[MaintenanceAlert] = []

        if sample.cpu_usage > limits.cpu:
            raised.extend(self._raise(
                AlertType.SCALE_UP,
                self._utilization_severity(sample.cpu_usage),
                MetricName.CPU_USAGE, sample.cpu_usage, limits.cpu, CPU_ACTION,
            ))

        if sample.memory_usage > limits.memory:
            raised.extend(self._raise(
                AlertType.SCALE_UP,
                self._utilization_severity(sample.memory_usage),
                MetricName.MEMORY_USAGE, sample.memory_usage, limits.memory, MEMORY_ACTION,
            ))

        if sample.task_queue_size > limits.queue_size:
            raised.extend(self._raise(
                AlertType.SCALE_UP, AlertSeverity.MEDIUM,
                MetricName.TASK_QUEUE_SIZE, sample.task_queue_size, limits.queue_size,
                QUEUE_ACTION,
            ))

        if sample.error_rate > limits.error_rate:
            raised.extend(self._raise(
                AlertType.OPTIMIZE, AlertSeverity.HIGH,
                MetricName.ERROR_RATE, sample.error_rate, limits.error_rate,
                ERROR_RATE_ACTION,
            ))

        return raised

    @staticmethod
    def _utilization_severity(value: float) -> AlertSeverity:
        if value > CRITICAL_UTILIZATION_PCT:
            return AlertSeverity.CRITICAL
        return AlertSeverity.HIGH

    def _raise(
        self,
        alert_type: AlertType,
        severity: AlertSeverity,
        metric: MetricName,
        value: float,
        threshold: float,
        action: str,
    ) -> List[MaintenanceAlert]:
        now = self.clock()
        if self.cooldown is not None and not self.cooldown.allow(metric.value, now):
            logger.debug("Alert for %s suppressed by cooldown", metric.value)
            return []

        alert = MaintenanceAlert(
            type=alert_type,
            severity=severity,
            metric=metric.value,
            current_value=value,
            threshold=threshold,
            prediction=self.forecaster.predict(metric),
            action=action,
            timestamp=now,
        )
        self.ledger.append(alert)
        self._notify(alert)
        return [alert]

    @staticmethod
    def _notify(alert: MaintenanceAlert) -> None:
        logger.warning(
            "Predictive maintenance alert: %s %s=%s exceeds %s",
            alert.severity.value, alert.metric, alert.current_value, alert.threshold,
            extra={
                "alert_type": alert.type.value,
                "metric": alert.metric,
                "severity": alert.severity.value,
                "extra_data": alert.to_dict(),
            },
        )
