"""Predictive maintenance engine: the composition root for all components."""

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional, Union

import pandas as pd

from src.logging_config import LogContext, log_performance

from .config import AlertSeverity, MaintenanceConfig, MetricName
from .exceptions import NotInitializedError
from .forecaster import Prediction, TrendForecaster
from .health import HealthScorer
from .ledger import AlertCooldown, AlertLedger, MaintenanceAlert
from .monitor import ThresholdMonitor
from .store import Sample, SampleStore

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PredictiveMaintenance:
    """Forecasts resource needs and raises maintenance alerts.

    Wires a sample store, threshold monitor, trend forecaster, health
    scorer and alert ledger together. Instances are independent; the
    module-level ``initialize``/``get`` pair only manages a default one.

    Args:
        config: Engine configuration. Defaults are used when omitted.
        clock: Returns the current time; used for alert timestamps and
            the windows of ``active_alerts`` and ``trends``.
        cooldown: Optional per-metric alert suppression policy.
        name: Label bound to log records emitted while recording samples.
    """

    def __init__(
        self,
        config: Optional[MaintenanceConfig] = None,
        clock: Callable[[], datetime] = _utc_now,
        cooldown: Optional[AlertCooldown] = None,
        name: str = "default",
    ):
        self.config = config or MaintenanceConfig()
        self.clock = clock
        self.name = name
        self.store = SampleStore(capacity=self.config.history_capacity)
        self.ledger = AlertLedger(capacity=self.config.alert_capacity)
        self.forecaster = TrendForecaster(self.store, self.config)
        self.monitor = ThresholdMonitor(
            self.forecaster, self.ledger, self.config, clock=clock, cooldown=cooldown,
        )
        self.scorer = HealthScorer()

    def record_sample(self, sample: Sample) -> List[MaintenanceAlert]:
        """Store ``sample`` and check it against alert thresholds.

        Returns the alerts raised by this sample.
        """
        self.store.append(sample)
        with LogContext(engine=self.name):
            return self.monitor.evaluate(sample)

    def predict(self, metric: Union[str, MetricName]) -> Prediction:
        return self.forecaster.predict(metric)

    @log_performance()
    def predict_all(self) -> List[Prediction]:
        return self.forecaster.predict_all()

    def active_alerts(
        self, severity: Optional[Union[str, AlertSeverity]] = None
    ) -> List[MaintenanceAlert]:
        """Alerts from the last hour, optionally of one severity."""
        return self.ledger.active(self.clock(), severity=severity)

    def trends(self, hours: float = 24) -> Dict[str, List[Any]]:
        """Utilization series for samples newer than ``hours`` ago."""
        samples = self.store.since(self.clock() - timedelta(hours=hours))
        return {
            "cpu": [s.cpu_usage for s in samples],
            "memory": [s.memory_usage for s in samples],
            "queue": [s.task_queue_size for s in samples],
            "timestamps": [s.timestamp for s in samples],
        }

    def trends_frame(self, hours: float = 24) -> pd.DataFrame:
        """Same window as ``trends`` as a DataFrame indexed by timestamp."""
        data = self.trends(hours)
        return pd.DataFrame(
            {"cpu": data["cpu"], "memory": data["memory"], "queue": data["queue"]},
            index=pd.DatetimeIndex(data["timestamps"], name="timestamp"),
        )

    @log_performance()
    def health_score(self) -> int:
        """0-100 health score; 100 when nothing has been recorded."""
        latest = self.store.latest()
        if latest is None:
            return 100
        return self.scorer.score(latest, self.predict_all())

    def summary(self) -> Dict[str, Any]:
        """Snapshot of engine state for a presentation layer."""
        predictions = self.predict_all()
        latest = self.store.latest()
        return {
            "health_score": self.scorer.score(latest, predictions),
            "sample_count": len(self.store),
            "alert_count": len(self.ledger),
            "active_alert_count": len(self.active_alerts()),
            "auto_scaling_enabled": self.config.enable_auto_scaling,
            "predictions": [p.to_dict() for p in predictions],
        }


_default_engine: Optional[PredictiveMaintenance] = None
_default_lock = threading.Lock()


def initialize(config: Optional[MaintenanceConfig] = None, **kwargs: Any) -> PredictiveMaintenance:
    """Create the process default engine, replacing any existing one."""
    global _default_engine
    with _default_lock:
        _default_engine = PredictiveMaintenance(config, **kwargs)
        logger.info(
            "Predictive maintenance initialized (horizon=%s min, auto_scaling=%s)",
            _default_engine.config.prediction_horizon,
            _default_engine.config.enable_auto_scaling,
        )
        return _default_engine


def get() -> PredictiveMaintenance:
    """Return the default engine; raises NotInitializedError before initialize()."""
    with _default_lock:
        if _default_engine is None:
            raise NotInitializedError()
        return _default_engine


def reset() -> None:
    """Drop the default engine."""
    global _default_engine
    with _default_lock:
        _default_engine = None
