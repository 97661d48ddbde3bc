"""Predictive maintenance: resource forecasting and threshold alerting."""

from .config import (
    AlertSeverity,
    AlertThresholds,
    AlertType,
    MaintenanceConfig,
    MetricName,
    PredictionSeverity,
    Trend,
)
from .exceptions import (
    MaintenanceError,
    NotInitializedError,
    UnknownMetricError,
)
from .store import (
    Sample,
    SampleStore,
)
from .forecaster import (
    LinearFit,
    Prediction,
    TrendForecaster,
    fit_linear_trend,
)
from .recommendations import recommend
from .ledger import (
    AlertCooldown,
    AlertLedger,
    MaintenanceAlert,
)
from .monitor import ThresholdMonitor
from .health import HealthScorer
from .engine import (
    PredictiveMaintenance,
    get,
    initialize,
)

__all__ = [
    # Config
    "AlertSeverity",
    "AlertThresholds",
    "AlertType",
    "MaintenanceConfig",
    "MetricName",
    "PredictionSeverity",
    "Trend",
    # Errors
    "MaintenanceError",
    "NotInitializedError",
    "UnknownMetricError",
    # Store
    "Sample",
    "SampleStore",
    # Forecaster
    "LinearFit",
    "Prediction",
    "TrendForecaster",
    "fit_linear_trend",
    "recommend",
    # Alerts
    "AlertCooldown",
    "AlertLedger",
    "MaintenanceAlert",
    "ThresholdMonitor",
    # Health
    "HealthScorer",
    # Engine
    "PredictiveMaintenance",
    "get",
    "initialize",
]
