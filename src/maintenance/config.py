"""Configuration for the predictive maintenance engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class MetricName(str, Enum):
    """Forecastable sample metrics, keyed by their public names."""

    CPU_USAGE = "cpuUsage"
    MEMORY_USAGE = "memoryUsage"
    TASK_QUEUE_SIZE = "taskQueueSize"
    ACTIVE_AGENTS = "activeAgents"
    REQUEST_RATE = "requestRate"
    AVG_RESPONSE_TIME = "avgResponseTime"
    ERROR_RATE = "errorRate"

    @property
    def attribute(self) -> str:
        """Name of the matching Sample attribute."""
        return _METRIC_ATTRIBUTES[self]


_METRIC_ATTRIBUTES = {
    MetricName.CPU_USAGE: "cpu_usage",
    MetricName.MEMORY_USAGE: "memory_usage",
    MetricName.TASK_QUEUE_SIZE: "task_queue_size",
    MetricName.ACTIVE_AGENTS: "active_agents",
    MetricName.REQUEST_RATE: "request_rate",
    MetricName.AVG_RESPONSE_TIME: "avg_response_time",
    MetricName.ERROR_RATE: "error_rate",
}


class Trend(str, Enum):
    """Direction of a fitted trend line."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class PredictionSeverity(str, Enum):
    """Severity of a forecast relative to its threshold."""

    NORMAL = "normal"
    WARNING = "warning"
    CRITICAL = "critical"


class AlertType(str, Enum):
    """Advisory action category of a maintenance alert."""

    SCALE_UP = "scale_up"
    SCALE_DOWN = "scale_down"
    OPTIMIZE = "optimize"
    RESTART = "restart"


class AlertSeverity(str, Enum):
    """Severity of a raised maintenance alert."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# History and ledger bounds (24h at one-minute cadence)
HISTORY_CAPACITY = 1440
ALERT_LEDGER_CAPACITY = 100
ACTIVE_ALERT_WINDOW_MINUTES = 60

# Forecasting
DEFAULT_PREDICTION_HORIZON = 60
MIN_SAMPLES_FOR_PREDICTION = 10
REGRESSION_WINDOW = 30
STABLE_SLOPE = 0.1
WARNING_RATIO = 0.9
DEFAULT_CLAMP_RANGE: Tuple[float, float] = (0.0, 100.0)

# Alert thresholds
DEFAULT_CPU_THRESHOLD = 80.0
DEFAULT_MEMORY_THRESHOLD = 85.0
DEFAULT_QUEUE_SIZE_THRESHOLD = 1000.0
DEFAULT_ERROR_RATE_THRESHOLD = 0.1
CRITICAL_UTILIZATION_PCT = 95.0

# Health score deductions against the latest sample
HEALTH_CPU_LIMIT = 80.0
HEALTH_MEMORY_LIMIT = 85.0
HEALTH_ERROR_RATE_LIMIT = 0.05
HEALTH_QUEUE_LIMIT = 500.0
HEALTH_CPU_PENALTY = 20
HEALTH_MEMORY_PENALTY = 20
HEALTH_ERROR_RATE_PENALTY = 30
HEALTH_QUEUE_PENALTY = 15
HEALTH_CRITICAL_PREDICTION_PENALTY = 10

# Metrics covered by predict_all(), in order
FORECAST_METRICS = (
    MetricName.CPU_USAGE,
    MetricName.MEMORY_USAGE,
    MetricName.TASK_QUEUE_SIZE,
    MetricName.ERROR_RATE,
    MetricName.AVG_RESPONSE_TIME,
)


@dataclass
class AlertThresholds:
    """Per-metric alert limits."""

    cpu: float = DEFAULT_CPU_THRESHOLD
    memory: float = DEFAULT_MEMORY_THRESHOLD
    queue_size: float = DEFAULT_QUEUE_SIZE_THRESHOLD
    error_rate: float = DEFAULT_ERROR_RATE_THRESHOLD

    def for_metric(self, metric: MetricName) -> Optional[float]:
        """Threshold for a metric, or None if it has no configured limit."""
        return {
            MetricName.CPU_USAGE: self.cpu,
            MetricName.MEMORY_USAGE: self.memory,
            MetricName.TASK_QUEUE_SIZE: self.queue_size,
            MetricName.ERROR_RATE: self.error_rate,
        }.get(metric)


@dataclass
class MaintenanceConfig:
    """Master predictive maintenance configuration.

    ``enable_auto_scaling`` is stored for future integration only; no
    scaling action is ever taken. ``clamp_ranges`` bounds predicted values
    per metric; metrics without an entry use ``DEFAULT_CLAMP_RANGE``.
    """

    prediction_horizon: int = DEFAULT_PREDICTION_HORIZON
    thresholds: AlertThresholds = field(default_factory=AlertThresholds)
    enable_auto_scaling: bool = False
    clamp_ranges: Dict[MetricName, Tuple[float, float]] = field(default_factory=dict)
    history_capacity: int = HISTORY_CAPACITY
    alert_capacity: int = ALERT_LEDGER_CAPACITY

    def clamp_range(self, metric: MetricName) -> Tuple[float, float]:
        return self.clamp_ranges.get(metric, DEFAULT_CLAMP_RANGE)

    @classmethod
    def from_dict(cls, options: Optional[Dict[str, Any]] = None) -> "MaintenanceConfig":
        """Build a config from camelCase options.

        Accepts ``predictionHorizon``, ``alertThresholds`` (``cpu``,
        ``memory``, ``queueSize``, ``errorRate``) and ``enableAutoScaling``.
        Missing or zero values fall back to the defaults.
        """
        options = options or {}
        limits = options.get("alertThresholds") or {}
        return cls(
            prediction_horizon=options.get("predictionHorizon") or DEFAULT_PREDICTION_HORIZON,
            thresholds=AlertThresholds(
                cpu=limits.get("cpu") or DEFAULT_CPU_THRESHOLD,
                memory=limits.get("memory") or DEFAULT_MEMORY_THRESHOLD,
                queue_size=limits.get("queueSize") or DEFAULT_QUEUE_SIZE_THRESHOLD,
                error_rate=limits.get("errorRate") or DEFAULT_ERROR_RATE_THRESHOLD,
            ),
            enable_auto_scaling=bool(options.get("enableAutoScaling", False)),
        )
