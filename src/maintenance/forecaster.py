"""Linear trend forecasting over the recent sample window."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np

from .config import (
    FORECAST_METRICS,
    MIN_SAMPLES_FOR_PREDICTION,
    REGRESSION_WINDOW,
    STABLE_SLOPE,
    WARNING_RATIO,
    MaintenanceConfig,
    MetricName,
    PredictionSeverity,
    Trend,
)
from .exceptions import UnknownMetricError
from .recommendations import COLLECTING_DATA, recommend
from .store import SampleStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Prediction:
    """Forecast for one metric. Recomputed on every query."""

    metric: str
    current_value: float
    predicted_value: float
    confidence: float
    time_horizon: int
    trend: Trend
    severity: PredictionSeverity
    recommendation: str

    @property
    def has_forecast(self) -> bool:
        """Zero confidence means no usable forecast yet."""
        return self.confidence > 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metric": self.metric,
            "currentValue": self.current_value,
            "predictedValue": self.predicted_value,
            "confidence": self.confidence,
            "timeHorizon": self.time_horizon,
            "trend": self.trend.value,
            "severity": self.severity.value,
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class LinearFit:
    """Ordinary least squares line y = slope * x + intercept."""

    slope: float
    intercept: float
    r_squared: float

    def at(self, x: float) -> float:
        return self.slope * x + self.intercept


def fit_linear_trend(values: Sequence[float]) -> LinearFit:
    """Fit a line to ``values`` indexed 0..n-1 using the normal equations.

    A degenerate denominator (fewer than two points) gives a flat line
    through the mean. R² is clamped to [0, 1]; a series with no variance
    scores 1.0 when the line fits it exactly.
    """
    y = np.asarray(values, dtype=float)
    n = len(y)
    if n == 0:
        return LinearFit(slope=0.0, intercept=0.0, r_squared=0.0)

    x = np.arange(n, dtype=float)
    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = float(np.dot(x, y))
    sum_xx = float(np.dot(x, x))

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        slope = 0.0
    else:
        slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n

    fitted = slope * x + intercept
    ss_res = float(np.sum((y - fitted) ** 2))
    ss_tot = float(np.sum((y - y.mean()) ** 2))
    # Rounding floor relative to the data's magnitude, so small-scale
    # metrics such as error rates keep their real variance.
    tolerance = np.finfo(float).eps * max(1.0, float(np.dot(y, y)))
    if ss_tot <= tolerance:
        r_squared = 1.0 if ss_res <= tolerance else 0.0
    else:
        r_squared = 1.0 - ss_res / ss_tot

    return LinearFit(
        slope=float(slope),
        intercept=float(intercept),
        r_squared=float(min(1.0, max(0.0, r_squared))),
    )


def classify_trend(slope: float) -> Trend:
    if abs(slope) < STABLE_SLOPE:
        return Trend.STABLE
    return Trend.INCREASING if slope > 0 else Trend.DECREASING


def classify_severity(value: float, threshold: Optional[float]) -> PredictionSeverity:
    """Compare a forecast against a threshold; no threshold means normal."""
    if threshold is None:
        return PredictionSeverity.NORMAL
    if value > threshold:
        return PredictionSeverity.CRITICAL
    if value > threshold * WARNING_RATIO:
        return PredictionSeverity.WARNING
    return PredictionSeverity.NORMAL


def resolve_metric(metric: Union[str, MetricName]) -> MetricName:
    try:
        return MetricName(metric)
    except ValueError:
        raise UnknownMetricError(str(metric)) from None


class TrendForecaster:
    """Projects metric values from the recent sample window.

    Reads from the sample store without mutating it, so repeated calls
    with no new samples return identical predictions.
    """

    def __init__(self, store: SampleStore, config: Optional[MaintenanceConfig] = None):
        self.store = store
        self.config = config or MaintenanceConfig()

    def predict(self, metric: Union[str, MetricName]) -> Prediction:
        """Forecast ``metric`` ``prediction_horizon`` minutes ahead."""
        name = resolve_metric(metric)
        window = self.store.window(REGRESSION_WINDOW)
        if len(window) < MIN_SAMPLES_FOR_PREDICTION:
            return self.default_prediction(name)

        values = [s.value(name) for s in window]
        fit = fit_linear_trend(values)
        horizon = self.config.prediction_horizon
        raw_value = fit.at(len(values) + horizon)

        trend = classify_trend(fit.slope)
        severity = classify_severity(raw_value, self.config.thresholds.for_metric(name))
        low, high = self.config.clamp_range(name)

        prediction = Prediction(
            metric=name.value,
            current_value=values[-1],
            predicted_value=max(low, min(raw_value, high)),
            confidence=fit.r_squared,
            time_horizon=horizon,
            trend=trend,
            severity=severity,
            recommendation=recommend(name.value, raw_value, trend, severity),
        )
        logger.debug(
            "Forecast %s: slope=%.4f r2=%.3f predicted=%.2f",
            name.value, fit.slope, fit.r_squared, raw_value,
        )
        return prediction

    def predict_all(self) -> List[Prediction]:
        return [self.predict(metric) for metric in FORECAST_METRICS]

    def default_prediction(self, metric: MetricName) -> Prediction:
        """Placeholder returned while fewer than the minimum samples exist."""
        return Prediction(
            metric=metric.value,
            current_value=0.0,
            predicted_value=0.0,
            confidence=0.0,
            time_horizon=self.config.prediction_horizon,
            trend=Trend.STABLE,
            severity=PredictionSeverity.NORMAL,
            recommendation=COLLECTING_DATA,
        )
