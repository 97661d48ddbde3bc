"""Composite 0-100 health score."""

from typing import Iterable, Optional

from .config import (
    HEALTH_CPU_LIMIT,
    HEALTH_CPU_PENALTY,
    HEALTH_CRITICAL_PREDICTION_PENALTY,
    HEALTH_ERROR_RATE_LIMIT,
    HEALTH_ERROR_RATE_PENALTY,
    HEALTH_MEMORY_LIMIT,
    HEALTH_MEMORY_PENALTY,
    HEALTH_QUEUE_LIMIT,
    HEALTH_QUEUE_PENALTY,
    PredictionSeverity,
)
from .forecaster import Prediction
from .store import Sample


class HealthScorer:
    """Scores system health from the latest sample and current forecasts.

    Starts at 100. Each breached limit on the latest sample and each
    critical forecast deducts a fixed amount; the result never drops
    below 0.
    """

    def score(self, latest: Optional[Sample], predictions: Iterable[Prediction]) -> int:
        if latest is None:
            return 100

        score = 100
        if latest.cpu_usage > HEALTH_CPU_LIMIT:
            score -= HEALTH_CPU_PENALTY
        if latest.memory_usage > HEALTH_MEMORY_LIMIT:
            score -= HEALTH_MEMORY_PENALTY
        if latest.error_rate > HEALTH_ERROR_RATE_LIMIT:
            score -= HEALTH_ERROR_RATE_PENALTY
        if latest.task_queue_size > HEALTH_QUEUE_LIMIT:
            score -= HEALTH_QUEUE_PENALTY

        critical = sum(1 for p in predictions if p.severity == PredictionSeverity.CRITICAL)
        score -= critical * HEALTH_CRITICAL_PREDICTION_PENALTY

        return max(0, score)
