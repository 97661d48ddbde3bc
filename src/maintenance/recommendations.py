"""Advisory text for forecasts."""

from .config import MetricName, PredictionSeverity, Trend

COLLECTING_DATA = "Collecting data for predictions..."

_FIXED_ADVICE = {
    MetricName.TASK_QUEUE_SIZE.value: (
        "Task queue growing. Scale up workers, optimize task processing, "
        "or implement prioritization."
    ),
    MetricName.ERROR_RATE.value: (
        "Error rate elevated. Review logs, fix bugs, and improve error handling."
    ),
    MetricName.AVG_RESPONSE_TIME.value: (
        "Response time increasing. Optimize database queries, add caching, "
        "or scale resources."
    ),
}


def recommend(
    metric: str,
    predicted_value: float,
    trend: Trend,
    severity: PredictionSeverity,
) -> str:
    """Map a forecast to a human-readable recommendation.

    Args:
        metric: Public metric name (e.g. ``"cpuUsage"``).
        predicted_value: Forecast value. Accepted for interface symmetry;
            the advice depends only on metric, trend and severity.
        trend: Fitted trend direction.
        severity: Forecast severity.

    Returns:
        Advisory text. Unknown metrics get a generic monitoring hint.
    """
    metric = getattr(metric, "value", metric)

    if severity == PredictionSeverity.NORMAL:
        return f"{metric} is within normal range"

    if metric == MetricName.CPU_USAGE.value:
        if trend == Trend.INCREASING:
            return (
                "CPU usage trending up. Consider scaling horizontally or "
                "optimizing CPU-intensive operations."
            )
        return "High CPU usage detected. Review recent code changes for performance issues."

    if metric == MetricName.MEMORY_USAGE.value:
        if trend == Trend.INCREASING:
            return (
                "Memory usage growing. Check for memory leaks, optimize data "
                "structures, or scale up memory."
            )
        return (
            "High memory usage. Consider implementing caching strategies or "
            "garbage collection tuning."
        )

    if metric in _FIXED_ADVICE:
        return _FIXED_ADVICE[metric]

    return f"Monitor {metric} closely"
