"""Exceptions raised by the predictive maintenance engine."""


class MaintenanceError(Exception):
    """Base exception for all predictive maintenance errors."""


class NotInitializedError(MaintenanceError):
    """Raised when the default engine is requested before initialize()."""

    def __init__(
        self,
        message: str = "Predictive maintenance not initialized. Call initialize() first.",
    ):
        super().__init__(message)


class UnknownMetricError(MaintenanceError, ValueError):
    """Raised when a metric name does not match any sample field."""

    def __init__(self, metric: str):
        super().__init__(f"Unknown metric: {metric!r}")
        self.metric = metric
