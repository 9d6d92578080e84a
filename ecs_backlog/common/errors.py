class BacklogMetricError(Exception):
    """Base class for failures raised while producing the backlog metric."""


class InvalidRequest(BacklogMetricError, ValueError):
    """The trigger event is missing a field or carries a malformed value."""


class QueueUnavailable(BacklogMetricError):
    """Redis could not be reached or the sorted set length could not be read."""


class ServiceLookupFailed(BacklogMetricError):
    """ECS could not be queried or did not return the requested service."""


class MetricPublishFailed(BacklogMetricError):
    """CloudWatch rejected or did not receive the metric data."""
