import logging
from functools import partial
from typing import Any, Callable, Dict, NamedTuple, Optional

from ecs_backlog.estimator import estimate_backlog
from ecs_backlog.aws.wrapper import AWSWrapper
from ecs_backlog.queue_metrics.redis import get_sorted_set_length
from ecs_backlog.fleet.ecs import get_running_task_count
from ecs_backlog.metrics.cloudwatch import put_backlog_metric
from ecs_backlog.request import BacklogRequest, parse_request
from ecs_backlog.config import load_config, Config


class Collaborators(NamedTuple):
    """External calls used by the pipeline, already bound to their clients."""
    sorted_set_length: Callable[[str, str], int]
    running_task_count: Callable[[str, str], int]
    put_metric: Callable[[int, BacklogRequest], None]


_collaborators: Optional[Collaborators] = None


def build_collaborators(config: Config) -> Collaborators:
    """
    Create the ECS and CloudWatch clients and bind every external call to them.

    Redis connections are not shared: the queue address comes with each
    request, so only the connection options are bound here.
    """
    aws_wrapper = AWSWrapper.from_config(config)
    ecs_client = aws_wrapper.create_aws_client('ecs')
    cloudwatch_client = aws_wrapper.create_aws_client('cloudwatch')

    return Collaborators(
        sorted_set_length=partial(get_sorted_set_length, config.redis_config()),
        running_task_count=partial(get_running_task_count, ecs_client),
        put_metric=partial(put_backlog_metric, cloudwatch_client)
    )


def get_collaborators() -> Collaborators:
    """Return the process-wide collaborators, creating them on first use."""
    global _collaborators
    if _collaborators is None:
        _collaborators = build_collaborators(load_config())
    return _collaborators


def publish_backlog(request: BacklogRequest, collaborators: Collaborators) -> int:
    """
    Observe the queue and the fleet, estimate the backlog per task and publish it.

    Steps run in order and the first failure is raised as is, so nothing is
    published unless both observations succeeded.

    Args:
        request: The service and sorted set to evaluate
        collaborators: Bound external calls

    Returns:
        int: The published backlog per task

    Raises:
        QueueUnavailable: If the sorted set length cannot be read
        ServiceLookupFailed: If the running task count cannot be read
        MetricPublishFailed: If the metric cannot be published
    """
    pending_count = collaborators.sorted_set_length(request.queue_address, request.queue_name)
    running_task_count = collaborators.running_task_count(request.cluster_name, request.service_name)

    backlog = estimate_backlog(pending_count, running_task_count)
    collaborators.put_metric(backlog, request)

    logging.info(f"Published backlog {backlog} for service {request.service_name} in cluster "
                 f"{request.cluster_name} (sorted-set {request.queue_name}: {pending_count} items, "
                 f"{running_task_count} running tasks)")
    return backlog


def lambda_handler(event: Dict[str, Any], context: Any) -> None:
    """
    Lambda handler publishing the backlog metric for one ECS service.

    Args:
        event: Trigger event with clusterName, redisAddress, serviceName and sortedSetName
        context: AWS Lambda context object

    Raises:
        BacklogMetricError: The first failure, so the trigger can apply its own retry policy
    """
    try:
        request = parse_request(event)
        publish_backlog(request, get_collaborators())
    except Exception as e:
        logging.error(f"Error publishing backlog metric: {e}", exc_info=True)
        raise
