import logging
from botocore.exceptions import BotoCoreError, ClientError

from ecs_backlog.common.errors import ServiceLookupFailed


def get_running_task_count(ecs_client, cluster_name, service_name):
    """
    Get the number of running tasks of an ECS service.

    Args:
        ecs_client: Boto3 ECS client
        cluster_name: ECS cluster name or ARN
        service_name: ECS service name or ARN

    Returns:
        int: The service's runningCount

    Raises:
        ServiceLookupFailed: If the API call fails, the service is not returned
                             or it carries no runningCount
    """
    try:
        response = ecs_client.describe_services(
            cluster=cluster_name,
            services=[service_name]
        )
    except (ClientError, BotoCoreError) as e:
        raise ServiceLookupFailed(f"Error describing service {service_name} in cluster {cluster_name}: {e}") from e

    services = response.get('services') or []
    if not services:
        reasons = ', '.join(f.get('reason', 'UNKNOWN') for f in response.get('failures') or [])
        raise ServiceLookupFailed(f"Service {service_name} not found in cluster {cluster_name}"
                                  + (f" ({reasons})" if reasons else ""))

    service = services[0]
    if service.get('runningCount') is None:
        raise ServiceLookupFailed(f"Service {service_name} in cluster {cluster_name} has no runningCount")

    running_count = int(service['runningCount'])
    logging.info(f"Number of running tasks for service {service_name}: {running_count}")
    return running_count
