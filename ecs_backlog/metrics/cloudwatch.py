import logging
from botocore.exceptions import BotoCoreError, ClientError

from ecs_backlog.common.errors import MetricPublishFailed

NAMESPACE = 'ELASTICACHE_ECS'
METRIC_NAME = 'RedisEcsServiceBacklog'


def put_backlog_metric(cloudwatch_client, backlog, request):
    """
    Publish one backlog-per-task data point to CloudWatch.

    Args:
        cloudwatch_client: Boto3 CloudWatch client
        backlog: Estimated backlog per task
        request: BacklogRequest supplying the metric dimensions

    Raises:
        MetricPublishFailed: If CloudWatch rejects or does not receive the data
    """
    try:
        cloudwatch_client.put_metric_data(
            Namespace=NAMESPACE,
            MetricData=[
                {
                    'MetricName': METRIC_NAME,
                    'Dimensions': [
                        {
                            'Name': 'ClusterName',
                            'Value': request.cluster_name
                        },
                        {
                            'Name': 'ServiceName',
                            'Value': request.service_name
                        },
                        {
                            'Name': 'SortedSetName',
                            'Value': request.queue_name
                        }
                    ],
                    'Value': float(backlog)
                }
            ]
        )
    except (ClientError, BotoCoreError) as e:
        raise MetricPublishFailed(f"Error publishing {METRIC_NAME} for service {request.service_name}: {e}") from e

    logging.debug(f"Published {NAMESPACE}/{METRIC_NAME}={backlog} for service {request.service_name}")
