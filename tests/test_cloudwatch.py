import unittest
from unittest import mock

from botocore.exceptions import ClientError, EndpointConnectionError

from ecs_backlog.common.errors import MetricPublishFailed
from ecs_backlog.metrics.cloudwatch import put_backlog_metric
from ecs_backlog.request import BacklogRequest


class TestPutBacklogMetric(unittest.TestCase):
    """Tests for publishing the backlog metric to CloudWatch."""

    def setUp(self):
        self.cloudwatch_client = mock.MagicMock()
        self.request = BacklogRequest(
            cluster_name='prod',
            service_name='worker',
            queue_address='redis.internal:6379',
            queue_name='jobs'
        )

    def test_metric_payload(self):
        """Test the namespace, name, dimensions and value sent to CloudWatch."""
        put_backlog_metric(self.cloudwatch_client, 10, self.request)

        self.cloudwatch_client.put_metric_data.assert_called_once_with(
            Namespace='ELASTICACHE_ECS',
            MetricData=[
                {
                    'MetricName': 'RedisEcsServiceBacklog',
                    'Dimensions': [
                        {'Name': 'ClusterName', 'Value': 'prod'},
                        {'Name': 'ServiceName', 'Value': 'worker'},
                        {'Name': 'SortedSetName', 'Value': 'jobs'}
                    ],
                    'Value': 10.0
                }
            ]
        )

    def test_value_sent_as_float(self):
        """Test that the integer estimate is widened to a float."""
        put_backlog_metric(self.cloudwatch_client, 3, self.request)

        _, kwargs = self.cloudwatch_client.put_metric_data.call_args
        value = kwargs['MetricData'][0]['Value']
        self.assertIsInstance(value, float)
        self.assertEqual(value, 3.0)

    def test_dimensions_keep_special_characters(self):
        """Test that dimension values are passed through untouched."""
        request = BacklogRequest(
            cluster_name='arn:aws:ecs:eu-west-1:123456789012:cluster/prod-é',
            service_name='worker svc/β',
            queue_address='redis.internal:6379',
            queue_name='{jobs}:pending#1'
        )

        put_backlog_metric(self.cloudwatch_client, 1, request)

        _, kwargs = self.cloudwatch_client.put_metric_data.call_args
        dimensions = {d['Name']: d['Value'] for d in kwargs['MetricData'][0]['Dimensions']}
        self.assertEqual(dimensions, {
            'ClusterName': request.cluster_name,
            'ServiceName': request.service_name,
            'SortedSetName': request.queue_name
        })

    def test_client_error_raises(self):
        """Test that a rejected submission is reported as MetricPublishFailed."""
        error = ClientError(
            {'Error': {'Code': 'InvalidParameterValue', 'Message': 'Bad dimension'}},
            'PutMetricData'
        )
        self.cloudwatch_client.put_metric_data.side_effect = error

        with self.assertRaises(MetricPublishFailed) as ctx:
            put_backlog_metric(self.cloudwatch_client, 1, self.request)

        self.assertIs(ctx.exception.__cause__, error)

    def test_connection_error_raises(self):
        """Test that an unreachable endpoint is reported as MetricPublishFailed."""
        self.cloudwatch_client.put_metric_data.side_effect = EndpointConnectionError(
            endpoint_url='https://monitoring.us-east-1.amazonaws.com/')

        with self.assertRaises(MetricPublishFailed):
            put_backlog_metric(self.cloudwatch_client, 1, self.request)


if __name__ == '__main__':
    unittest.main()
