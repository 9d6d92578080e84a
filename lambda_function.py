"""
Lambda function entry point for AWS Lambda deployments.
"""

# Configure logging first
from ecs_backlog.common.logger import setup_logging

setup_logging()

from ecs_backlog.main import lambda_handler


# The handler is specified in the Lambda configuration as "lambda_function.handler"
def handler(event, context):
    """
    AWS Lambda function handler that delegates to the main lambda_handler.

    Args:
        event: Trigger event naming the cluster, service, Redis address and sorted set
        context: AWS Lambda context object

    Returns:
        None; failures are raised to the trigger
    """
    return lambda_handler(event, context)
