"""
Backlog-per-worker metric publisher for ECS services fed by a Redis sorted set.

This package reads the length of a Redis sorted set and the running task count
of an ECS service, turns them into a backlog-per-task value and publishes it to
CloudWatch for a target tracking scaling policy to act on.
"""

__version__ = "0.1.0"
