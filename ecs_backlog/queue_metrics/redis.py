import logging
import redis
from redis.backoff import NoBackoff
from redis.retry import Retry

from ecs_backlog.common.errors import QueueUnavailable
from ecs_backlog.request import split_address

# redis-py retries connection and timeout errors by default; the trigger owns retries
NO_RETRY = Retry(NoBackoff(), 0)


def get_sorted_set_length(redis_config, queue_address, sorted_set_name):
    """
    Get the number of members in a Redis sorted set.

    A connection is opened for this call only and closed before returning,
    whether or not the query succeeded. Failed connects and reads are not
    retried.

    Args:
        redis_config: Dict containing Redis connection options with:
                     - password: Redis password (optional)
                     - db: Database number (default 0)
                     - use_ssl: Whether to use TLS (default False)
                     - connect_timeout: Connect timeout in seconds (default 5)
                     - socket_timeout: Read/write timeout in seconds (default 5)
        queue_address: Redis address in host:port form
        sorted_set_name: Key of the sorted set

    Returns:
        int: Cardinality of the set, 0 if the key does not exist

    Raises:
        QueueUnavailable: If Redis cannot be reached or the query fails
    """
    host, port = split_address(queue_address)

    try:
        with redis.Redis(
            host=host,
            port=port,
            db=redis_config.get('db', 0),
            password=redis_config.get('password'),
            ssl=redis_config.get('use_ssl', False),
            socket_connect_timeout=redis_config.get('connect_timeout', 5),
            socket_timeout=redis_config.get('socket_timeout', 5),
            retry=NO_RETRY,
            retry_on_timeout=False,
            decode_responses=True
        ) as r:
            length = r.zcard(sorted_set_name)
    except redis.exceptions.RedisError as e:
        raise QueueUnavailable(f"Error reading sorted set {sorted_set_name} at {queue_address}: {e}") from e

    logging.info(f"Number of items in sorted-set {sorted_set_name}: {length}")
    return int(length)
