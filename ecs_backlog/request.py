from typing import Any, Dict, NamedTuple, Tuple

from ecs_backlog.common.errors import InvalidRequest

# Trigger event keys mapped to BacklogRequest fields
EVENT_FIELDS = {
    'clusterName': 'cluster_name',
    'serviceName': 'service_name',
    'redisAddress': 'queue_address',
    'sortedSetName': 'queue_name'
}


class BacklogRequest(NamedTuple):
    """One evaluation unit: the ECS service and the sorted set feeding it."""
    cluster_name: str
    service_name: str
    queue_address: str
    queue_name: str


def split_address(address: str) -> Tuple[str, int]:
    """
    Split a 'host:port' Redis address.

    The port is taken after the last colon so bracketed IPv6 hosts work.

    Raises:
        InvalidRequest: If the address has no host or no valid port
    """
    host, sep, port = address.rpartition(':')
    host = host.strip('[]')
    if not sep or not host:
        raise InvalidRequest(f"Redis address must be in host:port form, got: {address!r}")
    if not (port.isascii() and port.isdigit()):
        raise InvalidRequest(f"Redis address has a non-numeric port: {address!r}")
    port_number = int(port)
    if not 0 < port_number < 65536:
        raise InvalidRequest(f"Redis address port out of range: {address!r}")
    return host, port_number


def parse_request(event: Dict[str, Any]) -> BacklogRequest:
    """
    Build a BacklogRequest from the trigger event.

    All four fields are required and must be non-empty strings; the Redis
    address must be in host:port form.

    Args:
        event: Trigger event with clusterName, redisAddress, serviceName
               and sortedSetName

    Returns:
        BacklogRequest: The validated request

    Raises:
        InvalidRequest: If a field is missing, empty or malformed
    """
    if not isinstance(event, dict):
        raise InvalidRequest(f"Event must be a JSON object, got: {type(event).__name__}")

    values = {}
    for key, field in EVENT_FIELDS.items():
        value = event.get(key)
        if not isinstance(value, str) or not value:
            raise InvalidRequest(f"Event field {key} is required and must be a non-empty string")
        values[field] = value

    split_address(values['queue_address'])
    return BacklogRequest(**values)
