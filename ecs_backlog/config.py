import os
from typing import Dict, Optional, NamedTuple


class Config(NamedTuple):
    """Process-wide settings for the AWS and Redis clients."""
    # AWS configuration
    region: str
    sso_profile: Optional[str]
    aws_connect_timeout: float
    aws_read_timeout: float
    aws_max_attempts: int

    # Redis configuration
    redis_password: Optional[str]
    redis_db: int
    redis_use_ssl: bool
    redis_connect_timeout: float
    redis_socket_timeout: float

    def redis_config(self) -> Dict[str, object]:
        """Connection options passed to every Redis client."""
        return {
            'password': self.redis_password,
            'db': self.redis_db,
            'use_ssl': self.redis_use_ssl,
            'connect_timeout': self.redis_connect_timeout,
            'socket_timeout': self.redis_socket_timeout
        }


def _parse_bool(value: str) -> bool:
    return value.lower() in ('true', '1', 't', 'yes')


def load_config(environ: Dict[str, str] = None) -> Config:
    """
    Load client configuration from environment variables.

    The trigger event never overrides these values: clients built from this
    configuration are shared by every invocation handled by the process.

    Args:
        environ: Optional mapping to read instead of os.environ

    Returns:
        Config: Configuration object with all client settings

    Raises:
        ValueError: If a numeric setting cannot be parsed
    """
    environ = os.environ if environ is None else environ

    # AWS configuration
    region = environ.get('AWS_REGION', 'us-east-1')
    sso_profile = environ.get('SSO_PROFILE') or None
    aws_connect_timeout = float(environ.get('AWS_CONNECT_TIMEOUT', '5'))
    aws_read_timeout = float(environ.get('AWS_READ_TIMEOUT', '5'))
    aws_max_attempts = int(environ.get('AWS_MAX_ATTEMPTS', '1'))

    # Redis configuration
    redis_password = environ.get('REDIS_PASSWORD') or None
    redis_db = int(environ.get('REDIS_DB', '0'))
    redis_use_ssl = _parse_bool(environ.get('REDIS_USE_SSL', 'False'))
    redis_connect_timeout = float(environ.get('REDIS_CONNECT_TIMEOUT', '5'))
    redis_socket_timeout = float(environ.get('REDIS_SOCKET_TIMEOUT', '5'))

    return Config(
        region=region,
        sso_profile=sso_profile,
        aws_connect_timeout=aws_connect_timeout,
        aws_read_timeout=aws_read_timeout,
        aws_max_attempts=aws_max_attempts,
        redis_password=redis_password,
        redis_db=redis_db,
        redis_use_ssl=redis_use_ssl,
        redis_connect_timeout=redis_connect_timeout,
        redis_socket_timeout=redis_socket_timeout
    )
