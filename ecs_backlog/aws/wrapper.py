import logging
import boto3
from botocore.exceptions import ClientError
from botocore.config import Config
from retry import retry

RETRIES_NUMBER = 3
REGION = 'us-east-1'


class AWSWrapper:
    """
    Wrapper class for creating boto3 clients with bounded timeouts
    """

    def __init__(self, aws_access_key_id: str = None, aws_secret_access_key: str = None,
                 aws_session_token: str = None, sso_profile_name: str = None,
                 region_name: str = REGION, connect_timeout: float = 5, read_timeout: float = 5,
                 max_attempts: int = 1):
        self._region_name = region_name
        self._default_config = Config(
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            retries={'total_max_attempts': max_attempts, 'mode': 'standard'}
        )
        self._session = self._create_boto_session(aws_access_key_id, aws_secret_access_key,
                                                  aws_session_token, sso_profile_name)

    @classmethod
    def from_config(cls, config) -> 'AWSWrapper':
        """Create a wrapper from an ecs_backlog.config.Config."""
        return cls(
            sso_profile_name=config.sso_profile,
            region_name=config.region,
            connect_timeout=config.aws_connect_timeout,
            read_timeout=config.aws_read_timeout,
            max_attempts=config.aws_max_attempts
        )

    @retry(exceptions=ClientError, tries=RETRIES_NUMBER, delay=3)
    def _create_boto_session(self, aws_access_key_id: str = None, aws_secret_access_key: str = None,
                             aws_session_token: str = None, sso_profile_name: str = None):
        logging.debug("Creating boto3 session via " + ("SSO profile name" if sso_profile_name else "AWS access key"))
        return boto3.session.Session(profile_name=sso_profile_name, region_name=self._region_name) \
            if sso_profile_name else boto3.session.Session(aws_access_key_id, aws_secret_access_key,
                                                           aws_session_token, region_name=self._region_name)

    @retry(exceptions=ClientError, tries=RETRIES_NUMBER, delay=3)
    def create_aws_client(self, service_name: str, region_name: str = None, config=None):
        """
        Create a boto3 client.

        Calls made through the client are not retried by botocore unless
        max_attempts was raised; the caller's trigger owns retries.

        Args:
            service_name: AWS service name ('ecs', 'cloudwatch', etc.)
            region_name: Optional AWS region override
            config: Optional botocore configuration merged over the default

        Returns:
            Boto3 client for the requested service
        """
        logging.debug(f'creating aws client for: {service_name}')

        client_config = self._default_config.merge(config) if config else self._default_config
        return self._session.client(service_name=service_name, region_name=region_name,
                                    config=client_config)
