"""S3 client construction.

This module turns ClientSettings into an authenticated boto3 S3 client.

Authentication Methods Supported:
    1. AWS CLI profiles (profile)
    2. Explicit credentials (access_key_id, secret_access_key), optionally
       with a session token for temporary credentials
    3. IAM roles / environment variables (no explicit credentials)

S3-Compatible Services:
    A configured endpoint replaces the SDK's default endpoint resolution,
    which is how MinIO, Ceph, R2 and similar services are reached. Services
    that cannot route virtual-hosted requests need ``force_path_style``.
"""

from typing import Any, Dict

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from s3_client.config_loader import ClientSettings
from s3_client.core import get_logger
from s3_client.core.exceptions import AuthConfigurationError

logger = get_logger(__name__)


class S3ClientManager:
    """Manages the S3 client connection for one invocation."""

    def __init__(self, config: ClientSettings, force_path_style: bool = False):
        """Initialize S3 client manager.

        Args:
            config: Client settings loaded from the config file
            force_path_style: Address objects as endpoint/bucket/key
        """
        self.config = config
        self.force_path_style = force_path_style
        self._client = None
        logger.info(
            "S3 client manager initialized",
            region=config.region,
            endpoint=config.endpoint,
            force_path_style=force_path_style,
        )

    @property
    def client(self):
        """Get or create S3 client instance."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self):
        """Create boto3 S3 client with the configured settings.

        Raises:
            AuthConfigurationError: If the SDK rejects the configuration
        """
        kwargs: Dict[str, Any] = {}

        if self.config.region:
            kwargs["region_name"] = self.config.region

        if self.config.endpoint:
            kwargs["endpoint_url"] = self.config.endpoint

        if self.force_path_style:
            kwargs["config"] = Config(s3={"addressing_style": "path"})

        try:
            if self.config.profile:
                session = boto3.Session(profile_name=self.config.profile)
                client = session.client("s3", **kwargs)  # type: ignore
                logger.info("S3 client created with profile", profile=self.config.profile)
            else:
                if self.config.access_key_id and self.config.secret_access_key:
                    kwargs.update(
                        {
                            "aws_access_key_id": self.config.access_key_id,
                            "aws_secret_access_key": self.config.secret_access_key,
                        }
                    )
                    if self.config.session_token:
                        kwargs["aws_session_token"] = self.config.session_token
                    logger.info("S3 client created with explicit credentials")
                else:
                    logger.info("S3 client created with default credential chain")

                client = boto3.client("s3", **kwargs)  # type: ignore

        except (BotoCoreError, ValueError) as e:
            error_msg = f"Error loading AWS config: {e}"
            logger.error(error_msg)
            raise AuthConfigurationError(error_msg)

        return client
