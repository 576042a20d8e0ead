"""DynamoDB session and client construction.

The client is built once at startup and handed to the repository through its
constructor; botocore low-level clients are safe to share across threads.
"""

import logging

import boto3
from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError

from articles_service.config import Settings
from articles_service.domain.exceptions import ConfigError

logger = logging.getLogger(__name__)


def create_dynamodb_client(settings: Settings) -> BaseClient:
    """Create a DynamoDB client from access key, secret and region settings.

    Empty credentials fall back to the default AWS credential chain.
    Raises ConfigError when the session cannot be configured.
    """
    access_key = settings.aws_access_key_id.strip() or None
    secret_key = settings.aws_secret_access_key.strip() or None
    if bool(access_key) != bool(secret_key):
        raise ConfigError(
            "Both AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY must be set, or neither."
        )

    try:
        session = boto3.session.Session(
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            region_name=settings.aws_region.strip() or None,
        )
        if not session.region_name:
            raise ConfigError(
                "AWS region is not configured. Set AWS_REGION or AWS_DEFAULT_REGION."
            )
        client = session.client(
            "dynamodb",
            endpoint_url=settings.dynamodb_endpoint_url.strip() or None,
        )
    except (BotoCoreError, ValueError) as exc:
        raise ConfigError(f"Could not create DynamoDB client: {exc}") from exc

    logger.info(
        "DynamoDB client ready (region=%s, endpoint=%s)",
        session.region_name,
        settings.dynamodb_endpoint_url or "default",
    )
    return client
