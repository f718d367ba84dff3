"""
Credential loading utilities for Lambda handlers.

This module reads the Mailgun credential pair from the Lambda environment,
optionally resolving the API key from AWS Secrets Manager, and initializes
the process-wide mail client.
"""

import json
import logging
import os

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from domain.errors import ConfigurationError, SecretNotFoundError
from domain.models import MailgunCredentials
from integrations import mailgun
from services.logging_config import configure_logging

logger = logging.getLogger(__name__)

# Configure Secrets Manager client with timeouts to prevent infinite hangs
secrets_config = Config(
    retries={
        'max_attempts': 1,  # 1 attempt total (no retries)
        'mode': 'standard'
    },
    connect_timeout=10,  # 10 seconds to establish connection
    read_timeout=30      # 30 seconds max for reading response
)

region = os.environ.get('AWS_REGION', os.environ.get('AWS_DEFAULT_REGION', 'us-west-2'))

# Initialize Secrets Manager client at module level (thread-safe, reused across invocations)
secrets_client = boto3.client('secretsmanager', region_name=region, config=secrets_config)
logger.info(f"Secrets Manager client initialized: region={region}, connect=10s, read=30s, max_attempts=1")


def fetch_api_key_from_secrets_manager(secret_id: str) -> str:
    """
    Fetch the Mailgun API key from AWS Secrets Manager.

    The SecretString may be the key itself or a JSON object with an
    'api_key' field.

    Args:
        secret_id: Secret name or ARN

    Returns:
        str: The API key

    Raises:
        SecretNotFoundError: If the secret does not exist or has no usable value
        ClientError: For other AWS service errors
    """
    try:
        response = secrets_client.get_secret_value(SecretId=secret_id)
    except ClientError as e:
        error_code = e.response.get('Error', {}).get('Code', 'Unknown')
        if error_code == 'ResourceNotFoundException':
            logger.error(f"Secret not found: {secret_id}")
            raise SecretNotFoundError(f"Mailgun API key secret not found: {secret_id}")
        logger.error(f"Failed to fetch secret {secret_id}: error_code={error_code}")
        raise

    secret_string = response.get('SecretString')
    if not secret_string:
        logger.error(f"Secret has no SecretString value: {secret_id}")
        raise SecretNotFoundError(f"Mailgun API key secret has no string value: {secret_id}")

    # Plain string secrets are the key itself
    try:
        secret_data = json.loads(secret_string)
    except json.JSONDecodeError:
        return secret_string

    if isinstance(secret_data, dict):
        api_key = secret_data.get('api_key')
        if not api_key:
            logger.error(f"Secret JSON has no 'api_key' field: {secret_id}")
            raise SecretNotFoundError(f"Mailgun API key secret has no 'api_key' field: {secret_id}")
        return api_key

    return secret_string


def load_credentials() -> MailgunCredentials:
    """
    Read the Mailgun credential pair from environment variables.

    Environment:
        MAILGUN_DOMAIN: Sending domain (required)
        MAILGUN_API_KEY: API key
        MAILGUN_API_KEY_SECRET_ID: Secrets Manager secret holding the API key,
            used when MAILGUN_API_KEY is not set

    Returns:
        MailgunCredentials: The credential pair

    Raises:
        ConfigurationError: If the domain or both API key sources are missing
        SecretNotFoundError: If the configured secret cannot be resolved
    """
    domain = os.environ.get('MAILGUN_DOMAIN')
    if not domain:
        raise ConfigurationError(
            "MAILGUN_DOMAIN environment variable is required but not set. "
            "Please configure this in your SAM template or Lambda environment."
        )

    api_key = os.environ.get('MAILGUN_API_KEY')
    if api_key:
        logger.info("Mailgun API key read from MAILGUN_API_KEY")
    else:
        secret_id = os.environ.get('MAILGUN_API_KEY_SECRET_ID')
        if not secret_id:
            raise ConfigurationError(
                "Either MAILGUN_API_KEY or MAILGUN_API_KEY_SECRET_ID environment "
                "variable must be set."
            )
        api_key = fetch_api_key_from_secrets_manager(secret_id)
        logger.info(f"Mailgun API key read from Secrets Manager: {secret_id}")

    return MailgunCredentials(domain=domain, api_key=api_key)


def initialize_from_environment() -> mailgun.MailgunClient:
    """
    Configure logging and initialize the process-wide mail client.

    Intended to be called once at module level by a Lambda handler.

    Returns:
        MailgunClient: The initialized process-wide client

    Example:
        >>> from services.credentials import initialize_from_environment
        >>> client = initialize_from_environment()
        >>> client.send_email({'to': 'user@example.com', 'text': 'Hi'})
    """
    configure_logging()

    try:
        credentials = load_credentials()
    except ConfigurationError as e:
        logger.error(f"Mail client initialization failed: {e}")
        raise

    return mailgun.initialize(credentials.domain, credentials.api_key)
