"""DynamoDB access for the room and definition stores.

Tables are named by environment variables so that a deployment, LocalStack
and the tests can each point the stores somewhere different.

Environment Variables:
    ROOM_TABLE: table of generated rooms (hash key ``id``)
    DEFINITION_TABLE: table of definition overrides (``kind`` + ``id``)
    LOCALSTACK_ENDPOINT: send all DynamoDB calls here (e.g. http://localhost:4566)
    AWS_DEFAULT_REGION: region for LocalStack (default: ap-southeast-1)
"""

import logging
import os
from typing import Any, Dict, Optional

import boto3

logger = logging.getLogger(__name__)

DEFAULT_REGION = "ap-southeast-1"


def get_localstack_endpoint() -> Optional[str]:
    return os.environ.get("LOCALSTACK_ENDPOINT")


def _resource_options() -> Dict[str, Any]:
    """Extra boto3 arguments when running against LocalStack."""
    endpoint = get_localstack_endpoint()
    if not endpoint:
        return {}
    return {
        "endpoint_url": endpoint,
        "region_name": os.environ.get("AWS_DEFAULT_REGION", DEFAULT_REGION),
        "aws_access_key_id": os.environ.get("AWS_ACCESS_KEY_ID", "test"),
        "aws_secret_access_key": os.environ.get("AWS_SECRET_ACCESS_KEY", "test"),
    }


def get_dynamodb_resource():
    return boto3.resource("dynamodb", **_resource_options())


def table_name(table_name_env_var: str) -> Optional[str]:
    return os.environ.get(table_name_env_var) or None


def has_table_configured(table_name_env_var: str) -> bool:
    """True when the variable names a table; never touches AWS."""
    return table_name(table_name_env_var) is not None


def get_dynamodb_table(table_name_env_var: str):
    """Return the table named by ``table_name_env_var``.

    Raises:
        ValueError: the variable is unset or empty.
    """
    name = table_name(table_name_env_var)
    if name is None:
        raise ValueError(f"Environment variable {table_name_env_var} is not set")
    logger.debug(f"Using DynamoDB table {name} ({table_name_env_var})")
    return get_dynamodb_resource().Table(name)
