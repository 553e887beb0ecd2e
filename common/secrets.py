import os
import json
import boto3

from common import config

_secrets_cache = {}

LOCALSTACK_PORT = 4566


def _get_client():
    if os.environ.get("ENV", "local") != "local":
        return boto3.client("secretsmanager")

    # LocalStack: LOCALSTACK_HOSTNAME is set inside its Lambda containers.
    ls_host = os.environ.get("LOCALSTACK_HOSTNAME", "localhost")
    return boto3.client(
        "secretsmanager",
        endpoint_url=f"http://{ls_host}:{LOCALSTACK_PORT}",
        region_name=os.environ.get("AWS_REGION", "us-east-1"),
        aws_access_key_id="test",
        aws_secret_access_key="test",
    )


def get_secret(secret_name: str) -> dict:
    """Retrieve a JSON secret once per container."""
    if secret_name not in _secrets_cache:
        response = _get_client().get_secret_value(SecretId=secret_name)
        _secrets_cache[secret_name] = json.loads(response["SecretString"])
    return _secrets_cache[secret_name]


def get_admin_credentials():
    """
    Return (username, password) for the config endpoint.

    With ADMIN_SECRET_NAME set, the secret's "password" (and optional
    "username") win over the environment. Password is None when unconfigured.
    """
    username = config.admin_username()
    password = config.admin_password_env()

    secret_name = config.admin_secret_name()
    if secret_name:
        secret = get_secret(secret_name)
        username = secret.get("username") or username
        password = secret.get("password") or password

    return username, password


def clear_cache():
    _secrets_cache.clear()
