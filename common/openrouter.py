"""Client for the OpenRouter models listing."""

from typing import List

import requests
from pydantic import ValidationError

from common import config
from common.errors import (
    UpstreamBadStatusError,
    UpstreamMalformedError,
    UpstreamUnreachableError,
)
from common.validators import ModelsResponse, RawModel


def fetch_raw_models(url: str = None, timeout: float = None) -> List[RawModel]:
    """GET the models listing and validate it into RawModel records."""
    url = url or config.api_url()
    if timeout is None:
        timeout = config.upstream_timeout()

    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise UpstreamUnreachableError(str(e)) from e

    if not resp.ok:
        raise UpstreamBadStatusError(resp.status_code, resp.reason or "")

    try:
        body = resp.json()
    except ValueError as e:
        raise UpstreamMalformedError("Response body is not JSON") from e

    try:
        return ModelsResponse.model_validate(body).data
    except ValidationError as e:
        raise UpstreamMalformedError(
            f"Invalid API response format: {e.error_count()} error(s)"
        ) from e
