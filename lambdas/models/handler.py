"""
Lambda: GET /api/models?ids=&exclude=&q=&sort=&order=&limit=
Returns normalized OpenRouter model data, cached for an hour per container.
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

from pydantic import ValidationError
from common import config
from common.cache import CachedFetcher
from common.errors import UpstreamError
from common.events import http_method, query_params
from common.logger import log_info, log_error, Timer
from common.openrouter import fetch_raw_models
from common.responses import json_response, error, empty
from common.selection import SEARCH_LIMIT, search_models, select_models, sort_models
from common.transform import build_payload
from common.validators import ModelsQuery

_fetcher = None


def get_fetcher() -> CachedFetcher:
    """Return the container's fetcher, creating it on first use."""
    global _fetcher
    if _fetcher is None:
        _fetcher = CachedFetcher(
            fetch=fetch_raw_models,
            transform=build_payload,
            ttl_seconds=config.cache_ttl_seconds(),
        )
    return _fetcher


def set_fetcher(fetcher):
    global _fetcher
    _fetcher = fetcher


def _apply_query(body: dict, query: ModelsQuery) -> dict:
    models = body["models"]
    if query.ids is not None:
        models = select_models(models, query.ids)
    if query.q is not None or query.exclude is not None or query.limit is not None:
        models = search_models(
            models,
            query.q,
            exclude_ids=query.exclude or (),
            limit=query.limit or SEARCH_LIMIT,
        )
    if query.sort:
        models = sort_models(models, query.sort, query.order)
    return {**body, "models": models, "matchedCount": len(models)}


def handler(event, context):
    method = http_method(event)
    if method == "OPTIONS":
        return empty()
    if method != "GET":
        return error("METHOD_NOT_ALLOWED", "Method not allowed", status_code=405)

    params = query_params(event)
    try:
        query = ModelsQuery(**params)
    except ValidationError as e:
        log_error("models_fetch_failed", error_code="VALIDATION_ERROR")
        return error("VALIDATION_ERROR", str(e))

    with Timer() as t:
        try:
            result = get_fetcher().get_data()
        except UpstreamError as e:
            return error(e.error_code, "Failed to fetch models", status_code=502)

    body = result.to_body()
    if params:
        body = _apply_query(body, query)

    if result.from_cache:
        log_info(
            "models_cache_hit",
            count=body["totalCount"],
            cache_reason=result.cache_reason,
        )
    else:
        log_info(
            "models_fetched",
            count=body["totalCount"],
            execution_time_ms=t.duration_ms,
        )

    return json_response(body)
