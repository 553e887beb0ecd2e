"""
Lambda: GET|POST /api/config
Reads (public) or updates (admin) the default model ids for the comparison table.
"""

import json
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

from pydantic import ValidationError
from common import defaults
from common.auth import verify_auth
from common.events import header, http_method
from common.logger import log_info, log_error
from common.responses import json_response, error, empty
from common.validators import DefaultModelsRequest

SAVED_MESSAGE = (
    "Config saved. To persist after redeployment, "
    "update the DEFAULT_MODELS environment variable."
)


def _get_config():
    ids, source = defaults.get()
    log_info("config_read", count=len(ids), source=source)
    return json_response({"defaultModels": ids, "count": len(ids), "source": source})


def _update_config(event):
    auth = verify_auth(header(event, "Authorization"))
    if not auth.valid:
        log_error("config_update_failed", error_code="UNAUTHORIZED")
        return error("UNAUTHORIZED", auth.error, status_code=401)

    try:
        body = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError:
        return error("VALIDATION_ERROR", "Invalid JSON body")

    if not isinstance(body, dict):
        return error("VALIDATION_ERROR", "defaultModels must be an array")

    try:
        req = DefaultModelsRequest(**body)
    except ValidationError as e:
        log_error("config_update_failed", error_code="VALIDATION_ERROR")
        return error("VALIDATION_ERROR", str(e))

    ids = defaults.set(req.defaultModels)
    log_info("config_updated", count=len(ids), username=auth.username)

    return json_response(
        {
            "success": True,
            "message": SAVED_MESSAGE,
            "defaultModels": ids,
            "count": len(ids),
            "envValue": defaults.env_value(ids),
        }
    )


def handler(event, context):
    method = http_method(event)
    if method == "OPTIONS":
        return empty()
    if method == "GET":
        return _get_config()
    if method == "POST":
        return _update_config(event)
    return error("METHOD_NOT_ALLOWED", "Method not allowed", status_code=405)
