import os
import sys
from unittest.mock import MagicMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from common import defaults, secrets
from lambdas.models import handler as models_handler

ENV_VARS = (
    "OPENROUTER_API_URL",
    "CACHE_TTL_SECONDS",
    "UPSTREAM_TIMEOUT_SECONDS",
    "ADMIN_USERNAME",
    "ADMIN_PASSWORD",
    "ADMIN_SECRET_NAME",
    "DEFAULT_MODELS",
)


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Each test starts with a cold container: no env config, no cached data."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    models_handler.set_fetcher(None)
    defaults.reset()
    secrets.clear_cache()
    yield
    models_handler.set_fetcher(None)
    defaults.reset()
    secrets.clear_cache()


@pytest.fixture
def raw_listing():
    """Two upstream records as the models API returns them."""
    return {
        "data": [
            {
                "id": "openai/gpt-4o",
                "name": "OpenAI: GPT-4o",
                "description": "Omni model",
                "context_length": 128000,
                "pricing": {"prompt": "0.0000025", "completion": "0.00001"},
                "architecture": {
                    "modality": "text+image->text",
                    "input_modalities": ["text", "image"],
                    "output_modalities": ["text"],
                },
                "top_provider": {"max_completion_tokens": 16384},
                "created": 1715558400,
            },
            {
                "id": "standalone-id",
                "pricing": {"prompt": "0", "completion": "0"},
            },
        ]
    }


def make_response(body=None, status_code=200, reason="OK", json_error=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason = reason
    resp.ok = 200 <= status_code < 300
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = body
    return resp


class FakeClock:
    def __init__(self, now=1_700_000_000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()
