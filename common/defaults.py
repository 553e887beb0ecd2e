"""Default model ids pre-selected in the comparison table."""

from typing import Iterable, List, Optional, Tuple

from common import config

FALLBACK_MODELS = [
    "openai/gpt-4o",
    "openai/gpt-4o-mini",
    "anthropic/claude-sonnet-4",
    "anthropic/claude-3.5-sonnet",
    "google/gemini-2.5-pro-preview-06-05",
    "google/gemini-2.5-flash-preview-05-20",
    "deepseek/deepseek-chat",
    "deepseek/deepseek-r1",
    "meta-llama/llama-3.3-70b-instruct",
    "mistralai/mistral-large-2411",
]

_override: Optional[List[str]] = None


def parse_ids(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def get() -> Tuple[List[str], str]:
    """Current ids and where they came from: memory, environment or fallback."""
    if _override is not None:
        return list(_override), "memory"
    env_value = config.default_models_env()
    if env_value and env_value.strip():
        return parse_ids(env_value), "environment"
    return list(FALLBACK_MODELS), "fallback"


def set(ids: Iterable[str]) -> List[str]:
    """Replace the in-memory list. Lost when the container is recycled."""
    global _override
    _override = [model_id.strip() for model_id in ids if model_id.strip()]
    return list(_override)


def reset():
    global _override
    _override = None


def env_value(ids: Iterable[str]) -> str:
    """Value to put in DEFAULT_MODELS to persist `ids` across deploys."""
    return ",".join(ids)
