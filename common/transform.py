"""
Normalization of raw OpenRouter records into the shape the dashboard reads.
Prices become USD per million tokens; lengths get a short display form.
"""

import math
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional

from common.validators import RawModel

OPENROUTER_MODEL_URL = "https://openrouter.ai/{model_id}"
DEFAULT_MODALITY = "text->text"
DEFAULT_MODALITIES = ["text"]
TOKENS_PER_PRICE_UNIT = 1_000_000


def format_price(price_per_token) -> float:
    """Per-token price (string or number) -> price per 1M tokens, 3 decimals."""
    try:
        price = float(price_per_token)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(price):
        return 0
    # Round half up, not half to even.
    return math.floor(price * TOKENS_PER_PRICE_UNIT * 1000 + 0.5) / 1000


def format_context_length(length: Optional[int]) -> Optional[str]:
    if not length:
        return None
    if length >= 1_000_000:
        value = (Decimal(length) / 1_000_000).quantize(Decimal("0.01"), ROUND_HALF_UP)
        return f"{value}M"
    if length >= 1_000:
        value = (Decimal(length) / 1_000).quantize(Decimal("1"), ROUND_HALF_UP)
        return f"{value}K"
    return str(length)


def extract_provider(model_id: str) -> str:
    provider, sep, _ = model_id.partition("/")
    return provider if sep else "unknown"


def to_iso(epoch_seconds: float) -> str:
    """Epoch seconds -> ISO-8601 UTC with millisecond precision, e.g. 2024-05-13T00:00:00.000Z."""
    moment = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _modalities(values: Optional[List[str]]) -> List[str]:
    # An empty list is a real answer; only a missing one gets the default.
    return list(DEFAULT_MODALITIES) if values is None else values


def process_model(raw: RawModel) -> dict:
    pricing = raw.pricing
    architecture = raw.architecture
    max_output = raw.top_provider.max_completion_tokens if raw.top_provider else None

    return {
        "id": raw.id,
        "name": raw.name or raw.id,
        "provider": extract_provider(raw.id),
        "description": raw.description or "",
        "contextLength": raw.context_length or 0,
        "contextLengthFormatted": format_context_length(raw.context_length),
        "maxOutput": max_output or 0,
        "maxOutputFormatted": format_context_length(max_output),
        "inputPrice": format_price(pricing.prompt if pricing else None),
        "outputPrice": format_price(pricing.completion if pricing else None),
        "modality": (architecture and architecture.modality) or DEFAULT_MODALITY,
        "inputModalities": _modalities(architecture.input_modalities if architecture else None),
        "outputModalities": _modalities(architecture.output_modalities if architecture else None),
        "openRouterUrl": OPENROUTER_MODEL_URL.format(model_id=raw.id),
        "createdAt": to_iso(raw.created) if raw.created else None,
    }


def process_models(raw_models: Iterable[RawModel]) -> List[dict]:
    return [process_model(raw) for raw in raw_models]


def build_payload(raw_models: Iterable[RawModel], now: float) -> dict:
    """Assemble the response document served by /api/models and the sync script."""
    models = process_models(raw_models)
    return {
        "updatedAt": to_iso(now),
        "totalCount": len(models),
        "models": models,
    }
