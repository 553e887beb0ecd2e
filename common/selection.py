"""Filtering and ordering helpers for the comparison table and the model picker."""

from typing import Iterable, List

SORT_FIELDS = ("name", "provider", "contextLength", "maxOutput", "inputPrice", "outputPrice")
SEARCH_LIMIT = 50


def select_models(models: List[dict], ids: Iterable[str]) -> List[dict]:
    """Models whose id is in `ids`, in payload order."""
    wanted = set(ids)
    return [m for m in models if m["id"] in wanted]


def search_models(
    models: List[dict], query: str, exclude_ids: Iterable[str] = (), limit: int = SEARCH_LIMIT
) -> List[dict]:
    excluded = set(exclude_ids)
    candidates = [m for m in models if m["id"] not in excluded]
    if query:
        needle = query.lower()
        candidates = [
            m
            for m in candidates
            if needle in m["name"].lower()
            or needle in m["id"].lower()
            or needle in m["provider"].lower()
        ]
    return candidates[:limit]


def sort_models(models: List[dict], field: str, direction: str = "asc") -> List[dict]:
    if field not in SORT_FIELDS:
        raise ValueError(f"Unsupported sort field: {field}")

    def key(model):
        value = model[field]
        return value.lower() if isinstance(value, str) else value

    return sorted(models, key=key, reverse=direction == "desc")
