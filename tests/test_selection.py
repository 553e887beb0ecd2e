"""
Unit tests for comparison-table selection, picker search and sorting.
"""

import pytest

from common.selection import search_models, select_models, sort_models


def _model(model_id, name, provider, input_price=1.0, context=1000):
    return {
        "id": model_id,
        "name": name,
        "provider": provider,
        "inputPrice": input_price,
        "contextLength": context,
    }


@pytest.fixture
def models():
    return [
        _model("openai/gpt-4o", "GPT-4o", "openai", 2.5, 128000),
        _model("anthropic/claude-sonnet-4", "Claude Sonnet 4", "anthropic", 3.0, 200000),
        _model("deepseek/deepseek-chat", "DeepSeek V3", "deepseek", 0.27, 64000),
        _model("openai/gpt-4o-mini", "gpt-4o mini", "openai", 0.15, 128000),
    ]


def test_select_keeps_payload_order(models):
    selected = select_models(models, ["openai/gpt-4o-mini", "openai/gpt-4o", "missing/id"])

    assert [m["id"] for m in selected] == ["openai/gpt-4o", "openai/gpt-4o-mini"]


def test_search_matches_name_id_and_provider_case_insensitively(models):
    assert [m["id"] for m in search_models(models, "CLAUDE")] == ["anthropic/claude-sonnet-4"]
    assert [m["id"] for m in search_models(models, "deepseek-chat")] == ["deepseek/deepseek-chat"]
    assert len(search_models(models, "OpenAI")) == 2


def test_search_excludes_selected_and_limits(models):
    result = search_models(models, "", exclude_ids=["openai/gpt-4o"], limit=2)

    assert [m["id"] for m in result] == ["anthropic/claude-sonnet-4", "deepseek/deepseek-chat"]


def test_sort_by_price(models):
    asc = sort_models(models, "inputPrice")
    desc = sort_models(models, "inputPrice", "desc")

    assert [m["inputPrice"] for m in asc] == [0.15, 0.27, 2.5, 3.0]
    assert [m["inputPrice"] for m in desc] == [3.0, 2.5, 0.27, 0.15]


def test_sort_strings_ignore_case(models):
    names = [m["name"] for m in sort_models(models, "name")]

    assert names == ["Claude Sonnet 4", "DeepSeek V3", "GPT-4o", "gpt-4o mini"]


def test_sort_is_stable_for_equal_keys(models):
    ids = [m["id"] for m in sort_models(models, "contextLength")]

    assert ids.index("openai/gpt-4o") < ids.index("openai/gpt-4o-mini")


def test_sort_rejects_unknown_field(models):
    with pytest.raises(ValueError):
        sort_models(models, "description")
