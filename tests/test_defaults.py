"""
Unit tests for the default model id store.
"""

from common import defaults


def test_fallback_when_nothing_configured():
    ids, source = defaults.get()

    assert source == "fallback"
    assert ids == defaults.FALLBACK_MODELS
    assert len(ids) == 10


def test_environment_is_trimmed_and_blanks_dropped(monkeypatch):
    monkeypatch.setenv("DEFAULT_MODELS", " openai/gpt-4o , ,deepseek/deepseek-r1,")

    assert defaults.get() == (["openai/gpt-4o", "deepseek/deepseek-r1"], "environment")


def test_blank_environment_uses_fallback(monkeypatch):
    monkeypatch.setenv("DEFAULT_MODELS", "   ")

    assert defaults.get()[1] == "fallback"


def test_memory_override_wins(monkeypatch):
    monkeypatch.setenv("DEFAULT_MODELS", "openai/gpt-4o")

    stored = defaults.set(["anthropic/claude-sonnet-4", "  "])

    assert stored == ["anthropic/claude-sonnet-4"]
    assert defaults.get() == (["anthropic/claude-sonnet-4"], "memory")

    defaults.reset()
    assert defaults.get()[1] == "environment"


def test_returned_lists_are_copies():
    ids, _ = defaults.get()
    ids.append("mutated/model")

    assert "mutated/model" not in defaults.get()[0]


def test_env_value():
    assert defaults.env_value(["a/b", "c/d"]) == "a/b,c/d"
