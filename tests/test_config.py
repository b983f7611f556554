import pytest

from eventdispatch.config import DispatcherConfig


def test_defaults_follow_reference_behaviour():
    config = DispatcherConfig()
    assert config.matching == "function"
    assert config.prune_empty is False
    assert config.thread_safe is True


def test_from_env_reads_prefixed_variables(monkeypatch):
    monkeypatch.setenv("EVENTDISPATCH_MATCHING", "Identity")
    monkeypatch.setenv("EVENTDISPATCH_PRUNE_EMPTY", "yes")
    monkeypatch.setenv("EVENTDISPATCH_THREAD_SAFE", "0")
    config = DispatcherConfig.from_env()
    assert config.matching == "identity"
    assert config.prune_empty is True
    assert config.thread_safe is False


def test_from_env_defaults(monkeypatch):
    for suffix in ("MATCHING", "PRUNE_EMPTY", "THREAD_SAFE"):
        monkeypatch.delenv(f"EVENTDISPATCH_{suffix}", raising=False)
    assert DispatcherConfig.from_env() == DispatcherConfig()


def test_unknown_matching_policy_rejected(monkeypatch):
    with pytest.raises(ValueError, match="Unsupported matching policy"):
        DispatcherConfig(matching="structural")
    monkeypatch.setenv("EVENTDISPATCH_MATCHING", "name")
    with pytest.raises(ValueError):
        DispatcherConfig.from_env()
