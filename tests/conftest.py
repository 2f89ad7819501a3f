import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("RPS_SEED", raising=False)
    monkeypatch.delenv("RPS_LOG_LEVEL", raising=False)
