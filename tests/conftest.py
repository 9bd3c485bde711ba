import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("GOLDSEARCH_LEFT", "GOLDSEARCH_RIGHT", "GOLDSEARCH_PRECISION"):
        monkeypatch.delenv(name, raising=False)
