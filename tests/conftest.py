"""Root test configuration: isolated working directory, env, and article fixtures"""

import json

import pytest

from artpub.config import Settings


@pytest.fixture(autouse=True)
def isolate(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory with no ARTPUB_* env vars."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"ARTPUB_{name.upper()}", raising=False)


@pytest.fixture(name="write_article")
def write_article_fixture(tmp_path):
    """Write a list of paragraph records as article JSON and return its path."""
    def _write(records, name="article.json"):
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path
    return _write


@pytest.fixture(name="settings")
def settings_fixture():
    return Settings()
