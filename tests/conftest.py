from types import SimpleNamespace

import pytest

import config
import gemini_service


@pytest.fixture(autouse=True)
def tmp_paths(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "DB_PATH", str(tmp_path / "history.db"))
    monkeypatch.setattr(config, "RAW_LOG", str(tmp_path / "llm_raw_logs.txt"))
    return tmp_path


class FakeModels:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_gemini(monkeypatch):
    """Install a fake Gemini client; returns a factory taking (text, candidates, error)."""
    def install(text=None, candidates=None, error=None):
        models = FakeModels(SimpleNamespace(text=text, candidates=candidates or []), error)
        monkeypatch.setattr(gemini_service, "get_client", lambda: SimpleNamespace(models=models))
        return models
    return install
