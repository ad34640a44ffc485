from types import SimpleNamespace

import pytest

from app.config import settings
from services.llm_client import reset_llm_client

from sample_pages import GOOD_HTML


class FakeCompletions:
    def __init__(self, content=None, exc=None):
        self.content = content
        self.exc = exc
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeLLMClient:
    def __init__(self, content=None, exc=None):
        self.completions = FakeCompletions(content=content, exc=exc)
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture(autouse=True)
def no_llm_key(monkeypatch):
    """テストではデフォルトで LLM を使わない（.env の値に依存しない）。"""
    monkeypatch.setattr(settings, "llm_api_key", None)
    reset_llm_client()
    yield
    reset_llm_client()


@pytest.fixture
def fake_llm(monkeypatch):
    """LLM キーを設定し、get_llm_client を偽クライアントに差し替える。"""
    import agents.suggestion_agent as suggestion_agent

    def _install(content=None, exc=None) -> FakeLLMClient:
        client = FakeLLMClient(content=content, exc=exc)
        monkeypatch.setattr(settings, "llm_api_key", "test-key")
        monkeypatch.setattr(suggestion_agent, "get_llm_client", lambda: client)
        return client

    return _install


@pytest.fixture
def serve_html(monkeypatch):
    """crawler の fetch_html を差し替えて、任意の HTML を返させる。"""
    import agents.page_analyzer_agent as page_analyzer_agent

    def _install(html=GOOD_HTML, exc=None):
        fetched = []

        def _fetch(url, timeout=None):
            fetched.append(url)
            if exc is not None:
                raise exc
            return html

        monkeypatch.setattr(page_analyzer_agent, "fetch_html", _fetch)
        return fetched

    return _install
