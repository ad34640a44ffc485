import pytest
import requests

from agents.page_analyzer_agent import PageAnalysisError, analyze_url, is_valid_url
from sample_pages import GOOD_TITLE


@pytest.mark.parametrize(
    "url",
    ["https://example.com", "http://example.com/path?q=1", "https://sub.example.co.jp:8080/"],
)
def test_is_valid_url_accepts_http_urls(url):
    assert is_valid_url(url) is True


@pytest.mark.parametrize(
    "url",
    ["", "example.com", "not a url", "ftp://example.com", "https://", "javascript:alert(1)", None],
)
def test_is_valid_url_rejects_others(url):
    assert is_valid_url(url) is False


def test_analyze_url_returns_metrics(serve_html):
    fetched = serve_html()

    metrics = analyze_url("https://example.com/")

    assert fetched == ["https://example.com/"]
    assert metrics.url == "https://example.com/"
    assert metrics.title.content == GOOD_TITLE
    assert metrics.loading_time >= 0


def test_analyze_url_invalid_format_does_not_fetch(serve_html):
    fetched = serve_html()

    with pytest.raises(PageAnalysisError, match="Invalid URL format"):
        analyze_url("example.com")

    assert fetched == []


def test_analyze_url_wraps_fetch_errors(serve_html):
    serve_html(exc=requests.Timeout("read timed out"))

    with pytest.raises(PageAnalysisError) as excinfo:
        analyze_url("https://slow.example.com/")

    assert str(excinfo.value) == "Failed to analyze URL: read timed out"
    assert isinstance(excinfo.value.__cause__, requests.Timeout)


def test_fetch_html_raises_for_error_status(monkeypatch):
    import services.crawler as crawler

    class FakeResponse:
        status_code = 404
        text = "not found"

        def raise_for_status(self):
            raise requests.HTTPError("404 Client Error")

    seen = {}

    def fake_get(url, headers=None, timeout=None):
        seen.update(url=url, headers=headers, timeout=timeout)
        return FakeResponse()

    monkeypatch.setattr(crawler.requests, "get", fake_get)

    with pytest.raises(requests.HTTPError):
        crawler.fetch_html("https://example.com/missing")

    assert seen["timeout"] == crawler.settings.fetch_timeout
    assert "SEO-Analyzer" in seen["headers"]["User-Agent"]
