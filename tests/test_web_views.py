import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.web.presenter import (
    SCORE_GREEN,
    SCORE_RED,
    SCORE_YELLOW,
    STATUS_BAD,
    STATUS_GOOD,
    STATUS_WARNING,
    alt_status,
    build_metric_rows,
    h1_status,
    results_view,
    score_color,
)
from app.graph.lg_workflow import analyze
from sample_pages import BARE_HTML


@pytest.fixture
def client():
    return TestClient(app)


@pytest.mark.parametrize(
    "score, color",
    [(100, SCORE_GREEN), (80, SCORE_GREEN), (79, SCORE_YELLOW), (60, SCORE_YELLOW), (59, SCORE_RED), (0, SCORE_RED)],
)
def test_score_color_bands(score, color):
    assert score_color(score) == color


@pytest.mark.parametrize(
    "pct, status",
    [(100, STATUS_GOOD), (90, STATUS_GOOD), (89, STATUS_WARNING), (70, STATUS_WARNING), (69, STATUS_BAD)],
)
def test_alt_status(pct, status):
    assert alt_status(pct) == status


def test_h1_status():
    assert h1_status(1) == STATUS_GOOD
    assert h1_status(0) == STATUS_WARNING
    assert h1_status(2) == STATUS_WARNING


def test_results_view_for_bare_page(serve_html):
    serve_html(html=BARE_HTML)

    view = results_view(analyze("https://example.com/"))

    assert view.state == "results"
    assert view.score == 70
    assert view.score_color == SCORE_YELLOW
    labels = [row.label for row in view.metrics]
    assert labels == ["Word Count", "Title Tag", "Meta Description", "Images", "Headings", "Links"]

    meta_row = view.metrics[2]
    assert meta_row.value == "Not found"
    assert meta_row.status_text == "0 chars"
    assert view.metrics[4].status_text == "Needs attention"


def test_metric_rows_links_value(serve_html):
    serve_html()
    rows = build_metric_rows(analyze("https://example.com/").analysis)
    assert rows[-1].value == "2 total (1 internal, 1 external)"
    assert rows[-1].status_class is None


def test_index_shows_form(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert 'id="analyzeForm"' in resp.text
    assert 'id="resultsSection"' not in resp.text
    assert 'id="errorSection"' not in resp.text


def test_submit_empty_url_shows_error(client):
    resp = client.post("/", data={"url": ""})

    assert resp.status_code == 400
    assert "Please enter a website URL" in resp.text
    assert 'id="resultsSection"' not in resp.text


def test_submit_invalid_url_shows_error(client, serve_html):
    fetched = serve_html()

    resp = client.post("/", data={"url": "example"})

    assert resp.status_code == 400
    assert "Please enter a valid URL (e.g., https://example.com)" in resp.text
    assert fetched == []


def test_submit_renders_results(client, serve_html):
    serve_html()

    resp = client.post("/", data={"url": "https://example.com/"})

    assert resp.status_code == 200
    assert 'id="resultsSection"' in resp.text
    assert f"color: {SCORE_GREEN}" in resp.text
    assert "Page Load Time" in resp.text
    assert "No specific suggestions available." in resp.text


def test_submit_escapes_page_text(client, serve_html):
    serve_html(html="<title>Tom &amp; Jerry &lt;b&gt;bold&lt;/b&gt;</title>")

    resp = client.post("/", data={"url": "https://example.com/"})

    assert resp.status_code == 200
    assert "Tom &amp; Jerry &lt;b&gt;bold&lt;/b&gt;" in resp.text
    assert "<b>bold</b>" not in resp.text


def test_submit_fetch_failure_shows_error(client, serve_html):
    serve_html(exc=OSError("boom"))

    resp = client.post("/", data={"url": "https://example.com/"})

    assert resp.status_code == 500
    assert "Failed to analyze URL: boom" in resp.text
