# app/web/views.py
from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from agents.page_analyzer_agent import is_valid_url
from app.graph.lg_workflow import analyze
from app.web.presenter import PageView, error_view, idle_view, results_view

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


def _render(request: Request, view: PageView, status_code: int = 200) -> HTMLResponse:
    return templates.TemplateResponse(
        request, "index.html", view.context(), status_code=status_code
    )


@router.get("/", response_class=HTMLResponse)
def index(request: Request) -> HTMLResponse:
    """入力フォーム（idle 状態）。"""
    return _render(request, idle_view())


@router.post("/", response_class=HTMLResponse)
def submit(request: Request, url: str = Form("")) -> HTMLResponse:
    """
    フォーム送信。JS が無効でも動くようにサーバ側でも URL をチェックする。
    成功 → results、失敗 → error を描画する。
    """
    url = url.strip()
    if not url:
        return _render(request, error_view("Please enter a website URL"), 400)
    if not is_valid_url(url):
        return _render(
            request,
            error_view("Please enter a valid URL (e.g., https://example.com)", url),
            400,
        )

    logger.info("[web.submit] url=%s", url)
    try:
        result = analyze(url)
    except Exception as e:  # noqa: BLE001
        logger.error("[web.submit] analysis failed url=%s error=%s", url, e)
        return _render(request, error_view(str(e), url), 500)

    return _render(request, results_view(result))
