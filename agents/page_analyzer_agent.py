# agents/page_analyzer_agent.py

from __future__ import annotations

import logging
import time
from urllib.parse import urlparse

from models.analysis_models import PageMetrics
from services.crawler import fetch_html
from services.html_parser import parse_html

logger = logging.getLogger(__name__)


class PageAnalysisError(RuntimeError):
    """ページ取得・解析に失敗したときの例外。API では 500 として返す。"""


def is_valid_url(url: str) -> bool:
    """http / https の絶対 URL で、ホストがあるものだけ受け付ける。"""
    if not url or not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def analyze_url(url: str) -> PageMetrics:
    """
    URL を取得して PageMetrics を返す。

    1) URL 形式チェック
    2) HTML 取得（services.crawler）
    3) 指標抽出（services.html_parser）

    loading_time は 2) + 3) の経過時間 (ms)。
    失敗はすべて PageAnalysisError にまとめて投げ直す。
    """
    if not is_valid_url(url):
        raise PageAnalysisError("Failed to analyze URL: Invalid URL format")

    started = time.perf_counter()
    try:
        logger.info("[page_analyzer] Fetching HTML: %s", url)
        html = fetch_html(url)
        metrics = parse_html(url, html)
    except Exception as e:
        logger.warning("[page_analyzer] failed url=%s error=%s", url, e)
        raise PageAnalysisError(f"Failed to analyze URL: {e}") from e

    # 抽出時間も含めて loading_time を確定させる
    loading_time = int((time.perf_counter() - started) * 1000)
    metrics = metrics.model_copy(update={"loading_time": loading_time})

    logger.info("[page_analyzer] done url=%s loading_time=%sms", url, loading_time)
    return metrics
