# services/crawler.py

import logging

import requests

from app.config import settings

logger = logging.getLogger(__name__)


def fetch_html(url: str, timeout: float | None = None) -> str:
    """
    単純な GET だけのクロール。
    1ページだけ取るので、並列もリトライも入れていない。
    タイムアウト / 非 2xx は requests の例外がそのまま上がる。
    """
    headers = {
        "User-Agent": settings.user_agent,
    }
    timeout = timeout if timeout is not None else settings.fetch_timeout

    logger.info("[crawler] GET %s timeout=%s", url, timeout)
    resp = requests.get(url, headers=headers, timeout=timeout)
    resp.raise_for_status()
    return resp.text
