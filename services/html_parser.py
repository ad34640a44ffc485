# services/html_parser.py

from __future__ import annotations

import logging
import math
from typing import Dict, List

from bs4 import BeautifulSoup
from bs4.element import PreformattedString

from models.analysis_models import (
    HEADING_LEVELS,
    HeadingStats,
    ImageStats,
    LinkInfo,
    LinkStats,
    PageMetrics,
    TextMetric,
)

logger = logging.getLogger(__name__)

# title / meta description の最適長（両端を含む）
TITLE_MIN_LENGTH = 30
TITLE_MAX_LENGTH = 60
META_DESCRIPTION_MIN_LENGTH = 120
META_DESCRIPTION_MAX_LENGTH = 160

# 内部/外部どちらにも数えない href
_IGNORED_HREF_PREFIXES = ("#", "javascript:")
_EXTERNAL_HREF_PREFIXES = ("http", "//")


def _text_metric(content: str, min_length: int, max_length: int) -> TextMetric:
    length = len(content)
    return TextMetric(
        content=content,
        length=length,
        is_optimal=min_length <= length <= max_length,
    )


def _round_half_up(value: float) -> int:
    # round() は偶数丸めなので 62.5 → 62 になってしまう
    return int(math.floor(value + 0.5))


def count_words(soup: BeautifulSoup) -> int:
    """
    <body> のテキストを空白区切りで数える。
    <body> が無い断片 HTML の場合は <head>/<title> 以外のテキストを対象にする。
    """
    if soup.body is not None:
        text = soup.body.get_text(separator=" ")
    else:
        strings = [
            s for s in soup.find_all(string=True)
            if not isinstance(s, PreformattedString)
            and s.find_parent(["head", "title"]) is None
        ]
        text = " ".join(strings)
    return len(text.split())


def extract_title(soup: BeautifulSoup) -> TextMetric:
    title = soup.title.get_text().strip() if soup.title else ""
    return _text_metric(title, TITLE_MIN_LENGTH, TITLE_MAX_LENGTH)


def extract_meta_description(soup: BeautifulSoup) -> TextMetric:
    meta_desc_tag = soup.find("meta", attrs={"name": "description"})
    description = (meta_desc_tag.get("content") if meta_desc_tag else None) or ""
    return _text_metric(
        description, META_DESCRIPTION_MIN_LENGTH, META_DESCRIPTION_MAX_LENGTH
    )


def analyze_images(soup: BeautifulSoup) -> ImageStats:
    """alt が無い / 空白だけの <img> を missing として数える。"""
    images = soup.find_all("img")
    total = len(images)
    missing_alt = 0
    for img in images:
        alt = img.get("alt")
        if not alt or not alt.strip():
            missing_alt += 1

    with_alt = total - missing_alt
    alt_percentage = _round_half_up(with_alt / total * 100) if total > 0 else 100

    return ImageStats(
        total=total,
        missing_alt=missing_alt,
        with_alt=with_alt,
        alt_percentage=alt_percentage,
    )


def extract_headings(soup: BeautifulSoup) -> HeadingStats:
    """h1〜h6 をレベルごとに文書順で集める。"""
    structure: Dict[str, List[str]] = {}
    for level in HEADING_LEVELS:
        structure[level] = [tag.get_text().strip() for tag in soup.find_all(level)]

    return HeadingStats(
        structure=structure,
        h1_count=len(structure["h1"]),
        total_count=sum(len(texts) for texts in structure.values()),
    )


def analyze_links(soup: BeautifulSoup) -> LinkStats:
    """
    a[href] を内部/外部に振り分ける。
    - "#..." / "javascript:..." はどちらにも入れない（total には含める）
    - "http..." / "//..." は外部
    - それ以外（相対パス、mailto: 等）は内部
    """
    anchors = soup.find_all("a", href=True)
    internal_links: List[LinkInfo] = []
    external_links: List[LinkInfo] = []

    for a in anchors:
        href = a["href"]
        if not href or href.startswith(_IGNORED_HREF_PREFIXES):
            continue
        link = LinkInfo(href=href, text=a.get_text().strip())
        if href.startswith(_EXTERNAL_HREF_PREFIXES):
            external_links.append(link)
        else:
            internal_links.append(link)

    return LinkStats(
        total=len(anchors),
        internal=len(internal_links),
        external=len(external_links),
        internal_links=internal_links,
        external_links=external_links,
    )


def parse_html(url: str, html: str, loading_time: int = 0) -> PageMetrics:
    """
    HTML文字列を解析して PageMetrics を生成する。
    ※ ここではネットワークアクセスは行わない（fetch_html で取得済み前提）
    各指標は独立して計算し、要素が無ければ空文字 / 0 になる。
    """
    soup = BeautifulSoup(html, "html.parser")

    metrics = PageMetrics(
        url=url,
        word_count=count_words(soup),
        title=extract_title(soup),
        meta_description=extract_meta_description(soup),
        images=analyze_images(soup),
        headings=extract_headings(soup),
        links=analyze_links(soup),
        loading_time=loading_time,
    )

    logger.info(
        "[html_parser] parsed url=%s words=%s images=%s headings=%s links=%s",
        url,
        metrics.word_count,
        metrics.images.total,
        metrics.headings.total_count,
        metrics.links.total,
    )
    return metrics
