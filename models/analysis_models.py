# models/analysis_models.py

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

HEADING_LEVELS = ("h1", "h2", "h3", "h4", "h5", "h6")


def utc_timestamp() -> str:
    """ISO-8601 (UTC, ミリ秒, 末尾 Z) のタイムスタンプ文字列を返す。"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """utc_timestamp() 形式の文字列を datetime に戻す。"""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class MetricModel(BaseModel):
    """
    抽出結果モデルの共通ベース。
    - JSON では camelCase（wordCount, isOptimal ...）
    - Python 側は snake_case のまま扱える
    - 一度計算したら変更しない（frozen）
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class TextMetric(MetricModel):
    """title / meta description 用。長さと最適範囲内かどうか。"""

    content: str = ""
    length: int = Field(0, ge=0)
    is_optimal: bool = False


class ImageStats(MetricModel):
    total: int = Field(0, ge=0)
    missing_alt: int = Field(0, ge=0)
    with_alt: int = Field(0, ge=0)
    alt_percentage: int = Field(100, ge=0, le=100)


class HeadingStats(MetricModel):
    """
    h1〜h6 のテキスト一覧。
    structure には常に h1〜h6 の 6 キーが入る（無いレベルは空リスト）。
    """

    structure: Dict[str, List[str]] = Field(
        default_factory=lambda: {level: [] for level in HEADING_LEVELS}
    )
    h1_count: int = Field(0, ge=0)
    total_count: int = Field(0, ge=0)


class LinkInfo(MetricModel):
    href: str
    text: str = ""


class LinkStats(MetricModel):
    # total は a[href] 全件（# / javascript: も含む）
    total: int = Field(0, ge=0)
    internal: int = Field(0, ge=0)
    external: int = Field(0, ge=0)
    internal_links: List[LinkInfo] = Field(default_factory=list)
    external_links: List[LinkInfo] = Field(default_factory=list)


class PageMetrics(MetricModel):
    """
    1ページ分の SEO 指標。
    Extractor (services.html_parser) が生成し、SuggestionAgent に渡す。
    """

    url: str
    word_count: int = Field(0, ge=0)
    title: TextMetric = Field(default_factory=TextMetric)
    meta_description: TextMetric = Field(default_factory=TextMetric)
    images: ImageStats = Field(default_factory=ImageStats)
    headings: HeadingStats = Field(default_factory=HeadingStats)
    links: LinkStats = Field(default_factory=LinkStats)

    # fetch + 抽出にかかった時間 (ms)
    loading_time: int = Field(0, ge=0)
    timestamp: str = Field(default_factory=utc_timestamp)
