# models/result_models.py

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.analysis_models import (
    HeadingStats,
    ImageStats,
    LinkStats,
    PageMetrics,
    TextMetric,
    utc_timestamp,
)
from models.suggestion_models import Suggestions


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PageAnalysis(ApiModel):
    """レスポンスの analysis 部分（PageMetrics から url / 時間系を除いたもの）。"""

    word_count: int
    title: TextMetric
    meta_description: TextMetric
    images: ImageStats
    headings: HeadingStats
    links: LinkStats

    @classmethod
    def from_metrics(cls, metrics: PageMetrics) -> "PageAnalysis":
        return cls(
            word_count=metrics.word_count,
            title=metrics.title,
            meta_description=metrics.meta_description,
            images=metrics.images,
            headings=metrics.headings,
            links=metrics.links,
        )


class PerformanceStats(ApiModel):
    loading_time: int = Field(0, ge=0)
    analysis_time: int = Field(0, ge=0)


class AnalysisResult(ApiModel):
    """POST /api/analyze の成功レスポンス。1リクエストの間だけ存在する。"""

    success: Literal[True] = True
    url: str
    timestamp: str
    analysis: PageAnalysis
    ai_suggestions: Suggestions
    performance: PerformanceStats


class ErrorResponse(ApiModel):
    success: Literal[False] = False
    error: str
    message: str
    timestamp: str = Field(default_factory=utc_timestamp)


class HealthResponse(ApiModel):
    status: str = "healthy"
    timestamp: str = Field(default_factory=utc_timestamp)
    version: str
