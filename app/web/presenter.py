# app/web/presenter.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from models.result_models import AnalysisResult, PageAnalysis

# スコアの色分け（>=80 緑 / >=60 黄 / それ以外 赤）
SCORE_GREEN = "#28a745"
SCORE_YELLOW = "#ffc107"
SCORE_RED = "#dc3545"

STATUS_GOOD = "status-good"
STATUS_WARNING = "status-warning"
STATUS_BAD = "status-bad"

NO_IMPROVEMENTS_TEXT = "No specific suggestions available."
NO_BLOG_IDEAS_TEXT = "No blog post ideas available."

# 画面状態（どれか1つだけ表示する）
STATE_IDLE = "idle"
STATE_RESULTS = "results"
STATE_ERROR = "error"


@dataclass
class MetricRow:
    label: str
    icon: str
    value: str
    status_class: Optional[str] = None
    status_text: Optional[str] = None


@dataclass
class PageView:
    """テンプレートに渡す表示用データ。"""

    state: str = STATE_IDLE
    url: str = ""
    error_message: str = ""
    score: int = 0
    score_color: str = SCORE_RED
    score_explanation: str = ""
    metrics: List[MetricRow] = field(default_factory=list)
    improvements: List[str] = field(default_factory=list)
    blog_ideas: List[str] = field(default_factory=list)
    loading_time: int = 0
    analysis_time: int = 0

    def context(self) -> Dict[str, Any]:
        return {
            "view": self,
            "no_improvements_text": NO_IMPROVEMENTS_TEXT,
            "no_blog_ideas_text": NO_BLOG_IDEAS_TEXT,
        }


def score_color(score: int) -> str:
    if score >= 80:
        return SCORE_GREEN
    if score >= 60:
        return SCORE_YELLOW
    return SCORE_RED


def optimal_status(is_optimal: bool) -> str:
    return STATUS_GOOD if is_optimal else STATUS_WARNING


def alt_status(alt_percentage: int) -> str:
    if alt_percentage >= 90:
        return STATUS_GOOD
    if alt_percentage >= 70:
        return STATUS_WARNING
    return STATUS_BAD


def h1_status(h1_count: int) -> str:
    return STATUS_GOOD if h1_count == 1 else STATUS_WARNING


def build_metric_rows(analysis: PageAnalysis) -> List[MetricRow]:
    """構造化指標のセクション（word count / title / meta / images / headings / links）。"""
    title = analysis.title
    meta = analysis.meta_description
    images = analysis.images
    headings = analysis.headings
    links = analysis.links

    return [
        MetricRow("Word Count", "fa-file-word", f"{analysis.word_count} words"),
        MetricRow(
            "Title Tag",
            "fa-heading",
            title.content or "Not found",
            optimal_status(title.is_optimal),
            f"{title.length} chars",
        ),
        MetricRow(
            "Meta Description",
            "fa-tag",
            meta.content or "Not found",
            optimal_status(meta.is_optimal),
            f"{meta.length} chars",
        ),
        MetricRow(
            "Images",
            "fa-image",
            f"{images.total} total, {images.missing_alt} missing alt",
            alt_status(images.alt_percentage),
            f"{images.alt_percentage}% with alt",
        ),
        MetricRow(
            "Headings",
            "fa-header",
            f"{headings.total_count} total, {headings.h1_count} H1 tags",
            h1_status(headings.h1_count),
            "Optimal" if headings.h1_count == 1 else "Needs attention",
        ),
        MetricRow(
            "Links",
            "fa-link",
            f"{links.total} total ({links.internal} internal, {links.external} external)",
        ),
    ]


def results_view(result: AnalysisResult) -> PageView:
    suggestions = result.ai_suggestions
    return PageView(
        state=STATE_RESULTS,
        url=result.url,
        score=suggestions.seo_score,
        score_color=score_color(suggestions.seo_score),
        score_explanation=suggestions.score_explanation or "SEO analysis completed.",
        metrics=build_metric_rows(result.analysis),
        improvements=list(suggestions.improvements),
        blog_ideas=list(suggestions.blog_ideas),
        loading_time=result.performance.loading_time,
        analysis_time=result.performance.analysis_time,
    )


def error_view(message: str, url: str = "") -> PageView:
    return PageView(state=STATE_ERROR, url=url, error_message=message)


def idle_view() -> PageView:
    return PageView(state=STATE_IDLE)
