# app/graph/lg_workflow.py
from __future__ import annotations

import logging
from datetime import datetime, timezone

from app.graph.lg_state import GraphState, create_initial_state
from app.graph import nodes
from models.analysis_models import parse_timestamp
from models.result_models import AnalysisResult, PageAnalysis, PerformanceStats

logger = logging.getLogger(__name__)


def run_workflow(url: str) -> GraphState:
    """
    /api/analyze 用のシンプルな直列ワークフロー。

    analyzer → suggestion
    """
    logger.info("[lg_workflow] run_workflow start url=%s", url)

    state = create_initial_state(url=url)

    # 1) HTML 取得 → PageMetrics
    state = nodes.analyzer_node(state)

    # 2) 改善提案（LLM or フォールバック）
    state = nodes.suggestion_node(state)

    logger.info(
        "[lg_workflow] run_workflow done url=%s current_node=%s",
        url,
        state.get("current_node"),
    )
    return state


def build_analysis_result(state: GraphState) -> AnalysisResult:
    """
    state の PageMetrics と Suggestions をレスポンス形にまとめる。
    analysis_time は指標の timestamp からここまでの経過時間 (ms)。
    """
    metrics = state["metrics"]
    elapsed = datetime.now(timezone.utc) - parse_timestamp(metrics.timestamp)
    analysis_time = max(0, int(elapsed.total_seconds() * 1000))

    return AnalysisResult(
        url=metrics.url,
        timestamp=metrics.timestamp,
        analysis=PageAnalysis.from_metrics(metrics),
        ai_suggestions=state["suggestions"],
        performance=PerformanceStats(
            loading_time=metrics.loading_time,
            analysis_time=analysis_time,
        ),
    )


def analyze(url: str) -> AnalysisResult:
    """run_workflow + build_analysis_result のショートカット。"""
    return build_analysis_result(run_workflow(url))
