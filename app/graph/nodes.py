# app/graph/nodes.py
from __future__ import annotations

import logging
from typing import List

from app.graph.lg_state import GraphState
from agents.page_analyzer_agent import analyze_url
from agents.suggestion_agent import generate_suggestions

logger = logging.getLogger(__name__)


def _log_progress(state: GraphState, node: str, message: str) -> GraphState:
    """
    進捗ログを state に積むユーティリティ。
    state は dict (GraphState) として扱う。
    """
    line = f"[{node}] {message}"

    messages: List[str] = list(state.get("progress_messages", []))
    messages.append(line)

    state["progress_messages"] = messages
    state["current_node"] = node

    logger.info(line)
    return state


# ---------- Analyzer ノード ----------


def analyzer_node(state: GraphState) -> GraphState:
    """
    Analyzer ノード:
    url を取得・解析して PageMetrics を state に詰める。
    失敗（PageAnalysisError）はそのまま上に投げる。
    """
    state = _log_progress(state, "analyzer", f"start: fetching {state['url']}")

    metrics = analyze_url(state["url"])
    state["metrics"] = metrics

    state = _log_progress(
        state,
        "analyzer",
        f"done: words={metrics.word_count} loading_time={metrics.loading_time}ms",
    )
    return state


# ---------- Suggestion ノード ----------


def suggestion_node(state: GraphState) -> GraphState:
    """
    Suggestion ノード:
    PageMetrics から Suggestions を生成する（LLM or フォールバック、例外なし）。
    """
    state = _log_progress(state, "suggestion", "start: generating suggestions")

    suggestions = generate_suggestions(state["metrics"])
    state["suggestions"] = suggestions

    state = _log_progress(
        state,
        "suggestion",
        f"done: score={suggestions.seo_score} improvements={len(suggestions.improvements)}",
    )
    return state
