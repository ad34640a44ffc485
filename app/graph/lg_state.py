# app/graph/lg_state.py
from __future__ import annotations

from typing import Any, Dict


class GraphState(Dict[str, Any]):
    """
    1回の解析リクエスト分の途中結果。ノードが順に書き足していく dict。

    キー:
      url             解析対象 URL（入力）
      metrics         analyzer_node が入れる PageMetrics
      suggestions     suggestion_node が入れる Suggestions
      progress_messages, current_node  進捗ログ
    """


def create_initial_state(url: str) -> GraphState:
    """
    ワークフロー開始時の初期 state を作成。
    リクエストごとに新しく作るので、リクエスト間で共有されるものは無い。
    """
    state: GraphState = GraphState()
    state["url"] = url
    state["progress_messages"] = []  # 各ノードからのログ的メッセージ
    state["current_node"] = None
    return state
