# app/api/routes.py
from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.config import settings
from app.graph.lg_workflow import analyze
from models.result_models import AnalysisResult, ErrorResponse, HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter()


# --------- Request モデル ---------


class AnalyzeRequest(BaseModel):
    # 未指定や文字列以外でも 422 にせず、400 / 500 の ErrorResponse で返したいので Any
    url: Optional[Any] = None


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


# --------- エンドポイント ---------


@router.post(
    "/analyze",
    response_model=AnalysisResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def api_analyze(payload: Optional[AnalyzeRequest] = None):
    """
    URL を解析して SEO 指標 + 改善提案を返すメインAPI。

    1) HTML 取得 → PageMetrics
    2) SuggestionAgent（LLM or フォールバック）
    3) まとめて AnalysisResult で返す
    """
    url = payload.url if payload else None
    if isinstance(url, str):
        url = url.strip()
    if not url:
        return _error_response(
            400, "URL is required", "Please provide a website URL to analyze"
        )

    logger.info("[api.analyze] start url=%s", url)

    try:
        result = analyze(url)
    except Exception as e:  # noqa: BLE001
        logger.error("[api.analyze] analysis failed url=%s error=%s", url, e)
        return _error_response(500, "Analysis failed", str(e))

    logger.info(
        "[api.analyze] done url=%s score=%s",
        url,
        result.ai_suggestions.seo_score,
    )
    return result


@router.get("/analyze/health", response_model=HealthResponse)
def api_health() -> HealthResponse:
    """ヘルスチェック。"""
    return HealthResponse(version=settings.app_version)
