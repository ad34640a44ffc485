# services/llm_client.py
from openai import OpenAI

from app.config import settings

_client: OpenAI | None = None


def get_llm_client() -> OpenAI:
    global _client
    if _client is None:
        if not settings.llm_api_key:
            raise RuntimeError("LLM_API_KEY が設定されていません")
        _client = OpenAI(
            api_key=settings.llm_api_key,
            base_url=settings.llm_base_url,
            timeout=settings.llm_timeout,
            max_retries=0,
        )
    return _client


def reset_llm_client() -> None:
    """設定変更後（テスト等）にクライアントを作り直させる。"""
    global _client
    _client = None
