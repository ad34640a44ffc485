# app/config.py

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    SEO チェッカーの設定。
    環境変数（または .env）で上書きできる。LLM_API_KEY が無くても起動でき、
    その場合の改善提案はルールベースだけになる。
    """

    # ---------- 改善提案用 LLM ----------
    # chat completions 互換 API のキー / 接続先 / モデル
    llm_api_key: str | None = None
    llm_base_url: str = "https://api.siliconflow.cn/v1"
    llm_model: str = "deepseek-ai/DeepSeek-V2-Chat"

    # リクエストパラメータ。timeout を超えたらフォールバックに切り替わる
    llm_temperature: float = 0.7
    llm_max_tokens: int = 2000
    llm_timeout: float = 30.0

    # ---------- 解析対象ページの取得 ----------
    # この時間で取れなければ解析全体を 500 で失敗させる
    fetch_timeout: float = 10.0
    user_agent: str = "Mozilla/5.0 (compatible; SEO-Analyzer/1.0)"

    # ---------- サーバ ----------
    host: str = "127.0.0.1"
    port: int = 8000
    # /api/analyze/health で返すバージョン
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # LLM_* 以外の無関係な環境変数は読み捨てる
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
