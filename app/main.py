# app/main.py
import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.config import settings
from app.api.routes import router as api_router
from app.web.views import router as web_router

# 開発中は必ずコンソールに出したいので、ルートロガーにハンドラを付ける
logging.basicConfig(
    level=settings.log_level.upper(),
    format="[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

STATIC_DIR = Path(__file__).resolve().parent / "static"

app = FastAPI(title="SEO Checker", version=settings.app_version)

app.include_router(api_router, prefix="/api")
app.include_router(web_router)
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


def run() -> None:
    """`seo-checker` コマンドの入口。uvicorn で app を起動する。"""
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
