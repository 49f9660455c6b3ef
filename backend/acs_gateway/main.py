# backend/acs_gateway/main.py

"""
バックエンドアプリケーションのエントリーポイント。

主な責務:
- /sendEmail, /sendSms, /sendWhatsAppMessage エンドポイントを公開する
- 起動時に ACS 設定とクライアントを生成する（不備があれば起動自体を失敗させる）
- 本番以外では OpenAPI (/docs, /openapi.json) を公開する
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

from acs_gateway.api.exceptions import register_exception_handlers
from acs_gateway.communication.client import get_communication_clients
from acs_gateway.communication.config import get_app_settings, get_communication_settings
from acs_gateway.communication.router import router as communication_router
from acs_gateway.utils.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    起動時に設定・クライアントを 1 度だけ生成する。

    接続文字列の未設定・形式不正はここで例外になり、アプリは起動しない。
    """
    settings = get_communication_settings()
    get_communication_clients()
    logger.info(
        "ACS clients initialized: sender_email=%s sender_sms=%s",
        settings.sender_email_address,
        settings.sender_phone_number,
    )
    yield


def create_app() -> FastAPI:
    """
    FastAPI アプリケーションファクトリ。

    - ACS 送信エンドポイント (/sendEmail, /sendSms, /sendWhatsAppMessage)
    - ヘルスチェックエンドポイント (/health)
    """
    app_settings = get_app_settings()
    configure_logging(app_settings.log_level)

    docs_enabled = not app_settings.is_production
    app = FastAPI(
        title="ACS Gateway",
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    if app_settings.enforce_https:
        app.add_middleware(HTTPSRedirectMiddleware)

    register_exception_handlers(app)

    # ルーター登録
    app.include_router(communication_router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """
        簡易ヘルスチェックエンドポイント。
        モニタリングや動作確認用。
        """
        return {"status": "ok", "environment": app_settings.environment}

    return app


# uvicorn 実行時のエントリーポイント
app = create_app()
