# backend/acs_gateway/api/exceptions.py

"""
アプリ全体の例外ハンドラ。

- リクエストボディの不備（JSON 不正・必須項目なし・型違い）→ 400
  ハンドラ本体は実行されないので ACS には到達しない
- ルーターで処理されずに漏れた ACS 連携エラー → 500（詳細はログ側で確認）
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from acs_gateway.communication.client import CommunicationClientError

logger = logging.getLogger(__name__)


def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    FastAPI デフォルトの 422 を 400 Bad Request に置き換える。
    """
    logger.info(
        "Rejected malformed request: method=%s path=%s errors=%d",
        request.method,
        request.url.path,
        len(exc.errors()),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def handle_communication_error(request: Request, exc: CommunicationClientError) -> JSONResponse:
    logger.error(
        "Unhandled communication error: method=%s path=%s error=%s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Failed to reach Azure Communication Services."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """例外ハンドラを FastAPI アプリに登録する。"""
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(CommunicationClientError, handle_communication_error)
