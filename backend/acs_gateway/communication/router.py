# backend/acs_gateway/communication/router.py

"""
ACS 送信用の FastAPI ルーター定義。

- POST /sendEmail
- POST /sendSms
- POST /sendWhatsAppMessage
"""

from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, Response, status

from .client import ProviderSendError
from .schemas import DispatchResult, EmailRequest, SmsRequest, WhatsAppRequest
from .service import CommunicationService

router = APIRouter(tags=["communication"])

EMAIL_SENT_MESSAGE = "Email sent successfully"
SMS_SENT_MESSAGE = "SMS sent successfully"
WHATSAPP_SENT_MESSAGE = "WhatsApp sent successfully"

MESSAGE_ID_HEADER = "X-Message-Id"
DELIVERY_STATUS_HEADER = "X-Delivery-Status"


@lru_cache()
def get_communication_service() -> CommunicationService:
    """
    CommunicationService のシングルトンインスタンスを取得する。

    NOTE:
    - 設定・クライアントは起動時（lifespan）に生成済みのものを使う。
    - テストでは dependency_overrides で差し替える。
    """
    return CommunicationService()


def _apply_result_headers(response: Response, result: DispatchResult) -> None:
    """プロバイダの送信結果をレスポンスヘッダに載せる。"""
    if result.message_id:
        response.headers[MESSAGE_ID_HEADER] = result.message_id
    response.headers[DELIVERY_STATUS_HEADER] = result.delivery_status


def _send_failed(channel_label: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to send {channel_label}.",
    )


@router.post(
    "/sendEmail",
    name="SendEmail",
    operation_id="SendEmail",
    response_model=str,
    summary="メールを 1 通送信する",
)
def send_email(
    body: EmailRequest,
    response: Response,
    service: CommunicationService = Depends(get_communication_service),
) -> str:
    """
    ACS Email で HTML メールを送信し、完了まで待ってから固定文言を返す。

    - 正常系: 200 "Email sent successfully"
    - 異常系: ACS 呼び出しが例外 → 500
    """
    try:
        result = service.send_email(body)
    except ProviderSendError as exc:
        raise _send_failed("email") from exc

    _apply_result_headers(response, result)
    return EMAIL_SENT_MESSAGE


@router.post(
    "/sendSms",
    name="SendSms",
    operation_id="SendSms",
    response_model=str,
    summary="SMS を 1 通送信する",
)
def send_sms(
    body: SmsRequest,
    response: Response,
    service: CommunicationService = Depends(get_communication_service),
) -> str:
    """
    ACS SMS で送信する。

    宛先ごとの受付失敗は 200 のまま X-Delivery-Status: failed で返す。
    """
    try:
        result = service.send_sms(body)
    except ProviderSendError as exc:
        raise _send_failed("SMS") from exc

    _apply_result_headers(response, result)
    return SMS_SENT_MESSAGE


@router.post(
    "/sendWhatsAppMessage",
    name="SendWhatsAppMessage",
    operation_id="SendWhatsAppMessage",
    response_model=str,
    summary="WhatsApp テンプレートメッセージを送信する",
)
def send_whatsapp_message(
    body: WhatsAppRequest,
    response: Response,
    service: CommunicationService = Depends(get_communication_service),
) -> str:
    try:
        result = service.send_whatsapp(body)
    except ProviderSendError as exc:
        raise _send_failed("WhatsApp message") from exc

    _apply_result_headers(response, result)
    return WHATSAPP_SENT_MESSAGE
