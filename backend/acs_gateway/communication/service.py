# backend/acs_gateway/communication/service.py

"""
送信リクエストを ACS SDK 呼び出しに変換するサービス層。

責務:
- リクエスト 1 件につき SDK の送信呼び出しを 1 回だけ行う（リトライ・重複排除なし）
- SDK の例外を ProviderSendError に包んで上位（router）へ伝える
- SDK が返す結果（メッセージ ID・受付ステータス）を DispatchResult として返す
"""

import logging
from typing import Any, Dict, List, Optional

from azure.communication.messages.models import TemplateNotificationContent

from .client import CommunicationClients, ProviderSendError, get_communication_clients
from .config import CommunicationSettings, get_communication_settings
from .schemas import Channel, DispatchResult, EmailRequest, SmsRequest, WhatsAppRequest
from .templates import build_message_template

logger = logging.getLogger(__name__)


class CommunicationService:
    """
    Email / SMS / WhatsApp の送信をまとめるサービス。

    - クライアントと設定は起動時に生成したものを共有する
    - 宛先や本文の形式チェックは行わない
    """

    def __init__(
        self,
        clients: Optional[CommunicationClients] = None,
        settings: Optional[CommunicationSettings] = None,
    ) -> None:
        self._settings = settings or get_communication_settings()
        self._clients = clients or get_communication_clients()

    # ---- 公開 API ------------------------------------------------------

    def send_email(self, request: EmailRequest) -> DispatchResult:
        """
        メールを 1 通送信し、ACS 側の処理完了まで待つ。
        """
        message: Dict[str, Any] = {
            "senderAddress": self._settings.sender_email_address,
            "recipients": {"to": [{"address": request.recipient}]},
            "content": {
                "subject": request.subject,
                "html": request.html_content,
            },
        }

        try:
            poller = self._clients.email.begin_send(message)
            outcome = poller.result()
        except Exception as exc:  # noqa: BLE001
            raise self._send_failed(Channel.EMAIL, exc) from exc

        outcome = outcome or {}
        error = outcome.get("error")
        result = DispatchResult(
            channel=Channel.EMAIL,
            message_id=outcome.get("id"),
            status=outcome.get("status"),
            successful=error is None,
            error_message=str(error) if error is not None else None,
        )
        self._log_result(result)
        return result

    def send_sms(self, request: SmsRequest) -> DispatchResult:
        """
        SMS を 1 通送信する。

        ACS は宛先ごとの結果を返す。受付失敗（キャリア拒否など）でも例外にはならないため、
        successful=False の DispatchResult として呼び出し元に返す。
        """
        try:
            responses = self._clients.sms.send(
                from_=self._settings.sender_phone_number,
                to=request.phone_number,
                message=request.message,
            )
        except Exception as exc:  # noqa: BLE001
            raise self._send_failed(Channel.SMS, exc) from exc

        if not responses:
            # 宛先ごとの結果が無い場合は受付を確認できていないので失敗扱い
            result = DispatchResult(
                channel=Channel.SMS,
                status="unknown",
                successful=False,
                error_message="no recipient result",
            )
        else:
            sms_result = responses[0]
            result = DispatchResult(
                channel=Channel.SMS,
                message_id=sms_result.message_id,
                status=str(sms_result.http_status_code),
                successful=bool(sms_result.successful),
                error_message=sms_result.error_message,
            )

        self._log_result(result)
        return result

    def send_whatsapp(self, request: WhatsAppRequest) -> DispatchResult:
        """
        WhatsApp のテンプレートメッセージを 1 件送信する。

        templateParameters は value1..valueN のプレースホルダに位置順で割り当てる。
        """
        recipients: List[str] = [request.phone_number]
        template = build_message_template(
            name=request.template_name,
            language=request.template_language,
            parameters=request.template_parameters,
        )
        content = TemplateNotificationContent(
            channel_registration_id=self._settings.whatsapp_channel_id,
            to=recipients,
            template=template,
        )

        try:
            response = self._clients.messages.send(content)
        except Exception as exc:  # noqa: BLE001
            raise self._send_failed(Channel.WHATSAPP, exc) from exc

        receipts = list(getattr(response, "receipts", None) or [])
        result = DispatchResult(
            channel=Channel.WHATSAPP,
            message_id=receipts[0].message_id if receipts else None,
            status="accepted" if receipts else None,
        )
        self._log_result(result)
        return result

    # ---- 内部ヘルパー -------------------------------------------------

    def _send_failed(self, channel: Channel, exc: Exception) -> ProviderSendError:
        logger.exception("ACS %s send raised an error.", channel.value)
        return ProviderSendError(channel, exc)

    def _log_result(self, result: DispatchResult) -> None:
        # 宛先や本文は個人情報を含むのでログに出さない
        if result.successful:
            logger.info(
                "ACS %s send accepted: message_id=%s status=%s",
                result.channel.value,
                result.message_id,
                result.status,
            )
        else:
            logger.warning(
                "ACS %s send rejected by provider: message_id=%s status=%s error=%s",
                result.channel.value,
                result.message_id,
                result.status,
                result.error_message,
            )
