# backend/acs_gateway/communication/client.py

"""
ACS SDK クライアントの生成を担当するモジュール。

Email / SMS / Messages の 3 クライアントは接続文字列から 1 度だけ生成し、
プロセス内の全リクエストで共有する（リクエストごとの状態は持たない）。
"""

from dataclasses import dataclass
from functools import lru_cache

from azure.communication.email import EmailClient
from azure.communication.messages import NotificationMessagesClient
from azure.communication.sms import SmsClient

from .config import CommunicationSettings, get_communication_settings
from .schemas import Channel


class CommunicationClientError(RuntimeError):
    """ACS 連携全般の例外。"""


class CommunicationConfigError(CommunicationClientError):
    """接続文字列が不正などでクライアントを生成できない場合のエラー。"""


class ProviderSendError(CommunicationClientError):
    """ACS の送信 API 呼び出しが例外で失敗した場合のエラー。"""

    def __init__(self, channel: Channel, cause: BaseException) -> None:
        super().__init__(f"ACS {channel.value} send failed: {cause}")
        self.channel = channel
        self.cause = cause


@dataclass(frozen=True)
class CommunicationClients:
    """
    ACS の長寿命クライアント 3 つをまとめたコンテナ。

    SDK クライアント自体はスレッドセーフなので、ロックなしで共有してよい。
    """

    email: EmailClient
    sms: SmsClient
    messages: NotificationMessagesClient


def build_communication_clients(settings: CommunicationSettings) -> CommunicationClients:
    """
    接続文字列から 3 つの SDK クライアントを生成する。

    :raises CommunicationConfigError: 接続文字列の形式が不正な場合
    """
    connection_string = settings.connection_string

    try:
        return CommunicationClients(
            email=EmailClient.from_connection_string(connection_string),
            sms=SmsClient.from_connection_string(connection_string),
            messages=NotificationMessagesClient.from_connection_string(connection_string),
        )
    except (ValueError, TypeError) as exc:
        raise CommunicationConfigError(
            "Invalid COMMUNICATION_SERVICES_CONNECTION_STRING. "
            "Expected 'endpoint=https://...;accesskey=...'."
        ) from exc


@lru_cache()
def get_communication_clients() -> CommunicationClients:
    """
    アプリ全体で共有する CommunicationClients を返す。

    初回呼び出し時にのみ生成し、それ以降は同じインスタンスを返す。
    """
    return build_communication_clients(get_communication_settings())
