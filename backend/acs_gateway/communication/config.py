# backend/acs_gateway/communication/config.py

"""
ACS 連携およびアプリ全体に必要な設定値をまとめるモジュール。

設定は起動時に 1 度だけ読み込み、以降は読み取り専用として扱う。
"""

from dataclasses import dataclass
from functools import lru_cache

from acs_gateway.utils.config import get_env, get_env_bool

_PRODUCTION_ENVIRONMENTS = {"production", "prod"}


@dataclass(frozen=True)
class CommunicationSettings:
    """ACS 用の設定値コンテナ。"""

    connection_string: str
    sender_email_address: str
    sender_phone_number: str
    whatsapp_channel_id: str


@dataclass(frozen=True)
class AppSettings:
    """アプリ全体（実行環境・ミドルウェア）の設定値。"""

    environment: str
    enforce_https: bool
    log_level: str

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in _PRODUCTION_ENVIRONMENTS


@lru_cache()
def get_communication_settings() -> CommunicationSettings:
    """
    環境変数から ACS 設定を読み込む。

    必須（デフォルトなし）:
      - COMMUNICATION_SERVICES_CONNECTION_STRING
      - SENDER_EMAIL_ADDRESS
      - SENDER_PHONE_NUMBER
      - WHATSAPP_NUMBER  （WhatsApp のチャネル登録 ID）
    """
    return CommunicationSettings(
        connection_string=get_env("COMMUNICATION_SERVICES_CONNECTION_STRING"),
        sender_email_address=get_env("SENDER_EMAIL_ADDRESS"),
        sender_phone_number=get_env("SENDER_PHONE_NUMBER"),
        whatsapp_channel_id=get_env("WHATSAPP_NUMBER"),
    )


@lru_cache()
def get_app_settings() -> AppSettings:
    """
    環境変数からアプリ設定を読み込む。

    任意:
      - APP_ENV        (デフォルト: development)
      - ENFORCE_HTTPS  (デフォルト: false)
      - LOG_LEVEL      (デフォルト: INFO)
    """
    environment = get_env("APP_ENV", default="development", required=False)
    log_level = get_env("LOG_LEVEL", default="INFO", required=False)

    return AppSettings(
        environment=environment,
        enforce_https=get_env_bool("ENFORCE_HTTPS", default=False),
        log_level=log_level,
    )
