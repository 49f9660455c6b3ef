"""
Azure Communication Services (ACS) 連携モジュール。

- config: 接続文字列・送信元アドレス等の設定値
- client: Email / SMS / Messages の SDK クライアント（プロセス内で 1 つずつ共有）
- schemas: /sendEmail, /sendSms, /sendWhatsAppMessage 用の Pydantic モデル
- templates: WhatsApp テンプレートのプレースホルダ組み立て
- service: リクエストを SDK 呼び出しに変換する送信ロジック
- router: 3 つの送信エンドポイント
"""

from .config import CommunicationSettings, get_communication_settings  # noqa: F401
from .service import CommunicationService  # noqa: F401
from .schemas import (  # noqa: F401
    DispatchResult,
    EmailRequest,
    SmsRequest,
    WhatsAppRequest,
)
