# backend/acs_gateway/communication/schemas.py

"""
送信エンドポイントのリクエスト／送信結果スキーマ定義。

JSON の項目名は camelCase（htmlContent, phoneNumber など）で受け取り、
Python 側では snake_case の属性として扱う。
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr

DEFAULT_TEMPLATE_NAME = "appointment_reminder"
DEFAULT_TEMPLATE_LANGUAGE = "en"


class Channel(str, Enum):
    """送信チャネル種別。"""

    EMAIL = "email"
    SMS = "sms"
    WHATSAPP = "whatsapp"


class _RequestModel(BaseModel):
    # 文字列項目に数値などが来た場合は型変換せず 400 にする
    model_config = ConfigDict(populate_by_name=True, strict=True)


class EmailRequest(_RequestModel):
    """
    /sendEmail のリクエストボディ。

    宛先・件名・本文の形式チェックは行わない（空文字も受け付ける）。
    """

    subject: StrictStr = Field(..., description="メール件名")
    html_content: StrictStr = Field(
        ...,
        alias="htmlContent",
        description="HTML 本文",
    )
    recipient: StrictStr = Field(..., description="宛先メールアドレス")


class SmsRequest(_RequestModel):
    """/sendSms のリクエストボディ。"""

    message: StrictStr = Field(..., description="SMS 本文")
    phone_number: StrictStr = Field(
        ...,
        alias="phoneNumber",
        description="宛先電話番号（E.164 形式を想定するが検証はしない）",
    )


class WhatsAppRequest(_RequestModel):
    """
    /sendWhatsAppMessage のリクエストボディ。

    templateParameters は順番どおりにテンプレートの value1..valueN に割り当てられる。
    登録済みテンプレートのプレースホルダ数との整合はチェックしない。
    """

    phone_number: StrictStr = Field(
        ...,
        alias="phoneNumber",
        description="宛先電話番号",
    )
    template_name: StrictStr = Field(
        DEFAULT_TEMPLATE_NAME,
        alias="templateName",
        description="ACS に登録済みの WhatsApp テンプレート名",
    )
    template_language: StrictStr = Field(
        DEFAULT_TEMPLATE_LANGUAGE,
        alias="templateLanguage",
        description="テンプレートの言語コード",
    )
    template_parameters: List[StrictStr] = Field(
        default_factory=list,
        alias="templateParameters",
        description="テンプレートに差し込む値（位置順）",
    )


class DispatchResult(BaseModel):
    """
    1 回の送信に対するプロバイダ側の結果。

    レスポンスボディは固定文言のままにして、この内容はヘッダとログで返す。
    """

    channel: Channel
    message_id: Optional[str] = Field(None, description="ACS が採番したメッセージ／オペレーション ID")
    status: Optional[str] = Field(None, description="ACS が返したステータス文字列")
    successful: bool = Field(True, description="ACS が受付成功とみなしたかどうか")
    error_message: Optional[str] = Field(None, description="受付失敗時のエラーメッセージ")

    @property
    def delivery_status(self) -> str:
        """X-Delivery-Status ヘッダに載せる値。"""
        if not self.successful:
            return "failed"
        return (self.status or "succeeded").lower()
