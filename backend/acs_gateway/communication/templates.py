# backend/acs_gateway/communication/templates.py

"""
WhatsApp テンプレートメッセージの組み立て。

templateParameters = ["Monday", "10am"] の場合:
  - value1 -> "Monday", value2 -> "10am" の MessageTemplateText を作る
  - body バインディングに value1, value2 を同じ順番で並べる
"""

from typing import List, Sequence

from azure.communication.messages.models import (
    MessageTemplate,
    MessageTemplateText,
    WhatsAppMessageTemplateBindings,
    WhatsAppMessageTemplateBindingsComponent,
)

PLACEHOLDER_PREFIX = "value"


def placeholder_name(index: int) -> str:
    """1 始まりの位置からプレースホルダ名（value1, value2, ...）を返す。"""
    if index < 1:
        raise ValueError(f"placeholder index must be >= 1, got {index}")
    return f"{PLACEHOLDER_PREFIX}{index}"


def build_template_values(parameters: Sequence[str]) -> List[MessageTemplateText]:
    return [
        MessageTemplateText(name=placeholder_name(position), text=parameter)
        for position, parameter in enumerate(parameters, start=1)
    ]


def build_template_bindings(
    values: Sequence[MessageTemplateText],
) -> WhatsAppMessageTemplateBindings:
    """
    テンプレート本文のバインディングを作る。

    パラメータ 0 件の場合は空のバインディングになる（ACS 側が受け付けるかは関知しない）。
    """
    return WhatsAppMessageTemplateBindings(
        body=[WhatsAppMessageTemplateBindingsComponent(ref_value=value.name) for value in values]
    )


def build_message_template(
    name: str,
    language: str,
    parameters: Sequence[str],
) -> MessageTemplate:
    values = build_template_values(parameters)
    return MessageTemplate(
        name=name,
        language=language,
        template_values=values,
        bindings=build_template_bindings(values),
    )
