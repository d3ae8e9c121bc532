"""Bulgarian display labels for offer statuses and payment methods.

Both lookups are total: they never raise for unknown codes.
"""

from __future__ import annotations

from typing import Iterable


UNKNOWN_LABEL = "Непознат"

STATUS_LABELS: dict[str, str] = {
    "draft": "Чернова",
    "issued": "Издаден",
    "viewed": "Прегледан",
    "signed": "Подписан",
    "withdrawn": "Отворен",
    "expired": "Изтекъл",
}

PAYMENT_METHOD_LABELS: dict[str, str] = {
    "cash": "В брой",
    "bank_transfer": "Банков превод",
    "card": "Кредитна карта",
    "invoice": "Фактура",
    "other": "Друго",
}


def translate_status(status: str | None) -> str:
    return STATUS_LABELS.get(status or "", UNKNOWN_LABEL)


def translate_allowed_payment_methods(methods: Iterable[str]) -> str:
    """
    Join payment method labels in input order, each followed by a space.

    Unknown codes contribute nothing to the result; they are neither
    rendered as UNKNOWN_LABEL nor reported.
    """
    result = ""
    for method in methods:
        label = PAYMENT_METHOD_LABELS.get(method)
        if label is not None:
            result += f"{label} "
    return result
