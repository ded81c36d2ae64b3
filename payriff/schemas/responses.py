from decimal import Decimal
from typing import Any, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from ..enums import Currency, Status

T = TypeVar("T")


class PayriffModel(BaseModel):
    # Ответы шлюза только читаем. Новые поля от Payriff не теряем, числа в строковых полях приводим к str.
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, extra="allow", coerce_numbers_to_str=True
    )


class PayriffResponse(PayriffModel, Generic[T]):
    """
    Общий конверт ответа Payriff:
    {
      "code": "00000",
      "message": "Approved",
      "route": "/api/v3/orders",
      "internalMessage": null,
      "responseId": "...",
      "payload": {...}
    }
    Ничего не проверяем: конверт возвращается как пришёл, даже при не-2xx статусе.
    """

    code: Optional[str] = None
    message: Optional[str] = None
    route: Optional[str] = None
    internal_message: Optional[str] = None
    response_id: Optional[str] = None
    payload: Optional[T] = None


class OrderPayload(PayriffModel):
    order_id: Optional[str] = None
    payment_url: Optional[str] = None
    transaction_id: Union[int, str, None] = Field(default=None, union_mode="left_to_right")


class CardDetails(PayriffModel):
    masked_pan: Optional[str] = None
    brand: Optional[str] = None
    card_holder_name: Optional[str] = None


class Installment(PayriffModel):
    type: Optional[str] = None
    period: Optional[str] = None


class Transaction(PayriffModel):
    uuid: Optional[str] = None
    created_date: Optional[str] = None
    # неизвестный статус остаётся строкой
    status: Union[Status, str, None] = Field(default=None, union_mode="left_to_right")
    channel: Optional[str] = None
    channel_type: Optional[str] = None
    request_rrn: Optional[str] = None
    response_rrn: Optional[str] = None
    pan: Optional[str] = None
    payment_way: Optional[str] = None
    card_details: Optional[CardDetails] = None
    card_uuid: Optional[str] = None
    merchant_category: Optional[str] = None
    installment: Optional[Installment] = None
    delivery_address: Optional[str] = None


class OrderInfo(PayriffModel):
    order_id: Optional[str] = None
    invoice_uuid: Optional[str] = None
    amount: Optional[Decimal] = None
    currency_type: Union[Currency, str, None] = Field(default=None, union_mode="left_to_right")
    merchant_name: Optional[str] = None
    commission_rate: Optional[Decimal] = None
    operation_type: Optional[str] = None
    payment_status: Optional[str] = None
    auto: Optional[bool] = None
    created_date: Optional[str] = None
    description: Optional[str] = None
    transactions: Optional[List[Transaction]] = None


def passthrough(data: Any) -> PayriffResponse[Any]:
    """
    Конверт без типизации payload, когда тело не легло на ожидаемую модель
    (payload строкой, чужой формат ошибки, не-объект JSON). Тело не теряется.
    """
    model = PayriffResponse[Any]
    if not isinstance(data, dict):
        return model.model_construct(payload=data)
    try:
        return model.model_validate(data)
    except ValidationError:
        aliases = {name: field.alias or name for name, field in model.model_fields.items()}
        extra = {k: v for k, v in data.items() if k not in aliases.values()}
        known = {name: data.get(alias) for name, alias in aliases.items()}
        return model.model_construct(**{**extra, **known})
