from decimal import Decimal
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from ..enums import Currency, Language, Operation


def _fits_float(v: Decimal) -> Decimal:
    # больше ~15 значащих цифр float не сохранит
    if v.is_finite() and Decimal(repr(float(v))) != v:
        raise ValueError(f"amount {v} cannot be sent as a JSON number without losing precision")
    return v


# Payriff принимает сумму числом (10.99), а не строкой
Amount = Annotated[Decimal, AfterValidator(_fits_float), PlainSerializer(float, return_type=float, when_used="json")]


class PayriffRequest(BaseModel):
    # snake_case в Python, camelCase на проводе; неизвестные поля уходят как есть
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="allow")

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CreateOrderRequest(PayriffRequest):
    amount: Amount
    description: str
    language: Optional[Language] = None
    currency: Optional[Currency] = None
    card_save: Optional[bool] = None
    operation: Optional[Operation] = None
    callback_url: Optional[str] = None


class RefundRequest(PayriffRequest):
    order_id: str
    amount: Amount


class CompleteRequest(PayriffRequest):
    order_id: str
    amount: Amount


class AutoPayRequest(PayriffRequest):
    card_uuid: str
    amount: Amount
    description: str
    currency: Optional[Currency] = None
    operation: Optional[Operation] = None
    callback_url: Optional[str] = None
