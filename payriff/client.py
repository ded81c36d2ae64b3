from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from .enums import SUCCESS_CODES, Operation
from .errors import InvalidResponseError
from .schemas.requests import AutoPayRequest, CompleteRequest, CreateOrderRequest, PayriffRequest, RefundRequest
from .schemas.responses import OrderInfo, OrderPayload, PayriffResponse, passthrough
from .settings import ClientConfig, check_options, resolve_config
from .utils.http import auth_headers, client
from .utils.logging import log_debug, log_error, log_warning

TAG = "payriff.client"

R = TypeVar("R", bound=PayriffRequest)
M = TypeVar("M", bound=BaseModel)


def is_successful(code: Optional[str]) -> bool:
    return isinstance(code, str) and any(code == c for c in SUCCESS_CODES)


class PayriffClient:
    """
    Payriff API v3:
      - POST /orders            (создать заказ)
      - GET  /orders/{orderId}  (информация о заказе)
      - POST /refund            (возврат)
      - POST /complete          (завершить PRE_AUTH)
      - POST /autoPay           (оплата сохранённой картой)
    Каждый вызов = один HTTP-запрос. Ответ возвращается как PayriffResponse без проверки `code`,
    успешность смотрим через is_successful().
    """

    def __init__(
        self,
        config: Optional[Union[ClientConfig, Mapping[str, Any]]] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **overrides: Any,
    ):
        if isinstance(config, ClientConfig):
            check_options(overrides)
            self.config = ClientConfig(**{**config.model_dump(), **overrides}) if overrides else config
        else:
            self.config = resolve_config(config, **overrides)
        self._transport = transport
        self._headers = auth_headers(self.config.secret_key)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    # ---- HTTP ----
    async def _request(
        self,
        method: str,
        path: str,
        response_model: Type[M],
        body: Optional[Dict[str, Any]] = None,
    ) -> M:
        url = f"{self.base_url}{path}"
        log_debug(f"{method} {url}", TAG)

        async with client(self.config.timeout_sec, transport=self._transport) as c:
            if body is None:
                resp = await c.request(method, url, headers=self._headers)
            else:
                resp = await c.request(method, url, json=body, headers=self._headers)

        try:
            data = resp.json()
        except ValueError as e:
            log_error(f"{method} {url}: non-JSON response, status={resp.status_code}", TAG)
            raise InvalidResponseError(
                f"Payriff returned non-JSON body (HTTP {resp.status_code})",
                status_code=resp.status_code,
                text=resp.text,
            ) from e

        try:
            result = response_model.model_validate(data)
        except ValidationError as e:
            # ответ не ломает вызов: отдаём конверт как пришёл, payload без типизации
            log_warning(f"{method} {url}: body does not match {response_model.__name__} ({e.error_count()} error(s))", TAG)
            result = passthrough(data)
        log_debug(f"{method} {url}: status={resp.status_code} code={getattr(result, 'code', None)}", TAG)
        return result

    async def _post(self, path: str, body: Dict[str, Any], response_model: Type[M]) -> M:
        return await self._request("POST", path, response_model, body=body)

    async def _get(self, path: str, response_model: Type[M]) -> M:
        return await self._request("GET", path, response_model)

    # ---- Utils ----
    @staticmethod
    def _coerce(model: Type[R], request: Union[R, Mapping[str, Any], None], fields: Dict[str, Any]) -> R:
        if isinstance(request, model):
            if fields:
                raise TypeError("Pass either a request object or keyword fields, not both")
            return request
        return model.model_validate({**(request or {}), **fields})

    @staticmethod
    def _with_defaults(request: PayriffRequest, defaults: Dict[str, Any]) -> Dict[str, Any]:
        # явные поля запроса всегда перекрывают дефолты; сам запрос не меняется
        return {**defaults, **request.to_wire()}

    # ---- API ----
    async def create_order(
        self, request: Union[CreateOrderRequest, Mapping[str, Any], None] = None, **fields: Any
    ) -> PayriffResponse[OrderPayload]:
        req = self._coerce(CreateOrderRequest, request, fields)
        body = self._with_defaults(req, {
            "language": self.config.default_language.value,
            "currency": self.config.default_currency.value,
            "callbackUrl": self.config.default_callback_url,
            "cardSave": False,
            "operation": Operation.PURCHASE.value,
        })
        return await self._post("/orders", body, PayriffResponse[OrderPayload])

    async def get_order_info(self, order_id: str) -> PayriffResponse[OrderInfo]:
        return await self._get(f"/orders/{order_id}", PayriffResponse[OrderInfo])

    async def refund(
        self, request: Union[RefundRequest, Mapping[str, Any], None] = None, **fields: Any
    ) -> PayriffResponse[Any]:
        req = self._coerce(RefundRequest, request, fields)
        return await self._post("/refund", req.to_wire(), PayriffResponse[Any])

    async def complete(
        self, request: Union[CompleteRequest, Mapping[str, Any], None] = None, **fields: Any
    ) -> PayriffResponse[Any]:
        req = self._coerce(CompleteRequest, request, fields)
        return await self._post("/complete", req.to_wire(), PayriffResponse[Any])

    async def auto_pay(
        self, request: Union[AutoPayRequest, Mapping[str, Any], None] = None, **fields: Any
    ) -> PayriffResponse[OrderInfo]:
        req = self._coerce(AutoPayRequest, request, fields)
        body = self._with_defaults(req, {
            "currency": self.config.default_currency.value,
            "callbackUrl": self.config.default_callback_url,
            "operation": Operation.PURCHASE.value,
        })
        return await self._post("/autoPay", body, PayriffResponse[OrderInfo])

    @staticmethod
    def is_successful(code: Optional[str]) -> bool:
        return is_successful(code)
