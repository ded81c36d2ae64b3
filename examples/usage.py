"""
Пример работы с Payriff.

    PAYRIFF_SECRET_KEY=... PAYRIFF_CALLBACK_URL=https://example.com/webhook python examples/usage.py

ID заказов и карт ниже - заглушки, подставьте свои.
"""

import asyncio

from payriff.client import PayriffClient, is_successful
from payriff.enums import Currency, Language, Operation
from payriff.settings import Settings
from payriff.utils.logging import configure_logging

ORDER_ID = "XXXXXXXX-XXXX-XXXX-XXXX-XXXXXXXXXXXX"
CARD_UUID = "XXXXXXXX-XXXX-XXXX-XXXX-XXXXXXXXXXXX"


async def main():
    # base_url / secret_key можно передать явно, иначе берутся из окружения
    payriff = PayriffClient()

    order = await payriff.create_order(
        amount=0.01,
        language=Language.EN,
        currency=Currency.AZN,
        description="Product purchase",
        callback_url="https://example.com/webhook",
        card_save=True,
        operation=Operation.PURCHASE,
    )
    print(order)
    if is_successful(order.code):
        print("pay here:", order.payload.payment_url)

    print(await payriff.get_order_info(ORDER_ID))
    print(await payriff.refund(order_id=ORDER_ID, amount=0.01))
    print(await payriff.complete(order_id=ORDER_ID, amount=0.01))
    print(await payriff.auto_pay(
        card_uuid=CARD_UUID,
        amount=0.01,
        currency=Currency.AZN,
        description="Subscription renewal",
        callback_url="https://example.com/webhook",
        operation=Operation.PURCHASE,
    ))


if __name__ == "__main__":
    configure_logging(Settings().LOG_LEVEL)
    asyncio.run(main())
