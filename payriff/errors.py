from typing import Optional


class PayriffError(Exception):
    """Базовое исключение клиента."""


class InvalidResponseError(PayriffError, ValueError):
    """Тело ответа шлюза не является JSON."""

    def __init__(self, message: str, status_code: Optional[int] = None, text: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.text = text
