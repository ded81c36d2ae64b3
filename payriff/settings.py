from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .enums import Currency, Language

DEFAULT_BASE_URL = "https://api.payriff.com/api/v3"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"

    # Provider: Payriff
    PAYRIFF_BASE_URL: str = DEFAULT_BASE_URL
    PAYRIFF_SECRET_KEY: str = ""
    PAYRIFF_CALLBACK_URL: str = ""
    PAYRIFF_LANGUAGE: Language = Language.AZ
    PAYRIFF_CURRENCY: Currency = Currency.AZN
    PAYRIFF_TIMEOUT_SEC: float = 15


class ClientConfig(BaseModel):
    """Конфигурация клиента. Не меняется после создания."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str = DEFAULT_BASE_URL
    secret_key: str = ""
    default_language: Language = Language.AZ
    default_currency: Currency = Currency.AZN
    default_callback_url: str = ""
    timeout_sec: float = 15

    @field_validator("base_url")
    @classmethod
    def _strip_slash(cls, v: str) -> str:
        return v.rstrip("/")


# поле ClientConfig -> переменная окружения
_ENV_FALLBACKS = {
    "base_url": "PAYRIFF_BASE_URL",
    "secret_key": "PAYRIFF_SECRET_KEY",
    "default_language": "PAYRIFF_LANGUAGE",
    "default_currency": "PAYRIFF_CURRENCY",
    "default_callback_url": "PAYRIFF_CALLBACK_URL",
    "timeout_sec": "PAYRIFF_TIMEOUT_SEC",
}


def check_options(options: Mapping[str, Any]) -> None:
    unknown = set(options) - set(_ENV_FALLBACKS)
    if unknown:
        raise TypeError(f"Unknown config option(s): {', '.join(sorted(unknown))}")


def resolve_config(overrides: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> ClientConfig:
    """
    Собирает ClientConfig один раз:
      явное значение (kwargs > overrides) -> переменные окружения / .env -> встроенный дефолт.
    Любое ложное явное значение ("", None, 0) считается отсутствующим, в том числе timeout_sec=0.
    """
    explicit = {**(overrides or {}), **kwargs}
    check_options(explicit)

    env = Settings()
    values = {
        field: explicit.get(field) or getattr(env, env_name)
        for field, env_name in _ENV_FALLBACKS.items()
    }
    return ClientConfig(**values)
