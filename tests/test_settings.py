"""Unit tests for Settings, ClientConfig and resolve_config."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from payriff.enums import Currency, Language
from payriff.settings import DEFAULT_BASE_URL, ClientConfig, resolve_config


class TestResolveConfig:
    def test_builtin_defaults(self):
        cfg = resolve_config()
        assert cfg.base_url == DEFAULT_BASE_URL
        assert cfg.secret_key == ""
        assert cfg.default_language is Language.AZ
        assert cfg.default_currency is Currency.AZN
        assert cfg.default_callback_url == ""

    def test_env_fallback(self, monkeypatch):
        monkeypatch.setenv("PAYRIFF_SECRET_KEY", "env-secret")
        monkeypatch.setenv("PAYRIFF_CALLBACK_URL", "https://shop.example/webhook")
        cfg = resolve_config()
        assert cfg.secret_key == "env-secret"
        assert cfg.default_callback_url == "https://shop.example/webhook"

    def test_explicit_wins_over_env(self, monkeypatch):
        monkeypatch.setenv("PAYRIFF_SECRET_KEY", "env-secret")
        cfg = resolve_config({"secret_key": "from-map"}, default_language="EN")
        assert cfg.secret_key == "from-map"
        assert cfg.default_language is Language.EN

    def test_kwargs_win_over_mapping(self):
        cfg = resolve_config({"secret_key": "a"}, secret_key="b")
        assert cfg.secret_key == "b"

    def test_empty_explicit_falls_back_to_env(self, monkeypatch):
        monkeypatch.setenv("PAYRIFF_SECRET_KEY", "env-secret")
        assert resolve_config(secret_key="").secret_key == "env-secret"

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("PAYRIFF_SECRET_KEY=dotenv-secret\n", encoding="utf-8")
        assert resolve_config().secret_key == "dotenv-secret"

    def test_trailing_slash_stripped(self):
        cfg = resolve_config(base_url="https://sandbox.payriff.test/api/v3/")
        assert cfg.base_url == "https://sandbox.payriff.test/api/v3"

    def test_zero_timeout_falls_back(self, monkeypatch):
        # как и пустая строка, 0 считается "не задано"
        monkeypatch.setenv("PAYRIFF_TIMEOUT_SEC", "30")
        assert resolve_config(timeout_sec=0).timeout_sec == 30

    def test_unknown_option(self):
        with pytest.raises(TypeError):
            resolve_config(secretKey="S")

    def test_invalid_currency(self):
        with pytest.raises(ValidationError):
            resolve_config(default_currency="GBP")


class TestClientConfig:
    def test_trailing_slash_stripped(self):
        assert ClientConfig(base_url="https://x.example/v3/").base_url == "https://x.example/v3"

    def test_unknown_field(self):
        with pytest.raises(ValidationError):
            ClientConfig(secretKey="S")

    def test_frozen(self):
        cfg = ClientConfig(secret_key="S")
        with pytest.raises(ValidationError):
            cfg.secret_key = "other"
