# Tests for webmaster tokens
# ==========================

import base64
import json
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from ressources_mg.auth import check_password, create_token, decode_token, verify_token
from ressources_mg.config import AppConfig, get_config
from ressources_mg.exceptions import ConfigurationError


def _config(**overrides):
    values = {
        "data_dir": Path("data"),
        "webmaster_password": "secret-password",
        "webmaster_secret": "signing-secret",
    }
    values.update(overrides)
    return AppConfig(**values)


class TestTokens:
    """Issue and verify signed tokens."""

    def test_round_trip(self):
        config = _config()
        payload = decode_token(create_token(config), config)
        assert payload["sub"] == "webmaster"
        assert payload["exp"] > payload["iat"]

    def test_timestamps_are_utc(self):
        config = _config()
        payload = decode_token(create_token(config), config)
        assert datetime.fromisoformat(payload["iat"]).utcoffset() == timedelta(0)
        assert datetime.fromisoformat(payload["exp"]).utcoffset() == timedelta(0)

    def test_tokens_are_unique(self):
        config = _config()
        assert create_token(config) != create_token(config)

    def test_wrong_secret(self):
        token = create_token(_config())
        assert not verify_token(token, _config(webmaster_secret="other"))

    def test_tampered_payload(self):
        config = _config()
        payload_b64, signature = create_token(config).split(".")
        payload = json.loads(base64.urlsafe_b64decode(payload_b64))
        payload["exp"] = "2999-01-01T00:00:00"
        forged = base64.urlsafe_b64encode(json.dumps(payload).encode()).decode()
        assert not verify_token(f"{forged}.{signature}", config)

    def test_expired(self):
        config = _config(token_expire_hours=-1)
        assert not verify_token(create_token(config), config)

    @pytest.mark.parametrize("token", [None, "", "garbage", "a.b.c", "bm90LWpzb24.deadbeef"])
    def test_malformed(self, token):
        assert decode_token(token, _config()) is None

    def test_missing_secret(self):
        config = _config(webmaster_secret=None)
        with pytest.raises(ConfigurationError):
            create_token(config)
        assert decode_token("x.y", config) is None


class TestPassword:

    def test_check(self):
        config = _config()
        assert check_password("secret-password", config)
        assert not check_password("wrong", config)
        assert not check_password(None, config)

    def test_not_configured(self):
        with pytest.raises(ConfigurationError):
            check_password("anything", _config(webmaster_password=None))


class TestConfig:
    """Environment-driven settings."""

    def test_development_secret_default(self, monkeypatch):
        monkeypatch.delenv("WEBMASTER_SECRET")
        assert get_config().webmaster_secret

    def test_no_default_secret_in_production(self, monkeypatch):
        monkeypatch.delenv("WEBMASTER_SECRET")
        monkeypatch.setenv("APP_ENV", "production")
        config = get_config()
        assert config.is_production
        assert config.webmaster_secret is None

    def test_cors_origins(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
        assert get_config().cors_origins == ["https://a.example", "https://b.example"]
