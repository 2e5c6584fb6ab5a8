"""Unit tests for core/config.py -- JWT key policy and defaults."""

import pytest

from core.config import Settings


def test_debug_generates_key():
    settings = Settings(jwt_key="", debug=True)
    assert len(settings.jwt_key) >= 32


def test_production_without_key_leaves_issuance_disabled():
    settings = Settings(jwt_key="", debug=False)
    assert settings.jwt_key == ""


def test_short_key_rejected():
    with pytest.raises(ValueError, match="at least 32"):
        Settings(jwt_key="123456")


def test_defaults():
    settings = Settings(jwt_key="k" * 32)
    assert settings.token_expire_seconds == 24 * 60 * 60
    assert settings.login_rate_limit
    assert settings.database_url.startswith("sqlite:///")
