"""Unit tests for auth/tokens.py and auth/models.Role.

Covers:
- Issued tokens carry Email, Perfil and role claims plus a 24h expiry
- decode() round-trips the identity and rejects tampered / foreign / expired tokens
- Empty JWT key: issue() returns "" and decode() rejects everything
- Role.parse fallback to Editor
"""

from datetime import datetime, timezone

import pytest
from jose import jwt

from auth.models import Administrator, Role, TokenClaims
from auth.tokens import TokenIssuer
from core.config import Settings

_KEY = "k" * 40


def _issuer(**overrides) -> TokenIssuer:
    return TokenIssuer(Settings(jwt_key=overrides.pop("jwt_key", _KEY), **overrides))


def _admin(role: Role = Role.ADMIN) -> Administrator:
    return Administrator(id=1, email="adm@teste.com", password="123456", role=role)


class TestIssue:
    def test_claims_present(self):
        token = _issuer().issue(_admin())
        payload = jwt.decode(token, _KEY, algorithms=["HS256"])
        assert payload["Email"] == "adm@teste.com"
        assert payload["Perfil"] == "Adm"
        assert payload["role"] == "Adm"

    def test_expiry_is_24_hours(self):
        before = datetime.now(timezone.utc).timestamp()
        token = _issuer().issue(_admin())
        payload = jwt.decode(token, _KEY, algorithms=["HS256"])
        assert payload["exp"] - before == pytest.approx(24 * 3600, abs=5)

    def test_header_is_hs256(self):
        token = _issuer().issue(_admin())
        assert jwt.get_unverified_header(token)["alg"] == "HS256"

    def test_empty_key_returns_empty_string(self):
        issuer = TokenIssuer(Settings(jwt_key="", debug=False))
        assert issuer.configured is False
        assert issuer.issue(_admin()) == ""


class TestDecode:
    def test_round_trip(self):
        issuer = _issuer()
        claims = issuer.decode(issuer.issue(_admin(Role.EDITOR)))
        assert claims == TokenClaims(email="adm@teste.com", role=Role.EDITOR)

    def test_foreign_key_rejected(self):
        token = _issuer(jwt_key="z" * 40).issue(_admin())
        assert _issuer().decode(token) is None

    def test_tampered_token_rejected(self):
        token = _issuer().issue(_admin())
        tampered = token[:-4] + ("BBBB" if token.endswith("AAAA") else "AAAA")
        assert _issuer().decode(tampered) is None

    def test_expired_token_rejected(self):
        issuer = _issuer(token_expire_seconds=-60)
        assert issuer.decode(issuer.issue(_admin())) is None

    def test_garbage_rejected(self):
        assert _issuer().decode("not-a-jwt") is None
        assert _issuer().decode("") is None

    def test_missing_role_claim_rejected(self):
        token = jwt.encode({"Email": "x@y.com"}, _KEY, algorithm="HS256")
        assert _issuer().decode(token) is None

    def test_empty_key_rejects_everything(self):
        token = _issuer().issue(_admin())
        assert TokenIssuer(Settings(jwt_key="", debug=False)).decode(token) is None


class TestRoleParse:
    @pytest.mark.parametrize("raw", ["Adm", "adm", "ADMIN", Role.ADMIN])
    def test_admin_spellings(self, raw):
        assert Role.parse(raw) is Role.ADMIN

    @pytest.mark.parametrize("raw", ["Editor", "editor", "Gerente", "", None, 3])
    def test_everything_else_is_editor(self, raw):
        assert Role.parse(raw) is Role.EDITOR
