"""
auth/tokens.py -- JWT issuance and verification.

Security design decisions:
  JWT: python-jose with HS256. Tokens are signed with Settings.jwt_key and
       carry three identity claims plus expiry:
         Email  -- the administrator's email
         Perfil -- the role, application-level claim returned to clients
         role   -- the same role, read by the authorization dependency
       Dropping either role claim changes authorization behavior, so both are
       always written.

  Expiry: issue time + Settings.token_expire_seconds (24 hours by default).
       There is no refresh and no revocation list; validity is signature plus
       expiry only.

  Empty key: issue() returns "" and decode() rejects everything. The login
       route treats "" as a configuration failure and never returns it.

  Passwords are compared as plaintext by the store (see auth/store.py).

Layer rule: no imports from api/ or fleet/. Import from core/ is allowed.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from auth.models import Administrator, Role, TokenClaims
from core.config import Settings

logger = logging.getLogger("vehicleregistry.auth")

_ALGORITHM = "HS256"

EMAIL_CLAIM = "Email"
PERFIL_CLAIM = "Perfil"
ROLE_CLAIM = "role"


class TokenIssuer:
    """Builds and verifies signed access tokens.

    Constructed once at startup from the Settings instance and stored on
    app.state.token_issuer.

    Usage:
        issuer = TokenIssuer(settings)
        token = issuer.issue(administrator)
        claims = issuer.decode(token)   # TokenClaims or None
    """

    def __init__(self, settings: Settings) -> None:
        self._key = settings.jwt_key
        self._expire_seconds = settings.token_expire_seconds

    @property
    def configured(self) -> bool:
        return bool(self._key)

    def issue(self, administrator: Administrator) -> str:
        """Encode a signed JWT for the administrator. Returns "" if no key is configured."""
        if not self._key:
            return ""
        role = Role.parse(administrator.role).value
        payload = {
            EMAIL_CLAIM: administrator.email,
            PERFIL_CLAIM: role,
            ROLE_CLAIM: role,
            "exp": datetime.now(timezone.utc) + timedelta(seconds=self._expire_seconds),
        }
        return jwt.encode(payload, self._key, algorithm=_ALGORITHM)

    def decode(self, token: str) -> TokenClaims | None:
        """Verify signature and expiry. Returns the claims or None on any failure.

        Returning None (rather than raising) keeps the caller simple: any invalid
        token is treated as unauthenticated.
        """
        if not self._key or not token:
            return None
        try:
            payload = jwt.decode(token, self._key, algorithms=[_ALGORITHM])
        except JWTError as exc:
            logger.debug("Rejected token: %s", exc)
            return None
        if EMAIL_CLAIM not in payload or ROLE_CLAIM not in payload:
            return None
        return TokenClaims(email=payload[EMAIL_CLAIM], role=Role.parse(payload[ROLE_CLAIM]))
