"""
auth/dependencies.py -- FastAPI Depends() helpers for authentication.

Per-request state machine:

  Unauthenticated --(valid bearer token)--> TokenValidated
  TokenValidated  --(role in allowed set)--> RoleAuthorized --> handler runs

  missing / malformed / invalid / expired token  -> AuthenticationError (401)
  valid token, role outside the allowed set      -> AuthorizationError  (403)

get_current_claims() is the "requires-valid-token" gate.
require_roles(*roles) builds a gate that also checks the role claim.

Layer rule: no imports from api/ or fleet/.
  auth/dependencies.py may import from fastapi (for Request) because this
  module is part of the FastAPI dependency injection system.
"""

from __future__ import annotations

from collections.abc import Callable

from fastapi import Request

from auth.models import Role, TokenClaims
from auth.tokens import TokenIssuer
from core.errors import AuthenticationError, AuthorizationError


def _bearer_token(request: Request) -> str | None:
    auth_header = request.headers.get("Authorization", "")
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_current_claims(request: Request) -> TokenClaims:
    """Require a valid bearer token. Raises AuthenticationError (401) otherwise.

    Use as a FastAPI dependency:
        @router.get("/protected")
        def route(claims: TokenClaims = Depends(get_current_claims)): ...
    """
    token = _bearer_token(request)
    if token is None:
        raise AuthenticationError("Authentication required.")
    issuer: TokenIssuer = request.app.state.token_issuer
    claims = issuer.decode(token)
    if claims is None:
        raise AuthenticationError("Invalid or expired token.")
    return claims


def require_roles(*roles: Role) -> Callable[[Request], TokenClaims]:
    """Build a dependency that requires a valid token whose role is in roles.

    Use as a FastAPI dependency:
        @router.delete("/veiculo/{id}", dependencies=[Depends(require_roles(Role.ADMIN))])
    """
    allowed = frozenset(roles)

    def dependency(request: Request) -> TokenClaims:
        claims = get_current_claims(request)
        if claims.role not in allowed:
            raise AuthorizationError(
                "Role not permitted for this operation.",
                detail=f"requires one of: {', '.join(sorted(r.value for r in allowed))}",
            )
        return claims

    return dependency
