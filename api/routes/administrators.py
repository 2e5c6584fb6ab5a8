"""
api/routes/administrators.py -- Login and administrator management endpoints.

Routes:
  POST /administradores/login   -- exchange email + password for a JWT (public)
  GET  /administradores         -- list administrators, optional ?pagina= (Adm)
  GET  /administradores/{id}    -- one administrator (Adm)
  POST /administradores         -- register an administrator (Adm)

Security:
  POST /login is rate-limited per client IP (Settings.login_rate_limit).
  A failed login is a bare 401 with no body, whether the email is unknown or
  the password is wrong.
  Cache-Control: no-store on login responses so tokens are not cached.
  Passwords are never serialized back to clients.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse

from api.dependencies import get_administrator_service
from api.limiter import limiter, login_rate_limit
from api.models import AdministradorDTO, AdministradorLogado, AdministradorModelView, LoginDTO
from auth.dependencies import require_roles
from auth.models import Administrator, Role
from auth.service import AdministratorService
from auth.tokens import TokenIssuer
from core.errors import ConfigurationError, NotFoundError, ValidationError
from core.validation import validate_administrator

logger = logging.getLogger("vehicleregistry.api")

# Auth policy:
# - POST /administradores/login:  public
# - everything else:              requires a token with role Adm
router = APIRouter(tags=["Administradores"])

_admin_only = [Depends(require_roles(Role.ADMIN))]


# ---------------------------------------------------------------------------
# Public endpoints
# ---------------------------------------------------------------------------


@limiter.limit(login_rate_limit)  # must be ABOVE @router to preserve FastAPI introspection
@router.post("/administradores/login", response_model=AdministradorLogado)
def login(
    request: Request,
    body: LoginDTO,
    service: AdministratorService = Depends(get_administrator_service),
) -> Response:
    """Authenticate with email and password; return the JWT in the body."""
    administrator = service.login(body.email, body.password)
    if administrator is None:
        logger.info("Failed login for %s", body.email)
        return Response(status_code=401, headers={"Cache-Control": "no-store"})

    issuer: TokenIssuer = request.app.state.token_issuer
    token = issuer.issue(administrator)
    if not token:
        raise ConfigurationError("Token issuance is not configured on this server.")

    logger.info("Administrator %d logged in", administrator.id)
    resp = JSONResponse(
        status_code=200,
        content=AdministradorLogado(
            email=administrator.email,
            role=administrator.role.value,
            token=token,
        ).model_dump(by_alias=True),
    )
    resp.headers["Cache-Control"] = "no-store"
    return resp


# ---------------------------------------------------------------------------
# Administrator management (Adm only)
# ---------------------------------------------------------------------------


@router.get("/administradores", response_model=list[AdministradorModelView], dependencies=_admin_only)
def list_administrators(
    pagina: Optional[int] = Query(default=None, ge=1),
    service: AdministratorService = Depends(get_administrator_service),
) -> list[AdministradorModelView]:
    """List administrators. Without ?pagina= the whole collection is returned."""
    return [AdministradorModelView.from_domain(a) for a in service.list_paged(pagina)]


@router.get("/administradores/{administrator_id}", response_model=AdministradorModelView, dependencies=_admin_only)
def get_administrator(
    administrator_id: int,
    service: AdministratorService = Depends(get_administrator_service),
) -> AdministradorModelView:
    administrator = service.find_by_id(administrator_id)
    if administrator is None:
        raise NotFoundError("Administrator not found.")
    return AdministradorModelView.from_domain(administrator)


@router.post(
    "/administradores",
    response_model=AdministradorModelView,
    status_code=201,
    dependencies=_admin_only,
)
def create_administrator(
    body: AdministradorDTO,
    response: Response,
    service: AdministratorService = Depends(get_administrator_service),
) -> AdministradorModelView:
    """Register a new administrator.

    An unrecognized Perfil is stored as Editor; a missing one is rejected.
    """
    messages = validate_administrator(body)
    if messages:
        raise ValidationError(messages)

    created = service.create(
        Administrator(
            email=body.email,
            password=body.password,
            role=Role.parse(body.role),
        )
    )
    response.headers["Location"] = f"/administradores/{created.id}"
    return AdministradorModelView.from_domain(created)
