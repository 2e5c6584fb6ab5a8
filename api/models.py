"""
API request and response models for the Vehicle Registry REST endpoints.

These Pydantic v2 models define the HTTP transport contract. They are
intentionally separate from the dataclasses in auth/models.py and
fleet/models.py, which own the internal domain representation. Route handlers
map between the two.

Wire names are the public contract (Email, Senha, Perfil, Nome, Marca, Ano,
Mensagens...). Python attribute names stay snake_case English and map to the
wire names through Field aliases; FastAPI serializes responses by alias.

Request DTOs accept missing or null fields on purpose: field rules are
checked by core/validation.py so every violated rule is reported together as
{"Mensagens": [...]}, instead of failing on the first pydantic error.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from auth.models import Administrator
from fleet.models import Vehicle

# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class LoginDTO(BaseModel):
    """Request body for POST /administradores/login."""

    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(default="", alias="Email")
    password: str = Field(default="", alias="Senha")


class AdministradorDTO(BaseModel):
    """Request body for POST /administradores.

    role is kept as a raw string; Role.parse() applies the Editor fallback.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = Field(default=None, alias="Email", max_length=255)
    password: Optional[str] = Field(default=None, alias="Senha", max_length=50)
    role: Optional[str] = Field(default=None, alias="Perfil")


class VeiculoDTO(BaseModel):
    """Request body for POST /veiculos and PUT /veiculo/{id}.

    Lengths and the year range are field rules in core/validation.py, so a
    PUT on an unknown id still answers 404 before they are checked.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(default=None, alias="Nome")
    brand: Optional[str] = Field(default=None, alias="Marca")
    year: Optional[int] = Field(default=None, alias="Ano")


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class HomeResponse(BaseModel):
    """Response for GET /."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    message: str = Field(default="Welcome to the Vehicle Registry API", alias="Mensagem")
    version: str = Field(alias="Versao")
    docs: str = Field(default="/docs", alias="Doc")


class AdministradorLogado(BaseModel):
    """Response for a successful POST /administradores/login."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    email: str = Field(alias="Email")
    role: str = Field(alias="Perfil")
    token: str = Field(alias="Token")


class AdministradorModelView(BaseModel):
    """Public view of an administrator -- the password never leaves the server."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(alias="Id")
    email: str = Field(alias="Email")
    role: str = Field(alias="Perfil")

    @classmethod
    def from_domain(cls, administrator: Administrator) -> "AdministradorModelView":
        return cls(id=administrator.id, email=administrator.email, role=administrator.role.value)


class VeiculoResponse(BaseModel):
    """Full vehicle record as returned by every vehicle route."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(alias="Id")
    name: str = Field(alias="Nome")
    brand: str = Field(alias="Marca")
    year: int = Field(alias="Ano")

    @classmethod
    def from_domain(cls, vehicle: Vehicle) -> "VeiculoResponse":
        return cls(id=vehicle.id, name=vehicle.name, brand=vehicle.brand, year=vehicle.year)


class ErrosDeValidacao(BaseModel):
    """400 body: one message per violated field rule."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    messages: list[str] = Field(default_factory=list, alias="Mensagens")


class ErrorDetail(BaseModel):
    """Machine-readable error payload."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: Optional[str] = None


class ErrorResponse(BaseModel):
    """Top-level error envelope returned on 401/403/404/422/429/5xx responses."""

    model_config = ConfigDict(frozen=True)

    error: ErrorDetail


class HealthResponse(BaseModel):
    """Response for GET /health."""

    model_config = ConfigDict(frozen=True)

    status: str
    version: str
    components: dict[str, str]
