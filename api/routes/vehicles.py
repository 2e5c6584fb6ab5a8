"""
api/routes/vehicles.py -- Vehicle CRUD endpoints.

Routes:
  POST   /veiculos        -- create (Adm, Editor)
  GET    /veiculos        -- list, ?pagina= 1-indexed, 10 per page (any role)
  GET    /veiculo/{id}    -- detail (Adm, Editor)
  PUT    /veiculo/{id}    -- full replace of Nome/Marca/Ano (Adm)
  DELETE /veiculo/{id}    -- delete (Adm)

Order of checks on PUT and DELETE: the vehicle is fetched first and a missing
id answers 404 before the body is validated or anything is written. Only then
does validation run (400 with every violated rule), then the mutation.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from api.dependencies import get_vehicle_service
from api.models import VeiculoDTO, VeiculoResponse
from auth.dependencies import get_current_claims, require_roles
from auth.models import Role
from core.errors import NotFoundError, ValidationError
from core.validation import validate_vehicle
from fleet.models import Vehicle
from fleet.service import VehicleService

router = APIRouter(tags=["Veículos"])

_admin_or_editor = [Depends(require_roles(Role.ADMIN, Role.EDITOR))]
_admin_only = [Depends(require_roles(Role.ADMIN))]


def _get_or_404(service: VehicleService, vehicle_id: int) -> Vehicle:
    vehicle = service.find_by_id(vehicle_id)
    if vehicle is None:
        raise NotFoundError("Vehicle not found.")
    return vehicle


@router.post("/veiculos", response_model=VeiculoResponse, status_code=201, dependencies=_admin_or_editor)
def create_vehicle(
    body: VeiculoDTO,
    response: Response,
    service: VehicleService = Depends(get_vehicle_service),
) -> VeiculoResponse:
    messages = validate_vehicle(body)
    if messages:
        raise ValidationError(messages)

    vehicle = service.create(Vehicle(name=body.name, brand=body.brand, year=body.year))
    response.headers["Location"] = f"/veiculo/{vehicle.id}"
    return VeiculoResponse.from_domain(vehicle)


@router.get("/veiculos", response_model=list[VeiculoResponse], dependencies=[Depends(get_current_claims)])
def list_vehicles(
    pagina: Optional[int] = Query(default=None, ge=1),
    service: VehicleService = Depends(get_vehicle_service),
) -> list[VeiculoResponse]:
    """List one page of vehicles. A missing ?pagina= means page 1."""
    return [VeiculoResponse.from_domain(v) for v in service.list_paged(pagina or 1)]


@router.get("/veiculo/{vehicle_id}", response_model=VeiculoResponse, dependencies=_admin_or_editor)
def get_vehicle(
    vehicle_id: int,
    service: VehicleService = Depends(get_vehicle_service),
) -> VeiculoResponse:
    return VeiculoResponse.from_domain(_get_or_404(service, vehicle_id))


@router.put("/veiculo/{vehicle_id}", response_model=VeiculoResponse, dependencies=_admin_only)
def update_vehicle(
    vehicle_id: int,
    body: VeiculoDTO,
    service: VehicleService = Depends(get_vehicle_service),
) -> VeiculoResponse:
    vehicle = _get_or_404(service, vehicle_id)

    messages = validate_vehicle(body)
    if messages:
        raise ValidationError(messages)

    vehicle.name = body.name
    vehicle.brand = body.brand
    vehicle.year = body.year
    service.update(vehicle)
    return VeiculoResponse.from_domain(vehicle)


@router.delete("/veiculo/{vehicle_id}", status_code=204, dependencies=_admin_only)
def delete_vehicle(
    vehicle_id: int,
    service: VehicleService = Depends(get_vehicle_service),
) -> Response:
    vehicle = _get_or_404(service, vehicle_id)
    service.delete(vehicle)
    return Response(status_code=204)
