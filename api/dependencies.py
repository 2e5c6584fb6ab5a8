"""
api/dependencies.py -- Per-request service wiring.

Each request gets fresh service objects built around the long-lived stores on
app.state. Handlers receive them through Depends(), and tests replace them
with app.dependency_overrides.
"""

from fastapi import Request

from auth.service import AdministratorService
from fleet.service import VehicleService


def get_administrator_service(request: Request) -> AdministratorService:
    return AdministratorService(request.app.state.admin_store)


def get_vehicle_service(request: Request) -> VehicleService:
    return VehicleService(request.app.state.vehicle_store)
