"""
fleet/service.py -- Vehicle use cases on top of VehicleStore.

update() and delete() are silent no-ops for ids that are not in the store.
Route handlers fetch the vehicle first and answer 404 themselves.
"""

import logging
from typing import Optional

from fleet.models import Vehicle
from fleet.store import VehicleStore

logger = logging.getLogger("vehicleregistry.fleet")

PAGE_SIZE = 10


class VehicleService:
    def __init__(self, store: VehicleStore) -> None:
        self._store = store

    def create(self, vehicle: Vehicle) -> Vehicle:
        """Persist the vehicle and return it with its id populated."""
        vehicle.id = self._store.create(vehicle)
        logger.info("Vehicle %d created (%s %s %d)", vehicle.id, vehicle.brand, vehicle.name, vehicle.year)
        return vehicle

    def list_paged(self, page: int = 1) -> list[Vehicle]:
        """Return one 1-indexed page of PAGE_SIZE vehicles ordered by id."""
        if page < 1:
            raise ValueError(f"Page number must be >= 1, got {page}")
        return self._store.list_vehicles(offset=(page - 1) * PAGE_SIZE, limit=PAGE_SIZE)

    def find_by_id(self, vehicle_id: int) -> Optional[Vehicle]:
        return self._store.get_by_id(vehicle_id)

    def update(self, vehicle: Vehicle) -> None:
        if self._store.update(vehicle):
            logger.info("Vehicle %d updated", vehicle.id)

    def delete(self, vehicle: Vehicle) -> None:
        if self._store.delete(vehicle.id):
            logger.info("Vehicle %d deleted", vehicle.id)
