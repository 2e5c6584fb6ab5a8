"""
auth/service.py -- Administrator use cases on top of AdministratorStore.

Constructed per request by api/dependencies.py with the store from app.state.

Layer rule: no imports from api/ or fleet/.
"""

from __future__ import annotations

import logging

from auth.models import Administrator, Role
from auth.store import AdministratorStore

logger = logging.getLogger("vehicleregistry.auth")

PAGE_SIZE = 10


class AdministratorService:
    def __init__(self, store: AdministratorStore) -> None:
        self._store = store

    def login(self, email: str, password: str) -> Administrator | None:
        """Return the administrator matching both fields exactly, or None."""
        return self._store.get_by_credentials(email, password)

    def create(self, administrator: Administrator) -> Administrator:
        """Persist the administrator and return it with its id populated."""
        administrator.id = self._store.create(administrator)
        logger.info("Administrator %d created (role=%s)", administrator.id, Role.parse(administrator.role).value)
        return administrator

    def list_paged(self, page: int | None = None) -> list[Administrator]:
        """Return one 1-indexed page of PAGE_SIZE administrators.

        page=None returns the whole collection without paging.
        """
        if page is None:
            return self._store.list_administrators()
        if page < 1:
            raise ValueError(f"Page number must be >= 1, got {page}")
        return self._store.list_administrators(offset=(page - 1) * PAGE_SIZE, limit=PAGE_SIZE)

    def find_by_id(self, administrator_id: int) -> Administrator | None:
        return self._store.get_by_id(administrator_id)

    def ensure_default_administrator(self, email: str, password: str) -> Administrator | None:
        """Seed one Adm account when no administrator exists yet.

        Returns the created administrator, or None when the store already has
        records or no email is configured.
        """
        if not email or self._store.count() > 0:
            return None
        created = self.create(Administrator(email=email, password=password, role=Role.ADMIN))
        logger.warning("Seeded default administrator %s -- change its credentials", email)
        return created
