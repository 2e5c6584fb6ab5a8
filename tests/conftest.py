"""
tests/conftest.py -- Shared test fixtures for Vehicle Registry integration tests.

This module provides:
  - _make_test_stores(): creates isolated in-memory DBs for administrators + vehicles
  - _patch_lifespan(): wires test stores into app.state, bypassing real startup
  - api_client: TestClient plus Adm and Editor JWTs for API integration tests
  - admin_store / vehicle_store: fresh per-test in-memory stores for unit tests

Design: Named shared-memory SQLite URIs (not plain :memory:) are required for
the TestClient fixtures because route handlers run in a thread pool. Plain
:memory: DBs are per-connection and would present a blank schema to each
worker thread. Unit-test stores use plain :memory: since they stay on one
thread.

DEBUG must be set before any core/auth/api import so get_settings()
auto-generates JWT_KEY instead of leaving token issuance disabled.
"""

from __future__ import annotations

import os
from collections.abc import Generator
from contextlib import asynccontextmanager

# CRITICAL: set before any application import -- get_settings() is cached.
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("LOGIN_RATE_LIMIT", "1000/minute")

import pytest
from fastapi.testclient import TestClient

from api.main import app
from auth.models import Administrator, Role
from auth.store import AdministratorStore
from auth.tokens import TokenIssuer
from core.config import get_settings
from fleet.store import VehicleStore

ADMIN_EMAIL = "adm@teste.com"
ADMIN_PASSWORD = "123456"
EDITOR_EMAIL = "editor@teste.com"
EDITOR_PASSWORD = "editor123"

# ---------------------------------------------------------------------------
# Store helpers
# ---------------------------------------------------------------------------


def _make_test_stores(db_suffix: str) -> tuple[AdministratorStore, VehicleStore]:
    """Create isolated named shared-memory SQLite stores for test isolation.

    Args:
        db_suffix: Unique string appended to the DB name so test modules
                   don't share state (the requesting module's name).
    """
    url = f"sqlite:///file:test_registry_{db_suffix}?mode=memory&cache=shared&uri=true"
    return AdministratorStore(url), VehicleStore(url)


def _patch_lifespan(admin_store: AdministratorStore, vehicle_store: VehicleStore, issuer: TokenIssuer):
    """Return an async context manager that replaces the real lifespan.

    Wires pre-created test stores and the token issuer into app.state so
    TestClient routes see isolated test DBs rather than the configured one.
    """

    @asynccontextmanager
    async def test_lifespan(app):
        app.state.settings = get_settings()
        app.state.admin_store = admin_store
        app.state.vehicle_store = vehicle_store
        app.state.token_issuer = issuer
        yield

    return test_lifespan


# ---------------------------------------------------------------------------
# Module-scoped fixtures -- one TestClient per test module for speed
# ---------------------------------------------------------------------------


@pytest.fixture(scope="module")
def api_client(request: pytest.FixtureRequest) -> Generator[tuple[TestClient, str, str], None, None]:
    """Yield (client, admin_token, editor_token) for API integration tests.

    One Adm and one Editor are created before the client starts:
      adm@teste.com / 123456         role Adm
      editor@teste.com / editor123   role Editor
    """
    admin_store, vehicle_store = _make_test_stores(request.module.__name__.rsplit(".", 1)[-1])
    issuer = TokenIssuer(get_settings())

    admin = Administrator(email=ADMIN_EMAIL, password=ADMIN_PASSWORD, role=Role.ADMIN)
    admin.id = admin_store.create(admin)
    editor = Administrator(email=EDITOR_EMAIL, password=EDITOR_PASSWORD, role=Role.EDITOR)
    editor.id = admin_store.create(editor)

    app.router.lifespan_context = _patch_lifespan(admin_store, vehicle_store, issuer)

    with TestClient(app, raise_server_exceptions=True) as client:
        yield client, issuer.issue(admin), issuer.issue(editor)

    app.dependency_overrides.clear()
    admin_store.close()
    vehicle_store.close()


# ---------------------------------------------------------------------------
# Function-scoped unit-test stores
# ---------------------------------------------------------------------------


@pytest.fixture
def admin_store() -> Generator[AdministratorStore, None, None]:
    store = AdministratorStore("sqlite:///:memory:")
    yield store
    store.close()


@pytest.fixture
def vehicle_store() -> Generator[VehicleStore, None, None]:
    store = VehicleStore("sqlite:///:memory:")
    yield store
    store.close()
