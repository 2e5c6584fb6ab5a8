"""
fleet/store.py -- SQLAlchemy-backed persistence layer for vehicles.

Uses SQLAlchemy Core (not ORM) so the dataclass in fleet/models.py remains the
authoritative domain representation. Swapping SQLite for MySQL or PostgreSQL
is a connection string change, not a rewrite.

Pattern: Repository + Data Mapper. VehicleStore is the repository;
_row_to_vehicle is the mapper.

Security: all queries use bound parameters. No f-strings in SQL.

Usage:
    store = VehicleStore("sqlite:///:memory:")
    vehicle_id = store.create(Vehicle(name="Fusca", brand="Volkswagen", year=1973))
    page = store.list_vehicles(offset=0, limit=10)
    store.close()
"""

from typing import Optional

from sqlalchemy import Column, Integer, MetaData, String, Table, create_engine, event, select
from sqlalchemy.engine import Engine

from fleet.models import Vehicle

# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

metadata = MetaData()

_vehicles = Table(
    "veiculos",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("nome", String(150), nullable=False),
    Column("marca", String(100), nullable=False),
    Column("ano", Integer, nullable=False),
)


def _set_wal_mode(dbapi_conn, connection_record) -> None:
    dbapi_conn.execute("PRAGMA journal_mode=WAL")


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class VehicleStore:
    """Repository for Vehicle entities."""

    def __init__(self, db_url: str) -> None:
        connect_args: dict = {}
        if db_url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        self.engine: Engine = create_engine(db_url, connect_args=connect_args)
        if db_url.startswith("sqlite"):
            event.listen(self.engine, "connect", _set_wal_mode)
        metadata.create_all(self.engine)

    def create(self, vehicle: Vehicle) -> int:
        """Insert a vehicle and return its assigned database ID."""
        with self.engine.connect() as conn:
            result = conn.execute(_vehicles.insert().values(nome=vehicle.name, marca=vehicle.brand, ano=vehicle.year))
            conn.commit()
            return result.inserted_primary_key[0]

    def get_by_id(self, vehicle_id: int) -> Optional[Vehicle]:
        with self.engine.connect() as conn:
            row = conn.execute(_vehicles.select().where(_vehicles.c.id == vehicle_id)).fetchone()
        return _row_to_vehicle(row) if row is not None else None

    def list_vehicles(self, offset: int, limit: int) -> list[Vehicle]:
        """Return up to limit vehicles ordered by id, skipping the first offset rows."""
        with self.engine.connect() as conn:
            rows = conn.execute(
                _vehicles.select().order_by(_vehicles.c.id).offset(offset).limit(limit)
            ).fetchall()
        return [_row_to_vehicle(r) for r in rows]

    def update(self, vehicle: Vehicle) -> bool:
        """Overwrite name, brand and year of the row with vehicle.id.

        Returns True if a row was updated, False if the id was not found.
        """
        with self.engine.connect() as conn:
            result = conn.execute(
                _vehicles.update()
                .where(_vehicles.c.id == vehicle.id)
                .values(nome=vehicle.name, marca=vehicle.brand, ano=vehicle.year)
            )
            conn.commit()
        return result.rowcount > 0

    def delete(self, vehicle_id: int) -> bool:
        """Delete a vehicle by id. Returns True if deleted, False if not found."""
        with self.engine.connect() as conn:
            result = conn.execute(_vehicles.delete().where(_vehicles.c.id == vehicle_id))
            conn.commit()
        return result.rowcount > 0

    def ping(self) -> bool:
        with self.engine.connect() as conn:
            conn.execute(select(1))
        return True

    def close(self) -> None:
        self.engine.dispose()


# ---------------------------------------------------------------------------
# Row mapper (Data Mapper pattern)
# ---------------------------------------------------------------------------


def _row_to_vehicle(row) -> Vehicle:
    return Vehicle(id=row.id, name=row.nome, brand=row.marca, year=row.ano)
