"""
auth/store.py -- SQLAlchemy Core persistence layer for administrators.

Pattern: Repository + Data Mapper (same as fleet/store.py).
AdministratorStore is the repository; _row_to_administrator is the mapper.
Service and route code never touches SQL directly.

Security:
  All queries use bound parameters. No f-strings in SQL.

  Passwords are stored and matched as plaintext (exact string comparison).
  This preserves the existing data and login behavior; see DESIGN.md for the
  risk note. Email uniqueness is a convention only -- there is no UNIQUE
  constraint, and get_by_credentials() returns the first match.

Layer rule: no imports from api/ or fleet/.
"""

from __future__ import annotations

from sqlalchemy import Column, Integer, MetaData, String, Table, create_engine, event, func, select
from sqlalchemy.engine import Engine

from auth.models import Administrator, Role

# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

_metadata = MetaData()

_administrators = Table(
    "administradores",
    _metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("email", String(255), nullable=False),
    Column("senha", String(50), nullable=False),
    Column("perfil", String(10), nullable=False, server_default=Role.EDITOR.value),
)


def _set_wal_mode(dbapi_conn, connection_record) -> None:
    """Enable WAL journal mode for concurrent read safety.

    Set per-connection because SQLite PRAGMAs are not inherited by new
    connections from the pool.
    """
    dbapi_conn.execute("PRAGMA journal_mode=WAL")


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class AdministratorStore:
    """Repository for Administrator entities.

    Every method checks a connection out of the engine pool and returns it on
    exit, including when the query raises.

    Usage:
        store = AdministratorStore("sqlite:///:memory:")
        admin_id = store.create(Administrator(email="adm@teste.com", password="123456", role=Role.ADMIN))
        admin = store.get_by_credentials("adm@teste.com", "123456")
        store.close()
    """

    def __init__(self, db_url: str) -> None:
        connect_args: dict = {}
        if db_url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        self.engine: Engine = create_engine(db_url, connect_args=connect_args)
        if db_url.startswith("sqlite"):
            event.listen(self.engine, "connect", _set_wal_mode)
        _metadata.create_all(self.engine)

    def create(self, administrator: Administrator) -> int:
        """Insert a new administrator and return its assigned database ID."""
        with self.engine.connect() as conn:
            result = conn.execute(
                _administrators.insert().values(
                    email=administrator.email,
                    senha=administrator.password,
                    perfil=Role.parse(administrator.role).value,
                )
            )
            conn.commit()
            return result.inserted_primary_key[0]

    def get_by_credentials(self, email: str, password: str) -> Administrator | None:
        """Return the first administrator whose email and password both match exactly."""
        with self.engine.connect() as conn:
            row = conn.execute(
                _administrators.select()
                .where((_administrators.c.email == email) & (_administrators.c.senha == password))
                .order_by(_administrators.c.id)
                .limit(1)
            ).fetchone()
        return _row_to_administrator(row) if row is not None else None

    def get_by_id(self, administrator_id: int) -> Administrator | None:
        """Look up an administrator by primary key. Returns None if not found."""
        with self.engine.connect() as conn:
            row = conn.execute(_administrators.select().where(_administrators.c.id == administrator_id)).fetchone()
        return _row_to_administrator(row) if row is not None else None

    def list_administrators(self, offset: int = 0, limit: int | None = None) -> list[Administrator]:
        """Return administrators ordered by id. limit=None returns every row after offset."""
        query = _administrators.select().order_by(_administrators.c.id).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        with self.engine.connect() as conn:
            rows = conn.execute(query).fetchall()
        return [_row_to_administrator(r) for r in rows]

    def count(self) -> int:
        with self.engine.connect() as conn:
            result = conn.execute(select(func.count()).select_from(_administrators)).scalar()
        return result or 0

    def ping(self) -> bool:
        """Return True if the database answers a trivial query."""
        with self.engine.connect() as conn:
            conn.execute(select(1))
        return True

    def close(self) -> None:
        self.engine.dispose()


# ---------------------------------------------------------------------------
# Row mapper (Data Mapper pattern)
# ---------------------------------------------------------------------------


def _row_to_administrator(row) -> Administrator:
    return Administrator(
        id=row.id,
        email=row.email,
        password=row.senha,
        role=Role.parse(row.perfil),
    )
