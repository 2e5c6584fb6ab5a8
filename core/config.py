"""
core/config.py -- Centralized application configuration via pydantic-settings.

All environment variable reads for the Vehicle Registry API happen here. No
module should call os.getenv() or os.environ.get() directly -- import
get_settings() instead.

Design patterns used:
  Singleton via lru_cache: get_settings() instantiates Settings once at first
      call and returns the cached instance on every subsequent call.

  Explicit hand-off: the Settings instance is read once in the app lifespan,
      stored on app.state.settings and passed into TokenIssuer. Nothing reads
      the JWT secret from module-level globals.

  @model_validator(mode="after"): Runs cross-field validation after all fields
      are resolved from environment. Dev mode generates a signing key with a
      warning; production mode without a key disables token issuance (login
      answers 500) instead of refusing to start.

Layer rule: core/ is the kernel. This module may not import from api/, auth/,
or fleet/.
"""

import logging
import secrets
from functools import lru_cache
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("vehicleregistry.config")

_DEFAULT_DB_URL = f"sqlite:///{Path(__file__).resolve().parent.parent / 'vehicleregistry.db'}"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    All fields have defaults so Settings() can be instantiated in test
    environments without a real .env file.

    Environment variable name mapping: field names are uppercased automatically.
    E.g. `jwt_key` reads from JWT_KEY, `database_url` reads from DATABASE_URL.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    debug: bool = False
    version: str = "1.0.0"
    host: str = "0.0.0.0"  # nosec B104 -- container default, override with HOST
    port: int = 8000

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    # Empty string means "not configured": TokenIssuer.issue() returns ""
    # and every bearer token is rejected.
    jwt_key: str = ""
    token_expire_seconds: int = 24 * 60 * 60

    # Seeded on first startup when the administradores table is empty.
    # Leave the email blank to skip seeding.
    default_admin_email: str = "administrador@teste.com"
    default_admin_password: str = "123456"

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    # Any SQLAlchemy URL, e.g. mysql+pymysql://user:pw@host/minimal_api
    database_url: str = _DEFAULT_DB_URL

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    login_rate_limit: str = "10/minute"
    allowed_hosts: list[str] = ["*"]
    cors_origins: list[str] = ["http://localhost", "http://localhost:3000", "http://127.0.0.1"]

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    @model_validator(mode="after")
    def validate_jwt_key(self) -> "Settings":
        """Resolve the JWT signing key policy.

        Dev mode (DEBUG=true): auto-generate a random key with a warning.
            Tokens will not survive restart -- acceptable for local dev.

        Production mode: a missing key is logged and left empty. Login then
            fails with a configuration error rather than handing out tokens
            signed with a guessable key.

        Both modes: reject configured keys shorter than 32 characters.
        """
        if not self.jwt_key:
            if self.debug:
                self.jwt_key = secrets.token_hex(32)
                logger.warning("Using auto-generated JWT_KEY. Tokens will not persist across restarts.")
            else:
                logger.warning("JWT_KEY is not set -- token issuance is disabled. Set JWT_KEY or DEBUG=true.")
            return self
        if len(self.jwt_key) < 32:
            raise ValueError("JWT_KEY must be at least 32 characters.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the application Settings singleton.

    In tests: call get_settings.cache_clear() between test cases if you need
    to inject different environment variables.
    """
    return Settings()
