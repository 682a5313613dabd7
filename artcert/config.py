"""Registry configuration — env-driven.

Centralized config using pydantic-settings for environment variable
support. Reads from .env file and ARTCERT_* environment variables.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class RegistryConfig(BaseSettings):
    """Registry configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export ARTCERT_AUTHORITY_PRINCIPAL=ST1AUTHORITY
        export ARTCERT_ISSUANCE_FEE=750
        export ARTCERT_STATE_PATH=/data/registry.json

    Or via .env file::

        ARTCERT_ENVIRONMENT=production
        ARTCERT_LOG_LEVEL=WARNING
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ARTCERT_",
        env_file_encoding="utf-8",
    )

    # Runtime environment
    environment: str = "development"
    log_level: str = "INFO"
    debug: bool = False

    # Registry bootstrap values; fixed into the state at initialization
    authority_principal: str = "ST1TEST"
    max_certificates: int = 10000
    issuance_fee: int = 500

    # Host snapshot file
    state_path: Path = Path(".artcert/registry.json")

    @property
    def is_production(self) -> bool:
        """Whether running in production mode."""
        return self.environment == "production"


# Module-level singleton — import as `from artcert.config import config`
config = RegistryConfig()
