"""Application configuration using pydantic-settings.

Restricted-asset relayer deployments are not part of the static network
table, they are supplied per environment.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug logging")
    log_level: str = Field(default="INFO", description="Log level when debug is off")

    # ======================
    # Swap defaults
    # ======================
    default_slippage_bps: int = Field(
        default=50, description="Default slippage tolerance in basis points (0.5%)"
    )

    # ======================
    # Restricted assets (RWA)
    # ======================
    rwa_relayer_addresses: dict[int, str] = Field(
        default_factory=dict,
        description="RWA relayer address per chain id (JSON object)",
    )
    rwa_tokens: dict[int, list[str]] = Field(
        default_factory=dict,
        description="Restricted token addresses per chain id (JSON object)",
    )

    @field_validator("default_slippage_bps")
    @classmethod
    def _check_slippage(cls, value: int) -> int:
        if value < 0 or value > 10_000:
            raise ValueError("default_slippage_bps must be between 0 and 10000")
        return value

    def get_rwa_relayer(self, chain_id: int) -> Optional[str]:
        """Get the RWA relayer address configured for a chain."""
        return self.rwa_relayer_addresses.get(chain_id)

    def get_rwa_tokens(self, chain_id: int) -> set[str]:
        """Get restricted token addresses for a chain, lowercased."""
        return {token.lower() for token in self.rwa_tokens.get(chain_id, [])}

    def get_safe_dict(self) -> dict:
        """Return settings dict suitable for logging."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "log_level": self.log_level,
            "default_slippage_bps": self.default_slippage_bps,
            "rwa": {
                str(chain_id): {
                    "relayer": address,
                    "tokens": len(self.rwa_tokens.get(chain_id, [])),
                }
                for chain_id, address in self.rwa_relayer_addresses.items()
            },
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    if settings.debug:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
