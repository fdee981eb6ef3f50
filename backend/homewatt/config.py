"""HomeWatt configuration — Pydantic BaseSettings loaded from .env."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "HomeWatt"
    debug: bool = True
    environment: str = "development"
    log_level: str = "INFO"

    # Network
    host: str = "127.0.0.1"
    port: int = 8000
    api_prefix: str = "/api"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:8000",
    ]

    # Auth — tokens are issued elsewhere, we only verify them
    secret_key: str = "change-me-in-prod"
    token_algorithm: str = "HS256"

    # Storage paths (relative resolved from backend/ at runtime)
    data_dir: str = "./data"
    log_dir: str = "./data/logs"
    database_path: str = "./data/homewatt.db"

    # Billing
    currency_symbol: str = "€"
    default_price_a1_b1: float = 0.0779  # daytime standard, per kWh
    default_price_a2_b1: float = 0.0334  # nighttime standard
    default_price_a1_b2: float = 0.1445  # daytime peak
    default_price_a2_b2: float = 0.0681  # nighttime peak

    # Server limits
    uvicorn_workers: int = 1
    max_db_connections: int = 5

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        env_prefix="HOMEWATT_",
        extra="ignore",
    )

    @property
    def default_tariff(self) -> dict[str, float]:
        return {
            "price_a1_b1": self.default_price_a1_b1,
            "price_a2_b1": self.default_price_a2_b1,
            "price_a1_b2": self.default_price_a1_b2,
            "price_a2_b2": self.default_price_a2_b2,
        }

    @field_validator("cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, value: list[str] | str) -> list[str]:
        if isinstance(value, str) and not value.startswith("["):
            return [o.strip() for o in value.split(",") if o.strip()]
        if isinstance(value, list):
            return value
        return ["http://localhost:5173"]

    @model_validator(mode="after")
    def _resolve_paths(self) -> "Settings":
        """Ensure data directories are absolute."""
        base = Path(__file__).resolve().parent.parent  # backend/
        for field in ("data_dir", "log_dir", "database_path"):
            val = getattr(self, field)
            if not Path(val).is_absolute():
                setattr(self, field, str(base / val))
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
