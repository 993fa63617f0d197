"""Application configuration loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.projection import InflationModel, TerminationMode


class Settings(BaseSettings):
    """Settings read from PATRIMONY_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="PATRIMONY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Projection defaults, used when a request omits them
    default_termination_mode: TerminationMode = TerminationMode.STOP_AT_TARGET
    default_inflation_model: InflationModel = InflationModel.GEOMETRIC
    short_circuit_unreachable: bool = True

    # Chart
    chart_max_points: int = Field(default=12, ge=2)

    # CORS
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    # Server
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()

