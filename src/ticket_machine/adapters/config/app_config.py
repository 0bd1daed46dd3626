"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SEED_SECTIONS = ("destinations", "users", "offers")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Machine configuration
    origin_station: str = Field(
        default="Oxford Station", description="Station the machine sells tickets from"
    )
    currency_symbol: str = Field(default="£", description="Symbol printed before amounts")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level (DEBUG, INFO, ...)")

    # TOML config file path holding seed destinations, users and offers
    config_file: str | None = Field(
        default="config.example.toml",
        description="Path to TOML configuration file with seed data",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @field_validator("origin_station")
    @classmethod
    def validate_origin_station(cls, v: str) -> str:
        """Validate the origin station is not blank."""
        if not v.strip():
            raise ValueError("origin_station cannot be empty")
        return v.strip()

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse TOML file, updating machine settings."""
        if not self.config_file:
            raise ValueError("config_file must be set to load seed data")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        # Update machine settings from TOML if present
        machine = toml_data.get("machine", {})
        if isinstance(machine, dict):
            origin_station = str(machine.get("origin_station", "")).strip()
            if origin_station:
                self.origin_station = origin_station
            if "currency_symbol" in machine:
                self.currency_symbol = str(machine["currency_symbol"])

        return toml_data

    def get_seed_config(self) -> dict[str, list[dict[str, Any]]]:
        """Parse and return seed data sections from the TOML file.

        Returns a dict with 'destinations', 'users' and 'offers' keys, each a list
        of raw entries. Missing sections are empty lists.

        Raises ValueError if a section is not a list.
        """
        toml_data = self._load_toml_data()

        seed: dict[str, list[dict[str, Any]]] = {}
        for section in SEED_SECTIONS:
            entries = toml_data.get(section, [])
            if not isinstance(entries, list):
                raise ValueError(f"TOML config '{section}' must be a list")
            seed[section] = entries
        return seed
