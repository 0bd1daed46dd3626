"""Seed data loader."""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from ticket_machine.adapters.config.app_config import AppConfig
from ticket_machine.domain.models.money import to_money
from ticket_machine.domain.models.seed_data import (
    DestinationSeed,
    OfferSeed,
    SeedData,
    UserSeed,
)

logger = logging.getLogger(__name__)


def _parse_amount(value: Any) -> Decimal | None:
    """Parse a TOML number or numeric string, returning None when unusable."""
    if value is None:
        return None
    try:
        return to_money(value)
    except ValueError:
        return None


def _parse_date_text(value: Any) -> str | None:
    # TOML has a native date type; keep ISO text so the registry validates it.
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class SeedDataLoader:
    """Loads seed destinations, users and offers from app config."""

    @staticmethod
    def load_destination_from_data(entry: dict[str, Any]) -> DestinationSeed | None:
        """Load a single destination from a data dict."""
        if not isinstance(entry, dict):
            return None
        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            return None

        single_price = _parse_amount(entry.get("single_price"))
        return_price = _parse_amount(entry.get("return_price"))
        if single_price is None or return_price is None:
            logger.warning(f"Skipping destination '{name}': prices must be numbers")
            return None

        return DestinationSeed(
            name=name.strip(),
            single_price=single_price,
            return_price=return_price,
        )

    @staticmethod
    def load_user_from_data(entry: dict[str, Any]) -> UserSeed | None:
        """Load a single user from a data dict."""
        if not isinstance(entry, dict):
            return None
        username = entry.get("username")
        password = entry.get("password")
        if not isinstance(username, str) or not isinstance(password, str):
            logger.warning("Skipping user entry without username or password")
            return None
        return UserSeed(
            username=username.strip(),
            password=password,
            is_admin=bool(entry.get("is_admin", False)),
        )

    @staticmethod
    def load_offer_from_data(entry: dict[str, Any]) -> OfferSeed | None:
        """Load a single offer from a data dict."""
        if not isinstance(entry, dict):
            return None
        offer_name = entry.get("name")
        station_name = entry.get("station")
        if not isinstance(offer_name, str) or not isinstance(station_name, str):
            logger.warning("Skipping offer entry without name or station")
            return None

        discount = _parse_amount(entry.get("discount_percentage"))
        start_date = _parse_date_text(entry.get("start_date"))
        end_date = _parse_date_text(entry.get("end_date"))
        if discount is None or start_date is None or end_date is None:
            logger.warning(f"Skipping offer '{offer_name}': discount and dates are required")
            return None

        return OfferSeed(
            offer_name=offer_name,
            station_name=station_name,
            discount_percentage=discount,
            start_date=start_date,
            end_date=end_date,
            is_active=bool(entry.get("is_active", True)),
        )

    @staticmethod
    def load(config: AppConfig) -> SeedData:
        """Load seed data from app config."""
        seed_config = config.get_seed_config()

        destinations = [
            seed
            for seed in map(SeedDataLoader.load_destination_from_data, seed_config["destinations"])
            if seed is not None
        ]
        users = [
            seed
            for seed in map(SeedDataLoader.load_user_from_data, seed_config["users"])
            if seed is not None
        ]
        offers = [
            seed
            for seed in map(SeedDataLoader.load_offer_from_data, seed_config["offers"])
            if seed is not None
        ]

        return SeedData(destinations=destinations, users=users, offers=offers)
