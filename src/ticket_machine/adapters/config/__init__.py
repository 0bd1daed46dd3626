"""Configuration adapters."""

from ticket_machine.adapters.config.app_config import AppConfig
from ticket_machine.adapters.config.seed_data_loader import SeedDataLoader

__all__ = ["AppConfig", "SeedDataLoader"]
