"""Adapters layer - configuration and output integrations."""

from ticket_machine.adapters.config import AppConfig, SeedDataLoader
from ticket_machine.adapters.formatters import TicketFormatter

__all__ = [
    "AppConfig",
    "SeedDataLoader",
    "TicketFormatter",
]
