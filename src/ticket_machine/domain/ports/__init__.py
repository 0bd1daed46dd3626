"""Ports (interfaces) for the ports-and-adapters architecture."""

from ticket_machine.domain.ports.destination_repository import DestinationRepository
from ticket_machine.domain.ports.offer_repository import OfferRepository

__all__ = [
    "DestinationRepository",
    "OfferRepository",
]
