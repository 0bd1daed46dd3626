"""Domain layer - core business logic and models."""

from ticket_machine.domain.models import (
    Destination,
    SpecialOffer,
    Ticket,
    TicketType,
    User,
)
from ticket_machine.domain.ports import (
    DestinationRepository,
    OfferRepository,
)

__all__ = [
    "Destination",
    "DestinationRepository",
    "OfferRepository",
    "SpecialOffer",
    "Ticket",
    "TicketType",
    "User",
]
