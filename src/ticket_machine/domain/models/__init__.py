"""Domain models for the ticket machine."""

from ticket_machine.domain.models.destination import Destination
from ticket_machine.domain.models.money import round_currency, to_money
from ticket_machine.domain.models.purchase import FareQuote, PurchaseResult
from ticket_machine.domain.models.seed_data import (
    DestinationSeed,
    OfferSeed,
    SeedData,
    UserSeed,
)
from ticket_machine.domain.models.special_offer import SpecialOffer
from ticket_machine.domain.models.system_summary import SystemSummary, TopDestination
from ticket_machine.domain.models.ticket import Ticket, TicketType
from ticket_machine.domain.models.user import User

__all__ = [
    "Destination",
    "DestinationSeed",
    "FareQuote",
    "OfferSeed",
    "PurchaseResult",
    "SeedData",
    "SpecialOffer",
    "SystemSummary",
    "Ticket",
    "TicketType",
    "TopDestination",
    "User",
    "UserSeed",
    "round_currency",
    "to_money",
]
