"""Ticket domain model."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from ticket_machine.domain.errors import InvalidTicketTypeError


class TicketType(Enum):
    """Kinds of ticket the machine sells."""

    SINGLE = "Single"
    RETURN = "Return"

    @classmethod
    def parse(cls, value: "TicketType | str") -> "TicketType":
        """Match a ticket type case-insensitively.

        Raises:
            InvalidTicketTypeError: If the value is neither single nor return.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for ticket_type in cls:
            if ticket_type.value.lower() == normalized:
                return ticket_type
        raise InvalidTicketTypeError(str(value))


@dataclass(frozen=True)
class Ticket:
    """A priced ticket from the origin station to a destination."""

    origin: str
    destination_name: str
    price: Decimal  # Already discount-adjusted when an offer applies
    ticket_type: TicketType
