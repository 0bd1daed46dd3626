"""Purchase and quote domain models."""

from dataclasses import dataclass
from decimal import Decimal

from ticket_machine.domain.models.special_offer import SpecialOffer
from ticket_machine.domain.models.ticket import Ticket


@dataclass(frozen=True)
class PurchaseResult:
    """Outcome of a successful purchase.

    The machine balance is already zero; ``change`` is the only way to claim
    what was left over.
    """

    ticket: Ticket
    change: Decimal


@dataclass(frozen=True)
class FareQuote:
    """Price of a ticket after the best applicable offer."""

    ticket: Ticket  # Undiscounted ticket as resolved by the machine
    offer: SpecialOffer | None
    original_price: Decimal
    discount_amount: Decimal
    final_price: Decimal

    @property
    def has_offer(self) -> bool:
        return self.offer is not None

    @property
    def ticket_to_charge(self) -> Ticket:
        """The ticket carrying the final price, as passed to the machine."""
        if self.offer is None:
            return self.ticket
        return Ticket(
            origin=self.ticket.origin,
            destination_name=self.ticket.destination_name,
            price=self.final_price,
            ticket_type=self.ticket.ticket_type,
        )
