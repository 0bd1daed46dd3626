"""Customer purchase service: quotes tickets with offers and buys them."""

import logging
from datetime import date

from ticket_machine.application.services.ticket_machine import TicketMachine
from ticket_machine.domain.models.calendar import parse_iso_date
from ticket_machine.domain.models.money import ZERO
from ticket_machine.domain.models.purchase import FareQuote, PurchaseResult
from ticket_machine.domain.models.ticket import TicketType
from ticket_machine.domain.ports.offer_repository import OfferRepository

logger = logging.getLogger(__name__)


class PurchaseService:
    """Service for the customer purchase flow."""

    def __init__(self, machine: TicketMachine, offers: OfferRepository) -> None:
        """Initialize with the ticket machine and the offers to consult."""
        self._machine = machine
        self._offers = offers

    def quote(
        self,
        destination_name: str,
        ticket_type: TicketType | str,
        on: date | str | None = None,
    ) -> FareQuote:
        """Price a ticket, applying the best offer valid on ``on`` (default today).

        Raises:
            DestinationNotFoundError: If the destination is not in the catalog.
            InvalidTicketTypeError: If the ticket type is neither single nor return.
            InvalidDateRangeError: If ``on`` is not a YYYY-MM-DD date.
        """
        travel_date = parse_iso_date(on) if on is not None else date.today()
        ticket = self._machine.search_ticket(destination_name, ticket_type)

        offer = self._offers.get_best_offer(ticket.destination_name, travel_date)
        if offer is None:
            return FareQuote(
                ticket=ticket,
                offer=None,
                original_price=ticket.price,
                discount_amount=ZERO,
                final_price=ticket.price,
            )

        logger.info(
            f"Offer #{offer.offer_id} '{offer.offer_name}' applies to "
            f"{ticket.destination_name} on {travel_date.isoformat()}"
        )
        return FareQuote(
            ticket=ticket,
            offer=offer,
            original_price=ticket.price,
            discount_amount=offer.get_discount_amount(ticket.price),
            final_price=offer.apply_discount(ticket.price),
        )

    def purchase(self, quote: FareQuote) -> PurchaseResult:
        """Buy the quoted ticket at its final price with the inserted money.

        Raises:
            InsufficientFundsError: If the balance does not cover the final price.
        """
        return self._machine.buy_ticket(quote.ticket_to_charge)
