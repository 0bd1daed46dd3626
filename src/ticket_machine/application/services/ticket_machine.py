"""Ticket machine service: fare lookup and the cash till."""

import logging
from decimal import Decimal

from ticket_machine.domain.errors import (
    DestinationNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidTicketTypeError,
)
from ticket_machine.domain.models.destination import Destination
from ticket_machine.domain.models.money import ZERO, is_whole_cents, to_money
from ticket_machine.domain.models.purchase import PurchaseResult
from ticket_machine.domain.models.ticket import Ticket, TicketType
from ticket_machine.domain.ports.destination_repository import DestinationRepository

logger = logging.getLogger(__name__)


class TicketMachine:
    """Resolves ticket prices and keeps the single running cash balance.

    The balance belongs to the machine, not to a customer: there is one till.
    """

    def __init__(self, origin_station: str, destinations: DestinationRepository) -> None:
        """Initialize the machine.

        Args:
            origin_station: Station the machine sells tickets from.
            destinations: Catalog shared with the admin back office.
        """
        self.origin_station = origin_station
        self._destinations = destinations
        self._inserted_money = ZERO

    @property
    def inserted_money(self) -> Decimal:
        """Money inserted since the last purchase or refund."""
        return self._inserted_money

    def available_destinations(self) -> list[Destination]:
        return self._destinations.all()

    def search_ticket(self, destination_name: str, ticket_type: TicketType | str) -> Ticket:
        """Resolve a destination and ticket type into a priced ticket.

        Raises:
            DestinationNotFoundError: If the destination is not in the catalog.
            InvalidTicketTypeError: If the ticket type is neither single nor return.
        """
        destination = self._destinations.find(destination_name)
        if destination is None:
            logger.warning(f"Destination '{destination_name}' not found")
            raise DestinationNotFoundError(destination_name)

        try:
            resolved_type = TicketType.parse(ticket_type)
        except InvalidTicketTypeError:
            logger.warning(f"Invalid ticket type '{ticket_type}'")
            raise

        return Ticket(
            origin=self.origin_station,
            destination_name=destination.name,
            price=destination.price_for(resolved_type),
            ticket_type=resolved_type,
        )

    def insert_money(self, amount: Decimal | float | str) -> Decimal:
        """Add money to the balance and return the new total.

        Raises:
            InvalidAmountError: If the amount is not positive or has sub-cent digits.
        """
        try:
            amount = to_money(amount)
        except ValueError as e:
            raise InvalidAmountError() from e
        if amount <= 0 or not is_whole_cents(amount):
            logger.warning(f"Rejected insertion of {amount}")
            raise InvalidAmountError()
        self._inserted_money += amount
        logger.info(f"Inserted {amount:.2f}, total inserted {self._inserted_money:.2f}")
        return self._inserted_money

    def buy_ticket(self, ticket: Ticket) -> PurchaseResult:
        """Sell a ticket against the inserted money.

        On success the sale is recorded at the ticket's price, the balance goes
        back to zero and the leftover is returned as change. On failure the
        balance is kept so more money can be inserted.

        Raises:
            InsufficientFundsError: If the balance does not cover the price.
            DestinationNotFoundError: If the ticket's destination has left the catalog.
        """
        if self._inserted_money < ticket.price:
            shortfall = ticket.price - self._inserted_money
            logger.warning(
                f"Insufficient funds for {ticket.destination_name}: short {shortfall:.2f}"
            )
            raise InsufficientFundsError(shortfall)

        self._destinations.record_sale(ticket.destination_name, ticket.price)
        change = self._inserted_money - ticket.price
        self._inserted_money = ZERO
        logger.info(
            f"Sold {ticket.ticket_type.value} ticket {ticket.origin} -> "
            f"{ticket.destination_name} for {ticket.price:.2f}, change {change:.2f}"
        )
        return PurchaseResult(ticket=ticket, change=change)

    def return_change(self) -> Decimal:
        """Refund the whole balance, aborting the pending transaction."""
        change = self._inserted_money
        self._inserted_money = ZERO
        if change > 0:
            logger.info(f"Returning {change:.2f}")
        return change
