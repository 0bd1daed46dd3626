"""Protocol for rendering tickets and reports as text."""

from decimal import Decimal
from typing import Protocol

from ticket_machine.domain.models.destination import Destination
from ticket_machine.domain.models.purchase import FareQuote, PurchaseResult
from ticket_machine.domain.models.special_offer import SpecialOffer
from ticket_machine.domain.models.system_summary import SystemSummary
from ticket_machine.domain.models.ticket import Ticket


class TicketFormatterProtocol(Protocol):
    """Protocol for formatting machine output."""

    def format_money(self, amount: Decimal) -> str:
        """Format an amount with the currency symbol and two decimals.

        Args:
            amount: The amount to format.

        Returns:
            Formatted amount like "£25.50".
        """
        ...

    def format_ticket(self, ticket: Ticket) -> str:
        """Render a printed ticket."""
        ...

    def format_destinations(self, origin_station: str, destinations: list[Destination]) -> str:
        """Render the table of destinations and prices."""
        ...

    def format_offer(self, offer: SpecialOffer) -> str:
        """Render one offer with its status."""
        ...

    def format_quote(self, quote: FareQuote) -> str:
        """Render a price quote, including any discount."""
        ...

    def format_purchase(self, result: PurchaseResult) -> str:
        """Render the ticket and change of a completed purchase."""
        ...

    def format_summary(self, summary: SystemSummary) -> str:
        """Render the admin system summary."""
        ...
