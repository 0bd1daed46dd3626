"""Plain-text formatter for tickets and reports."""

from datetime import date
from decimal import Decimal

from ticket_machine.adapters.config.app_config import AppConfig
from ticket_machine.domain.contracts.ticket_formatter import TicketFormatterProtocol
from ticket_machine.domain.models.destination import Destination
from ticket_machine.domain.models.money import round_currency
from ticket_machine.domain.models.purchase import FareQuote, PurchaseResult
from ticket_machine.domain.models.special_offer import SpecialOffer
from ticket_machine.domain.models.system_summary import SystemSummary
from ticket_machine.domain.models.ticket import Ticket

RULE_WIDTH = 60


class TicketFormatter(TicketFormatterProtocol):
    """Formatter for machine output based on configuration."""

    def __init__(self, config: AppConfig, today: date | None = None) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with the currency symbol.
            today: Date used for "valid today" markers; defaults to the current date.
        """
        self.config = config
        self._today = today

    @property
    def today(self) -> date:
        return self._today or date.today()

    def format_money(self, amount: Decimal) -> str:
        """Format an amount with the currency symbol, rounded half-up to two decimals."""
        return f"{self.config.currency_symbol}{round_currency(amount):.2f}"

    def format_ticket(self, ticket: Ticket) -> str:
        """Render a printed ticket."""
        return "\n".join(
            [
                "***",
                ticket.origin,
                "to",
                ticket.destination_name,
                f"Price: {self.format_money(ticket.price)} {ticket.ticket_type.value}",
                "***",
            ]
        )

    def format_destinations(self, origin_station: str, destinations: list[Destination]) -> str:
        """Render the table of destinations and prices."""
        if not destinations:
            return "No destinations available"
        lines = [
            f"=== Available Destinations from {origin_station} ===",
            f"{'Destination':<20} {'Single':<12} {'Return':<12} {'Sold':>6} {'Takings':>12}",
            "-" * RULE_WIDTH,
        ]
        for destination in destinations:
            lines.append(
                f"{destination.name:<20} "
                f"{self.format_money(destination.single_price):<12} "
                f"{self.format_money(destination.return_price):<12} "
                f"{destination.sales_count:>6} "
                f"{self.format_money(destination.total_takings):>12}"
            )
        lines.append("-" * RULE_WIDTH)
        lines.append(f"Total Destinations: {len(destinations)}")
        return "\n".join(lines)

    def format_offer(self, offer: SpecialOffer) -> str:
        """Render one offer with its status."""
        status = "ACTIVE" if offer.is_active else "INACTIVE"
        valid_today = "Valid Today" if offer.is_valid_today(self.today) else "Not Valid Today"
        lines = [
            "-" * RULE_WIDTH,
            f"Offer ID:     #{offer.offer_id}",
            f"Name:         {offer.offer_name}",
            f"Station:      {offer.station_name}",
            f"Discount:     {offer.discount_percentage}%",
            f"Valid From:   {offer.start_date.isoformat()}",
            f"Valid Until:  {offer.end_date.isoformat()}",
            f"Status:       {status}",
            f"Today:        {valid_today}",
        ]
        days_left = offer.days_until_expiry(self.today)
        if offer.has_expired(self.today):
            lines.append("Expires:      Expired")
        elif days_left is not None:
            lines.append(f"Expires:      in {days_left} day(s)")
        lines.append("-" * RULE_WIDTH)
        return "\n".join(lines)

    def format_offers(self, offers: list[SpecialOffer]) -> str:
        """Render a list of offers followed by counts."""
        if not offers:
            return "No special offers available"
        blocks = [self.format_offer(offer) for offer in offers]
        active = sum(1 for offer in offers if offer.is_active)
        blocks.append(f"Total Offers: {len(offers)} | Active: {active}")
        return "\n\n".join(blocks)

    def format_quote(self, quote: FareQuote) -> str:
        """Render a price quote, including any discount."""
        ticket = quote.ticket
        header = f"{ticket.ticket_type.value} ticket {ticket.origin} -> {ticket.destination_name}"
        if quote.offer is None:
            return f"{header}\nTicket Price: {self.format_money(quote.final_price)}"
        return "\n".join(
            [
                header,
                "Special Offer Available!",
                f"   {quote.offer.offer_name} - {quote.offer.discount_percentage}% OFF",
                f"   Original Price: {self.format_money(quote.original_price)}",
                f"   Discount: -{self.format_money(quote.discount_amount)}",
                f"   Final Price: {self.format_money(quote.final_price)}",
            ]
        )

    def format_purchase(self, result: PurchaseResult) -> str:
        """Render the ticket and change of a completed purchase."""
        lines = [self.format_ticket(result.ticket)]
        if result.change > 0:
            lines.append(f"Your change: {self.format_money(result.change)}")
        lines.append("Thank you for your purchase!")
        return "\n".join(lines)

    def format_summary(self, summary: SystemSummary) -> str:
        """Render the admin system summary."""
        lines = [
            "SYSTEM SUMMARY",
            f"Station: {summary.origin_station}",
            f"Total Destinations: {summary.destination_count}",
            f"Total Revenue: {self.format_money(summary.total_revenue)}",
        ]
        if summary.average_single_price is not None and summary.average_return_price is not None:
            lines.extend(
                [
                    "Average Prices:",
                    f"  Single: {self.format_money(summary.average_single_price)}",
                    f"  Return: {self.format_money(summary.average_return_price)}",
                ]
            )
        if summary.top_destination is not None:
            top = summary.top_destination
            lines.extend(
                [
                    "Top Destination:",
                    f"  {top.name} - {self.format_money(top.total_takings)} in sales",
                ]
            )
        lines.append(f"Current Balance: {self.format_money(summary.current_balance)}")
        return "\n".join(lines)
