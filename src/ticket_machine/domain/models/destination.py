"""Destination domain model."""

from dataclasses import dataclass, field
from decimal import Decimal

from ticket_machine.domain.errors import InvalidPriceError
from ticket_machine.domain.models.money import ZERO, is_whole_cents, to_money
from ticket_machine.domain.models.ticket import TicketType


def _is_valid_price(price: Decimal) -> bool:
    return price > 0 and is_whole_cents(price)


@dataclass
class Destination:
    """A sellable station with its prices and cumulative sales figures."""

    name: str
    single_price: Decimal
    return_price: Decimal
    sales_count: int = field(default=0, compare=False)
    total_takings: Decimal = field(default=ZERO, compare=False)

    def __post_init__(self) -> None:
        self.single_price = to_money(self.single_price)
        self.return_price = to_money(self.return_price)
        self.total_takings = to_money(self.total_takings)
        if not _is_valid_price(self.single_price) or not _is_valid_price(self.return_price):
            raise InvalidPriceError()

    def matches(self, name: str) -> bool:
        """Check whether this destination has the given name, ignoring case."""
        return self.name.casefold() == name.strip().casefold()

    def price_for(self, ticket_type: TicketType | str) -> Decimal:
        """Return the price of a single or return ticket."""
        if TicketType.parse(ticket_type) is TicketType.SINGLE:
            return self.single_price
        return self.return_price

    def update_prices(self, single_price: Decimal, return_price: Decimal) -> None:
        """Overwrite both prices, or neither when either is not a positive whole-cent amount."""
        single_price = to_money(single_price)
        return_price = to_money(return_price)
        if not _is_valid_price(single_price) or not _is_valid_price(return_price):
            raise InvalidPriceError()
        self.single_price = single_price
        self.return_price = return_price

    def record_sale(self, price: Decimal) -> None:
        """Count one sale and add its price to the takings."""
        self.sales_count += 1
        self.total_takings += to_money(price)
