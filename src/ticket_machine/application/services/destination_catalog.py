"""Destination catalog service."""

import logging
from decimal import Decimal

from ticket_machine.domain.errors import (
    DestinationNotFoundError,
    InvalidFactorError,
    InvalidPriceError,
)
from ticket_machine.domain.models.destination import Destination
from ticket_machine.domain.models.money import round_currency, to_money

logger = logging.getLogger(__name__)


class DestinationCatalog:
    """Owns the sellable destinations and their pricing and sales counters."""

    def __init__(self, destinations: list[Destination] | None = None) -> None:
        """Initialize with an optional list of destinations."""
        self._destinations: list[Destination] = list(destinations or [])

    def __len__(self) -> int:
        return len(self._destinations)

    def find(self, name: str) -> Destination | None:
        """Find a destination by exact name, ignoring case."""
        for destination in self._destinations:
            if destination.matches(name):
                return destination
        logger.debug(f"Destination '{name}' not found")
        return None

    def exists(self, name: str) -> bool:
        return self.find(name) is not None

    def all(self) -> list[Destination]:
        """Return every destination in insertion order."""
        return list(self._destinations)

    def add(self, destination: Destination) -> None:
        """Append a destination.

        Names are not checked for duplicates here; validated entry goes through
        ``AdminService.add_destination``.
        """
        self._destinations.append(destination)
        logger.info(f"Destination '{destination.name}' added")

    def update_prices(self, name: str, single_price: Decimal, return_price: Decimal) -> Destination:
        """Overwrite both prices of a destination.

        Raises:
            DestinationNotFoundError: If the destination does not exist.
            InvalidPriceError: If either price is not positive. Nothing is changed.
        """
        destination = self.find(name)
        if destination is None:
            logger.warning(f"Cannot update prices: destination '{name}' not found")
            raise DestinationNotFoundError(name)
        try:
            destination.update_prices(single_price, return_price)
        except InvalidPriceError:
            logger.warning(f"Rejected non-positive prices for '{destination.name}'")
            raise
        logger.info(
            f"Updated '{destination.name}': single {destination.single_price}, "
            f"return {destination.return_price}"
        )
        return destination

    def adjust_all_prices(self, factor: Decimal | float | str) -> list[Destination]:
        """Multiply every price by ``factor``, storing values rounded to the cent.

        Rounding happens before storage, so repeated adjustments compound on
        the rounded prices.

        Raises:
            InvalidFactorError: If the factor is not a positive number.
            InvalidPriceError: If a rounded price would reach zero. Nothing is changed.
        """
        try:
            factor = to_money(factor)
        except ValueError as e:
            logger.warning(f"Rejected price adjustment factor {factor!r}")
            raise InvalidFactorError() from e
        if factor <= 0:
            logger.warning(f"Rejected price adjustment factor {factor}")
            raise InvalidFactorError()

        if not self._destinations:
            logger.warning("No destinations to update")
            return []

        adjusted = [
            (
                destination,
                round_currency(destination.single_price * factor),
                round_currency(destination.return_price * factor),
            )
            for destination in self._destinations
        ]
        # A tiny factor can round a price down to zero; refuse before touching anything.
        if any(single <= 0 or ret <= 0 for _, single, ret in adjusted):
            logger.warning(f"Factor {factor} would round a price down to zero")
            raise InvalidPriceError()

        for destination, single, ret in adjusted:
            destination.update_prices(single, ret)
        logger.info(f"Adjusted prices of {len(self._destinations)} destination(s) by {factor}")
        return self.all()

    def record_sale(self, name: str, price: Decimal) -> None:
        """Count a sale against a destination the caller has already resolved."""
        destination = self.find(name)
        if destination is None:
            raise DestinationNotFoundError(name)
        destination.record_sale(price)
        logger.info(
            f"Recorded sale to '{destination.name}' for {price}: "
            f"{destination.sales_count} sold, takings {destination.total_takings}"
        )
