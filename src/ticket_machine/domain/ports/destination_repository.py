"""Destination repository port."""

from decimal import Decimal
from typing import Protocol

from ticket_machine.domain.models.destination import Destination


class DestinationRepository(Protocol):
    """Port for looking up destinations and recording their sales."""

    def find(self, name: str) -> Destination | None:
        """Find a destination by name, ignoring case."""
        ...

    def all(self) -> list[Destination]:
        """Return every destination in insertion order."""
        ...

    def record_sale(self, name: str, price: Decimal) -> None:
        """Count a sale of ``price`` against the named destination."""
        ...
