"""Admin back-office service.

Every operation requires an admin to be logged in on the shared session.
The service keeps no state of its own: it validates input and delegates to
the catalog, the offer registry and the machine.
"""

import logging
from collections.abc import Callable
from datetime import date
from decimal import Decimal
from functools import wraps
from typing import Any, TypeVar

from ticket_machine.application.services.auth_session import AuthSession
from ticket_machine.application.services.destination_catalog import DestinationCatalog
from ticket_machine.application.services.offer_registry import OfferRegistry
from ticket_machine.application.services.ticket_machine import TicketMachine
from ticket_machine.domain.errors import (
    AdminRequiredError,
    DuplicateDestinationError,
    InvalidInputError,
    InvalidPriceError,
)
from ticket_machine.domain.models.destination import Destination
from ticket_machine.domain.models.money import ZERO, is_whole_cents, round_currency, to_money
from ticket_machine.domain.models.special_offer import SpecialOffer
from ticket_machine.domain.models.system_summary import SystemSummary, TopDestination

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def requires_admin(method: F) -> F:
    """Refuse the call unless the session has an admin logged in."""

    @wraps(method)
    def wrapper(self: "AdminService", *args: Any, **kwargs: Any) -> Any:
        if not self._session.is_admin_logged_in():
            logger.warning(f"Refused '{method.__name__}': admin privileges required")
            raise AdminRequiredError()
        return method(self, *args, **kwargs)

    return wrapper  # type: ignore[return-value]


class AdminService:
    """Validated admin operations over the catalog and the offer registry."""

    def __init__(
        self,
        session: AuthSession,
        catalog: DestinationCatalog,
        offers: OfferRegistry,
        machine: TicketMachine,
    ) -> None:
        self._session = session
        self._catalog = catalog
        self._offers = offers
        self._machine = machine

    @requires_admin
    def view_all_destinations(self) -> list[Destination]:
        return self._catalog.all()

    @requires_admin
    def add_destination(
        self, name: str, single_price: Decimal | float | str, return_price: Decimal | float | str
    ) -> Destination:
        """Add a destination after checking its name and prices.

        Raises:
            InvalidInputError: If the name is blank.
            InvalidPriceError: If either price is not positive or has sub-cent digits.
            DuplicateDestinationError: If the name is taken, ignoring case.
        """
        if not name or not name.strip():
            raise InvalidInputError("Destination name cannot be empty")
        name = name.strip()
        try:
            single = to_money(single_price)
            ret = to_money(return_price)
        except ValueError as e:
            raise InvalidPriceError() from e
        if single <= 0 or ret <= 0 or not is_whole_cents(single) or not is_whole_cents(ret):
            raise InvalidPriceError()
        if self._catalog.exists(name):
            logger.warning(f"Destination '{name}' already exists")
            raise DuplicateDestinationError(name)

        destination = Destination(name=name, single_price=single, return_price=ret)
        self._catalog.add(destination)
        return destination

    @requires_admin
    def update_destination(
        self, name: str, single_price: Decimal | float | str, return_price: Decimal | float | str
    ) -> Destination:
        """Replace both prices of an existing destination."""
        try:
            single = to_money(single_price)
            ret = to_money(return_price)
        except ValueError as e:
            raise InvalidPriceError() from e
        return self._catalog.update_prices(name, single, ret)

    @requires_admin
    def adjust_all_prices(self, factor: Decimal | float | str) -> list[Destination]:
        """Scale every price, e.g. 1.1 for a 10% rise or 0.9 for a 10% cut."""
        return self._catalog.adjust_all_prices(factor)

    @requires_admin
    def system_summary(self) -> SystemSummary:
        """Aggregate revenue, average prices and the best-selling destination."""
        destinations = self._catalog.all()
        total_revenue = sum((d.total_takings for d in destinations), ZERO)

        average_single: Decimal | None = None
        average_return: Decimal | None = None
        top: TopDestination | None = None
        if destinations:
            count = Decimal(len(destinations))
            average_single = round_currency(sum(d.single_price for d in destinations) / count)
            average_return = round_currency(sum(d.return_price for d in destinations) / count)
            best = max(destinations, key=lambda d: d.total_takings)
            if best.total_takings > 0:
                top = TopDestination(name=best.name, total_takings=best.total_takings)

        return SystemSummary(
            origin_station=self._machine.origin_station,
            destination_count=len(destinations),
            total_revenue=total_revenue,
            average_single_price=average_single,
            average_return_price=average_return,
            top_destination=top,
            current_balance=self._machine.inserted_money,
        )

    @requires_admin
    def add_offer(
        self,
        offer_name: str,
        station_name: str,
        discount_percentage: Decimal | float | str,
        start_date: date | str,
        end_date: date | str,
    ) -> SpecialOffer:
        return self._offers.add_offer(
            offer_name, station_name, discount_percentage, start_date, end_date
        )

    @requires_admin
    def delete_offer(self, offer_id: int) -> SpecialOffer:
        return self._offers.delete(offer_id)

    @requires_admin
    def activate_offer(self, offer_id: int) -> SpecialOffer:
        return self._offers.activate(offer_id)

    @requires_admin
    def deactivate_offer(self, offer_id: int) -> SpecialOffer:
        return self._offers.deactivate(offer_id)

    @requires_admin
    def toggle_offer(self, offer_id: int) -> SpecialOffer:
        return self._offers.toggle(offer_id)
