"""Special offer registry service."""

import logging
from datetime import date
from decimal import Decimal

from ticket_machine.domain.errors import (
    InvalidDateRangeError,
    InvalidDiscountError,
    InvalidInputError,
    OfferNotFoundError,
)
from ticket_machine.domain.models.calendar import parse_iso_date
from ticket_machine.domain.models.money import to_money
from ticket_machine.domain.models.special_offer import SpecialOffer

logger = logging.getLogger(__name__)


class OfferRegistry:
    """Owns promotional offers, keyed by a sequential id that is never reused."""

    def __init__(self) -> None:
        self._offers: list[SpecialOffer] = []
        self._next_offer_id = 1

    def __len__(self) -> int:
        return len(self._offers)

    def add_offer(
        self,
        offer_name: str,
        station_name: str,
        discount_percentage: Decimal | float | str,
        start_date: date | str,
        end_date: date | str,
    ) -> SpecialOffer:
        """Validate and register a new, active offer.

        Raises:
            InvalidInputError: If the offer or station name is blank.
            InvalidDiscountError: If the discount is not in (0, 100].
            InvalidDateRangeError: If a date is malformed or the end precedes the start.
        """
        if not offer_name or not offer_name.strip():
            logger.warning("Rejected offer with empty name")
            raise InvalidInputError("Offer name cannot be empty")
        if not station_name or not station_name.strip():
            logger.warning(f"Rejected offer '{offer_name}' with empty station name")
            raise InvalidInputError("Station name cannot be empty")

        try:
            discount = to_money(discount_percentage)
        except ValueError as e:
            raise InvalidDiscountError() from e
        if discount <= 0 or discount > 100:
            logger.warning(f"Rejected offer '{offer_name}' with discount {discount}%")
            raise InvalidDiscountError()

        try:
            start = parse_iso_date(start_date)
            end = parse_iso_date(end_date)
        except InvalidDateRangeError:
            logger.warning(f"Rejected offer '{offer_name}': dates must be YYYY-MM-DD")
            raise
        if end < start:
            logger.warning(f"Rejected offer '{offer_name}': end {end} before start {start}")
            raise InvalidDateRangeError("End date must be after start date")

        offer = SpecialOffer(
            offer_id=self._next_offer_id,
            offer_name=offer_name,
            station_name=station_name,
            discount_percentage=discount,
            start_date=start,
            end_date=end,
        )
        self._offers.append(offer)
        self._next_offer_id += 1
        logger.info(f"Created {offer.summary()}")
        return offer

    def get_offer(self, offer_id: int) -> SpecialOffer:
        """Return an offer by id.

        Raises:
            OfferNotFoundError: If no offer has this id.
        """
        return self._offers[self._index_of(offer_id)]

    def all_offers(self) -> list[SpecialOffer]:
        return list(self._offers)

    def active_offers(self) -> list[SpecialOffer]:
        return [offer for offer in self._offers if offer.is_active]

    def find_applicable(self, station_name: str, on: date | str) -> list[SpecialOffer]:
        """Return active offers for the station whose window contains ``on``.

        A malformed date string matches nothing.
        """
        try:
            check_date = parse_iso_date(on)
        except InvalidDateRangeError:
            logger.warning(f"Invalid date '{on}'. Use YYYY-MM-DD")
            return []
        return [
            offer
            for offer in self._offers
            if offer.applies_to(station_name) and offer.is_valid_on(check_date)
        ]

    def get_best_offer(self, station_name: str, on: date | str) -> SpecialOffer | None:
        """Return the applicable offer with the highest discount.

        Among equal discounts the earliest added offer wins.
        """
        best: SpecialOffer | None = None
        for offer in self.find_applicable(station_name, on):
            if best is None or offer.discount_percentage > best.discount_percentage:
                best = offer
        return best

    def delete(self, offer_id: int) -> SpecialOffer:
        """Remove an offer permanently. Its id is never handed out again.

        Raises:
            OfferNotFoundError: If no offer has this id.
        """
        offer = self._offers.pop(self._index_of(offer_id))
        logger.info(f"Offer #{offer.offer_id} '{offer.offer_name}' deleted")
        return offer

    def activate(self, offer_id: int) -> SpecialOffer:
        """Mark an offer active. Activating an active offer is a no-op."""
        return self._set_active(offer_id, True)

    def deactivate(self, offer_id: int) -> SpecialOffer:
        """Mark an offer inactive. Deactivating an inactive offer is a no-op."""
        return self._set_active(offer_id, False)

    def toggle(self, offer_id: int) -> SpecialOffer:
        """Flip an offer between active and inactive."""
        return self._set_active(offer_id, not self.get_offer(offer_id).is_active)

    def search(self, term: str) -> list[SpecialOffer]:
        """Return offers whose name or station contains ``term``, ignoring case.

        A blank term matches nothing.
        """
        if not term or not term.strip():
            logger.warning("Search term cannot be empty")
            return []
        needle = term.casefold()
        results = [
            offer
            for offer in self._offers
            if needle in offer.offer_name.casefold() or needle in offer.station_name.casefold()
        ]
        logger.debug(f"Found {len(results)} offer(s) matching '{term}'")
        return results

    def search_by_station(self, station_name: str) -> list[SpecialOffer]:
        """Return every offer for the station, active or not.

        A blank station name matches nothing.
        """
        if not station_name or not station_name.strip():
            logger.warning("Station name cannot be empty")
            return []
        return [offer for offer in self._offers if offer.applies_to(station_name)]

    def _index_of(self, offer_id: int) -> int:
        for index, offer in enumerate(self._offers):
            if offer.offer_id == offer_id:
                return index
        logger.warning(f"Offer #{offer_id} not found")
        raise OfferNotFoundError(offer_id)

    def _set_active(self, offer_id: int, is_active: bool) -> SpecialOffer:
        offer = self.get_offer(offer_id)
        if is_active:
            offer.activate()
        else:
            offer.deactivate()
        state = "activated" if is_active else "deactivated"
        logger.info(f"Offer #{offer.offer_id} '{offer.offer_name}' has been {state}")
        return offer
