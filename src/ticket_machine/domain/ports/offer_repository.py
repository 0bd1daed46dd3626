"""Offer repository port."""

from datetime import date
from typing import Protocol

from ticket_machine.domain.models.special_offer import SpecialOffer


class OfferRepository(Protocol):
    """Port for finding promotional offers."""

    def find_applicable(self, station_name: str, on: date | str) -> list[SpecialOffer]:
        """Return active offers for the station whose window contains ``on``."""
        ...

    def get_best_offer(self, station_name: str, on: date | str) -> SpecialOffer | None:
        """Return the applicable offer with the highest discount, if any."""
        ...
