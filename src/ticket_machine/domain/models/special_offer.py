"""Special offer domain model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ticket_machine.domain.models.money import ZERO, round_currency, to_money

HUNDRED = Decimal(100)

# Everything else is fixed once the offer is created.
_MUTABLE_FIELDS = frozenset({"is_active"})


@dataclass
class SpecialOffer:
    """A time-windowed percentage discount on tickets to one station.

    Only the activity flag can change after creation, through ``activate``
    and ``deactivate``. Every holder of the offer sees the change.
    """

    offer_id: int
    offer_name: str
    station_name: str
    discount_percentage: Decimal
    start_date: date
    end_date: date
    is_active: bool = True

    def __setattr__(self, name: str, value: object) -> None:
        if name not in _MUTABLE_FIELDS and name in self.__dict__:
            raise AttributeError(f"SpecialOffer.{name} cannot be changed")
        super().__setattr__(name, value)

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    def applies_to(self, station_name: str) -> bool:
        """Check whether this offer is for the given station, ignoring case."""
        return self.station_name.casefold() == station_name.strip().casefold()

    def is_valid_on(self, on: date) -> bool:
        """Check whether the offer is active and ``on`` lies inside its window.

        Both boundary dates are valid.
        """
        return self.is_active and self.start_date <= on <= self.end_date

    def is_valid_today(self, today: date | None = None) -> bool:
        return self.is_valid_on(today or date.today())

    def has_expired(self, today: date | None = None) -> bool:
        """Check whether the end date has passed."""
        return (today or date.today()) > self.end_date

    def days_until_expiry(self, today: date | None = None) -> int | None:
        """Return whole days left before the end date, or None on or after it."""
        today = today or date.today()
        if today < self.end_date:
            return (self.end_date - today).days
        return None

    def apply_discount(self, original_price: Decimal) -> Decimal:
        """Return the discounted price, rounded half-up to the cent.

        Inactive offers leave the price unchanged.
        """
        original_price = to_money(original_price)
        if not self.is_active:
            return original_price
        discount = original_price * (self.discount_percentage / HUNDRED)
        return round_currency(original_price - discount)

    def get_discount_amount(self, original_price: Decimal) -> Decimal:
        """Return the amount saved, rounded half-up to the cent.

        Rounded independently of ``apply_discount``, so the two may disagree
        by up to half a cent.
        """
        if not self.is_active:
            return ZERO
        discount = to_money(original_price) * (self.discount_percentage / HUNDRED)
        return round_currency(discount)

    def summary(self) -> str:
        """One-line description of the offer."""
        status = "Active" if self.is_active else "Inactive"
        return (
            f"Offer #{self.offer_id}: {self.offer_name} - {self.discount_percentage}% off "
            f"{self.station_name} ({self.start_date.isoformat()} to "
            f"{self.end_date.isoformat()}) [{status}]"
        )
