"""Bootstrap data domain models."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class DestinationSeed:
    """A destination to load at start-up."""

    name: str
    single_price: Decimal
    return_price: Decimal


@dataclass(frozen=True)
class UserSeed:
    """A user account to create at start-up."""

    username: str
    password: str = field(repr=False)
    is_admin: bool = False


@dataclass(frozen=True)
class OfferSeed:
    """A special offer to register at start-up.

    Dates stay as ISO strings; they are validated when the offer is added.
    """

    offer_name: str
    station_name: str
    discount_percentage: Decimal
    start_date: str
    end_date: str
    is_active: bool = True


@dataclass(frozen=True)
class SeedData:
    """Everything needed to initialize a ticket system."""

    destinations: list[DestinationSeed] = field(default_factory=list)
    users: list[UserSeed] = field(default_factory=list)
    offers: list[OfferSeed] = field(default_factory=list)
