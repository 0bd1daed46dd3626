"""System summary domain model."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class TopDestination:
    """The destination with the highest takings."""

    name: str
    total_takings: Decimal


@dataclass(frozen=True)
class SystemSummary:
    """Aggregated figures for the admin back office."""

    origin_station: str
    destination_count: int
    total_revenue: Decimal
    average_single_price: Decimal | None  # None when the catalog is empty
    average_return_price: Decimal | None
    top_destination: TopDestination | None  # None until something has sold
    current_balance: Decimal
