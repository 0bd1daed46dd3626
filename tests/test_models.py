"""Tests for domain models."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from ticket_machine.domain.errors import (
    InsufficientFundsError,
    InvalidDateRangeError,
    InvalidPriceError,
    InvalidTicketTypeError,
    NotFoundError,
)
from ticket_machine.domain.models import (
    Destination,
    FareQuote,
    SpecialOffer,
    Ticket,
    TicketType,
    User,
    round_currency,
    to_money,
)
from ticket_machine.domain.models.calendar import parse_iso_date
from ticket_machine.domain.models.money import is_whole_cents


def _offer(discount: str = "20", is_active: bool = True) -> SpecialOffer:
    return SpecialOffer(
        offer_id=1,
        offer_name="Christmas Sale",
        station_name="London",
        discount_percentage=Decimal(discount),
        start_date=date(2025, 12, 1),
        end_date=date(2025, 12, 31),
        is_active=is_active,
    )


def test_to_money_converts_floats_through_their_text() -> None:
    """Given a float, when converting to money, then the decimal matches its text form."""
    assert to_money(25.5) == Decimal("25.5")
    assert to_money("30.00") == Decimal("30.00")
    assert to_money(10) == Decimal("10")


def test_to_money_rejects_non_numbers() -> None:
    """Given text that is not a number, when converting to money, then ValueError is raised."""
    with pytest.raises(ValueError, match="Not a currency amount"):
        to_money("ten pounds")
    with pytest.raises(ValueError):
        to_money("NaN")


def test_round_currency_rounds_halves_up() -> None:
    """Given an amount on a half cent, when rounding, then it rounds away from zero."""
    assert round_currency(Decimal("1.005")) == Decimal("1.01")
    assert round_currency(Decimal("1.004")) == Decimal("1.00")
    assert round_currency(Decimal("28.05")) == Decimal("28.05")


def test_parse_iso_date_accepts_strict_format_only() -> None:
    """Given date strings, when parsing, then only YYYY-MM-DD calendar dates are accepted."""
    assert parse_iso_date("2025-12-01") == date(2025, 12, 1)
    assert parse_iso_date(date(2025, 1, 2)) == date(2025, 1, 2)

    for bad in ("2025-1-5", "20251201", "2025-02-30", "01/12/2025", ""):
        with pytest.raises(InvalidDateRangeError):
            parse_iso_date(bad)


def test_parse_iso_date_takes_calendar_date_of_datetime() -> None:
    """Given a datetime, when parsing, then its calendar date is returned."""
    parsed = parse_iso_date(datetime(2025, 12, 31, 23, 59))

    assert parsed == date(2025, 12, 31)
    assert type(parsed) is date


def test_is_whole_cents() -> None:
    """Given amounts, when checking precision, then only two decimal places pass."""
    assert is_whole_cents(Decimal("25.50"))
    assert is_whole_cents(Decimal("10"))
    assert not is_whole_cents(Decimal("30.005"))


def test_ticket_type_parses_case_insensitively() -> None:
    """Given ticket type text in any case, when parsing, then the matching type is returned."""
    assert TicketType.parse("single") is TicketType.SINGLE
    assert TicketType.parse("RETURN") is TicketType.RETURN
    assert TicketType.parse(" Return ") is TicketType.RETURN
    assert TicketType.parse(TicketType.SINGLE) is TicketType.SINGLE


def test_ticket_type_rejects_unknown_values_as_not_found() -> None:
    """Given an unknown ticket type, when parsing, then a not-found style error is raised."""
    with pytest.raises(InvalidTicketTypeError) as exc_info:
        TicketType.parse("weekly")

    assert isinstance(exc_info.value, NotFoundError)
    assert exc_info.value.ticket_type == "weekly"


def test_destination_creation() -> None:
    """Given destination data, when creating a Destination, then counters start at zero."""
    destination = Destination(name="London", single_price=Decimal("25.50"), return_price=45)

    assert destination.single_price == Decimal("25.50")
    assert destination.return_price == Decimal("45")
    assert destination.sales_count == 0
    assert destination.total_takings == Decimal("0")


def test_destination_rejects_non_positive_prices() -> None:
    """Given a zero or negative price, when creating a Destination, then InvalidPriceError is raised."""
    with pytest.raises(InvalidPriceError):
        Destination(name="Nowhere", single_price=Decimal("0"), return_price=Decimal("10"))
    with pytest.raises(InvalidPriceError):
        Destination(name="Nowhere", single_price=Decimal("10"), return_price=Decimal("-1"))


def test_destination_rejects_sub_cent_prices() -> None:
    """Given a price with three decimals, when creating or updating, then InvalidPriceError is raised."""
    with pytest.raises(InvalidPriceError):
        Destination(name="Nowhere", single_price=Decimal("25.505"), return_price=Decimal("45"))

    destination = Destination(name="London", single_price=Decimal("25.50"), return_price=Decimal("45"))
    with pytest.raises(InvalidPriceError):
        destination.update_prices(Decimal("26.001"), Decimal("46"))

    assert destination.single_price == Decimal("25.50")


def test_destination_price_for_ticket_type() -> None:
    """Given a destination, when asking for a price, then the matching field is returned."""
    destination = Destination(name="London", single_price=Decimal("25.50"), return_price=Decimal("45.00"))

    assert destination.price_for("single") == Decimal("25.50")
    assert destination.price_for(TicketType.RETURN) == Decimal("45.00")


def test_destination_update_prices_is_all_or_nothing() -> None:
    """Given one invalid price, when updating, then neither price changes."""
    destination = Destination(name="London", single_price=Decimal("25.50"), return_price=Decimal("45.00"))

    with pytest.raises(InvalidPriceError):
        destination.update_prices(Decimal("30.00"), Decimal("0"))

    assert destination.single_price == Decimal("25.50")
    assert destination.return_price == Decimal("45.00")


def test_destination_record_sale_accumulates() -> None:
    """Given two sales, when recording them, then count and takings accumulate."""
    destination = Destination(name="London", single_price=Decimal("25.50"), return_price=Decimal("45.00"))

    destination.record_sale(Decimal("25.50"))
    destination.record_sale(Decimal("20.40"))

    assert destination.sales_count == 2
    assert destination.total_takings == Decimal("45.90")


def test_ticket_is_frozen() -> None:
    """Given a Ticket, when trying to modify it, then raises AttributeError."""
    ticket = Ticket("Oxford Station", "London", Decimal("25.50"), TicketType.SINGLE)

    with pytest.raises(AttributeError):
        ticket.price = Decimal("1.00")  # type: ignore[misc]


class TestSpecialOffer:
    """Tests for SpecialOffer discounts and validity."""

    def test_apply_discount_rounds_to_cents(self) -> None:
        """Given a 20% offer, when discounting 25.50, then the price is 20.40."""
        assert _offer().apply_discount(Decimal("25.50")) == Decimal("20.40")

    def test_get_discount_amount_rounds_to_cents(self) -> None:
        """Given a 20% offer, when computing the saving on 25.50, then it is 5.10."""
        assert _offer().get_discount_amount(Decimal("25.50")) == Decimal("5.10")

    def test_discount_roundings_are_independent(self) -> None:
        """Given a price where half cents appear, when rounding both ways, then results may disagree."""
        offer = _offer(discount="50")
        price = Decimal("0.05")

        # 0.025 rounds up both as the saving and as the discounted price.
        assert offer.get_discount_amount(price) == Decimal("0.03")
        assert offer.apply_discount(price) == Decimal("0.03")
        assert price - offer.get_discount_amount(price) != offer.apply_discount(price)

    def test_inactive_offer_does_not_discount(self) -> None:
        """Given an inactive offer, when applying it, then the price is unchanged and nothing is saved."""
        offer = _offer(is_active=False)

        assert offer.apply_discount(Decimal("25.50")) == Decimal("25.50")
        assert offer.get_discount_amount(Decimal("25.50")) == Decimal("0")

    def test_validity_includes_both_boundaries(self) -> None:
        """Given an offer window, when checking dates, then both ends are valid and outside is not."""
        offer = _offer()

        assert offer.is_valid_on(date(2025, 12, 1))
        assert offer.is_valid_on(date(2025, 12, 31))
        assert not offer.is_valid_on(date(2025, 11, 30))
        assert not offer.is_valid_on(date(2026, 1, 1))

    def test_inactive_offer_is_never_valid(self) -> None:
        """Given an inactive offer, when checking a date inside its window, then it is not valid."""
        assert not _offer(is_active=False).is_valid_on(date(2025, 12, 10))

    def test_deactivate_changes_the_offer_in_place(self) -> None:
        """Given a held offer, when deactivating it, then the same object stops discounting."""
        offer = _offer()
        held = offer

        offer.deactivate()

        assert held.is_active is False
        assert held.apply_discount(Decimal("25.50")) == Decimal("25.50")

        offer.activate()

        assert held.is_active is True
        assert held.apply_discount(Decimal("25.50")) == Decimal("20.40")

    def test_offer_fields_are_immutable(self) -> None:
        """Given an offer, when trying to change its discount, then raises AttributeError."""
        offer = _offer()

        with pytest.raises(AttributeError):
            offer.discount_percentage = Decimal("99")  # type: ignore[misc]
        with pytest.raises(AttributeError):
            offer.station_name = "Leeds"

        assert offer.discount_percentage == Decimal("20")
        assert offer.station_name == "London"

    def test_expiry_helpers(self) -> None:
        """Given dates around the end date, when checking expiry, then days left and expiry agree."""
        offer = _offer()

        assert offer.days_until_expiry(date(2025, 12, 21)) == 10
        assert offer.days_until_expiry(date(2025, 12, 31)) is None
        assert not offer.has_expired(date(2025, 12, 31))
        assert offer.has_expired(date(2026, 1, 1))
        assert offer.is_valid_today(date(2025, 12, 24))

    def test_summary(self) -> None:
        """Given an offer, when summarizing, then the line names id, discount, station and window."""
        assert _offer().summary() == (
            "Offer #1: Christmas Sale - 20% off London (2025-12-01 to 2025-12-31) [Active]"
        )


def test_user_verifies_password_by_exact_match() -> None:
    """Given a user, when verifying passwords, then only the exact password matches."""
    user = User(username="admin", password="admin123", is_admin=True)

    assert user.verify_password("admin123")
    assert not user.verify_password("ADMIN123")
    assert user.matches("ADMIN")


def test_user_repr_hides_password() -> None:
    """Given a user, when printing it, then the password does not appear."""
    assert "admin123" not in repr(User(username="admin", password="admin123", is_admin=True))


def test_user_info() -> None:
    """Given a regular user, when describing them, then role and status are shown."""
    user = User(username="john", password="john789", is_admin=False)

    assert user.user_info() == "Username: john | Role: Regular User | Status: Logged Out"


def test_fare_quote_ticket_to_charge_carries_final_price() -> None:
    """Given a quote with an offer, when taking the ticket to charge, then it has the final price."""
    ticket = Ticket("Oxford Station", "London", Decimal("25.50"), TicketType.SINGLE)
    quote = FareQuote(
        ticket=ticket,
        offer=_offer(),
        original_price=Decimal("25.50"),
        discount_amount=Decimal("5.10"),
        final_price=Decimal("20.40"),
    )

    charged = quote.ticket_to_charge

    assert charged.price == Decimal("20.40")
    assert charged.destination_name == "London"
    assert charged.ticket_type is TicketType.SINGLE
    assert quote.has_offer


def test_insufficient_funds_message_rounds_shortfall_half_up() -> None:
    """Given a shortfall on a half cent, when building the message, then it rounds up."""
    error = InsufficientFundsError(Decimal("0.005"))

    assert error.message == "Insufficient funds. You need 0.01 more"
    assert error.shortfall == Decimal("0.005")
