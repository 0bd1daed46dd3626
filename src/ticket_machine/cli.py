"""Command line interface for the ticket machine."""

import argparse
import json
import logging
import sys
from decimal import Decimal
from typing import Any

from ticket_machine.adapters.config import AppConfig, SeedDataLoader
from ticket_machine.adapters.formatters import TicketFormatter
from ticket_machine.application.bootstrap import TicketSystem, build_ticket_system
from ticket_machine.domain.errors import DomainError
from ticket_machine.domain.models import Destination, FareQuote, SpecialOffer, round_currency

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def load_system(config: AppConfig) -> TicketSystem:
    """Build a ticket system seeded from the configured TOML file."""
    seed = SeedDataLoader.load(config)
    logger.debug(f"Loaded seed data from {config.config_file}")
    return build_ticket_system(seed, config.origin_station)


def _money_text(amount: Decimal) -> str:
    return f"{round_currency(amount):.2f}"


def _destination_to_dict(destination: Destination) -> dict[str, Any]:
    return {
        "name": destination.name,
        "single_price": _money_text(destination.single_price),
        "return_price": _money_text(destination.return_price),
        "sales_count": destination.sales_count,
        "total_takings": _money_text(destination.total_takings),
    }


def _offer_to_dict(offer: SpecialOffer) -> dict[str, Any]:
    return {
        "offer_id": offer.offer_id,
        "name": offer.offer_name,
        "station": offer.station_name,
        "discount_percentage": str(offer.discount_percentage),
        "start_date": offer.start_date.isoformat(),
        "end_date": offer.end_date.isoformat(),
        "is_active": offer.is_active,
    }


def _quote_to_dict(quote: FareQuote) -> dict[str, Any]:
    return {
        "origin": quote.ticket.origin,
        "destination": quote.ticket.destination_name,
        "ticket_type": quote.ticket.ticket_type.value,
        "original_price": _money_text(quote.original_price),
        "discount_amount": _money_text(quote.discount_amount),
        "final_price": _money_text(quote.final_price),
        "offer": _offer_to_dict(quote.offer) if quote.offer else None,
    }


def show_destinations(system: TicketSystem, formatter: TicketFormatter, as_json: bool) -> None:
    destinations = system.machine.available_destinations()
    if as_json:
        print(json.dumps([_destination_to_dict(d) for d in destinations], indent=2))
    else:
        print(formatter.format_destinations(system.machine.origin_station, destinations))


def show_offers(
    system: TicketSystem,
    formatter: TicketFormatter,
    as_json: bool,
    active_only: bool = False,
    search: str | None = None,
) -> None:
    """Print offers, optionally only active ones or those matching a search term."""
    if search is not None:
        offers = system.offers.search(search)
    else:
        offers = system.offers.all_offers()
    if active_only:
        offers = [offer for offer in offers if offer.is_active]

    if as_json:
        print(json.dumps([_offer_to_dict(o) for o in offers], indent=2))
    else:
        print(formatter.format_offers(offers))


def show_quote(
    system: TicketSystem,
    formatter: TicketFormatter,
    destination: str,
    ticket_type: str,
    on: str | None,
    as_json: bool,
) -> None:
    quote = system.purchases.quote(destination, ticket_type, on)
    if as_json:
        print(json.dumps(_quote_to_dict(quote), indent=2))
    else:
        print(formatter.format_quote(quote))


def buy_ticket(
    system: TicketSystem,
    formatter: TicketFormatter,
    destination: str,
    ticket_type: str,
    amounts: list[str],
    on: str | None,
) -> None:
    """Quote a ticket, insert the amounts in order and buy it.

    Money is refunded when the purchase fails.
    """
    quote = system.purchases.quote(destination, ticket_type, on)
    print(formatter.format_quote(quote))

    try:
        for amount in amounts:
            total = system.machine.insert_money(amount)
            print(f"Total inserted: {formatter.format_money(total)}")
        result = system.purchases.purchase(quote)
    except DomainError:
        refund = system.machine.return_change()
        if refund > 0:
            print(f"Refunded: {formatter.format_money(refund)}")
        raise

    print(formatter.format_purchase(result))


def show_summary(
    system: TicketSystem, formatter: TicketFormatter, username: str, password: str
) -> None:
    """Log in, print the admin system summary and log out again."""
    system.session.login(username, password)
    try:
        print(formatter.format_summary(system.admin.system_summary()))
    finally:
        system.session.logout()


def build_parser() -> argparse.ArgumentParser:
    """Set up and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Train Ticket Vending Machine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List destinations and prices
  ticket-machine destinations

  # Price a ticket on a given day, including special offers
  ticket-machine quote London single --date 2025-12-10

  # Buy a ticket with two insertions
  ticket-machine buy London return --insert 20 --insert 30

  # Show the admin summary
  ticket-machine summary --username admin --password admin123
        """,
    )
    parser.add_argument("--config", help="Path to TOML configuration file with seed data")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    destinations_parser = subparsers.add_parser("destinations", help="List destinations")
    destinations_parser.add_argument("--json", action="store_true", help="Output as JSON")

    offers_parser = subparsers.add_parser("offers", help="List special offers")
    offers_parser.add_argument("--active", action="store_true", help="Only active offers")
    offers_parser.add_argument("--search", help="Match offer or station names")
    offers_parser.add_argument("--json", action="store_true", help="Output as JSON")

    quote_parser = subparsers.add_parser("quote", help="Price a ticket")
    quote_parser.add_argument("destination", help="Destination name")
    quote_parser.add_argument("ticket_type", help="Single or Return")
    quote_parser.add_argument("--date", help="Travel date (YYYY-MM-DD), defaults to today")
    quote_parser.add_argument("--json", action="store_true", help="Output as JSON")

    buy_parser = subparsers.add_parser("buy", help="Buy a ticket")
    buy_parser.add_argument("destination", help="Destination name")
    buy_parser.add_argument("ticket_type", help="Single or Return")
    buy_parser.add_argument(
        "--insert",
        action="append",
        required=True,
        metavar="AMOUNT",
        help="Money to insert; repeat to insert several times",
    )
    buy_parser.add_argument("--date", help="Travel date (YYYY-MM-DD), defaults to today")

    summary_parser = subparsers.add_parser("summary", help="Show the admin system summary")
    summary_parser.add_argument("--username", required=True, help="Admin username")
    summary_parser.add_argument("--password", required=True, help="Admin password")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = AppConfig(config_file=args.config) if args.config else AppConfig()
        configure_logging(config.log_level)
        system = load_system(config)
        formatter = TicketFormatter(config)

        if args.command == "destinations":
            show_destinations(system, formatter, as_json=args.json)
        elif args.command == "offers":
            show_offers(
                system, formatter, as_json=args.json, active_only=args.active, search=args.search
            )
        elif args.command == "quote":
            show_quote(
                system, formatter, args.destination, args.ticket_type, args.date, args.json
            )
        elif args.command == "buy":
            buy_ticket(
                system, formatter, args.destination, args.ticket_type, args.insert, args.date
            )
        elif args.command == "summary":
            show_summary(system, formatter, args.username, args.password)

    except DomainError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
