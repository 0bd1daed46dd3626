"""Wiring of the ticket system from seed data."""

import logging
from dataclasses import dataclass

from ticket_machine.application.services.admin_service import AdminService
from ticket_machine.application.services.auth_session import AuthSession
from ticket_machine.application.services.destination_catalog import DestinationCatalog
from ticket_machine.application.services.offer_registry import OfferRegistry
from ticket_machine.application.services.purchase_service import PurchaseService
from ticket_machine.application.services.ticket_machine import TicketMachine
from ticket_machine.domain.models.destination import Destination
from ticket_machine.domain.models.seed_data import SeedData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TicketSystem:
    """All components of one machine, sharing the catalog, offers and session."""

    catalog: DestinationCatalog
    offers: OfferRegistry
    machine: TicketMachine
    session: AuthSession
    admin: AdminService
    purchases: PurchaseService


def build_ticket_system(seed: SeedData, origin_station: str) -> TicketSystem:
    """Create the components and load the seed data in order.

    Destinations go through the raw catalog add, users and offers through
    their validated entry points, so an invalid seed entry raises its
    domain error.
    """
    catalog = DestinationCatalog()
    offers = OfferRegistry()
    session = AuthSession()
    machine = TicketMachine(origin_station, catalog)

    for destination in seed.destinations:
        catalog.add(
            Destination(
                name=destination.name,
                single_price=destination.single_price,
                return_price=destination.return_price,
            )
        )

    for user in seed.users:
        session.add_user(user.username, user.password, user.is_admin)

    for offer_seed in seed.offers:
        offer = offers.add_offer(
            offer_seed.offer_name,
            offer_seed.station_name,
            offer_seed.discount_percentage,
            offer_seed.start_date,
            offer_seed.end_date,
        )
        if not offer_seed.is_active:
            offers.deactivate(offer.offer_id)

    logger.info(
        f"Ticket system for '{origin_station}' initialized with {len(catalog)} destination(s), "
        f"{len(session.users())} user(s) and {len(offers)} offer(s)"
    )

    return TicketSystem(
        catalog=catalog,
        offers=offers,
        machine=machine,
        session=session,
        admin=AdminService(session, catalog, offers, machine),
        purchases=PurchaseService(machine, offers),
    )
