"""Application services (use cases) for the ticket machine."""

from ticket_machine.application.services.admin_service import AdminService
from ticket_machine.application.services.auth_session import AuthSession
from ticket_machine.application.services.destination_catalog import DestinationCatalog
from ticket_machine.application.services.offer_registry import OfferRegistry
from ticket_machine.application.services.purchase_service import PurchaseService
from ticket_machine.application.services.ticket_machine import TicketMachine

__all__ = [
    "AdminService",
    "AuthSession",
    "DestinationCatalog",
    "OfferRegistry",
    "PurchaseService",
    "TicketMachine",
]
