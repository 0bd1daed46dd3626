"""Contracts (protocols) implemented by outer adapters."""

from ticket_machine.domain.contracts.ticket_formatter import TicketFormatterProtocol

__all__ = ["TicketFormatterProtocol"]
