"""Output formatters."""

from ticket_machine.adapters.formatters.ticket_formatter import TicketFormatter

__all__ = ["TicketFormatter"]
