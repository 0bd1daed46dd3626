"""Domain error codes for the ticket machine."""

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum


def _cents(amount: Decimal) -> str:
    return str(amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


class ErrorCode(Enum):
    """Domain error codes."""

    DESTINATION_NOT_FOUND = "DESTINATION_NOT_FOUND"
    DUPLICATE_DESTINATION = "DUPLICATE_DESTINATION"
    INVALID_PRICE = "INVALID_PRICE"
    INVALID_FACTOR = "INVALID_FACTOR"
    INVALID_TICKET_TYPE = "INVALID_TICKET_TYPE"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_DISCOUNT = "INVALID_DISCOUNT"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    OFFER_NOT_FOUND = "OFFER_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    DUPLICATE_USER = "DUPLICATE_USER"
    BAD_CREDENTIALS = "BAD_CREDENTIALS"
    SESSION_BUSY = "SESSION_BUSY"
    NO_ACTIVE_SESSION = "NO_ACTIVE_SESSION"
    ADMIN_REQUIRED = "ADMIN_REQUIRED"


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """Base class for lookups that found nothing."""


class DestinationNotFoundError(NotFoundError):
    """Raised when a destination is not in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCode.DESTINATION_NOT_FOUND,
            message=f"Destination '{name}' not found",
        )
        self.name = name


class InvalidTicketTypeError(NotFoundError):
    """Raised when a ticket type is neither single nor return.

    Reported as a not-found condition: there is no such ticket to sell.
    """

    def __init__(self, ticket_type: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_TYPE,
            message=f"Invalid ticket type '{ticket_type}'. Please choose 'Single' or 'Return'",
        )
        self.ticket_type = ticket_type


class OfferNotFoundError(NotFoundError):
    """Raised when no offer has the given id."""

    def __init__(self, offer_id: int) -> None:
        super().__init__(
            code=ErrorCode.OFFER_NOT_FOUND,
            message=f"Offer #{offer_id} not found",
        )
        self.offer_id = offer_id


class UserNotFoundError(NotFoundError):
    """Raised when a username is unknown."""

    def __init__(self, username: str) -> None:
        super().__init__(
            code=ErrorCode.USER_NOT_FOUND,
            message=f"User '{username}' not found",
        )
        self.username = username


class DuplicateDestinationError(DomainError):
    """Raised when adding a destination whose name is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_DESTINATION,
            message=f"Destination '{name}' already exists",
        )
        self.name = name


class InvalidPriceError(DomainError):
    """Raised when a price is not strictly positive."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PRICE,
            message="Prices must be positive with at most two decimal places",
        )


class InvalidFactorError(DomainError):
    """Raised when a price adjustment factor is not strictly positive."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_FACTOR, message="Factor must be positive")


class InvalidAmountError(DomainError):
    """Raised when inserting a non-positive amount of money."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_AMOUNT,
            message="Please insert a positive amount with at most two decimal places",
        )


class InsufficientFundsError(DomainError):
    """Raised when the inserted money does not cover the ticket price."""

    def __init__(self, shortfall: Decimal) -> None:
        super().__init__(
            code=ErrorCode.INSUFFICIENT_FUNDS,
            message=f"Insufficient funds. You need {_cents(shortfall)} more",
        )
        self.shortfall = shortfall


class InvalidInputError(DomainError):
    """Raised when a required text field is blank."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message)


class InvalidDiscountError(DomainError):
    """Raised when a discount percentage is outside (0, 100]."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DISCOUNT,
            message="Discount percentage must be between 0 and 100",
        )


class InvalidDateRangeError(DomainError):
    """Raised for unparseable dates or an end date before the start date."""

    def __init__(self, message: str = "Invalid date format. Use YYYY-MM-DD") -> None:
        super().__init__(code=ErrorCode.INVALID_DATE_RANGE, message=message)


class DuplicateUserError(DomainError):
    """Raised when adding a user whose username is already taken."""

    def __init__(self, username: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_USER,
            message=f"User '{username}' already exists",
        )
        self.username = username


class BadCredentialsError(DomainError):
    """Raised when a password does not match."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.BAD_CREDENTIALS, message="Login failed: Incorrect password"
        )


class SessionBusyError(DomainError):
    """Raised when logging in while another user holds the session."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.SESSION_BUSY,
            message="Another user is already logged in. Please logout first",
        )


class NoActiveSessionError(DomainError):
    """Raised when logging out with nobody logged in."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_ACTIVE_SESSION, message="No user is currently logged in"
        )


class AdminRequiredError(DomainError):
    """Raised when an admin operation runs without a logged-in admin."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADMIN_REQUIRED,
            message="Admin privileges required. Access denied",
        )
