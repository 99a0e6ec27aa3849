class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


# Seat matrix / reservation session


class OutOfRangeError(DomainError):
    """Seat coordinate outside the grid - caller error, re-prompt"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class SeatUnavailableError(ConflictError):
    """Seat is not free - caller error, re-prompt"""


class InvalidStateError(ConflictError):
    """Session/matrix desynchronization - discard the session and start over"""


class EmptySelectionError(DomainError):
    def __init__(self, message: str = 'No seats selected') -> None:
        super().__init__(message, 400)


# Scheduling


class ClashDetectedError(ConflictError):
    """Cinema already has a showing at the given datetime"""


class HasDependentBookingsError(ConflictError):
    """Delete/alter guard - resolve dependent bookings first"""


# Pricing


class UnknownSurchargeKeyError(CustomBaseError):
    """Configuration error - fixed by staff configuration, never retried by the user"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


# Concurrency


class LockContentionError(ConflictError):
    """Resource lock could not be acquired within the configured timeout"""
