"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidAmountError(DomainException):
    """Amount is negative or not a finite number"""

    pass


class InvalidCountError(DomainException):
    """Installment tier count is negative"""

    pass


class InvalidDueDayError(DomainException):
    """Monthly due day is outside 1..31"""

    pass


class InvalidScheduleError(DomainException):
    """Installment start month is outside 1..12"""

    pass


class InvalidRecordError(DomainException):
    """Stored bidder/lot record cannot be mapped to an obligation"""

    pass
