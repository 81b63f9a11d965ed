"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class UnknownFeeTemplateError(DomainException):
    """Fee name is not in the fee catalog"""

    pass
