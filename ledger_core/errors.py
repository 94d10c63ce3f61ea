"""
Ledger Error Taxonomy

Every failure raised by the ledger core is one of three kinds. Errors are
raised where the violation is detected and propagate unchanged to the caller.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of ledger failures"""
    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    ENTITY_NOT_FOUND = "entity_not_found"


class LedgerError(ValueError):
    """Base class for ledger failures, carrying an error kind and a message"""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class InvalidAmount(LedgerError):
    """Amount is non-positive, rounds to zero, or a transfer targets its own source"""
    kind = ErrorKind.INVALID_AMOUNT


class InsufficientBalance(LedgerError):
    """Debit larger than the account's current balance"""
    kind = ErrorKind.INSUFFICIENT_BALANCE

    def __init__(self, message: str, requested: Optional[int] = None, available: Optional[int] = None):
        super().__init__(message)
        self.requested = requested
        self.available = available


class EntityNotFound(LedgerError):
    """Referenced customer or account does not exist"""
    kind = ErrorKind.ENTITY_NOT_FOUND

    def __init__(self, message: str, entity_type: Optional[str] = None, key: Optional[str] = None):
        super().__init__(message)
        self.entity_type = entity_type
        self.key = key
