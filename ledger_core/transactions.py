"""
Transaction Records Module

Immutable records of money movements. A record is appended to exactly one
account's history for deposits and withdrawals, and to both accounts'
histories for transfers.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from .errors import InvalidAmount


class TransactionType(Enum):
    """Kinds of money movement"""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    TRANSFER = "transfer"


@dataclass(frozen=True)
class Transaction:
    """
    Immutable transaction record

    Amounts are positive integer minor units. ``source_account`` is None for
    deposits, ``destination_account`` is None for withdrawals, and transfers
    carry both.
    """
    timestamp: datetime
    transaction_type: TransactionType
    amount: int
    description: str
    source_account: Optional[str] = None
    destination_account: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise InvalidAmount(f"transaction amount must be integer minor units, got {self.amount!r}")
        if self.amount <= 0:
            raise InvalidAmount("transaction amount must be positive")

    @property
    def is_transfer(self) -> bool:
        return self.transaction_type == TransactionType.TRANSFER

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary"""
        return {
            'timestamp': self.timestamp.isoformat(),
            'transaction_type': self.transaction_type.value,
            'amount': self.amount,
            'description': self.description,
            'source_account': self.source_account,
            'destination_account': self.destination_account,
        }
