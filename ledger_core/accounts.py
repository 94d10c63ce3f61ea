"""
Account Management Module

Account entity with an integer balance and an append-only transaction
history, plus the directory that assigns account numbers and stores accounts.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple
import threading

from .clock import Clock
from .customers import Customer
from .errors import InsufficientBalance, InvalidAmount
from .transactions import Transaction, TransactionType


def _require_positive(amount: int) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmount(f"amount must be integer minor units, got {amount!r}")
    if amount <= 0:
        raise InvalidAmount("amount must be positive")


class Account:
    """
    Customer account holding a balance in minor units

    Balance and history change only through ``deposit``, ``withdraw`` and
    ``append_transaction``. The balance never drops below zero and history
    entries are never edited or removed.
    """

    def __init__(self, account_number: str, owner: Customer, clock: Clock):
        self._account_number = account_number
        self._owner = owner
        self._clock = clock
        self._balance = 0
        self._history: List[Transaction] = []
        self._lock = threading.RLock()

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def owner(self) -> Customer:
        return self._owner

    @property
    def balance(self) -> int:
        """Current balance in minor units"""
        return self._balance

    @property
    def history(self) -> Tuple[Transaction, ...]:
        """Snapshot of the history in chronological order"""
        with self._lock:
            return tuple(self._history)

    @property
    def lock(self) -> threading.RLock:
        """Lock serializing mutations of this account"""
        return self._lock

    def deposit(self, amount: int, description: str) -> Transaction:
        """
        Credit the account

        Raises:
            InvalidAmount: If amount is not positive
        """
        _require_positive(amount)
        with self._lock:
            transaction = Transaction(
                timestamp=self._clock.now(),
                transaction_type=TransactionType.DEPOSIT,
                amount=amount,
                description=description,
                source_account=None,
                destination_account=self._account_number
            )
            self._balance += amount
            self._history.append(transaction)
            return transaction

    def withdraw(self, amount: int, description: str) -> Transaction:
        """
        Debit the account

        Raises:
            InvalidAmount: If amount is not positive
            InsufficientBalance: If amount exceeds the current balance
        """
        _require_positive(amount)
        with self._lock:
            if amount > self._balance:
                raise InsufficientBalance(
                    f"insufficient balance in account {self._account_number}: "
                    f"requested {amount}, available {self._balance}",
                    requested=amount,
                    available=self._balance
                )
            transaction = Transaction(
                timestamp=self._clock.now(),
                transaction_type=TransactionType.WITHDRAWAL,
                amount=amount,
                description=description,
                source_account=self._account_number,
                destination_account=None
            )
            self._balance -= amount
            self._history.append(transaction)
            return transaction

    def append_transaction(self, transaction: Transaction) -> None:
        """Record a pre-built transaction without touching the balance"""
        with self._lock:
            self._history.append(transaction)

    def __repr__(self) -> str:
        return (f"Account(account_number={self._account_number!r}, "
                f"owner={self._owner.tax_id!r}, balance={self._balance})")


class AccountDirectory(ABC):
    """Abstract account store keyed by account number"""

    @abstractmethod
    def next_account_number(self) -> str:
        """Reserve a fresh, never used account number"""
        pass

    @abstractmethod
    def add(self, account_number: str, customer: Customer) -> Account:
        """Create and store an account owned by customer"""
        pass

    @abstractmethod
    def find(self, account_number: str) -> Optional[Account]:
        """Get account by number"""
        pass

    @abstractmethod
    def by_customer(self, tax_id: str) -> List[Account]:
        """Accounts owned by the customer with this tax id"""
        pass

    @abstractmethod
    def all(self) -> List[Account]:
        """All accounts"""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass


class InMemoryAccountDirectory(AccountDirectory):
    """In-memory account directory with a sequential number generator"""

    def __init__(self, clock: Clock, first_number: int = 1001):
        self._clock = clock
        self._accounts: Dict[str, Account] = {}
        self._next_number = first_number
        self._lock = threading.RLock()

    def next_account_number(self) -> str:
        with self._lock:
            number = str(self._next_number)
            while number in self._accounts:
                self._next_number += 1
                number = str(self._next_number)
            self._next_number += 1
            return number

    def add(self, account_number: str, customer: Customer) -> Account:
        with self._lock:
            if account_number in self._accounts:
                raise ValueError(f"Account number {account_number} is already assigned")
            account = Account(account_number, customer, self._clock)
            self._accounts[account_number] = account
            return account

    def find(self, account_number: str) -> Optional[Account]:
        with self._lock:
            return self._accounts.get(account_number)

    def by_customer(self, tax_id: str) -> List[Account]:
        with self._lock:
            return [
                account for account in self._accounts.values()
                if account.owner.tax_id == tax_id
            ]

    def all(self) -> List[Account]:
        with self._lock:
            return list(self._accounts.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)
