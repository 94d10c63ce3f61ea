"""
Ledger Service Module

Orchestrates customer onboarding, account opening and money movements
against the customer and account directories. Every operation validates
before mutating; failures propagate to the caller unchanged.
"""

from typing import List, Optional, Tuple

from .accounts import Account, AccountDirectory, InMemoryAccountDirectory
from .clock import Clock, SystemClock
from .config import LedgerConfig, get_config
from .currency import DecimalMoneyConverter, MoneyConverter, Numeric
from .customers import Customer, CustomerDirectory, InMemoryCustomerDirectory
from .errors import EntityNotFound, InvalidAmount
from .logging_config import get_logger, log_action
from .transactions import Transaction, TransactionType


class LedgerService:
    """
    Ledger operations over injected directories, money converter and clock
    """

    def __init__(
        self,
        customers: CustomerDirectory,
        accounts: AccountDirectory,
        money_converter: MoneyConverter,
        clock: Clock
    ):
        self.customers = customers
        self.accounts = accounts
        self.money_converter = money_converter
        self.clock = clock
        self.logger = get_logger("ledger_core.ledger")

    @classmethod
    def in_memory(cls, clock: Optional[Clock] = None,
                  config: Optional[LedgerConfig] = None) -> 'LedgerService':
        """Build a service backed by fresh in-memory directories"""
        config = config or get_config()
        clock = clock or SystemClock()
        return cls(
            customers=InMemoryCustomerDirectory(first_id=config.first_customer_id),
            accounts=InMemoryAccountDirectory(clock, first_number=config.first_account_number),
            money_converter=DecimalMoneyConverter(),
            clock=clock
        )

    def create_customer(self, name: str, tax_id: str) -> Customer:
        """Create a customer, returning the existing one if the tax id is known"""
        customer, created = self.customers.add_if_absent(name, tax_id)
        if not created:
            log_action(
                self.logger, "debug", "Customer already exists",
                action="create_customer", resource=f"customer:{customer.id}"
            )
            return customer

        log_action(
            self.logger, "info", "Customer created",
            action="create_customer", resource=f"customer:{customer.id}",
            extra={"customer_id": customer.id, "name": customer.name}
        )
        return customer

    def open_account(self, tax_id: str) -> Account:
        """
        Open a new account for an existing customer

        Raises:
            EntityNotFound: If no customer has this tax id
        """
        customer = self.customers.get_by_tax_id(tax_id)
        if customer is None:
            raise EntityNotFound(
                f"customer with tax id {tax_id} not found",
                entity_type="customer", key=tax_id
            )

        account_number = self.accounts.next_account_number()
        account = self.accounts.add(account_number, customer)
        log_action(
            self.logger, "info", "Account opened",
            action="open_account", resource=f"account:{account_number}",
            extra={"account_number": account_number, "customer_id": customer.id}
        )
        return account

    def get_account(self, account_number: str) -> Account:
        """
        Get account by number

        Raises:
            EntityNotFound: If the account does not exist
        """
        account = self.accounts.find(account_number)
        if account is None:
            raise EntityNotFound(
                f"account {account_number} not found",
                entity_type="account", key=account_number
            )
        return account

    def balance(self, account_number: str) -> int:
        """Current balance of an account in minor units"""
        return self.get_account(account_number).balance

    def deposit(self, account_number: str, value: Numeric) -> None:
        """
        Deposit an amount into an account

        Raises:
            EntityNotFound: If the account does not exist
            InvalidAmount: If the amount is not positive after conversion
        """
        account = self.get_account(account_number)
        amount = self.money_converter.to_minor_units(value)
        account.deposit(amount, "deposit")
        log_action(
            self.logger, "info", "Deposit posted",
            action="deposit", resource=f"account:{account_number}",
            extra={"amount": amount, "balance": account.balance}
        )

    def withdraw(self, account_number: str, value: Numeric) -> None:
        """
        Withdraw an amount from an account

        Raises:
            EntityNotFound: If the account does not exist
            InvalidAmount: If the amount is not positive after conversion
            InsufficientBalance: If the amount exceeds the balance
        """
        account = self.get_account(account_number)
        amount = self.money_converter.to_minor_units(value)
        account.withdraw(amount, "withdrawal")
        log_action(
            self.logger, "info", "Withdrawal posted",
            action="withdraw", resource=f"account:{account_number}",
            extra={"amount": amount, "balance": account.balance}
        )

    def transfer(self, source_number: str, destination_number: str, value: Numeric) -> None:
        """
        Move an amount between two accounts

        The source is debited, the destination credited, and one shared
        transfer record is appended to both histories. Both account locks are
        held, in account number order, for the whole sequence.

        Raises:
            InvalidAmount: If source and destination are the same account,
                or the amount is not positive after conversion
            EntityNotFound: If either account does not exist
            InsufficientBalance: If the amount exceeds the source balance
        """
        if source_number == destination_number:
            raise InvalidAmount(f"cannot transfer from account {source_number} to itself")

        amount = self.money_converter.to_minor_units(value)
        source = self.get_account(source_number)
        destination = self.get_account(destination_number)

        first, second = sorted((source, destination), key=lambda account: account.account_number)
        with first.lock, second.lock:
            # Debit validates amount and balance; nothing has changed if it raises
            source.withdraw(amount, f"transfer to {destination_number}")
            destination.deposit(amount, f"transfer from {source_number}")

            record = Transaction(
                timestamp=self.clock.now(),
                transaction_type=TransactionType.TRANSFER,
                amount=amount,
                description="transfer",
                source_account=source_number,
                destination_account=destination_number
            )
            source.append_transaction(record)
            destination.append_transaction(record)

        log_action(
            self.logger, "info", "Transfer posted",
            action="transfer", resource=f"account:{source_number}",
            extra={
                "amount": amount,
                "source_account": source_number,
                "destination_account": destination_number
            }
        )

    def list_customers_with_accounts(self) -> List[Tuple[Customer, List[Account]]]:
        """Every known customer paired with their accounts (possibly none)"""
        return [
            (customer, self.accounts.by_customer(customer.tax_id))
            for customer in self.customers.all()
        ]

    def statement(self, account_number: str) -> List[Transaction]:
        """
        Full transaction history of an account in chronological order

        Raises:
            EntityNotFound: If the account does not exist
        """
        return list(self.get_account(account_number).history)
