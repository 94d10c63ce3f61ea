"""
Reporting Module

Plain-text renderings of the ledger for console output. These sit outside
the ledger operations and only read from the service.
"""

from typing import List

from .currency import format_minor_units
from .ledger import LedgerService


def render_customer_listing(service: LedgerService) -> List[str]:
    """One line per customer: id, name, tax id and account balances"""
    lines = []
    for customer, accounts in service.list_customers_with_accounts():
        balances = ", ".join(
            f"{account.account_number}:{format_minor_units(account.balance)}"
            for account in accounts
        )
        lines.append(f"{customer.id} {customer.name} {customer.tax_id} -> [{balances}]")
    return lines


def render_statement(service: LedgerService, account_number: str) -> List[str]:
    """One line per transaction of the account, oldest first"""
    return [
        f"{account_number} {transaction.transaction_type.name} "
        f"{format_minor_units(transaction.amount)} {transaction.description}"
        for transaction in service.statement(account_number)
    ]
