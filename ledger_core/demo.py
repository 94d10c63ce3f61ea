"""
Demo data for the ledger.

Run ``python run.py`` to print the seeded ledger.
"""

from typing import Dict

from .ledger import LedgerService

DEMO_CUSTOMERS = [
    ("Ana", "11111111111"),
    ("Bruno", "22222222222"),
    ("Carla", "33333333333"),
]


def seed_demo_ledger(service: LedgerService) -> Dict[str, str]:
    """
    Populate a ledger with three customers and a few movements

    Returns:
        Account numbers keyed by customer name
    """
    numbers = {}
    for name, tax_id in DEMO_CUSTOMERS:
        customer = service.create_customer(name, tax_id)
        numbers[name] = service.open_account(customer.tax_id).account_number

    service.deposit(numbers["Ana"], "1500.00")
    service.deposit(numbers["Bruno"], "800.00")
    service.deposit(numbers["Carla"], "2500.00")
    service.transfer(numbers["Carla"], numbers["Ana"], "300.00")
    service.withdraw(numbers["Bruno"], "100.00")
    return numbers
