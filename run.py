#!/usr/bin/env python3
"""
Ledger Core Entry Point

Seeds a demo ledger and prints every customer's balances followed by the
first account's statement.
"""

import sys

from ledger_core.config import get_config
from ledger_core.demo import seed_demo_ledger
from ledger_core.errors import LedgerError
from ledger_core.ledger import LedgerService
from ledger_core.logging_config import setup_logging
from ledger_core.reporting import render_customer_listing, render_statement


def main() -> int:
    config = get_config()
    setup_logging(config.log_level, log_format=config.log_format, log_file=config.log_file)

    service = LedgerService.in_memory(config=config)
    try:
        seed_demo_ledger(service)
    except LedgerError as e:
        print(f"{e.kind.value}: {e}", file=sys.stderr)
        return 1

    for line in render_customer_listing(service):
        print(line)

    listing = service.list_customers_with_accounts()
    if listing and listing[0][1]:
        first_account = listing[0][1][0].account_number
        for line in render_statement(service, first_account):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
