"""
Tests for the ledger error taxonomy
"""

import pytest

from ledger_core.errors import (
    EntityNotFound, ErrorKind, InsufficientBalance, InvalidAmount, LedgerError
)


class TestErrorTaxonomy:

    @pytest.mark.parametrize("error_class,kind", [
        (InvalidAmount, ErrorKind.INVALID_AMOUNT),
        (InsufficientBalance, ErrorKind.INSUFFICIENT_BALANCE),
        (EntityNotFound, ErrorKind.ENTITY_NOT_FOUND),
    ])
    def test_kinds(self, error_class, kind):
        error = error_class("something went wrong")

        assert error.kind == kind
        assert error.message == "something went wrong"
        assert str(error) == "something went wrong"
        assert isinstance(error, LedgerError)
        assert isinstance(error, ValueError)

    def test_exactly_three_kinds(self):
        assert len(ErrorKind) == 3

    def test_entity_not_found_details(self):
        error = EntityNotFound("account 1 not found", entity_type="account", key="1")

        assert error.entity_type == "account"
        assert error.key == "1"
        assert repr(error) == "EntityNotFound('account 1 not found')"

    def test_insufficient_balance_details(self):
        error = InsufficientBalance("insufficient", requested=500, available=100)

        assert error.requested == 500
        assert error.available == 100
