"""
Test suite for customers module

Tests idempotent creation keyed by tax id, sequential identifiers and
enumeration order.
"""

import dataclasses
import threading

import pytest

from ledger_core.customers import Customer, CustomerDirectory, InMemoryCustomerDirectory


class TestCustomer:
    """Test Customer record"""

    def test_customer_is_immutable(self):
        customer = Customer(id=1, name="Ana", tax_id="111")

        with pytest.raises(dataclasses.FrozenInstanceError):
            customer.name = "Other"


class TestInMemoryCustomerDirectory:
    """Test in-memory customer directory"""

    def setup_method(self):
        self.directory = InMemoryCustomerDirectory()

    def test_is_customer_directory(self):
        assert isinstance(self.directory, CustomerDirectory)

    def test_add_assigns_sequential_ids(self):
        ana = self.directory.add("Ana", "111")
        bruno = self.directory.add("Bruno", "222")

        assert ana.id == 1
        assert bruno.id == 2
        assert ana.name == "Ana"
        assert ana.tax_id == "111"

    def test_add_is_idempotent_per_tax_id(self):
        first = self.directory.add("Ana", "111")
        second = self.directory.add("Someone Else", "111")

        assert second is first
        assert second.name == "Ana"
        assert len(self.directory) == 1

        # The counter does not advance on a repeated tax id
        assert self.directory.add("Bruno", "222").id == 2

    def test_add_if_absent_reports_creation(self):
        ana, created = self.directory.add_if_absent("Ana", "111")
        again, created_again = self.directory.add_if_absent("Ana", "111")

        assert created is True
        assert created_again is False
        assert again is ana

    def test_get_by_tax_id(self):
        ana = self.directory.add("Ana", "111")

        assert self.directory.get_by_tax_id("111") is ana
        assert self.directory.get_by_tax_id("999") is None

    def test_all_in_insertion_order(self):
        self.directory.add("Carla", "333")
        self.directory.add("Ana", "111")
        self.directory.add("Bruno", "222")

        assert [c.name for c in self.directory.all()] == ["Carla", "Ana", "Bruno"]

    def test_all_returns_copy(self):
        self.directory.add("Ana", "111")
        customers = self.directory.all()
        customers.clear()

        assert len(self.directory.all()) == 1

    def test_custom_first_id(self):
        directory = InMemoryCustomerDirectory(first_id=100)
        assert directory.add("Ana", "111").id == 100

    def test_independent_directories_have_independent_counters(self):
        other = InMemoryCustomerDirectory()
        self.directory.add("Ana", "111")
        self.directory.add("Bruno", "222")

        assert other.add("Carla", "333").id == 1

    def test_concurrent_add_creates_single_customer(self):
        results = []

        def worker():
            results.append(self.directory.add("Ana", "111"))

        threads = [threading.Thread(target=worker) for _ in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(self.directory) == 1
        assert all(customer is results[0] for customer in results)
