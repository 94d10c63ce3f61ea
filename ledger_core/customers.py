"""
Customer Management Module

Customers are created once per tax identifier and never change afterwards.
Every account owned by a customer holds a reference to the same record.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
import threading


@dataclass(frozen=True)
class Customer:
    """Customer identified by a sequential id and a unique tax id"""
    id: int
    name: str
    tax_id: str


class CustomerDirectory(ABC):
    """Abstract customer store keyed by tax id"""

    @abstractmethod
    def get_by_tax_id(self, tax_id: str) -> Optional[Customer]:
        """Get customer by tax id"""
        pass

    @abstractmethod
    def add_if_absent(self, name: str, tax_id: str) -> Tuple[Customer, bool]:
        """
        Create a customer unless the tax id is already known

        Returns:
            The customer for this tax id and whether this call created it
        """
        pass

    def add(self, name: str, tax_id: str) -> Customer:
        """
        Create a customer, or return the existing one for this tax id

        The name is ignored when the tax id is already known.
        """
        return self.add_if_absent(name, tax_id)[0]

    @abstractmethod
    def all(self) -> List[Customer]:
        """All customers"""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass


class InMemoryCustomerDirectory(CustomerDirectory):
    """In-memory customer directory; iteration follows insertion order"""

    def __init__(self, first_id: int = 1):
        self._customers: Dict[str, Customer] = {}
        self._next_id = first_id
        self._lock = threading.RLock()

    def get_by_tax_id(self, tax_id: str) -> Optional[Customer]:
        with self._lock:
            return self._customers.get(tax_id)

    def add_if_absent(self, name: str, tax_id: str) -> Tuple[Customer, bool]:
        with self._lock:
            existing = self._customers.get(tax_id)
            if existing is not None:
                return existing, False

            customer = Customer(id=self._next_id, name=name, tax_id=tax_id)
            self._next_id += 1
            self._customers[tax_id] = customer
            return customer, True

    def all(self) -> List[Customer]:
        with self._lock:
            return list(self._customers.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._customers)
