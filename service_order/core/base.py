"""Base classes for the customer service system."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional
from abc import ABC, abstractmethod


class ServiceClass(Enum):
    """Service class of a customer; the value doubles as input tag and output label."""
    WAITING = 'waiting'
    MISSED = 'missed'


@dataclass(frozen=True)
class Customer:
    """A customer record waiting to be served."""
    name: str
    service_class: ServiceClass
    duration: int


class Node:
    """One link of a container chain."""

    __slots__ = ('customer', 'next')

    def __init__(self, customer: Customer, next_node: Optional['Node'] = None):
        self.customer = customer
        self.next = next_node


class Container(ABC):
    """Base class for the linked record containers."""

    def __init__(self, component_id: str):
        self.component_id = component_id
        self.total_arrivals = 0
        self.total_departures = 0
        self.current_size = 0

    def __len__(self) -> int:
        return self.current_size

    def __iter__(self) -> Iterator[Customer]:
        """Iterate held records in removal order without removing them."""
        node = self._head()
        while node is not None:
            yield node.customer
            node = node.next

    def is_empty(self) -> bool:
        return self._head() is None

    def peek(self) -> Optional[Customer]:
        """Return the record the next removal would yield, if any."""
        node = self._head()
        return node.customer if node is not None else None

    def _record_arrival(self):
        self.total_arrivals += 1
        self.current_size += 1

    def _record_departure(self):
        self.total_departures += 1
        self.current_size -= 1

    @abstractmethod
    def _head(self) -> Optional[Node]:
        """Node that the next removal takes from."""
        pass

    @abstractmethod
    def clear(self) -> int:
        """
        Release every node still held.
        Returns the number of records released.
        """
        pass

    @staticmethod
    def _release_chain(node: Optional[Node]) -> int:
        # Unlink one hop at a time so long chains never recurse on release.
        released = 0
        while node is not None:
            next_node = node.next
            node.next = None
            node = next_node
            released += 1
        return released
