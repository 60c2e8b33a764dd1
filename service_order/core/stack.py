"""Stack component implementation."""

from typing import Optional

from .base import Container, Customer, Node, ServiceClass


class Stack(Container):
    """LIFO stack of missed customers; each node links to the one below it."""

    def __init__(self, component_id: str = 'missed'):
        super().__init__(component_id)
        self.top: Optional[Node] = None

    def _head(self) -> Optional[Node]:
        return self.top

    def push(self, name: str, duration: int) -> Customer:
        """Place a missed customer on top of the stack."""
        customer = Customer(name, ServiceClass.MISSED, duration)
        self.top = Node(customer, next_node=self.top)
        self._record_arrival()
        return customer

    def pop(self) -> Optional[Customer]:
        """Remove and return the top customer, or None if the stack is empty."""
        if self.top is None:
            return None

        removed = self.top
        self.top = removed.next
        removed.next = None

        self._record_departure()
        return removed.customer

    def clear(self) -> int:
        released = self._release_chain(self.top)
        self.top = None
        self.current_size = 0
        return released
