"""Queue component implementation."""

from typing import Optional

from .base import Container, Customer, Node, ServiceClass


class Queue(Container):
    """FIFO queue of waiting customers, singly linked from front to back."""

    def __init__(self, component_id: str = 'waiting'):
        super().__init__(component_id)
        self.front: Optional[Node] = None
        self.back: Optional[Node] = None

    def _head(self) -> Optional[Node]:
        return self.front

    def enqueue(self, name: str, duration: int) -> Customer:
        """Append a waiting customer at the back."""
        customer = Customer(name, ServiceClass.WAITING, duration)
        node = Node(customer)

        if self.back is None:
            # First node is both ends
            self.front = node
            self.back = node
        else:
            self.back.next = node
            self.back = node

        self._record_arrival()
        return customer

    def dequeue(self) -> Optional[Customer]:
        """Remove and return the front customer, or None if the queue is empty."""
        if self.front is None:
            return None

        removed = self.front
        self.front = removed.next
        if self.front is None:
            self.back = None
        removed.next = None

        self._record_departure()
        return removed.customer

    def clear(self) -> int:
        released = self._release_chain(self.front)
        self.front = None
        self.back = None
        self.current_size = 0
        return released
