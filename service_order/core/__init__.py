"""Core components of the customer service system."""

from .base import Container, Customer, Node, ServiceClass
from .queue import Queue
from .stack import Stack

__all__ = [
    'Container',
    'Customer',
    'Node',
    'ServiceClass',
    'Queue',
    'Stack'
]
