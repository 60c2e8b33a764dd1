"""Customer service ordering package."""

from .core import Customer, Queue, ServiceClass, Stack
from .system import (
    LoadError,
    NoValidRecords,
    ServiceEvent,
    ServiceResult,
    ServiceSystem,
    SourceUnavailable,
)

__version__ = '0.1.0'

__all__ = [
    'Customer',
    'Queue',
    'ServiceClass',
    'Stack',
    'LoadError',
    'NoValidRecords',
    'ServiceEvent',
    'ServiceResult',
    'ServiceSystem',
    'SourceUnavailable'
]
