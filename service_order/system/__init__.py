"""Loading and serving of customer records."""

from .loader import (
    LoadError,
    LoadOutcome,
    LoadReport,
    NoValidRecords,
    SourceUnavailable,
    load_file,
    load_records,
    parse_records,
    tokenize,
)
from .service_system import (
    MISSED_PER_ROUND,
    WAITING_PER_ROUND,
    SchedulerState,
    ServiceEvent,
    ServiceResult,
    ServiceSystem,
)

__all__ = [
    'LoadError',
    'LoadOutcome',
    'LoadReport',
    'NoValidRecords',
    'SourceUnavailable',
    'load_file',
    'load_records',
    'parse_records',
    'tokenize',
    'MISSED_PER_ROUND',
    'WAITING_PER_ROUND',
    'SchedulerState',
    'ServiceEvent',
    'ServiceResult',
    'ServiceSystem',
]
