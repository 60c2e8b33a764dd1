"""Main service system: owns the containers and runs the round policy."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List
import numpy as np

from ..core import Customer, Queue, ServiceClass, Stack
from .loader import LoadReport, RawRecord, load_file, load_records

WAITING_PER_ROUND = 3
MISSED_PER_ROUND = 1


class SchedulerState(Enum):
    DRAINING = 'draining'
    DONE = 'done'


@dataclass(frozen=True)
class ServiceEvent:
    """One customer served, in the order it was served."""
    sequence_number: int
    name: str
    label: ServiceClass
    duration: int

    def format(self) -> str:
        return f"{self.sequence_number}. {self.name} {self.label.value} time {self.duration}"

    def to_dict(self) -> Dict:
        return {
            'sequence_number': self.sequence_number,
            'name': self.name,
            'label': self.label.value,
            'duration': self.duration
        }


@dataclass
class ServiceResult:
    """Outcome of draining both containers."""
    events: List[ServiceEvent] = field(default_factory=list)
    total_duration: int = 0
    rounds: int = 0


class ServiceSystem:
    """
    Serves waiting customers (FIFO) and missed customers (LIFO) in rounds.

    Each round serves up to ``waiting_per_round`` customers from the queue,
    then up to ``missed_per_round`` from the stack. Serving stops once both
    containers are empty.
    """

    def __init__(self,
                 waiting_per_round: int = WAITING_PER_ROUND,
                 missed_per_round: int = MISSED_PER_ROUND):
        if waiting_per_round < 0 or missed_per_round < 0:
            raise ValueError("per-round limits must be non-negative")
        if waiting_per_round + missed_per_round == 0:
            raise ValueError("a round must be able to serve at least one customer")

        self.waiting_per_round = waiting_per_round
        self.missed_per_round = missed_per_round
        self.queue = Queue('waiting')
        self.stack = Stack('missed')

        self.events: List[ServiceEvent] = []
        self.total_duration = 0
        self.rounds = 0

    @property
    def state(self) -> SchedulerState:
        if self.queue.is_empty() and self.stack.is_empty():
            return SchedulerState.DONE
        return SchedulerState.DRAINING

    def load(self, path: str) -> LoadReport:
        """Load a record file into the queue and the stack."""
        return load_file(path, self.queue, self.stack)

    def load_records(self, records: Iterable[RawRecord]) -> LoadReport:
        """Load already parsed (name, tag, duration) records."""
        return load_records(records, self.queue, self.stack)

    def _emit(self, customer: Customer) -> ServiceEvent:
        event = ServiceEvent(
            sequence_number=len(self.events) + 1,
            name=customer.name,
            label=customer.service_class,
            duration=customer.duration
        )
        self.events.append(event)
        self.total_duration += customer.duration
        return event

    def serve_round(self) -> List[ServiceEvent]:
        """Serve a single round. Returns no events once both containers are empty."""
        if self.state is SchedulerState.DONE:
            return []

        served = []
        for _ in range(self.waiting_per_round):
            customer = self.queue.dequeue()
            if customer is None:
                break
            served.append(self._emit(customer))

        for _ in range(self.missed_per_round):
            customer = self.stack.pop()
            if customer is None:
                break
            served.append(self._emit(customer))

        self.rounds += 1
        return served

    def serve(self) -> Iterator[ServiceEvent]:
        """Yield events round by round until both containers are empty."""
        while self.state is SchedulerState.DRAINING:
            yield from self.serve_round()

    def serve_all(self) -> ServiceResult:
        """Drain both containers and return every event plus the total."""
        for _ in self.serve():
            pass
        return ServiceResult(
            events=list(self.events),
            total_duration=self.total_duration,
            rounds=self.rounds
        )

    def get_metrics_summary(self) -> Dict:
        """Get a summary of the served customers."""
        metrics = {
            'system': {
                'customers_served': len(self.events),
                'total_duration': self.total_duration,
                'rounds': self.rounds,
                'state': self.state.value
            },
            'classes': {},
            'components': {}
        }

        for service_class in ServiceClass:
            durations = np.array([e.duration for e in self.events
                                  if e.label is service_class])
            class_metrics = {
                'served': int(durations.size),
                'total_duration': int(durations.sum())
            }
            if durations.size > 0:
                class_metrics['mean_duration'] = float(np.mean(durations))
                class_metrics['std_duration'] = float(np.std(durations))
                class_metrics['min_duration'] = int(np.min(durations))
                class_metrics['max_duration'] = int(np.max(durations))
            metrics['classes'][service_class.value] = class_metrics

        for component in (self.queue, self.stack):
            metrics['components'][component.component_id] = {
                'total_arrivals': component.total_arrivals,
                'total_departures': component.total_departures,
                'current_size': component.current_size
            }

        return metrics

    def reset(self) -> None:
        """Release any customers still held and reset the system to initial state."""
        self.queue.clear()
        self.stack.clear()
        self.queue.total_arrivals = 0
        self.queue.total_departures = 0
        self.stack.total_arrivals = 0
        self.stack.total_departures = 0

        self.events.clear()
        self.total_duration = 0
        self.rounds = 0
