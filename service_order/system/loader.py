"""
Record loader: reads customer records from a text source and routes them
into the waiting queue and the missed stack.

The source is a stream of whitespace-separated tokens read as triplets
``<name> <tag> <duration>``; line breaks carry no meaning.
"""

import itertools
import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, Tuple

from ..core import Queue, Stack, ServiceClass

logger = logging.getLogger(__name__)

RawRecord = Tuple[str, str, int]

_LEADING_INTEGER = re.compile(r'[+-]?\d+')


class LoadError(Exception):
    """Base class for failures that leave nothing to serve."""


class SourceUnavailable(LoadError):
    """The input source could not be opened."""

    def __init__(self, path: str):
        super().__init__(f"cannot open {path}")
        self.path = path


class NoValidRecords(LoadError):
    """The source opened but yielded no record that could be routed."""

    def __init__(self, path: str, report: 'LoadReport'):
        super().__init__(f"no valid records in {path}")
        self.path = path
        self.report = report


class LoadOutcome(Enum):
    """Result of validating a single record."""
    ACCEPTED = 'accepted'
    NEGATIVE_DURATION = 'negative_duration'
    UNKNOWN_CLASS = 'unknown_class'


@dataclass
class LoadReport:
    """Counts of what happened to each record read from a source."""
    outcomes: Dict[LoadOutcome, int] = field(default_factory=Counter)
    waiting: int = 0
    missed: int = 0

    @property
    def accepted(self) -> int:
        return self.outcomes[LoadOutcome.ACCEPTED]

    @property
    def discarded(self) -> int:
        return sum(count for outcome, count in self.outcomes.items()
                   if outcome is not LoadOutcome.ACCEPTED)

    @property
    def loaded_any(self) -> bool:
        return self.accepted > 0


def tokenize(lines: Iterable[str]) -> Iterator[str]:
    """Split a line-oriented source into a flat token stream."""
    for line in lines:
        yield from line.split()


def parse_records(tokens: Iterable[str]) -> Iterator[RawRecord]:
    """
    Group a token stream into (name, tag, duration) triplets.

    The duration is the integer at the start of its token. Any text after
    it (the ".5" of "3.5") is read as the next token. Reading stops when a
    duration token does not start with an integer, and at a trailing
    incomplete triplet; earlier triplets are kept.
    """
    tokens = iter(tokens)
    while True:
        name = next(tokens, None)
        if name is None:
            return
        tag = next(tokens, None)
        duration = next(tokens, None)
        if tag is None or duration is None:
            logger.debug("ignoring incomplete trailing record starting at %r", name)
            return

        match = _LEADING_INTEGER.match(duration)
        if match is None:
            logger.debug("stopping at non-integer duration %r for %r", duration, name)
            return
        rest = duration[match.end():]
        if rest:
            tokens = itertools.chain([rest], tokens)
        yield name, tag, int(match.group())


def classify(tag: str, duration: int) -> LoadOutcome:
    """Validate a record; the duration check takes precedence over the tag."""
    if duration < 0:
        return LoadOutcome.NEGATIVE_DURATION
    if tag in (ServiceClass.WAITING.value, ServiceClass.MISSED.value):
        return LoadOutcome.ACCEPTED
    return LoadOutcome.UNKNOWN_CLASS


def load_records(records: Iterable[RawRecord], queue: Queue, stack: Stack) -> LoadReport:
    """Route records into the queue (waiting) or the stack (missed)."""
    report = LoadReport()

    for name, tag, duration in records:
        outcome = classify(tag, duration)
        report.outcomes[outcome] += 1

        if outcome is not LoadOutcome.ACCEPTED:
            logger.debug("discarded %s %s %d: %s", name, tag, duration, outcome.value)
            continue

        if ServiceClass(tag) is ServiceClass.WAITING:
            queue.enqueue(name, duration)
            report.waiting += 1
        else:
            stack.push(name, duration)
            report.missed += 1

    return report


def load_file(path: str, queue: Queue, stack: Stack) -> LoadReport:
    """
    Load a record file into the containers.

    Raises:
        SourceUnavailable: the file could not be opened
        NoValidRecords: the file opened but no record was routed
    """
    try:
        source = open(path, 'r', errors='replace')
    except OSError as err:
        raise SourceUnavailable(path) from err

    with source:
        report = load_records(parse_records(tokenize(source)), queue, stack)

    logger.debug("loaded %d waiting and %d missed from %s (%d discarded)",
                 report.waiting, report.missed, path, report.discarded)

    if not report.loaded_any:
        raise NoValidRecords(path, report)
    return report
