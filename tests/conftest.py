import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import matplotlib

matplotlib.use("Agg")

import pytest

from service_order.system import ServiceSystem


@pytest.fixture
def system() -> ServiceSystem:
    """Fresh service system, released after the test."""

    system = ServiceSystem()
    yield system
    system.reset()


@pytest.fixture
def write_records(tmp_path):
    """Write record text to a file and return its path."""

    def _write(text: str, name: str = "customers.txt") -> str:
        path = tmp_path / name
        path.write_text(text)
        return str(path)

    return _write
