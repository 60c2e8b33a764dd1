"""Visualization utilities for service runs."""

from .plotting import (
    plot_service_order,
    plot_class_summary
)

__all__ = [
    'plot_service_order',
    'plot_class_summary'
]
