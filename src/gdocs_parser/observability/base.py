# observability/base.py

"""Metrics seam for document fetching and parsing.

Sources and ``SchemaParser`` report through a ``MetricsHook``; metric names
live in ``names``. Applications plug in their own backend by implementing
the two methods below.
"""

from typing import Protocol


class MetricsHook(Protocol):
    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Record one fetch or parse duration in milliseconds."""
        ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Add ``value`` to a counter such as paragraphs or sections seen."""
        ...


class NoOpMetricsHook:
    """Default hook that discards every measurement."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        return None

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        return None
