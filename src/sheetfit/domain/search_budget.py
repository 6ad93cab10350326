"""Cancellation and timeout hook for the split search.

The split search runs over every candidate cut position, so its wall-clock
time grows with the sheet size. A SearchBudget lets a caller bound it,
either with a timeout or with an event set from another thread.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class CancelEvent(Protocol):
    """Anything with an ``is_set`` method, e.g. ``threading.Event``."""

    def is_set(self) -> bool: ...


class SearchCancelledError(RuntimeError):
    """Raised when the split search is stopped before completion.

    Attributes:
        reason: Either "timeout" or "cancelled".
        scanned: Number of split lengths fully scanned.
        total: Number of split lengths the search would have scanned.
    """

    def __init__(self, reason: str, scanned: int, total: int) -> None:
        self.reason = reason
        self.scanned = scanned
        self.total = total
        super().__init__(
            f"Split search {reason} after {scanned} of {total} split positions"
        )


@dataclass
class SearchBudget:
    """Bounds on how long the split search may run.

    The solver calls ``start()`` once, then ``check()`` before each outer
    loop iteration. No partial result is returned when the budget runs out.

    Attributes:
        timeout_seconds: Wall-clock limit, or None for no limit.
        cancel_event: Optional event; the search stops once it is set.
        clock: Monotonic time source in seconds.
    """

    timeout_seconds: float | None = None
    cancel_event: CancelEvent | None = None
    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)
    _deadline: float | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError("Timeout must be positive")

    def start(self) -> None:
        """Start the clock for the timeout."""
        if self.timeout_seconds is not None:
            self._deadline = self.clock() + self.timeout_seconds

    def check(self, scanned: int, total: int) -> None:
        """Raise SearchCancelledError if the search must stop.

        Args:
            scanned: Split lengths scanned so far.
            total: Split lengths in the whole search.

        Raises:
            SearchCancelledError: If the event is set or the deadline passed.
        """
        if self.cancel_event is not None and self.cancel_event.is_set():
            logger.info("Split search cancelled at %d/%d", scanned, total)
            raise SearchCancelledError("cancelled", scanned, total)
        if self._deadline is not None and self.clock() >= self._deadline:
            logger.info("Split search timed out at %d/%d", scanned, total)
            raise SearchCancelledError("timeout", scanned, total)
