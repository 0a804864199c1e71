from typing import Any


class InvalidOrderError(ValueError):
    """Raised when an interval is constructed with ``start > end``."""

    def __init__(self, start: Any, end: Any):
        self.start: Any = start
        self.end: Any = end
        super().__init__(
            f"Interval start ({start!r}) must be <= end ({end!r}).\n"
            f"Hint: Swap the bounds, or let Interval.safe_create(...) order them:\n"
            f"  Interval.safe_create({start!r}, {end!r})"
        )
