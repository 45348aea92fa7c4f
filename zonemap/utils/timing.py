"""Timing utilities for performance monitoring."""
import time
from zonemap.utils.logging import log_structured


class Timer:
    """Context manager for timing code blocks."""

    def __init__(self, operation: str):
        """
        Initialize timer.

        Args:
            operation: Name of the operation being timed
        """
        self.operation = operation
        self.start = None
        self.elapsed = None

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed = time.perf_counter() - self.start
        log_structured(
            "info",
            f"Operation {self.operation} completed",
            operation=self.operation,
            elapsed_seconds=self.elapsed
        )
