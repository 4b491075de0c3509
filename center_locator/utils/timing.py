"""Timing utilities for request monitoring."""
import time
from center_locator.utils.logging import log_structured


class Timer:
    """Context manager for timing code blocks."""
    
    def __init__(self, operation: str, **fields):
        """
        Initialize timer.
        
        Args:
            operation: Name of the operation being timed
            **fields: Extra fields logged with the timing
        """
        self.operation = operation
        self.fields = fields
        self.start = None
        self.elapsed = None
    
    def __enter__(self):
        self.start = time.perf_counter()
        return self
    
    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        log_structured(
            "info" if exc_type is None else "warning",
            f"Operation {self.operation} {'completed' if exc_type is None else 'failed'}",
            operation=self.operation,
            elapsed_seconds=round(self.elapsed, 4),
            **self.fields
        )
        return False
