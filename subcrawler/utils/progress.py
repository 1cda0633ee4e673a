"""Progress indicator utilities for SubCrawler."""

import sys
from typing import Optional, Iterator
from contextlib import contextmanager
import threading

from tqdm import tqdm


class ProgressIndicator:
    """Thread-safe progress bar for long-running operations."""

    def __init__(self, total: Optional[int] = None, desc: str = "",
                 disable: bool = False, unit: str = "it"):
        """Initialize progress indicator.

        Args:
            total: Total number of items (None for indeterminate)
            desc: Description of the operation
            disable: Whether to disable the progress indicator
            unit: Unit of items
        """
        self.total = total
        self.desc = desc
        self.disable = disable
        self.unit = unit
        self.tqdm_instance = None
        self._lock = threading.Lock()

    def start(self) -> None:
        """Start the progress indicator."""
        if self.disable:
            return

        self.tqdm_instance = tqdm(
            total=self.total,
            desc=self.desc,
            unit=self.unit,
            file=sys.stderr
        )

    def update(self, n: int = 1) -> None:
        """Update progress by n units.

        Args:
            n: Number of units to increment by
        """
        if self.disable:
            return

        with self._lock:
            if self.tqdm_instance:
                self.tqdm_instance.update(n)

    def close(self) -> None:
        """Close the progress indicator."""
        if self.disable:
            return

        if self.tqdm_instance:
            self.tqdm_instance.close()


@contextmanager
def progress_bar(total: Optional[int] = None, desc: str = "",
                 disable: bool = False, unit: str = "it") -> Iterator[ProgressIndicator]:
    """Context manager for progress indicator.

    Args:
        total: Total number of items (None for indeterminate)
        desc: Description of the operation
        disable: Whether to disable the progress indicator
        unit: Unit of items

    Yields:
        ProgressIndicator instance
    """
    progress = ProgressIndicator(total, desc, disable, unit)
    progress.start()
    try:
        yield progress
    finally:
        progress.close()
