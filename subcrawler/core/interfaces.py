"""Base interfaces and data models for SubCrawler components.

This module defines the data models passed between the scan engine and the
presentation layer, together with the abstract base classes that resolver
backends and output formatters implement.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any, Tuple
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ScanTask:
    """A contiguous slice of the candidate sequence owned by one worker.

    Attributes:
        index: Position of this task in the partition (0-based)
        candidates: Candidate labels assigned to the worker, in input order
    """
    index: int
    candidates: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.candidates)


@dataclass
class ScanResult:
    """Data model representing the outcome of a completed scan.

    Attributes:
        domain: The base domain that was scanned (e.g., example.com)
        subdomains: Resolved hostnames, sorted ascending with no duplicates
        stats: Dictionary containing statistics about the scan
    """
    domain: str
    subdomains: List[str] = field(default_factory=list)
    stats: Dict[str, Any] = None

    def __post_init__(self):
        """Initialize default statistics."""
        if self.stats is None:
            self.stats = {
                'total_candidates': 0,  # Candidates handed to the engine
                'processed': 0,         # Candidates attempted by workers
                'total_subdomains': len(self.subdomains),
                'workers': 0,           # Requested worker count after clamping
                'tasks': 0,             # Non-empty tasks actually started
                'resolver': None,       # Name of the resolver backend
                'elapsed': 0.0          # Wall-clock seconds
            }


class HostResolver(ABC):
    """Base interface for name-resolution backends.

    A resolver answers a single question: does this hostname currently
    resolve to at least one address? Resolution failures of any kind
    (NXDOMAIN, timeouts, malformed names) are reported as False rather
    than raised, because a negative answer is the expected outcome for
    most candidates in a brute-force scan.
    """

    @abstractmethod
    def resolve(self, hostname: str) -> bool:
        """Check whether a hostname resolves.

        Args:
            hostname: Fully qualified hostname (e.g., www.example.com)

        Returns:
            True if at least one address was returned, False otherwise
        """
        pass

    @property
    def name(self) -> str:
        """Return the name of this resolver backend."""
        return self.__class__.__name__.replace('Resolver', '').lower()


class OutputFormatter(ABC):
    """Base interface for output formatters."""

    @abstractmethod
    def format(self, result: ScanResult) -> str:
        """Format the scan result for output.

        Args:
            result: The scan result to format

        Returns:
            Formatted string representation in the specific output format
        """
        pass
