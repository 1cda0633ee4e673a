"""Concurrent scan engine for subdomain brute-forcing.

The engine splits the candidate labels into contiguous tasks, starts one
worker thread per task, and collects every hostname that resolves into a
lock-guarded result set. A shared counter records how many candidates have
been attempted so callers can render "processed / total" progress while the
scan runs. Once all workers are joined the result set is read once, sorted
and returned.
"""

import concurrent.futures
import logging
import threading
import time
from enum import Enum
from typing import List, Optional, Sequence, Set

from subcrawler.core.exceptions import ScanError
from subcrawler.core.interfaces import HostResolver, ScanResult, ScanTask
from subcrawler.utils.dns_utils import DNSUtils, DEFAULT_BACKEND, DEFAULT_TIMEOUT, create_resolver
from subcrawler.utils.progress import ProgressIndicator, progress_bar


class ScanState(Enum):
    """Lifecycle states of a scan."""
    IDLE = 'idle'
    PARTITIONING = 'partitioning'
    RUNNING = 'running'
    JOINING = 'joining'
    DONE = 'done'


def partition(candidates: Sequence[str], worker_count: int) -> List[ScanTask]:
    """Split candidates into contiguous, near-equal tasks.

    Chunks hold ceil(N / W) candidates each, except the last one which may
    be shorter. Empty tasks are never produced, so fewer than
    ``worker_count`` tasks come back when there are not enough candidates.

    Args:
        candidates: Ordered candidate labels
        worker_count: Requested number of workers (clamped to at least 1)

    Returns:
        List of ScanTask objects in input order
    """
    candidates = list(candidates)
    worker_count = max(1, worker_count)

    if not candidates:
        return []

    chunk_size = -(-len(candidates) // worker_count)
    return [
        ScanTask(index=index, candidates=tuple(candidates[start:start + chunk_size]))
        for index, start in enumerate(range(0, len(candidates), chunk_size))
    ]


class ResultSet:
    """Set of resolved hostnames shared by the workers of one scan."""

    def __init__(self):
        self._hostnames: Set[str] = set()
        self._lock = threading.Lock()

    def add(self, hostname: str) -> None:
        with self._lock:
            self._hostnames.add(hostname)

    def __len__(self) -> int:
        with self._lock:
            return len(self._hostnames)

    def sorted(self) -> List[str]:
        """Return the hostnames sorted lexicographically ascending."""
        with self._lock:
            return sorted(self._hostnames)


class ProgressCounter:
    """Monotonic count of candidates attempted during one scan.

    Attributes:
        total: Number of candidates in the scan
    """

    def __init__(self, total: int, listener: Optional[ProgressIndicator] = None):
        self.total = total
        self._listener = listener
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> None:
        with self._lock:
            self._value += 1
        if self._listener is not None:
            self._listener.update(1)

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


class ScanEngine:
    """Run a concurrent subdomain scan.

    Each call to :meth:`scan` creates its own result set and progress
    counter, so one engine can be reused for several scans. Only the latest
    counter is kept so that :attr:`processed` can be read during and after
    a scan.

    Attributes:
        resolver: Backend used to check each candidate hostname
        show_progress: Whether to render a progress bar on stderr
        state: Current lifecycle state
    """

    def __init__(self, resolver: Optional[HostResolver] = None, backend: str = DEFAULT_BACKEND,
                 timeout: float = DEFAULT_TIMEOUT, show_progress: bool = False):
        """Initialize the scan engine.

        Args:
            resolver: Resolver backend instance (built from ``backend`` if omitted)
            backend: Resolver backend name used when ``resolver`` is None
            timeout: Per-query timeout in seconds for the dns backend
            show_progress: Whether to show a progress bar
        """
        if resolver is None:
            resolver = create_resolver(backend, timeout)
        self.resolver = resolver
        self.show_progress = show_progress
        self.state = ScanState.IDLE
        self.logger = logging.getLogger('subcrawler.scan_engine')
        self._counter: Optional[ProgressCounter] = None
        self._task_count = 0

    @property
    def processed(self) -> int:
        """Number of candidates attempted in the current or latest scan."""
        return self._counter.value if self._counter else 0

    @property
    def total(self) -> int:
        """Number of candidates in the current or latest scan."""
        return self._counter.total if self._counter else 0

    def resolve(self, candidate: str, domain: str) -> bool:
        """Check whether ``candidate.domain`` resolves.

        Args:
            candidate: Subdomain label
            domain: Base domain

        Returns:
            True if the hostname resolves, False otherwise
        """
        return self.resolver.resolve(DNSUtils.build_hostname(candidate, domain))

    def scan(self, domain: str, candidates: Sequence[str], worker_count: int) -> List[str]:
        """Scan candidates against a domain and return the hostnames that resolve.

        Args:
            domain: Base domain (e.g., example.com)
            candidates: Candidate labels; duplicates are allowed
            worker_count: Number of concurrent workers (clamped to at least 1)

        Returns:
            Sorted list of resolved hostnames without duplicates

        Raises:
            ScanError: If a worker cannot be started or fails
        """
        candidates = list(candidates)
        if worker_count < 1:
            self.logger.warning(f"Worker count {worker_count} is below 1, using 1 worker")
            worker_count = 1

        self._transition(ScanState.PARTITIONING)
        tasks = partition(candidates, worker_count)
        self._task_count = len(tasks)
        results = ResultSet()

        with progress_bar(total=len(candidates), desc=f"Scanning {domain}",
                          disable=not self.show_progress, unit="host") as progress:
            self._counter = ProgressCounter(len(candidates), listener=progress)
            self.logger.info(
                f"Scanning {len(candidates)} candidates against {domain} "
                f"with {len(tasks)} workers")
            self._run_workers(tasks, domain, results, self._counter)

        hostnames = results.sorted()
        self._transition(ScanState.DONE)
        self.logger.info(
            f"Scan of {domain} complete: {len(hostnames)} of "
            f"{self._counter.value} candidates resolved")
        return hostnames

    def run(self, domain: str, candidates: Sequence[str], worker_count: int) -> ScanResult:
        """Run a scan and bundle its hostnames with statistics.

        Args:
            domain: Base domain (e.g., example.com)
            candidates: Candidate labels
            worker_count: Number of concurrent workers

        Returns:
            ScanResult for the presentation layer
        """
        candidates = list(candidates)
        workers = max(1, worker_count)
        start_time = time.time()
        hostnames = self.scan(domain, candidates, worker_count)
        elapsed = time.time() - start_time

        result = ScanResult(domain=domain, subdomains=hostnames)
        result.stats.update({
            'total_candidates': len(candidates),
            'processed': self.processed,
            'total_subdomains': len(hostnames),
            'workers': workers,
            'tasks': self._task_count,
            'resolver': self.resolver.name,
            'elapsed': round(elapsed, 3)
        })
        return result

    def _run_workers(self, tasks: List[ScanTask], domain: str,
                     results: ResultSet, counter: ProgressCounter) -> None:
        """Start one worker per task and wait for all of them.

        A keyboard interrupt tells the workers to stop after their current
        lookup and is re-raised without waiting for them.

        Raises:
            ScanError: If any worker could not be started or raised
        """
        if not tasks:
            self._transition(ScanState.RUNNING)
            self._transition(ScanState.JOINING)
            return

        errors = {}
        stop = threading.Event()
        executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=len(tasks), thread_name_prefix='subcrawler-worker')
        try:
            self._transition(ScanState.RUNNING)
            future_to_task = {
                executor.submit(self._run_task, task, domain, results, counter, stop): task
                for task in tasks
            }

            self._transition(ScanState.JOINING)
            for future in concurrent.futures.as_completed(future_to_task):
                task = future_to_task[future]
                try:
                    processed = future.result()
                    self.logger.debug(f"Worker {task.index} finished {processed} candidates")
                except Exception as e:
                    self.logger.error(f"Worker {task.index} failed: {e}")
                    errors[task.index] = e
        except KeyboardInterrupt:
            self.logger.warning("Scan interrupted, stopping workers")
            stop.set()
            executor.shutdown(wait=False, cancel_futures=True)
            self.state = ScanState.IDLE
            raise
        except RuntimeError as e:
            executor.shutdown(wait=True)
            self.state = ScanState.IDLE
            raise ScanError(f"Unable to start scan workers: {e}") from e
        executor.shutdown(wait=True)

        if errors:
            self.state = ScanState.IDLE
            first = errors[min(errors)]
            raise ScanError(
                f"{len(errors)} of {len(tasks)} scan workers failed") from first

    def _run_task(self, task: ScanTask, domain: str, results: ResultSet,
                  counter: ProgressCounter, stop: threading.Event) -> int:
        """Process one task sequentially until it is exhausted or ``stop`` is set.

        Returns:
            Number of candidates processed
        """
        processed = 0
        for candidate in task.candidates:
            if stop.is_set():
                break
            if self.resolve(candidate, domain):
                hostname = DNSUtils.build_hostname(candidate, domain)
                self.logger.debug(f"Resolved {hostname}")
                results.add(hostname)
            counter.increment()
            processed += 1
        return processed

    def _transition(self, state: ScanState) -> None:
        self.logger.debug(f"Scan state {self.state.value} -> {state.value}")
        self.state = state
