"""
Pytest configuration file for SubCrawler tests.
"""
import os
import sys
import threading
import pytest

# Add the parent directory to sys.path to allow importing subcrawler
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from subcrawler.core.interfaces import HostResolver


class StaticResolver(HostResolver):
    """Deterministic resolver that answers from a fixed set of hostnames."""

    def __init__(self, resolvable=None):
        self.resolvable = set(resolvable or [])
        self.calls = []
        self._lock = threading.Lock()

    def resolve(self, hostname):
        with self._lock:
            self.calls.append(hostname)
        return hostname in self.resolvable


# Common fixtures for tests
@pytest.fixture
def sample_domain():
    """Return a sample domain for testing."""
    return "example.com"


@pytest.fixture
def sample_candidates():
    """Return a list of candidate labels for testing."""
    return ["www", "mail", "doesnotexist123"]


@pytest.fixture
def static_resolver():
    """Return a resolver that resolves www and mail under example.com."""
    return StaticResolver({"www.example.com", "mail.example.com"})


@pytest.fixture
def resolver_factory():
    """Return the StaticResolver class for tests that need custom oracles."""
    return StaticResolver
