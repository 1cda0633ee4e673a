"""DNS utility functions for SubCrawler.

This module provides domain validation, hostname construction and the
resolver backends used by the scan engine. Two backends are available:
the host's own ``getaddrinfo`` facility (the default) and an opt-in
dnspython stub resolver with an explicit per-attempt timeout. Both answer
a pure existence question, so any address family counts as a hit.
"""

import socket
import re
import logging
from typing import Optional

from dns.resolver import Resolver, NXDOMAIN, NoAnswer, Timeout, NoNameservers
import dns.exception

from subcrawler.core.exceptions import ValidationError, ConfigurationError, NetworkError
from subcrawler.core.interfaces import HostResolver

DEFAULT_TIMEOUT = 3.0
DEFAULT_BACKEND = 'system'

# Port handed to getaddrinfo; only the name part of the lookup matters
PROBE_PORT = 80


class DNSUtils:
    """DNS utility functions for domain validation and hostname handling."""

    DOMAIN_PATTERN = re.compile(
        r'^([a-zA-Z0-9]([a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])?\.)+[a-zA-Z]{2,}$'
    )

    @staticmethod
    def normalize_domain(domain: str) -> str:
        """Lowercase a domain and strip surrounding whitespace and the root dot.

        Args:
            domain: Domain name as typed by the user

        Returns:
            Normalized domain name
        """
        if not isinstance(domain, str):
            return domain
        return domain.strip().rstrip('.').lower()

    def validate_domain(self, domain: str) -> bool:
        """Validate if a string is a valid domain name.

        Args:
            domain: Domain name to validate

        Returns:
            True if domain is valid

        Raises:
            ValidationError: If domain is invalid
        """
        if not domain or not isinstance(domain, str):
            raise ValidationError("Domain must be a non-empty string")

        if not self.DOMAIN_PATTERN.match(domain):
            raise ValidationError(f"Invalid domain format: {domain}")

        return True

    @staticmethod
    def build_hostname(candidate: str, domain: str) -> str:
        """Join a candidate label and the base domain into a hostname.

        Args:
            candidate: Subdomain label (e.g., "www")
            domain: Base domain (e.g., "example.com")

        Returns:
            Fully qualified hostname (e.g., "www.example.com")
        """
        return f"{candidate}.{domain}"


class SystemResolver(HostResolver):
    """Resolve hostnames through the host's getaddrinfo facility.

    Honors the hosts file, NSS and the system resolver configuration.
    There is no timeout beyond whatever the platform applies.
    """

    def __init__(self):
        self.logger = logging.getLogger('subcrawler.resolver.system')

    def resolve(self, hostname: str) -> bool:
        try:
            addresses = socket.getaddrinfo(hostname, PROBE_PORT, type=socket.SOCK_STREAM)
        except (OSError, UnicodeError, ValueError) as e:
            # socket.gaierror and socket.herror are OSError subclasses
            self.logger.debug(f"Lookup failed for {hostname}: {e}")
            return False
        return bool(addresses)


class DNSPythonResolver(HostResolver):
    """Resolve hostnames with a dnspython stub resolver.

    Queries A records first and falls back to AAAA when the name exists but
    has no IPv4 address. Each query is bounded by ``timeout`` seconds.

    Attributes:
        timeout: Per-query timeout in seconds
        resolver: Underlying dnspython resolver, shared by all workers
    """

    RECORD_TYPES = ('A', 'AAAA')

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        """Initialize the dnspython resolver.

        Args:
            timeout: Per-query timeout in seconds

        Raises:
            NetworkError: If the host has no usable resolver configuration
        """
        self.timeout = timeout
        self.logger = logging.getLogger('subcrawler.resolver.dns')
        try:
            self.resolver = Resolver()
        except dns.exception.DNSException as e:
            raise NetworkError("Unable to read the system resolver configuration") from e
        self.resolver.timeout = timeout
        self.resolver.lifetime = timeout

    @property
    def name(self) -> str:
        return 'dns'

    def resolve(self, hostname: str) -> bool:
        for rdtype in self.RECORD_TYPES:
            try:
                answers = self.resolver.resolve(hostname, rdtype)
            except NXDOMAIN:
                self.logger.debug(f"Domain {hostname} does not exist")
                return False
            except NoAnswer:
                self.logger.debug(f"No {rdtype} records for {hostname}")
                continue
            except (Timeout, NoNameservers) as e:
                self.logger.debug(f"Lookup failed for {hostname}: {e}")
                return False
            except (dns.exception.DNSException, UnicodeError) as e:
                self.logger.debug(f"Error resolving {hostname}: {e}")
                return False
            if answers:
                return True
        return False


RESOLVER_BACKENDS = {
    'dns': DNSPythonResolver,
    'system': SystemResolver,
}


def create_resolver(backend: str = DEFAULT_BACKEND, timeout: Optional[float] = DEFAULT_TIMEOUT) -> HostResolver:
    """Create a resolver backend by name.

    Args:
        backend: Backend name ('dns' or 'system')
        timeout: Per-query timeout in seconds (dnspython backend only)

    Returns:
        HostResolver instance

    Raises:
        ConfigurationError: If the backend name is unknown
    """
    if backend == 'dns':
        return DNSPythonResolver(timeout=DEFAULT_TIMEOUT if timeout is None else timeout)
    elif backend == 'system':
        return SystemResolver()
    else:
        raise ConfigurationError(
            f"Unknown resolver backend: {backend} (choose from {', '.join(sorted(RESOLVER_BACKENDS))})")
