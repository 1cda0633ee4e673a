"""Custom exceptions for SubCrawler.

This module defines the exception hierarchy used throughout SubCrawler.
All exceptions inherit from the base SubCrawlerError class so callers can
catch every SubCrawler-specific failure with a single except clause.
"""


class SubCrawlerError(Exception):
    """Base exception for all SubCrawler errors."""
    pass


class ValidationError(SubCrawlerError):
    """Raised when input validation fails.

    This exception is raised when user input fails validation, such as an
    invalid target domain or a malformed command-line value.
    """
    pass


class NetworkError(SubCrawlerError):
    """Raised when network operations fail.

    Resolution failures for individual candidates are not errors and never
    raise this exception. It is reserved for failures of the resolution
    facility itself, such as a missing resolver configuration.
    """
    pass


class ConfigurationError(SubCrawlerError):
    """Raised when configuration is invalid.

    This exception is raised when settings are incomplete or incompatible,
    such as an unknown resolver backend or a custom wordlist type without
    a wordlist path.
    """
    pass


class WordlistError(SubCrawlerError):
    """Raised when a wordlist cannot be located or read."""
    pass


class ScanError(SubCrawlerError):
    """Raised when a scan cannot complete.

    A scan fails as a whole when a worker cannot be started or terminates
    abnormally. The original worker exception is chained as ``__cause__``.
    No partial result is returned alongside this exception.
    """
    pass
