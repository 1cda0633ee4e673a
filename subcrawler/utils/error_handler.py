"""Error handling utilities for SubCrawler."""

import logging
import sys
from typing import Optional


class ErrorHandler:
    """Centralized error reporting for SubCrawler.

    The handler prints a one-line message per error and logs the details.
    Deciding whether the process should exit is left to the caller.
    """

    PREFIXES = {
        'input': "Input Error",
        'wordlist': "Wordlist Error",
        'config': "Configuration Error",
        'network': "Network Error",
        'scan': "Scan Error",
    }

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize the error handler.

        Args:
            verbose: Enable verbose error reporting
            quiet: Only log warnings and errors
        """
        self.verbose = verbose
        self.quiet = quiet
        self._setup_logging()

    def _setup_logging(self):
        """Set up logging configuration."""
        if self.verbose:
            level = logging.DEBUG
        elif self.quiet:
            level = logging.WARNING
        else:
            level = logging.INFO
        logging.basicConfig(
            level=level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=[
                logging.StreamHandler(sys.stderr)
            ]
        )
        self.logger = logging.getLogger('subcrawler')

    def handle_error(self, error_type: str, message: str, exception: Optional[Exception] = None) -> None:
        """Report an error based on its type.

        Args:
            error_type: Type of error (input, wordlist, config, network, scan, unexpected)
            message: Error message to display
            exception: Optional exception object
        """
        prefix = self.PREFIXES.get(error_type)
        if prefix is None:
            self._handle_unexpected_error(message, exception)
            return

        print(f"{prefix}: {message}", file=sys.stderr)
        if exception is not None:
            cause = exception.__cause__
            if cause is not None:
                print(f"  Caused by: {cause!r}", file=sys.stderr)
            if self.verbose:
                self.logger.debug(f"Exception details: {exception}", exc_info=exception)

    def _handle_unexpected_error(self, message: str, exception: Optional[Exception] = None):
        """Handle unexpected errors."""
        print(f"Unexpected Error: {message}", file=sys.stderr)
        if exception:
            self.logger.error(f"Exception: {exception}", exc_info=exception)

    def log_error(self, message: str, exception: Optional[Exception] = None) -> None:
        """Log error details.

        Args:
            message: Error message to log
            exception: Optional exception object
        """
        if exception:
            self.logger.error(f"{message}: {exception}")
        else:
            self.logger.error(message)
