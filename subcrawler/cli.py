"""Command-line interface for SubCrawler."""

import argparse
import os
import sys
import logging
from typing import List, Optional

from colorama import Fore, Style, just_fix_windows_console

from subcrawler import __version__
from subcrawler.core.exceptions import (
    ValidationError, ConfigurationError, WordlistError, NetworkError, ScanError
)
from subcrawler.core.interfaces import ScanResult
from subcrawler.utils.error_handler import ErrorHandler
from subcrawler.utils.dns_utils import DNSUtils, DEFAULT_BACKEND, DEFAULT_TIMEOUT, RESOLVER_BACKENDS
from subcrawler.utils.wordlist import WordlistLoader, WordlistType, SECLISTS_ENV_VAR

BANNER = r"""
 ____        _      ____                    _
/ ___| _   _| |__  / ___|_ __ __ ___      _| | ___ _ __
\___ \| | | | '_ \| |   | '__/ _` \ \ /\ / / |/ _ \ '__|
 ___) | |_| | |_) | |___| | | (_| |\ V  V /| |  __/ |
|____/ \__,_|_.__/ \____|_|  \__,_| \_/\_/ |_|\___|_|
"""


def print_banner(color: bool = True) -> None:
    """Print the banner to stderr."""
    if color:
        print(f"{Fore.BLUE}{BANNER}{Style.RESET_ALL}", file=sys.stderr)
        print(f"{Fore.GREEN}        Subdomain Reconnaissance Tool v{__version__}{Style.RESET_ALL}",
              file=sys.stderr)
    else:
        print(BANNER, file=sys.stderr)
        print(f"        Subdomain Reconnaissance Tool v{__version__}", file=sys.stderr)
    print("=" * 60, file=sys.stderr)


class CLI:
    """Command-line interface for SubCrawler."""

    def __init__(self, error_handler: Optional[ErrorHandler] = None):
        """Initialize the CLI.

        Args:
            error_handler: Error handler used to report invalid input
        """
        self.parser = self._create_parser()
        self.error_handler = error_handler
        self.dns_utils = DNSUtils()
        self.logger = logging.getLogger('subcrawler.cli')

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser with all options.

        Returns:
            Configured argument parser
        """
        parser = argparse.ArgumentParser(
            prog='subcrawler',
            description='SubCrawler - brute-force subdomain discovery over DNS',
            epilog='Example: subcrawler example.com -w top5000 -t 50'
        )

        parser.add_argument(
            'domain',
            help='Target domain to discover subdomains for'
        )

        # Wordlist options
        parser.add_argument(
            '-w', '--wordlist-type',
            choices=[t.value for t in WordlistType],
            default=WordlistType.LIGHT.value,
            help='Wordlist to use (default: light, the built-in list)'
        )

        parser.add_argument(
            '-c', '--custom-wordlist',
            help='Path to a custom wordlist file (implies --wordlist-type custom)'
        )

        parser.add_argument(
            '--seclists-path',
            default=os.environ.get(SECLISTS_ENV_VAR),
            help=f'SecLists DNS wordlist directory (default: ${SECLISTS_ENV_VAR})'
        )

        # Scan options
        parser.add_argument(
            '-t', '--threads',
            type=int,
            default=10,
            help='Number of concurrent workers (default: 10)'
        )

        parser.add_argument(
            '--resolver',
            choices=sorted(RESOLVER_BACKENDS),
            default=DEFAULT_BACKEND,
            help='Resolution backend: system (getaddrinfo, honors the hosts file) '
                 f'or dns (dnspython, honors --timeout) (default: {DEFAULT_BACKEND})'
        )

        parser.add_argument(
            '--timeout',
            type=float,
            default=DEFAULT_TIMEOUT,
            help=f'Per-query timeout in seconds for the dns resolver (default: {DEFAULT_TIMEOUT})'
        )

        # Output options
        parser.add_argument(
            '--output',
            choices=['text', 'json', 'csv'],
            default='text',
            help='Output format (default: text)'
        )

        parser.add_argument(
            '--output-file',
            help='Write output to file instead of stdout'
        )

        parser.add_argument(
            '--no-progress',
            action='store_true',
            help='Disable the progress bar'
        )

        parser.add_argument(
            '--no-color',
            action='store_true',
            help='Disable colored output'
        )

        # Verbosity options
        parser.add_argument(
            '-v', '--verbose',
            action='store_true',
            help='Enable verbose output'
        )

        parser.add_argument(
            '-q', '--quiet',
            action='store_true',
            help='Suppress all non-error output'
        )

        parser.add_argument(
            '--version',
            action='version',
            version=f'%(prog)s {__version__}'
        )

        return parser

    def parse_arguments(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments.

        Args:
            args: Command-line arguments (None for sys.argv)

        Returns:
            Parsed arguments namespace
        """
        parsed_args = self.parser.parse_args(args)

        parsed_args.domain = self.dns_utils.normalize_domain(parsed_args.domain)
        if parsed_args.custom_wordlist:
            parsed_args.wordlist_type = WordlistType.CUSTOM.value

        return parsed_args

    def validate_input(self, args: argparse.Namespace) -> bool:
        """Validate user input.

        Args:
            args: Parsed arguments namespace

        Returns:
            True if input is valid, False after reporting the problem
        """
        try:
            self.dns_utils.validate_domain(args.domain)
        except ValidationError as e:
            self._report('input', str(e))
            return False

        if args.timeout <= 0:
            self._report('input', "Timeout must be greater than 0")
            return False

        if args.verbose and args.quiet:
            self._report('input', "Cannot specify both --verbose and --quiet")
            return False

        return True

    def display_results(self, result: ScanResult, output_format: str,
                        output_file: Optional[str] = None, color: bool = False) -> None:
        """Display results in the specified format.

        Args:
            result: Scan result
            output_format: Output format (text, json, csv)
            output_file: Optional output file path
            color: Whether to colorize text output
        """
        from subcrawler.utils.formatters import write_output
        write_output(result, output_format, output_file, color=color)

    def display_summary(self, result: ScanResult) -> None:
        """Display a summary of the scan on stderr.

        Args:
            result: Scan result
        """
        stats = result.stats
        print("\nSummary:", file=sys.stderr)
        print(f"Subdomains found: {stats['total_subdomains']}", file=sys.stderr)
        print(f"Candidates processed: {stats['processed']}/{stats['total_candidates']}",
              file=sys.stderr)
        print(f"Workers: {stats['workers']} ({stats['tasks']} started)", file=sys.stderr)
        print(f"Resolver: {stats['resolver']}", file=sys.stderr)
        print(f"Elapsed: {stats['elapsed']:.2f}s", file=sys.stderr)

    def _report(self, error_type: str, message: str, exception: Optional[Exception] = None) -> None:
        if self.error_handler is None:
            self.error_handler = ErrorHandler()
        self.error_handler.handle_error(error_type, message, exception)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = CLI()
    args = cli.parse_arguments(argv)

    error_handler = ErrorHandler(verbose=args.verbose, quiet=args.quiet)
    cli.error_handler = error_handler

    if not cli.validate_input(args):
        return 1

    just_fix_windows_console()
    color = not args.no_color and sys.stdout.isatty()
    if not args.quiet:
        print_banner(color=not args.no_color and sys.stderr.isatty())

    try:
        # Import here to keep argument parsing fast
        from subcrawler.core.scan_engine import ScanEngine

        loader = WordlistLoader(seclists_path=args.seclists_path)
        candidates = loader.load(WordlistType(args.wordlist_type), args.custom_wordlist)

        engine = ScanEngine(
            backend=args.resolver,
            timeout=args.timeout,
            show_progress=not (args.quiet or args.no_progress)
        )
        result = engine.run(args.domain, candidates, args.threads)

        cli.display_results(result, args.output, args.output_file, color=color)

        if not args.quiet:
            cli.display_summary(result)

        return 0
    except ConfigurationError as e:
        error_handler.handle_error('config', str(e), e)
    except WordlistError as e:
        error_handler.handle_error('wordlist', str(e), e)
    except NetworkError as e:
        error_handler.handle_error('network', str(e), e)
    except ScanError as e:
        error_handler.handle_error('scan', str(e), e)
    except KeyboardInterrupt:
        print("\nScan interrupted", file=sys.stderr)
        return 130
    except Exception as e:
        error_handler.handle_error('unexpected', "An unexpected error occurred", e)
    return 1


if __name__ == '__main__':
    sys.exit(main())
