"""Output formatters for SubCrawler."""

import json
import csv
import io
import sys
from typing import Optional

from colorama import Fore, Style

from subcrawler.core.interfaces import ScanResult, OutputFormatter


class TextFormatter(OutputFormatter):
    """Format results as plain text."""

    def __init__(self, color: bool = False):
        """Initialize the text formatter.

        Args:
            color: Whether to colorize hostnames with ANSI escapes
        """
        self.color = color

    def format(self, result: ScanResult) -> str:
        output = io.StringIO()

        output.write("\nFound subdomains:\n")
        if not result.subdomains:
            output.write("No subdomains found.\n")

        for hostname in result.subdomains:
            if self.color:
                output.write(f"{Fore.GREEN}{hostname}{Style.RESET_ALL}\n")
            else:
                output.write(f"{hostname}\n")

        return output.getvalue()


class JSONFormatter(OutputFormatter):
    """Format results as JSON."""

    def format(self, result: ScanResult) -> str:
        output = {
            'domain': result.domain,
            'subdomains': result.subdomains,
            'stats': result.stats
        }
        return json.dumps(output, indent=2)


class CSVFormatter(OutputFormatter):
    """Format results as CSV."""

    def format(self, result: ScanResult) -> str:
        output = io.StringIO()
        writer = csv.writer(output)

        writer.writerow(['Subdomain', 'Domain'])
        for hostname in result.subdomains:
            writer.writerow([hostname, result.domain])

        return output.getvalue()


class FormatterFactory:
    """Factory for creating output formatters."""

    @staticmethod
    def create_formatter(format_type: str, color: bool = False) -> OutputFormatter:
        """Create an output formatter based on the format type.

        Args:
            format_type: Type of formatter (text, json, csv)
            color: Whether the text formatter should colorize output

        Returns:
            OutputFormatter instance

        Raises:
            ValueError: If format type is invalid
        """
        if format_type == 'text':
            return TextFormatter(color=color)
        elif format_type == 'json':
            return JSONFormatter()
        elif format_type == 'csv':
            return CSVFormatter()
        else:
            raise ValueError(f"Invalid format type: {format_type}")


def write_output(result: ScanResult, format_type: str, output_file: Optional[str] = None,
                 color: bool = False) -> None:
    """Write formatted output to file or stdout.

    Args:
        result: Scan result
        format_type: Output format (text, json, csv)
        output_file: Optional output file path
        color: Whether to colorize text output (ignored for files)
    """
    formatter = FormatterFactory.create_formatter(format_type, color=color and not output_file)
    formatted_output = formatter.format(result)

    if output_file:
        with open(output_file, 'w') as f:
            f.write(formatted_output)
    else:
        sys.stdout.write(formatted_output)
