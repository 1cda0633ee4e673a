"""
Unit tests for output formatters.
"""
import pytest
import json
import csv
import io
from unittest.mock import patch, mock_open

from colorama import Fore, Style

from subcrawler.utils.formatters import (
    TextFormatter, JSONFormatter, CSVFormatter,
    FormatterFactory, write_output
)
from subcrawler.core.interfaces import ScanResult


class TestFormatters:
    """Test output formatters."""

    @pytest.fixture
    def sample_result(self):
        """Create a sample result for testing."""
        result = ScanResult(
            domain="example.com",
            subdomains=["api.example.com", "mail.example.com", "www.example.com"]
        )
        result.stats.update({
            'total_candidates': 45,
            'processed': 45,
            'workers': 10,
            'tasks': 9,
            'resolver': 'dns',
            'elapsed': 1.234
        })
        return result

    def test_text_formatter(self, sample_result):
        """Hostnames are listed one per line under a header."""
        output = TextFormatter().format(sample_result)

        assert output == (
            "\nFound subdomains:\n"
            "api.example.com\n"
            "mail.example.com\n"
            "www.example.com\n"
        )

    def test_text_formatter_color(self, sample_result):
        """Colored output wraps each hostname in green."""
        output = TextFormatter(color=True).format(sample_result)

        assert f"{Fore.GREEN}www.example.com{Style.RESET_ALL}" in output

    def test_text_formatter_empty(self):
        """An empty result says so."""
        output = TextFormatter().format(ScanResult(domain="example.com"))

        assert "No subdomains found." in output

    def test_json_formatter(self, sample_result):
        """JSON output carries the domain, hostnames and stats."""
        data = json.loads(JSONFormatter().format(sample_result))

        assert data['domain'] == "example.com"
        assert data['subdomains'] == sample_result.subdomains
        assert data['stats']['total_subdomains'] == 3
        assert data['stats']['processed'] == 45

    def test_csv_formatter(self, sample_result):
        """CSV output has a header and one row per hostname."""
        rows = list(csv.reader(io.StringIO(CSVFormatter().format(sample_result))))

        assert rows[0] == ['Subdomain', 'Domain']
        assert rows[1:] == [
            ['api.example.com', 'example.com'],
            ['mail.example.com', 'example.com'],
            ['www.example.com', 'example.com'],
        ]

    def test_formatter_factory(self):
        """Test formatter factory."""
        assert isinstance(FormatterFactory.create_formatter('text'), TextFormatter)
        assert isinstance(FormatterFactory.create_formatter('json'), JSONFormatter)
        assert isinstance(FormatterFactory.create_formatter('csv'), CSVFormatter)
        assert FormatterFactory.create_formatter('text', color=True).color is True

        with pytest.raises(ValueError):
            FormatterFactory.create_formatter('invalid')

    def test_write_output_stdout(self, capsys, sample_result):
        """Test writing output to stdout."""
        write_output(sample_result, 'json')

        data = json.loads(capsys.readouterr().out)
        assert data['subdomains'][-1] == "www.example.com"

    @patch('builtins.open', new_callable=mock_open)
    def test_write_output_file(self, mock_file, sample_result):
        """Files never receive color codes."""
        write_output(sample_result, 'text', 'output.txt', color=True)

        mock_file.assert_called_once_with('output.txt', 'w')
        written = mock_file().write.call_args[0][0]
        assert Fore.GREEN not in written
        assert "www.example.com" in written
