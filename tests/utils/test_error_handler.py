"""
Unit tests for the error handler.
"""
import logging
from unittest.mock import patch

from subcrawler.utils.error_handler import ErrorHandler
from subcrawler.core.exceptions import ScanError


class TestErrorHandler:
    """Test error reporting."""

    @patch('logging.basicConfig')
    def test_logging_levels(self, mock_basic_config):
        """Verbosity flags select the logging level."""
        ErrorHandler(verbose=True)
        assert mock_basic_config.call_args[1]['level'] == logging.DEBUG

        ErrorHandler(quiet=True)
        assert mock_basic_config.call_args[1]['level'] == logging.WARNING

        ErrorHandler()
        assert mock_basic_config.call_args[1]['level'] == logging.INFO

    def test_handle_known_error(self, capsys):
        """Known error types are printed with their prefix."""
        ErrorHandler().handle_error('wordlist', "Wordlist not found at path: x.txt")

        assert "Wordlist Error: Wordlist not found at path: x.txt" in capsys.readouterr().err

    def test_handle_error_shows_cause(self, capsys):
        """The chained cause of an error is shown."""
        try:
            raise ScanError("1 of 2 scan workers failed") from RuntimeError("boom")
        except ScanError as e:
            ErrorHandler().handle_error('scan', str(e), e)

        err = capsys.readouterr().err
        assert "Scan Error: 1 of 2 scan workers failed" in err
        assert "RuntimeError('boom')" in err

    def test_handle_unexpected_error(self, capsys):
        """Unknown error types are reported as unexpected."""
        handler = ErrorHandler()
        with patch.object(handler.logger, 'error') as mock_error:
            handler.handle_error('unexpected', "An unexpected error occurred", ValueError("x"))

        assert "Unexpected Error: An unexpected error occurred" in capsys.readouterr().err
        mock_error.assert_called_once()

    def test_handler_does_not_exit(self, capsys):
        """Reporting an input error leaves the exit decision to the caller."""
        ErrorHandler().handle_error('input', "Invalid domain format: invalid")

        assert "Input Error" in capsys.readouterr().err
