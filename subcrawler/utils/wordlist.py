"""Wordlist loading for SubCrawler.

Candidates come from one of three places: the built-in light list, one of
the SecLists ``subdomains-top1million`` lists, or a user-supplied file.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import List, Optional

from subcrawler.core.exceptions import ConfigurationError, WordlistError

# Default wordlist of common subdomain prefixes
DEFAULT_WORDLIST = [
    'www', 'mail', 'remote', 'blog', 'webmail', 'server', 'ns1', 'ns2',
    'smtp', 'secure', 'vpn', 'm', 'shop', 'ftp', 'mail2', 'test', 'portal',
    'ns', 'ww1', 'host', 'support', 'dev', 'web', 'bbs', 'ww42', 'mx', 'email',
    'cloud', '1', '2', 'forum', 'admin', 'api', 'cdn', 'stage', 'gw', 'dns',
    'download', 'demo', 'dashboard', 'app', 'beta', 'auth', 'cms', 'testing'
]

# Well-known SecLists install locations, searched in order
SECLISTS_PATHS = [
    '/usr/share/wordlists/seclists/Discovery/DNS/',
    '/usr/share/seclists/Discovery/DNS/',
    '/opt/seclists/Discovery/DNS/',
    '/usr/local/share/seclists/Discovery/DNS/'
]

SECLISTS_ENV_VAR = 'SECLISTS_PATH'


class WordlistType(Enum):
    """Available wordlist sources."""
    LIGHT = 'light'
    TOP5000 = 'top5000'
    TOP20000 = 'top20000'
    TOP110000 = 'top110000'
    CUSTOM = 'custom'


SECLISTS_FILES = {
    WordlistType.TOP5000: 'subdomains-top1million-5000.txt',
    WordlistType.TOP20000: 'subdomains-top1million-20000.txt',
    WordlistType.TOP110000: 'subdomains-top1million-110000.txt',
}


class WordlistLoader:
    """Resolve a wordlist selection into a list of candidate labels."""

    def __init__(self, seclists_path: Optional[str] = None):
        """Initialize the wordlist loader.

        Args:
            seclists_path: Preferred SecLists DNS directory. Falls back to the
                SECLISTS_PATH environment variable, then to the well-known
                install locations.
        """
        self.seclists_path = seclists_path or os.environ.get(SECLISTS_ENV_VAR)
        self.logger = logging.getLogger('subcrawler.wordlist')

    def load(self, wordlist_type: WordlistType = WordlistType.LIGHT,
             custom_path: Optional[str] = None) -> List[str]:
        """Load the candidates for a wordlist selection.

        Args:
            wordlist_type: Which wordlist to load
            custom_path: Path to a wordlist file, required for CUSTOM

        Returns:
            List of candidate labels in file order

        Raises:
            ConfigurationError: If CUSTOM is selected without a path
            WordlistError: If the wordlist cannot be found or read
        """
        if wordlist_type == WordlistType.LIGHT:
            return list(DEFAULT_WORDLIST)

        if wordlist_type == WordlistType.CUSTOM:
            if not custom_path:
                raise ConfigurationError(
                    "Custom wordlist path must be provided when using the custom wordlist type")
            return self.load_file(custom_path)

        base_path = self.find_seclists_path()
        if base_path is None:
            raise WordlistError(
                "Could not find SecLists wordlist directory. "
                "Please install SecLists or provide a custom path using --seclists-path")
        return self.load_file(str(base_path / SECLISTS_FILES[wordlist_type]))

    def load_file(self, file_path: str) -> List[str]:
        """Read candidate labels from a file, one per line.

        Lines are stripped and blank lines dropped. Duplicate entries are kept.

        Args:
            file_path: Path to the wordlist file

        Returns:
            List of candidate labels

        Raises:
            WordlistError: If the file does not exist or cannot be read
        """
        path = Path(file_path)
        if not path.is_file():
            raise WordlistError(f"Wordlist not found at path: {file_path}")

        try:
            with open(path, 'r', encoding='utf-8', errors='ignore') as f:
                wordlist = [line.strip() for line in f if line.strip()]
        except OSError as e:
            raise WordlistError(f"Error reading wordlist {file_path}: {e}") from e

        self.logger.debug(f"Loaded {len(wordlist)} entries from {file_path}")
        return wordlist

    def find_seclists_path(self) -> Optional[Path]:
        """Locate the SecLists DNS wordlist directory.

        Returns:
            Path to the directory, or None if no candidate location exists
        """
        if self.seclists_path:
            custom = Path(self.seclists_path)
            if custom.exists():
                return custom
            self.logger.warning(f"SecLists path {self.seclists_path} does not exist")

        for potential_path in SECLISTS_PATHS:
            path = Path(potential_path)
            if path.exists():
                return path

        return None
