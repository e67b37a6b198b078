"""
Corpus input helpers.

This module lists the text files of a corpus directory and reads them line
by line.
"""

import os
from pathlib import Path
from typing import Iterator, List

from .errors import ListingError, ReadError


class CorpusReader:
    """Handles corpus directory listing and line reading."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def list_files(self, corpus_dir) -> List[Path]:
        """
        List the input files of a corpus directory (non-recursive).

        Hidden entries (name starting with ".") are skipped when
        SKIP_HIDDEN_FILES is set, and sub-directories are always skipped.

        Args:
            corpus_dir: Directory containing text files.

        Returns:
            File paths sorted by name.
        """
        corpus_dir = Path(corpus_dir)
        try:
            entries = sorted(os.listdir(corpus_dir))
        except OSError as exc:
            raise ListingError(f"Unable to list directory {corpus_dir}: {exc}", path=corpus_dir) from exc

        files = []
        for name in entries:
            if self.config.SKIP_HIDDEN_FILES and name.startswith("."):
                continue
            path = corpus_dir / name
            if path.is_dir():
                continue
            files.append(path)
        return files

    def read_lines(self, path) -> Iterator[str]:
        """
        Yield the lines of a text file without their line terminators.

        Args:
            path: File to read.

        Yields:
            One string per line.
        """
        try:
            with open(path, "r", encoding=self.config.FILE_ENCODING, errors=self.config.FILE_ERRORS) as f:
                for line in f:
                    yield line.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(f"Unable to read {path}: {exc}", path=path) from exc
