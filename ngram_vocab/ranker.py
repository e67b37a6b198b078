"""
Vocabulary ranking and output module.

This module orders aggregated term counts by frequency and writes them as
one ``term<TAB>count`` line per entry.
"""

import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable, List, Mapping, Tuple

from loguru import logger

from .errors import WriteError


class RankingWriter:
    """Ranks terms by frequency and writes the vocabulary file."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def rank(self, counts: Mapping[str, int]) -> List[Tuple[str, int]]:
        """
        Order terms by descending count.

        Equal counts are ordered lexicographically by term so the output is
        reproducible.

        Args:
            counts: Term -> count mapping.

        Returns:
            List of (term, count) tuples.
        """
        return sorted(counts.items(), key=lambda x: (-x[1], x[0]))

    def format_line(self, term: str, count: int) -> str:
        """Render one output line."""
        return f"{term}{self.config.FIELD_SEPARATOR}{count}\n"

    def write(self, ranked: Iterable[Tuple[str, int]], output_path) -> Path:
        """
        Write ranked terms to disk.

        The file is written next to its destination under a temporary name and
        renamed into place once complete, so a failed run leaves no partial
        output behind.

        Args:
            ranked: (term, count) tuples in output order.
            output_path: Destination file.

        Returns:
            Path of the written file.
        """
        output_path = Path(output_path)
        directory = output_path.parent

        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w", delete=False, encoding=self.config.OUTPUT_ENCODING,
                dir=directory, prefix=f".{output_path.name}.", suffix=".tmp", newline="\n"
            ) as tmp:
                tmp_path = tmp.name
                for term, count in ranked:
                    tmp.write(self.format_line(term, count))
            os.chmod(tmp_path, self._output_mode(output_path))
            os.replace(tmp_path, output_path)
            tmp_path = None
        except (OSError, UnicodeEncodeError) as exc:
            raise WriteError(f"Unable to write vocabulary to {output_path}: {exc}", path=output_path) from exc
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)

        logger.info(f"Wrote vocabulary to {output_path}")
        return output_path

    def _output_mode(self, output_path: Path) -> int:
        """
        Permission bits the output should carry after the rename.

        An existing destination keeps its mode; a new file gets what a plain
        open() would create under the current umask (temporary files are 0600).
        """
        try:
            return stat.S_IMODE(os.stat(output_path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def summarize(self, ranked: List[Tuple[str, int]], topn: int = None) -> None:
        """
        Print a summary of vocabulary statistics.

        Args:
            ranked: Ranked (term, count) tuples.
            topn: Number of top terms to show. If None, uses config default.
        """
        if topn is None:
            topn = self.config.SUMMARY_TOP_N

        total_occurrences = sum(count for _, count in ranked)
        unique_terms = len(ranked)
        print("\n=== Vocabulary Summary ===")
        print(f"Unique terms: {unique_terms}  |  Total term occurrences: {total_occurrences}")
        if topn > 0 and unique_terms > 0:
            preview = ", ".join(f"{term}:{count}" for term, count in ranked[:topn])
            print(f"Top {topn} terms: {preview}")
