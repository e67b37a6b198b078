"""
Main VocabularyBuilder class that orchestrates the entire vocabulary pipeline.

This module contains the VocabularyBuilder class that coordinates resource
loading, corpus reading, term extraction, aggregation and ranked output.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from loguru import logger

from .aggregator import VocabularyAggregator
from .config import load_config
from .errors import BuildCancelled, ReadError
from .extractor import NgramExtractor
from .lexicon import Stemmer, StopwordSet
from .ranker import RankingWriter
from .tokenizer import Tokenizer
from .utils import CorpusReader


class VocabularyBuilder:
    """
    Main builder class that provides a unified interface for vocabulary generation.

    Lexical resources are loaded once by ``setup()`` and shared read-only by
    every extraction call. Tokenizer, stopword set and stemmer may be injected
    to substitute alternative implementations.
    """

    def __init__(self, config_dict: Optional[Dict] = None, tokenizer=None,
                 stopwords=None, stemmer=None):
        """
        Initialize the VocabularyBuilder.

        Args:
            config_dict: Optional configuration dictionary to override defaults.
            tokenizer: Optional tokenizer exposing ``tokenize(line)``.
            stopwords: Optional stopword set exposing ``is_stopword(token)``.
            stemmer: Optional stemmer exposing ``stem(token)``.
        """
        self.config = load_config(config_dict)

        # Initialize components
        self.tokenizer = tokenizer if tokenizer is not None else Tokenizer(self.config)
        self.stopwords = stopwords if stopwords is not None else StopwordSet(self.config)
        self.stemmer = stemmer if stemmer is not None else Stemmer(self.config)
        self.corpus_reader = CorpusReader(self.config)
        self.ranking_writer = RankingWriter(self.config)
        self.extractor = NgramExtractor(self.config, self.stopwords, self.stemmer, tokenizer=self.tokenizer)

        # State variables
        self.vocabulary = VocabularyAggregator(self.config)
        self.files_processed: List[Path] = []
        self.files_skipped: List[Path] = []
        self.lines_read = 0
        self.max_n: Optional[int] = None

        # Status flags
        self._resources_loaded = stopwords is not None and stemmer is not None
        self._stemmer_injected = stemmer is not None
        self._stopwords_injected = stopwords is not None

    def setup(self) -> None:
        """
        Load the WordNet dictionary and the stopword list.

        Raises SetupError before any corpus processing if either resource is
        missing or unreadable.
        """
        if self._resources_loaded:
            return

        if not self._stemmer_injected:
            self.stemmer.load_wordnet()
        if not self._stopwords_injected:
            self.stopwords.load_stopwords()

        self._resources_loaded = True

    def process_file(self, path, n: int) -> VocabularyAggregator:
        """
        Count the terms of one file.

        Args:
            path: Text file to read.
            n: Maximum n-gram span.

        Returns:
            Aggregator holding this file's counts only.
        """
        shard = VocabularyAggregator(self.config)
        lines = 0
        for line in self.corpus_reader.read_lines(path):
            shard.update(self.extractor.extract_line(line, n))
            lines += 1
        self.lines_read += lines
        return shard

    def build(self, corpus_dir, n: int, cancel_event=None) -> VocabularyAggregator:
        """
        Build the vocabulary of every file in a corpus directory.

        Args:
            corpus_dir: Directory containing text files.
            n: Maximum n-gram span (n >= 1).
            cancel_event: Optional ``threading.Event``; checked between files.

        Returns:
            Aggregator holding the counts of the whole corpus.
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ValueError(f"n must be an integer >= 1, got {n!r}")

        self.setup()

        files = self.corpus_reader.list_files(corpus_dir)
        logger.info(f"{len(files)} files queued.")

        self.vocabulary = VocabularyAggregator(self.config)
        self.files_processed = []
        self.files_skipped = []
        self.lines_read = 0
        self.max_n = n

        for path in files:
            if cancel_event is not None and cancel_event.is_set():
                raise BuildCancelled(f"Cancelled after {len(self.files_processed)} of {len(files)} files")

            logger.info(str(path))
            try:
                shard = self.process_file(path, n)
            except ReadError as exc:
                if not self.config.SKIP_UNREADABLE_FILES:
                    raise
                logger.warning(f"Skipping {path}: {exc}")
                self.files_skipped.append(path)
                continue

            self.vocabulary.merge(shard)
            self.files_processed.append(path)

        logger.info(f"Counted {len(self.vocabulary)} distinct terms from {self.lines_read} lines")
        return self.vocabulary

    def run(self, corpus_dir, n: int, output_path, cancel_event=None) -> List[Tuple[str, int]]:
        """
        Build, rank and write the vocabulary.

        Args:
            corpus_dir: Directory containing text files.
            n: Maximum n-gram span (n >= 1).
            output_path: Destination of the ranked ``term<TAB>count`` file.
            cancel_event: Optional ``threading.Event``; checked between files.

        Returns:
            Ranked (term, count) tuples as written.
        """
        vocabulary = self.build(corpus_dir, n, cancel_event=cancel_event)
        ranked = self.ranking_writer.rank(vocabulary.counts())
        self.ranking_writer.write(ranked, output_path)
        return ranked

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the last build.

        Returns:
            Dictionary containing various statistics.
        """
        return {
            "max_n": self.max_n,
            "num_files": len(self.files_processed),
            "num_skipped_files": len(self.files_skipped),
            "num_lines": self.lines_read,
            "num_terms": len(self.vocabulary),
            "total_occurrences": self.vocabulary.total(),
        }
