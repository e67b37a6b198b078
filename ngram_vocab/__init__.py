"""
N-gram Vocabulary Builder

Converts a directory of plain-text documents into a frequency-ranked
vocabulary of stemmed, stopword-filtered, lowercased unigrams and n-grams.

Main components:
- VocabularyBuilder: Pipeline orchestrator
- Tokenizer: Penn Treebank style word tokenization
- StopwordSet / Stemmer: Lexical resources (stopword list, WordNet)
- NgramExtractor: Per-line unigram and n-gram term generation
- VocabularyAggregator: Term occurrence counting
- RankingWriter: Frequency ranking and output
- CorpusReader: Corpus directory listing and line reading
"""

from .generator import VocabularyBuilder
from .tokenizer import Tokenizer
from .lexicon import StopwordSet, Stemmer
from .extractor import NgramExtractor
from .aggregator import VocabularyAggregator
from .ranker import RankingWriter
from .utils import CorpusReader
from .errors import (
    NgramVocabError,
    SetupError,
    ListingError,
    ReadError,
    WriteError,
    BuildCancelled,
)

__version__ = "1.0.0"

__all__ = [
    "VocabularyBuilder",
    "Tokenizer",
    "StopwordSet",
    "Stemmer",
    "NgramExtractor",
    "VocabularyAggregator",
    "RankingWriter",
    "CorpusReader",
    "NgramVocabError",
    "SetupError",
    "ListingError",
    "ReadError",
    "WriteError",
    "BuildCancelled",
]
