"""
Lexical resources: stopword list and WordNet-backed stemmer.

Both are loaded once before any corpus processing starts and are only read
afterwards, so a single instance can be shared by every extraction call.
"""

from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Set

import nltk
from loguru import logger
from nltk.corpus import wordnet as nltk_wordnet
from nltk.corpus.reader.wordnet import ADJ, ADV, NOUN, VERB, WordNetCorpusReader

from .errors import SetupError

# Part-of-speech order used when looking up base forms without context
POS_ORDER = (NOUN, VERB, ADJ, ADV)


class StopwordSet:
    """Static membership test over a loaded word list."""

    def __init__(self, config, words: Optional[Iterable[str]] = None):
        """Initialize with configuration and an optional initial word list."""
        self.config = config
        self.words: Set[str] = set(words) if words is not None else set()

    def load_stopwords(self, path=None) -> Set[str]:
        """
        Load stopwords from a file into the set, one word per line.

        Words are kept in their raw surface form (no stemming, no case folding)
        because they are matched against raw tokens.

        Args:
            path: Stopword file. If None, uses config default.

        Returns:
            The loaded set of stopwords.
        """
        if path is None:
            path = self.config.STOPWORDS_PATH

        words = set()
        try:
            with open(path, "r", encoding="utf-8") as f:
                for line in f:
                    word = line.strip()
                    if word:
                        words.add(word)
        except (OSError, UnicodeDecodeError) as exc:
            raise SetupError(f"Unable to read stopword list {path}: {exc}", path=path) from exc

        self.words = words
        logger.info(f"{len(words)} stopwords loaded.")
        return words

    def is_stopword(self, token: str) -> bool:
        """Return True if the raw token is in the stopword list."""
        return token in self.words

    def __contains__(self, token: str) -> bool:
        return self.is_stopword(token)

    def __len__(self) -> int:
        return len(self.words)


class Stemmer:
    """Maps surface tokens to WordNet base forms."""

    def __init__(self, config, wordnet=None):
        """
        Initialize with configuration.

        Args:
            config: Settings object.
            wordnet: Any object exposing ``morphy(form, pos=None)``. If None,
                call ``load_wordnet()`` before stemming.
        """
        self.config = config
        self.wordnet = wordnet
        self._cached_stem = lru_cache(maxsize=config.STEM_CACHE_SIZE)(self._lookup_stem)

    def load_wordnet(self, dict_dir=None):
        """
        Open the WordNet database used for base-form lookup.

        Args:
            dict_dir: WordNet "dict" directory. If None, uses config default;
                when that is also None the database is taken from NLTK's data
                path (downloaded first if NLTK_AUTO_DOWNLOAD is set).

        Returns:
            The loaded WordNet reader.
        """
        if dict_dir is None:
            dict_dir = self.config.WORDNET_DIR

        try:
            if dict_dir is not None:
                wordnet = WordNetCorpusReader(str(Path(dict_dir)), None)
            else:
                if self.config.NLTK_AUTO_DOWNLOAD:
                    nltk.download("wordnet", quiet=True)
                nltk_wordnet.ensure_loaded()
                wordnet = nltk_wordnet
        except (LookupError, OSError) as exc:
            source = dict_dir if dict_dir is not None else "NLTK data path"
            raise SetupError(f"Unable to open WordNet dictionary ({source}): {exc}", path=dict_dir) from exc

        self.wordnet = wordnet
        self._cached_stem.cache_clear()
        logger.info("WordNet loaded.")
        return wordnet

    def find_stems(self, token: str) -> List[str]:
        """
        Find every distinct WordNet base form of a token.

        Lookup is case-insensitive and tries nouns, verbs, adjectives and
        adverbs in that order.

        Args:
            token: Surface-form token.

        Returns:
            Base forms in part-of-speech order; empty if WordNet knows none.
        """
        if self.wordnet is None:
            raise RuntimeError("WordNet not loaded. Call load_wordnet() first.")

        form = token.lower()
        stems = []
        for pos in POS_ORDER:
            stem = self.wordnet.morphy(form, pos)
            if stem and stem not in stems:
                stems.append(stem)
        return stems

    def stem(self, token: str) -> str:
        """
        Return the canonical stem of a token, or the token itself if none exists.

        Args:
            token: Surface-form token.

        Returns:
            First WordNet base form, else the unchanged token.
        """
        if not token:
            return token

        return self._cached_stem(token)

    def _lookup_stem(self, token: str) -> str:
        stems = self.find_stems(token)
        return stems[0] if stems else token
