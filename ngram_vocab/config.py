"""
Configuration settings for the n-gram vocabulary builder.

This module contains all configurable parameters for the vocabulary builder.
Modify these values, or pass overrides to ``load_config``, to customize the
behavior of the system.
"""

from pathlib import Path
from typing import Any, Dict, Optional

# Project paths
PACKAGE_ROOT = Path(__file__).parent
RESOURCE_DIR = PACKAGE_ROOT / "resources"

# Lexical resources
STOPWORDS_PATH = RESOURCE_DIR / "stopwords.txt"  # One stopword per line
WORDNET_DIR = None  # WordNet "dict" directory; None uses NLTK's data path
NLTK_AUTO_DOWNLOAD = False  # Fetch the NLTK wordnet package if missing
STEM_CACHE_SIZE = 65536  # Distinct tokens whose stems are kept in memory

# Tokenizer settings
TOKENIZER_CONVERT_PARENTHESES = True  # ( ) [ ] { } -> -LRB- -RRB- ... as in PTB

# Corpus settings
FILE_ENCODING = "utf-8"  # Encoding of input text files
FILE_ERRORS = "strict"  # Decoding error handler: "strict", "ignore", "replace"
SKIP_HIDDEN_FILES = True  # Skip entries whose name begins with "."
SKIP_UNREADABLE_FILES = False  # Warn and continue instead of aborting

# Output settings
OUTPUT_ENCODING = "utf-8"
TERM_SEPARATOR = " "  # Joins stems inside an n-gram
FIELD_SEPARATOR = "\t"  # Separates term and count in the output file
SUMMARY_TOP_N = 10  # Number of terms shown by the --stats summary

# Logging settings
VERBOSE = False  # Debug-level logging
LOG_LEVEL = "INFO"  # Logging level: DEBUG, INFO, WARNING, ERROR


class Config:
    """Attribute-style settings object built from the module defaults."""

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        for key, value in globals().items():
            if key.isupper():
                setattr(self, key, value)
        for key, value in (config_dict or {}).items():
            setattr(self, key.upper(), value)

    def __repr__(self) -> str:
        items = ", ".join(f"{k}={v!r}" for k, v in sorted(vars(self).items()))
        return f"Config({items})"


def load_config(config_dict: Optional[Dict[str, Any]] = None) -> Config:
    """
    Build a configuration object, overriding defaults with ``config_dict``.

    Args:
        config_dict: Optional mapping of setting name to value. Keys are
            case-insensitive.

    Returns:
        Config object exposing every setting as an upper-case attribute.
    """
    return Config(config_dict)
