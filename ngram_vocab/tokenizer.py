"""
Word tokenization module.

This module splits raw text lines into surface-form word tokens following
Penn Treebank conventions, using NLTK's Treebank tokenizer.
"""

from typing import List

from nltk.tokenize import TreebankWordTokenizer


class Tokenizer:
    """Handles Penn Treebank style word tokenization."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config
        self._treebank = TreebankWordTokenizer()

    def tokenize(self, line: str, convert_parentheses: bool = None) -> List[str]:
        """
        Split a line of text into surface-form tokens.

        Punctuation is split off words, contractions are separated
        ("don't" -> "do", "n't") and double quotes become `` and ''.

        Args:
            line: Raw text line.
            convert_parentheses: Whether to map brackets to -LRB-/-RRB- style
                tokens. If None, uses config default.

        Returns:
            Ordered list of tokens; empty for a blank line.
        """
        if convert_parentheses is None:
            convert_parentheses = self.config.TOKENIZER_CONVERT_PARENTHESES

        if not line or not line.strip():
            return []

        return self._treebank.tokenize(line, convert_parentheses=convert_parentheses)
