"""
Unigram and n-gram term extraction.

This module turns the tokens of one line into the ordered sequence of
normalized terms (stemmed unigrams plus contiguous n-grams) that the line
contributes to the vocabulary.
"""

from typing import List, Sequence


class NgramExtractor:
    """Produces normalized unigram and n-gram terms for a line of text."""

    def __init__(self, config, stopwords, stemmer, tokenizer=None):
        """
        Initialize with configuration and lexical collaborators.

        Args:
            config: Settings object.
            stopwords: Object exposing ``is_stopword(token) -> bool``.
            stemmer: Object exposing ``stem(token) -> str``.
            tokenizer: Object exposing ``tokenize(line) -> list``; only needed
                for ``extract_line``.
        """
        self.config = config
        self.stopwords = stopwords
        self.stemmer = stemmer
        self.tokenizer = tokenizer

    def extract(self, tokens: Sequence[str], n: int) -> List[str]:
        """
        Generate the terms contributed by one tokenized line.

        At each position the unigram comes first (skipped when the raw token
        is a stopword), followed by the spans of 2..n stems starting there.
        Spans running past the end of the line are dropped, and stopwords are
        never filtered out of spans. Every term is lowercased last.

        Args:
            tokens: Surface-form tokens of the line, in order.
            n: Maximum number of stems per term (n >= 1).

        Returns:
            Terms in position order.
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ValueError(f"n must be an integer >= 1, got {n!r}")

        sep = self.config.TERM_SEPARATOR
        tokens = list(tokens)
        stems = [self.stemmer.stem(token) for token in tokens]
        num_tokens = len(tokens)

        terms = []
        for i, token in enumerate(tokens):
            # unigram
            if not self.stopwords.is_stopword(token) and stems[i]:
                terms.append(stems[i])

            # 2 thru n-gram
            for span in range(1, n):
                if i + span >= num_tokens:
                    break
                gram = sep.join(stems[i:i + span + 1])
                if gram:
                    terms.append(gram)

        return [term.lower() for term in terms]

    def extract_line(self, line: str, n: int) -> List[str]:
        """
        Tokenize a raw line and generate its terms.

        Args:
            line: Raw text line.
            n: Maximum number of stems per term.

        Returns:
            Terms in position order.
        """
        if self.tokenizer is None:
            raise RuntimeError("No tokenizer configured for NgramExtractor.")
        return self.extract(self.tokenizer.tokenize(line), n)
