"""Shared pytest fixtures: fake WordNet and ready-made lexical collaborators."""

import pytest

from ngram_vocab.config import load_config
from ngram_vocab.lexicon import Stemmer, StopwordSet


class FakeWordNet:
    """Stands in for an NLTK WordNet reader; returns base forms from a dict."""

    def __init__(self, mapping=None, by_pos=None):
        self.mapping = mapping or {}
        self.by_pos = by_pos or {}
        self.calls = []

    def morphy(self, form, pos=None):
        self.calls.append((form, pos))
        if (form, pos) in self.by_pos:
            return self.by_pos[(form, pos)]
        return self.mapping.get(form)


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def make_stemmer(config):
    def _make(mapping=None, by_pos=None):
        return Stemmer(config, wordnet=FakeWordNet(mapping, by_pos))
    return _make


@pytest.fixture
def make_stopwords(config):
    def _make(words=()):
        return StopwordSet(config, words=words)
    return _make


@pytest.fixture
def fake_wordnet_cls():
    return FakeWordNet
