import pytest

from ngram_vocab.extractor import NgramExtractor
from ngram_vocab.tokenizer import Tokenizer


@pytest.fixture
def make_extractor(config, make_stemmer, make_stopwords):
    def _make(stopwords=(), mapping=None, tokenizer=None):
        return NgramExtractor(config, make_stopwords(stopwords), make_stemmer(mapping), tokenizer=tokenizer)
    return _make


def test_stopword_head_still_starts_bigram(make_extractor):
    extractor = make_extractor(stopwords={"The"})

    terms = extractor.extract(["The", "Quick", "Fox"], 2)

    assert terms == ["the quick", "quick", "quick fox", "fox"]


def test_single_token_has_no_spans(make_extractor):
    extractor = make_extractor(mapping={"cats": "cat"})

    assert extractor.extract(["cats"], 3) == ["cat"]


def test_empty_line_yields_nothing(make_extractor, config):
    extractor = make_extractor(tokenizer=Tokenizer(config))

    assert extractor.extract([], 3) == []
    assert extractor.extract_line("", 3) == []


def test_n_one_yields_unigrams_only(make_extractor):
    extractor = make_extractor()

    assert extractor.extract(["a", "b", "c"], 1) == ["a", "b", "c"]


def test_trigram_order(make_extractor):
    extractor = make_extractor()

    terms = extractor.extract(["a", "b", "c", "d"], 3)

    assert terms == ["a", "a b", "a b c", "b", "b c", "b c d", "c", "c d", "d"]


@pytest.mark.parametrize("n", [1, 2, 3, 4, 7])
def test_terms_never_exceed_n_stems(make_extractor, n):
    extractor = make_extractor(stopwords={"of"})
    tokens = "the rest of the story is told here".split()

    terms = extractor.extract(tokens, n)

    assert terms
    assert all(1 <= len(term.split(" ")) <= n for term in terms)


def test_no_truncated_spans_at_line_end(make_extractor):
    extractor = make_extractor()
    tokens = ["x", "y", "z"]

    terms = extractor.extract(tokens, 5)

    # only the last token starts a term, and only its unigram
    assert [t for t in terms if t.startswith("z")] == ["z"]
    assert "y z" in terms
    assert not any(len(t.split(" ")) > 3 for t in terms)


def test_stopwords_only_filter_unigrams(make_extractor):
    extractor = make_extractor(stopwords={"of", "the"})

    terms = extractor.extract(["of", "the", "day"], 2)

    assert "of" not in terms
    assert "the" not in terms
    assert terms == ["of the", "the day", "day"]


def test_stopword_check_uses_raw_token_not_stem(make_extractor):
    # "was" stems to "be"; the stopword list names the stem only
    extractor = make_extractor(stopwords={"be"}, mapping={"was": "be"})

    assert extractor.extract(["was"], 1) == ["be"]


def test_stopword_check_is_case_sensitive(make_extractor):
    extractor = make_extractor(stopwords={"the"})

    assert extractor.extract(["The", "the"], 1) == ["the"]


def test_terms_are_lowercase(make_extractor):
    extractor = make_extractor()

    terms = extractor.extract(["HELLO", "World", "ÉTÉ"], 2)

    assert terms == ["hello", "hello world", "world", "world été", "été"]


def test_spans_are_built_from_stems(make_extractor):
    extractor = make_extractor(mapping={"cats": "cat", "ran": "run"})

    assert extractor.extract(["cats", "ran"], 2) == ["cat", "cat run", "run"]


@pytest.mark.parametrize("n", [0, -1, 1.5, "2", True])
def test_invalid_n_is_rejected(make_extractor, n):
    extractor = make_extractor()

    with pytest.raises(ValueError):
        extractor.extract(["a"], n)


def test_extract_line_tokenizes_punctuation(make_extractor, config):
    extractor = make_extractor(stopwords={"The"}, tokenizer=Tokenizer(config))

    terms = extractor.extract_line("The Quick Fox.", 2)

    assert terms == ["the quick", "quick", "quick fox", "fox", "fox .", "."]


def test_extract_line_requires_tokenizer(make_extractor):
    extractor = make_extractor()

    with pytest.raises(RuntimeError):
        extractor.extract_line("a b", 2)
