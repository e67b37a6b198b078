#!/usr/bin/env python3
"""
Main entry point for the N-gram Vocabulary Builder.

This script provides a command-line interface for building a ranked
vocabulary file from a directory of text files.
"""

import argparse
import sys

from loguru import logger

from ngram_vocab import NgramVocabError, VocabularyBuilder
from ngram_vocab.log_setup import setup_logging


def positive_int(value: str) -> int:
    """argparse type for the maximum n-gram span."""
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"n must be >= 1, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a frequency-ranked vocabulary of stemmed unigrams and n-grams",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py ./corpus 3 vocab.tsv                     # Unigrams through trigrams
  python main.py ./corpus 1 vocab.tsv --stats            # Unigrams only, print a summary
  python main.py ./corpus 2 vocab.tsv --wordnet-dir ./wn3.1/dict
        """
    )

    parser.add_argument("corpus_dir", help="Directory containing text files (non-recursive)")
    parser.add_argument("n", type=positive_int, help="Maximum n-gram span (1 = unigrams only)")
    parser.add_argument("output", help="Path of the ranked term<TAB>count output file")

    parser.add_argument(
        "--stopwords",
        type=str,
        default=None,
        help="Stopword list, one word per line (default: bundled list)"
    )

    parser.add_argument(
        "--wordnet-dir",
        type=str,
        default=None,
        help="WordNet dict directory (default: NLTK data path)"
    )

    parser.add_argument(
        "--download",
        action="store_true",
        help="Download the NLTK wordnet package if it is missing"
    )

    parser.add_argument(
        "--skip-unreadable",
        action="store_true",
        help="Skip files that cannot be read instead of aborting"
    )

    parser.add_argument(
        "--encoding",
        type=str,
        default=None,
        help="Encoding of input files (default: utf-8)"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print vocabulary statistics after writing"
    )

    parser.add_argument(
        "--top-n",
        type=int,
        default=None,
        help="Number of terms shown by --stats (default: 10)"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def config_overrides(args) -> dict:
    """Translate command-line options into configuration overrides."""
    overrides = {}
    if args.stopwords is not None:
        overrides["STOPWORDS_PATH"] = args.stopwords
    if args.wordnet_dir is not None:
        overrides["WORDNET_DIR"] = args.wordnet_dir
    if args.download:
        overrides["NLTK_AUTO_DOWNLOAD"] = True
    if args.skip_unreadable:
        overrides["SKIP_UNREADABLE_FILES"] = True
    if args.encoding is not None:
        overrides["FILE_ENCODING"] = args.encoding
    if args.top_n is not None:
        overrides["SUMMARY_TOP_N"] = args.top_n
    if args.log_level is not None:
        overrides["LOG_LEVEL"] = args.log_level
    if args.verbose:
        overrides["VERBOSE"] = True
    return overrides


def main(argv=None) -> int:
    """Main entry point for the vocabulary builder."""
    args = build_parser().parse_args(argv)

    builder = VocabularyBuilder(config_dict=config_overrides(args))
    setup_logging(builder.config)

    try:
        ranked = builder.run(args.corpus_dir, args.n, args.output)
    except NgramVocabError as e:
        logger.error(f"{e.stage} failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted; no output written.")
        return 130

    if args.stats:
        print("\n=== Build Statistics ===")
        for key, value in builder.get_stats().items():
            print(f"{key}: {value}")
        builder.ranking_writer.summarize(ranked)

    return 0


if __name__ == "__main__":
    sys.exit(main())
