"""
Exceptions raised by the vocabulary builder.

Every fatal condition carries the pipeline stage it came from so the command
line can report where a run failed.
"""


class NgramVocabError(RuntimeError):
    """Base class for all vocabulary builder failures."""

    stage = "run"

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class SetupError(NgramVocabError):
    """A lexical resource (WordNet, stopword list) could not be loaded."""

    stage = "setup"


class ListingError(NgramVocabError):
    """The corpus directory could not be listed."""

    stage = "listing"


class ReadError(NgramVocabError):
    """An input file could not be opened or decoded."""

    stage = "reading"


class WriteError(NgramVocabError):
    """The ranked vocabulary could not be written."""

    stage = "writing"


class BuildCancelled(NgramVocabError):
    """Cancellation was requested between files."""

    stage = "processing"
