class FreqChartError(Exception):
    """Base class for every error raised by freqchart."""


class ConfigurationError(FreqChartError, ValueError):
    """A setting (command-line option or environment variable) has an invalid value."""


class InputFileError(FreqChartError, OSError):
    """An input file could not be opened or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read input file '{path}': {reason}")


class InvalidTokenError(FreqChartError, ValueError):
    """A token reached the trie without being normalized first."""


class EmptyIndexError(FreqChartError):
    """Top-K was requested from an index that holds no tokens."""


class IndexConsumedError(FreqChartError):
    """The index has already been extracted and cannot be used again."""


class EmptyHeapError(FreqChartError, IndexError):
    """extract_max() was called on an empty heap."""
