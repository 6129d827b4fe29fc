import re
import logging
from enum import Enum
from typing import Iterator

from .exceptions import InputFileError

logger = logging.getLogger(__name__)

NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]+")


class TokenMode(str, Enum):
    """How raw text is cut into countable units."""
    WORD = "word"
    CHARACTER = "character"


def normalize(raw: str) -> str:
    """
    Strip everything but ASCII letters and digits, lowercase what is left.
    An empty result means the unit should be discarded.
    """
    return NON_ALNUM_RE.sub("", raw).lower()


def scan_units(text: str, mode: TokenMode = TokenMode.WORD) -> Iterator[str]:
    """
    Yield raw (not yet normalized) units from `text` in scan order.

    Word mode yields whitespace-delimited runs, character mode yields every
    single character, whitespace included.
    """
    if mode is TokenMode.CHARACTER:
        yield from text
    else:
        yield from text.split()


def iter_file_tokens(path: str, mode: TokenMode = TokenMode.WORD, encoding: str = "utf-8") -> Iterator[str]:
    """
    Lazily yield the raw units of a file, line by line.

    Raises:
        InputFileError: if the file cannot be opened or read.
    """
    try:
        with open(path, "r", encoding=encoding, errors="replace") as file:
            for line in file:
                yield from scan_units(line, mode)
    except OSError as e:
        raise InputFileError(path, e.strerror or str(e)) from e
