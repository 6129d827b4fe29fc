import logging
from typing import Iterable, List, NamedTuple, Optional, Sequence

from tqdm import tqdm

from .exceptions import EmptyIndexError, IndexConsumedError
from .heap import FrequencyHeap, HeapEntry
from .trie import Trie
from .utils import TokenMode, iter_file_tokens, normalize

logger = logging.getLogger(__name__)


class RankedToken(NamedTuple):
    token: str
    frequency: int
    occurrence_order: int


class TopKResult(NamedTuple):
    """Ranked tokens handed to the report, plus what the report needs to scale them."""
    entries: List[RankedToken]
    total_token_count: int
    requested: int

    @property
    def underfilled(self) -> bool:
        """True when fewer distinct tokens existed than were requested."""
        return len(self.entries) < self.requested


class FrequencyIndex:
    """
    Counts token occurrences and yields the most frequent ones.

    A Trie maps every distinct token to the node holding its frequency; a
    FrequencyHeap keeps one entry per distinct token in ranked order. Each
    node points back at its entry's heap slot, so a repeat occurrence costs a
    trie walk plus one sift-up.

    The index serves a single extraction: after extract_top_k() it refuses
    further use.

    Attributes:
        total_token_count (int): Tokens recorded, repeats included. Discarded
                                 (empty after normalization) units do not count.
        unique_token_count (int): Distinct tokens recorded.
    """

    def __init__(self) -> None:
        """Initializes an empty FrequencyIndex."""
        self.trie: Trie = Trie()
        self.heap: FrequencyHeap = FrequencyHeap()
        self.total_token_count: int = 0
        self.unique_token_count: int = 0
        self._next_occurrence_order: int = 0
        self._consumed: bool = False

    def _ensure_usable(self) -> None:
        if self._consumed:
            raise IndexConsumedError("This index has already been extracted; build a new one to query again.")

    def record(self, raw_token: str) -> Optional[str]:
        """
        Records one raw unit.

        Args:
            raw_token (str): A word or character as scanned from the input.

        Returns:
            Optional[str]: The normalized token, or None if normalization left
                           nothing and the unit was discarded.
        """
        self._ensure_usable()

        token = normalize(raw_token)
        if not token:
            return None

        self.total_token_count += 1
        node = self.trie.find_or_create_path(token)

        if node.heap_slot is not None:
            node.frequency += 1
            self.heap.increase_key_at(node.heap_slot)
        else:
            node.frequency = 1
            node.is_terminal = True
            entry = HeapEntry(token, self._next_occurrence_order, node)
            self._next_occurrence_order += 1
            self.unique_token_count += 1
            node.heap_slot = self.heap.insert(entry)
        return token

    def record_many(self, raw_tokens: Iterable[str]) -> int:
        """Records every unit of `raw_tokens` in order; returns how many were kept."""
        kept = 0
        for raw_token in raw_tokens:
            if self.record(raw_token) is not None:
                kept += 1
        return kept

    def ingest_file(self, path: str, mode: TokenMode = TokenMode.WORD, encoding: str = "utf-8") -> int:
        """
        Records every unit of one file in scan order.

        Returns:
            int: Number of tokens kept from this file.

        Raises:
            InputFileError: if the file cannot be opened or read.
        """
        kept = self.record_many(iter_file_tokens(path, mode, encoding))
        logger.info(f"Ingested {kept} token(s) from '{path}' ({mode.value} mode)")
        return kept

    def ingest_files(self, paths: Sequence[str], mode: TokenMode = TokenMode.WORD,
                     encoding: str = "utf-8", show_progress: bool = True) -> int:
        """
        Ingests `paths` strictly in the given order, stopping at the first
        unreadable file.

        Returns:
            int: Number of tokens kept across all files.
        """
        kept = 0
        for path in tqdm(paths, desc="Reading files", unit="file", disable=not show_progress):
            kept += self.ingest_file(path, mode, encoding)
        logger.info(f"Total tokens: {self.total_token_count}, unique tokens: {self.unique_token_count}")
        return kept

    def frequency_of(self, token: str) -> int:
        """Current count of a normalized token, 0 if it was never recorded."""
        node = self.trie.find(token)
        return node.frequency if node is not None else 0

    def extract_top_k(self, k: int) -> TopKResult:
        """
        Removes and returns up to `k` tokens, highest frequency first, ties
        going to the token seen first.

        Args:
            k (int): How many tokens to return. Must be at least 1.

        Returns:
            TopKResult: The ranked tokens. When fewer than `k` distinct tokens
                        exist, all of them are returned and `underfilled` is set.

        Raises:
            ValueError: if k is not a positive integer.
            EmptyIndexError: if no token has been recorded.
            IndexConsumedError: if the index was already extracted.
        """
        self._ensure_usable()
        if isinstance(k, bool) or not isinstance(k, int) or k < 1:
            raise ValueError(f"k must be a positive integer, got {k!r}.")
        if self.unique_token_count == 0:
            raise EmptyIndexError("No data: no tokens were recorded.")

        self._consumed = True
        entries: List[RankedToken] = []
        while len(entries) < k and len(self.heap) > 0:
            entry = self.heap.extract_max()
            entries.append(RankedToken(entry.token, entry.frequency, entry.occurrence_order))

        if len(entries) < k:
            logger.warning(f"Requested top {k} but only {len(entries)} distinct token(s) exist.")
        return TopKResult(entries, self.total_token_count, k)
