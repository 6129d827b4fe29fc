import logging
from typing import List, Optional

from .exceptions import EmptyHeapError
from .trie import TrieNode

logger = logging.getLogger(__name__)


class HeapEntry:
    """
    One distinct token inside the FrequencyHeap.

    The frequency is read through the owning TrieNode, so the heap always sees
    the count the trie holds.

    Attributes:
        token (str): The normalized token.
        occurrence_order (int): Rank of the token's first appearance among all
                                distinct tokens. Fixed at creation.
        node (TrieNode): The trie node that owns this token.
    """
    __slots__ = ('token', 'occurrence_order', 'node')

    def __init__(self, token: str, occurrence_order: int, node: TrieNode) -> None:
        self.token: str = token
        self.occurrence_order: int = occurrence_order
        self.node: TrieNode = node

    @property
    def frequency(self) -> int:
        return self.node.frequency

    def precedes(self, other: "HeapEntry") -> bool:
        """True if this entry ranks strictly ahead of `other`: higher frequency, then earlier occurrence."""
        if self.frequency != other.frequency:
            return self.frequency > other.frequency
        return self.occurrence_order < other.occurrence_order

    def __repr__(self) -> str:
        return f"HeapEntry({self.token!r}, frequency={self.frequency}, occurrence_order={self.occurrence_order})"


class FrequencyHeap:
    """
    Array-based binary max-heap of HeapEntry, ordered by
    (frequency descending, occurrence_order ascending).

    Every entry's node.heap_slot mirrors the entry's position. All moves go
    through _swap(), which rewrites both back-pointers together with the slots.
    """

    def __init__(self, capacity: int = 1) -> None:
        if capacity < 1:
            raise ValueError("capacity must be a positive integer.")
        self._slots: List[Optional[HeapEntry]] = [None] * capacity
        self._size: int = 0

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @staticmethod
    def _parent(i: int) -> int:
        return (i - 1) // 2

    @staticmethod
    def _left(i: int) -> int:
        return 2 * i + 1

    @staticmethod
    def _right(i: int) -> int:
        return 2 * i + 2

    def _grow(self) -> None:
        new_capacity = 2 * len(self._slots)
        self._slots.extend([None] * (new_capacity - len(self._slots)))
        logger.debug(f"Heap capacity grown to {new_capacity}")

    def _swap(self, i: int, j: int) -> None:
        a, b = self._slots[i], self._slots[j]
        a.node.heap_slot, b.node.heap_slot = j, i
        self._slots[i], self._slots[j] = b, a

    def _sift_up(self, i: int) -> int:
        while i > 0:
            parent = self._parent(i)
            if not self._slots[i].precedes(self._slots[parent]):
                break
            self._swap(i, parent)
            i = parent
        return i

    def _sift_down(self, i: int) -> int:
        while True:
            left, right = self._left(i), self._right(i)
            if left >= self._size:
                return i

            # left wins unless right strictly precedes it
            child = left
            if right < self._size and self._slots[right].precedes(self._slots[left]):
                child = right

            if not self._slots[child].precedes(self._slots[i]):
                return i
            self._swap(i, child)
            i = child

    def insert(self, entry: HeapEntry) -> int:
        """
        Adds an entry and restores heap order.

        Args:
            entry (HeapEntry): A new entry whose token is not yet in the heap.

        Returns:
            int: The slot the entry came to rest in (also stored in entry.node.heap_slot).
        """
        if self._size == len(self._slots):
            self._grow()
        slot = self._size
        self._slots[slot] = entry
        entry.node.heap_slot = slot
        self._size += 1
        return self._sift_up(slot)

    def increase_key_at(self, slot: int) -> int:
        """
        Restores heap order after the frequency of the entry at `slot` went up by one.

        A higher frequency can only move an entry toward the root, so a sift-up
        is enough.

        Returns:
            int: The entry's new slot.
        """
        if not 0 <= slot < self._size:
            raise IndexError(f"Heap slot {slot} is out of range (size {self._size}).")
        return self._sift_up(slot)

    def peek(self) -> HeapEntry:
        if self._size == 0:
            raise EmptyHeapError("peek from an empty heap")
        return self._slots[0]

    def extract_max(self) -> HeapEntry:
        """
        Removes and returns the highest-ranked entry.

        The extracted entry's node gets heap_slot = None.

        Raises:
            EmptyHeapError: if the heap is empty.
        """
        if self._size == 0:
            raise EmptyHeapError("extract_max from an empty heap")

        last = self._size - 1
        if last > 0:
            self._swap(0, last)
        top = self._slots[last]
        self._slots[last] = None
        self._size = last
        top.node.heap_slot = None

        if self._size > 1:
            self._sift_down(0)
        return top

    def check_invariants(self) -> None:
        """
        Verifies heap order and back-pointers for every occupied slot.

        Raises:
            AssertionError: naming the first slot that breaks either invariant.
        """
        for i in range(self._size):
            entry = self._slots[i]
            if entry is None:
                raise AssertionError(f"Slot {i} is empty inside a heap of size {self._size}")
            if entry.node.heap_slot != i:
                raise AssertionError(
                    f"Back-pointer mismatch at slot {i}: node points to {entry.node.heap_slot}"
                )
            if i > 0 and entry.precedes(self._slots[self._parent(i)]):
                raise AssertionError(f"Heap order broken between slot {i} and its parent")
