import logging
from typing import List, Optional

from .exceptions import InvalidTokenError

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 36  # a-z then 0-9


def symbol_index(character: str) -> int:
    """
    Maps an alphabet symbol to its child slot: 'a'-'z' -> 0-25, '0'-'9' -> 26-35.

    Raises:
        InvalidTokenError: if the character is not a lowercase ASCII letter or a digit.
    """
    if "a" <= character <= "z":
        return ord(character) - ord("a")
    if "0" <= character <= "9":
        return 26 + ord(character) - ord("0")
    raise InvalidTokenError(f"Symbol {character!r} is outside the [a-z0-9] alphabet.")


class TrieNode:
    """
    A node in the Trie data structure.

    Attributes:
        children (List[Optional[TrieNode]]): Dense child table indexed by symbol_index().
        is_terminal (bool): True if a recorded token ends at this node.
        frequency (int): Occurrences of the token ending here. Only meaningful
                         when is_terminal is True.
        heap_slot (Optional[int]): Current position of this token's entry in the
                                   FrequencyHeap, or None while the token is not
                                   (or no longer) in the heap.
    """
    __slots__ = ('children', 'is_terminal', 'frequency', 'heap_slot')

    def __init__(self) -> None:
        """Initializes a new TrieNode."""
        self.children: List[Optional[TrieNode]] = [None] * ALPHABET_SIZE
        self.is_terminal: bool = False
        self.frequency: int = 0
        self.heap_slot: Optional[int] = None


class Trie:
    """
    Maps each distinct normalized token to the TrieNode that carries its
    frequency and heap back-pointer. The trie owns every node it creates.
    """

    def __init__(self) -> None:
        self.root: TrieNode = TrieNode()
        self.node_count: int = 1

    def find_or_create_path(self, token: str) -> TrieNode:
        """
        Walks the path for `token` from the root, creating missing nodes.

        Frequencies are left untouched; the caller decides what a hit means.

        Args:
            token (str): A normalized, non-empty token over [a-z0-9].

        Returns:
            TrieNode: The node at the end of the path.

        Raises:
            InvalidTokenError: if the token is empty or contains a symbol outside
                               the alphabet. The trie is left unchanged.
        """
        if not token:
            raise InvalidTokenError("Cannot insert an empty token.")

        slots = [symbol_index(character) for character in token]

        node = self.root
        for slot in slots:
            child = node.children[slot]
            if child is None:
                child = TrieNode()
                node.children[slot] = child
                self.node_count += 1
            node = child
        return node

    def find(self, token: str) -> Optional[TrieNode]:
        """Returns the terminal node for `token`, or None if it was never recorded."""
        if not token:
            return None
        node = self.root
        for character in token:
            try:
                slot = symbol_index(character)
            except InvalidTokenError:
                return None
            node = node.children[slot]
            if node is None:
                return None
        return node if node.is_terminal else None
