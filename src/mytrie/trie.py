"""This module represents the implementation of a Trie structure that's
used for storing strings and iterating over those sharing a common prefix.

Common prefixes are saved only once, which makes iterating over all the
suffixes belonging to a prefix proportional to the matched subtree rather
than to the whole content.

Create a trie, insert something and query it:

    >>> trie = Trie(["Hallo", "Hallöchen", "Tschüs"])
    >>> trie.contains_prefix("Hall")
    True
    >>> sorted(trie.iter_content("Hall"))
    ['Hallo', 'Hallöchen']
    >>> trie.remove("Hallöchen")
    True
"""

import logging
import weakref
from collections.abc import Iterable, Iterator
from typing import Optional

from src.mytrie.node import NodeIterator, TrieNode

logger = logging.getLogger(__name__)

# The stop symbol on which no character shall follow
# and which is appended while inserting
STOP = "\0"


class InvalidContentError(ValueError):
    """Raised when a string handed to the trie can't be stored in it."""


class TrieMutationError(RuntimeError):
    """Raised when a trie is modified while an iteration over it is alive."""


class Trie:
    """Represents a prefix tree of strings.

    Every stored string is kept as its characters followed by the stop
    symbol, so a string that is a prefix of another one (e.g. "Hallo"
    and "Hallo Welt") is still distinguishable from it.

    Iterators returned by `iter_suffixes` and `iter_content` borrow the
    trie: any modification while one of them is neither exhausted nor
    dropped raises `TrieMutationError`.
    """

    def __init__(
        self,
        content: Optional[Iterable[str]] = None,
        *,
        stop: str = STOP,
    ) -> None:
        """Initialize a trie, optionally filled with some strings.

        Args:
            content (Optional[Iterable[str]]): Strings to insert one by one.
            stop (str): The reserved character terminating every stored
            string. It must not occur in any string passed to the trie.

        Raises:
            ValueError: If `stop` is not a single character.
            InvalidContentError: If `content` is a single string instead
            of an iterable of strings, or holds an unstorable string.

        """
        if not isinstance(stop, str) or len(stop) != 1:
            raise ValueError(
                f"The stop symbol must be a single character, got {stop!r}.",
            )
        # A string would be split into its characters
        if isinstance(content, str):
            raise InvalidContentError(
                f"Expected an iterable of strings, got the string {content!r}.",
            )
        self._stop = stop
        self._root = TrieNode()
        self._sessions: "weakref.WeakSet[SuffixIterator]" = weakref.WeakSet()

        if content is not None:
            inserted = 0
            for item in content:
                self.insert(item)
                inserted += 1
            logger.debug("Built a trie from %d strings", inserted)

    @classmethod
    def from_iterable(cls, content: Iterable[str], *, stop: str = STOP) -> "Trie":
        """Initialize a trie from a set of strings.

        Args:
            content (Iterable[str]): The strings to insert.
            stop (str): See `Trie.__init__`.

        Returns:
            Trie: A trie containing every given string.

        """
        return cls(content, stop=stop)

    @classmethod
    def _from_root(cls, root: TrieNode, stop: str) -> "Trie":
        trie = cls(stop=stop)
        trie._root = root
        return trie

    @property
    def stop(self) -> str:
        """The stop symbol appended to every stored string."""
        return self._stop

    def __repr__(self) -> str:
        """Return a string representation of the trie.

        Returns:
            str: The stop symbol and whether the trie holds anything.

        """
        return f"Trie(stop={self._stop!r}, empty={self.is_empty()})"

    def __contains__(self, content: object) -> bool:
        """Support `content in trie`, False for anything but stored strings."""
        return isinstance(content, str) and self.contains(content)

    def __iter__(self) -> Iterator[str]:
        """Iterate every stored string."""
        return self.iter_content("")

    def __bool__(self) -> bool:
        """Return True if the trie contains any string."""
        return not self.is_empty()

    def _validate(self, content: str) -> bool:
        """Check a string handed to the trie by the caller.

        Args:
            content (str): The string given by the caller.

        Raises:
            InvalidContentError: If `content` isn't a string.

        Returns:
            bool: False if `content` contains the stop symbol, so that it
            can neither be stored nor be found, True otherwise.

        """
        if not isinstance(content, str):
            raise InvalidContentError(
                f"Expected a string, got {type(content).__name__}.",
            )
        return self._stop not in content

    def _ensure_not_borrowed(self) -> None:
        """Refuse a modification while an iteration over the trie is alive.

        Raises:
            TrieMutationError: If an unexhausted iterator still exists.

        """
        if any(not session.exhausted for session in self._sessions):
            raise TrieMutationError(
                "The trie can't be modified while it is being iterated over. "
                "Exhaust or drop the pending iterators first.",
            )

    def insert(self, content: str) -> None:
        """Add a string to the trie.

        Args:
            content (str): The string to insert.

        Raises:
            InvalidContentError: If `content` isn't a string or
            contains the stop symbol.

        """
        if not self._validate(content):
            raise InvalidContentError(
                f"The string {content!r} contains the reserved stop "
                f"symbol {self._stop!r}.",
            )
        self._ensure_not_borrowed()
        # Insert char sequence with a stop symbol
        self._root.insert(content + self._stop)

    def remove(self, content: str) -> bool:
        """Remove a string from the trie.

        Args:
            content (str): The string to remove.

        Returns:
            bool: True on successful removal, False if `content`
            was not present (the trie is left unchanged).

        """
        storable = self._validate(content)
        self._ensure_not_borrowed()
        if not storable:
            return False
        # The stop symbol has to be appended again to remove the whole path
        return self._root.remove(content + self._stop)

    def contains(self, content: str) -> bool:
        """Check if the specified string was inserted into the trie.

        Args:
            content (str): The string to look for.

        Returns:
            bool: True if `content` itself is stored, False otherwise.

        """
        if not self._validate(content):
            return False
        return self._root.get_node(content + self._stop) is not None

    def contains_prefix(self, prefix: str) -> bool:
        """Check if something with this prefix is in the trie.

        The empty prefix is always contained, even in an empty trie.
        """
        # The path of a stored string followed by the stop symbol
        # exists internally but isn't a prefix of anything
        if not self._validate(prefix):
            return False
        return self._root.get_node(prefix) is not None

    def iter_suffixes(self, prefix: str) -> "SuffixIterator":
        """Iterate all suffixes that follow this prefix.

        The order of iteration is arbitrary. A prefix that isn't in the
        trie yields nothing.

        Args:
            prefix (str): The prefix to look under.

        Returns:
            SuffixIterator: A lazy iterator over the stored strings
            starting with `prefix`, with the prefix cut off.

        """
        return self._open_session(prefix, keep_prefix=False)

    def iter_content(self, prefix: str) -> "SuffixIterator":
        """Iterate all strings in the trie with this prefix.

        The order of iteration is arbitrary.

        Args:
            prefix (str): The prefix to look under.

        Returns:
            SuffixIterator: A lazy iterator over the full stored strings
            starting with `prefix`.

        """
        return self._open_session(prefix, keep_prefix=True)

    def _open_session(self, prefix: str, keep_prefix: bool) -> "SuffixIterator":
        node = self._root.get_node(prefix) if self._validate(prefix) else None
        session = SuffixIterator(
            node.iter_suffixes() if node is not None else None,
            self._stop,
            prefix if keep_prefix else "",
        )
        if not session.exhausted:
            self._sessions.add(session)
        return session

    def remove_suffixes(self, prefix: str) -> Optional["Trie"]:
        """Remove everything that follows this prefix.

        Args:
            prefix (str): The prefix whose whole subtree is removed.

        Returns:
            Optional[Trie]: The removed subtree as another trie, containing
            all those removed strings minus the prefix, or None if the prefix
            is not in the trie (the trie is left unchanged).

        """
        storable = self._validate(prefix)
        self._ensure_not_borrowed()
        if not storable:
            return None
        if not prefix:
            detached, self._root = self._root, TrieNode()
        else:
            detached = self._root.remove_subtree(prefix)
            if detached is None:
                return None
        logger.debug("Removed the subtree below prefix %r", prefix)
        return Trie._from_root(detached, self._stop)

    def clear(self) -> None:
        """Remove every string from the trie."""
        self._ensure_not_borrowed()
        self._root = TrieNode()

    def is_empty(self) -> bool:
        """Return True if the trie contains no content."""
        return not self._root.children

    def count_nodes(self) -> int:
        """Count the nodes reachable from the root, the root included.

        Returns:
            int: The total number of nodes of the trie.

        """
        total_nodes = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            total_nodes += 1
            stack.extend(node.children.values())
        return total_nodes


class SuffixIterator:
    """Iterate over all strings stored below a node.

    Wraps the raw path labels of a node's subtree: labels not ending in
    the stop symbol are skipped, the stop symbol is stripped, and the
    given prefix is put in front of every produced string.
    """

    __slots__ = ("_labels", "_stop", "_prefix", "__weakref__")

    def __init__(
        self,
        labels: Optional[NodeIterator],
        stop: str,
        prefix: str = "",
    ) -> None:
        self._labels = labels
        self._stop = stop
        self._prefix = prefix

    def __iter__(self) -> "SuffixIterator":
        return self

    def __next__(self) -> str:
        if self._labels is None:
            raise StopIteration
        for label in self._labels:
            # Only labels ending in the stop symbol are stored strings
            if label.endswith(self._stop):
                return self._prefix + label[:-1]
        self._labels = None
        raise StopIteration

    @property
    def exhausted(self) -> bool:
        """Whether the iterator has nothing left to produce."""
        return self._labels is None or self._labels.exhausted
