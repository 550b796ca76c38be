"""Node layer of the prefix tree.

Every node owns a mapping from a single character to its child node. All
operations walk the tree iteratively, so the length of a stored string is not
limited by the interpreter's recursion limit.
"""

from collections.abc import Iterable, Iterator
from typing import Optional


class TrieNode:
    """Represent a node in the trie structure."""

    __slots__ = ("children",)

    def __init__(self) -> None:
        """Initialize a new Trie node.

        Attributes:
            children (dict): A dictionary mapping characters to
            their corresponding child TrieNode instances. A node
            without children is a leaf.

        """
        # A dictionary to store child nodes (character: TrieNode)
        self.children: dict[str, TrieNode] = {}

    def __repr__(self) -> str:
        """Return a string representation of the node.

        Returns:
            str: The characters leading to the node's children.

        """
        return f"TrieNode(children={list(self.children)!r})"

    def insert(self, path: Iterable[str]) -> None:
        """Insert a path of characters below this node.

        Missing nodes are created on the way down, existing ones are
        reused, so inserting the same path twice is a no-op.

        Args:
            path (Iterable[str]): The characters to insert.

        """
        node = self
        for char in path:
            child = node.children.get(char)
            # If the character is not already a child, add a new TrieNode
            if child is None:
                child = node.children[char] = TrieNode()
            # Move to the child node
            node = child

    def get_node(self, path: Iterable[str]) -> Optional["TrieNode"]:
        """Descend along a path of characters.

        Args:
            path (Iterable[str]): The characters to follow.

        Returns:
            Optional[TrieNode]: The node at the end of the path, this node
            itself for an empty path, or None if the path does not exist.

        """
        node = self
        for char in path:
            child = node.children.get(char)
            # If the character is not found, the path does not exist
            if child is None:
                return None
            node = child
        return node

    def iter_suffixes(self) -> "NodeIterator":
        """Start a new enumeration session over this node's subtree.

        Returns:
            NodeIterator: A lazy iterator over the labels of every path from
            this node down to a leaf.

        """
        return NodeIterator(self)

    def remove(self, path: Iterable[str]) -> bool:
        """Remove a path of characters and prune the emptied nodes.

        The whole path is looked up before anything is deleted, so a
        failed removal leaves the tree untouched.

        Args:
            path (Iterable[str]): The characters to remove.

        Returns:
            bool: True if the path existed and was removed, False otherwise.

        """
        walked = self._walk(path)
        if walked is None:
            return False
        nodes, edges = walked
        self._prune(nodes, edges)
        return True

    def remove_subtree(self, path: Iterable[str]) -> Optional["TrieNode"]:
        """Detach the subtree found at the end of a non-empty path.

        Ancestors left without children by the detachment are pruned
        like in `remove`.

        Args:
            path (Iterable[str]): The characters leading to the subtree.

        Returns:
            Optional[TrieNode]: The detached node with all its descendants,
            or None if the path does not exist or is empty.

        """
        walked = self._walk(path)
        if walked is None or not walked[1]:
            return None
        nodes, edges = walked
        # Cut the last edge, the detached node keeps its descendants
        detached = nodes.pop()
        del nodes[-1].children[edges.pop()]
        self._prune(nodes, edges)
        return detached

    def _walk(
        self,
        path: Iterable[str],
    ) -> Optional[tuple[list["TrieNode"], list[str]]]:
        """Collect the nodes and edges along a path without modifying them.

        Returns:
            Optional[tuple]: The visited nodes (this node first) and the
            characters between them, or None if the path does not exist.

        """
        nodes = [self]
        edges: list[str] = []
        for char in path:
            child = nodes[-1].children.get(char)
            # Nothing is touched before the whole path is known to exist
            if child is None:
                return None
            nodes.append(child)
            edges.append(char)
        return nodes, edges

    @staticmethod
    def _prune(nodes: list["TrieNode"], edges: list[str]) -> None:
        # Unwind bottom-up while the visited child has nothing left below it
        for idx in range(len(edges) - 1, -1, -1):
            if nodes[idx + 1].children:
                break
            del nodes[idx].children[edges[idx]]


class NodeIterator:
    """Iterate over all path labels stored below a node.

    The iterator keeps an explicit frontier of (node, label) pairs instead
    of recursing, so its memory is bounded by the number of pending
    branches rather than by the number of stored strings.
    """

    __slots__ = ("_frontier",)

    def __init__(self, start: TrieNode) -> None:
        self._frontier: list[tuple[TrieNode, str]] = [(start, "")]

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        frontier = self._frontier
        while frontier:
            node, label = frontier.pop()
            # A leaf ends a path, so its label is complete
            if not node.children:
                return label
            # Otherwise postpone the children and continue with one of them
            frontier.extend(
                (child, label + char) for char, child in node.children.items()
            )
        raise StopIteration

    @property
    def exhausted(self) -> bool:
        """Whether every label has already been produced."""
        return not self._frontier
