import pytest

from src.mytrie.node import NodeIterator, TrieNode


def build(*paths: str) -> TrieNode:
    root = TrieNode()
    for path in paths:
        root.insert(path)
    return root


def test_insert_creates_one_node_per_character():
    """Test that a path is stored as a chain of single-child nodes."""
    root = build("abc")

    assert list(root.children) == ["a"]
    assert list(root.children["a"].children) == ["b"]
    assert list(root.children["a"].children["b"].children) == ["c"]
    assert root.children["a"].children["b"].children["c"].children == {}


def test_insert_reuses_shared_prefix():
    """Test that common prefixes are stored only once."""
    root = build("abc", "abd")

    b_node = root.children["a"].children["b"]
    assert set(b_node.children) == {"c", "d"}


def test_insert_is_idempotent():
    """Test that inserting the same path twice keeps the same nodes."""
    root = build("abc")
    c_node = root.get_node("abc")

    root.insert("abc")

    assert root.get_node("abc") is c_node


def test_insert_empty_path_is_noop():
    """Test that an empty path adds nothing."""
    root = build("")
    assert root.children == {}


def test_get_node_empty_path_returns_self():
    """Test that descending along nothing stays at the node."""
    root = TrieNode()
    assert root.get_node("") is root


@pytest.mark.parametrize("path", ["x", "abx", "abcd"])
def test_get_node_missing_path(path):
    """Test that a path leaving the tree is reported as not found."""
    root = build("abc")
    assert root.get_node(path) is None


def test_get_node_accepts_any_iterable():
    """Test that the path may be any iterable of characters."""
    root = build("abc")
    assert root.get_node(iter(["a", "b"])) is root.children["a"].children["b"]


def test_iter_suffixes_of_leaf_yields_empty_label():
    """Test that a leaf produces exactly the empty label."""
    assert list(TrieNode().iter_suffixes()) == [""]


def test_iter_suffixes_yields_every_leaf_label():
    """Test that every path down to a leaf is produced once."""
    root = build("car", "cat", "dog")
    assert sorted(root.iter_suffixes()) == ["car", "cat", "dog"]


def test_iter_suffixes_is_relative_to_start_node():
    """Test that labels start below the node enumeration starts from."""
    root = build("car", "cat", "dog")
    node = root.get_node("ca")
    assert sorted(node.iter_suffixes()) == ["r", "t"]


def test_iter_suffixes_is_restartable():
    """Test that every call starts a new, independent session."""
    root = build("car", "cat")
    first = root.iter_suffixes()
    next(first)

    assert sorted(root.iter_suffixes()) == ["car", "cat"]
    assert len(list(first)) == 1


def test_node_iterator_is_lazy():
    """Test that the frontier only grows with pending branches."""
    root = build("ab", "ac")
    iterator = NodeIterator(root)

    assert iter(iterator) is iterator
    assert not iterator.exhausted
    next(iterator)
    assert not iterator.exhausted
    next(iterator)
    assert iterator.exhausted
    with pytest.raises(StopIteration):
        next(iterator)


def test_iter_suffixes_handles_deep_paths():
    """Test that paths longer than the recursion limit are fine."""
    path = "a" * 5000
    root = build(path)

    assert list(root.iter_suffixes()) == [path]
    assert root.remove(path) is True
    assert root.children == {}


def test_remove_prunes_the_whole_chain():
    """Test that removing the only path leaves an empty node."""
    root = build("abc")

    assert root.remove("abc") is True
    assert root.children == {}


def test_remove_keeps_shared_prefix():
    """Test that pruning stops at a node with remaining children."""
    root = build("abc", "abd")

    assert root.remove("abc") is True
    assert root.get_node("abc") is None
    assert root.get_node("abd") is not None
    assert set(root.get_node("ab").children) == {"d"}


def test_remove_prefix_path_keeps_longer_path():
    """Test that an inner path ending is not pruned below it."""
    root = build("ab", "abcd")

    # "ab" ends on a node that still has children, so nothing is pruned
    assert root.remove("ab") is True
    assert root.get_node("abcd") is not None


@pytest.mark.parametrize("path", ["abx", "x", "abcd"])
def test_remove_missing_path_does_not_mutate(path):
    """Test that a failed removal leaves the tree untouched."""
    root = build("abc", "abd")
    before = sorted(root.iter_suffixes())

    assert root.remove(path) is False
    assert sorted(root.iter_suffixes()) == before


def test_remove_subtree_detaches_node():
    """Test that the subtree is cut off with its content intact."""
    root = build("abc", "abd", "xyz")
    b_node = root.get_node("ab")

    detached = root.remove_subtree("ab")

    assert detached is b_node
    assert sorted(detached.iter_suffixes()) == ["c", "d"]
    assert root.get_node("ab") is None
    assert sorted(root.iter_suffixes()) == ["xyz"]


def test_remove_subtree_prunes_emptied_ancestors():
    """Test that no childless node is left on the path to the subtree."""
    root = build("abc", "xyz")

    root.remove_subtree("ab")

    assert root.get_node("a") is None
    assert list(root.children) == ["x"]


def test_remove_subtree_keeps_ancestors_with_other_children():
    """Test that pruning stops at the first node still in use."""
    root = build("abc", "axy")

    root.remove_subtree("ab")

    assert set(root.get_node("a").children) == {"x"}


@pytest.mark.parametrize("path", ["abx", "q"])
def test_remove_subtree_missing_path(path):
    """Test that a missing prefix is not found and nothing is removed."""
    root = build("abc")

    assert root.remove_subtree(path) is None
    assert sorted(root.iter_suffixes()) == ["abc"]


def test_remove_subtree_empty_path():
    """Test that the node can't detach itself from a parent it lacks."""
    root = build("abc")

    assert root.remove_subtree("") is None
    assert root.get_node("abc") is not None
