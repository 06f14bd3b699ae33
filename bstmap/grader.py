"""Scored self-check of the tree map.

Runs groups of checks against :mod:`bstmap.treemap` and prints a line per
check, a partial score per group and, when run without an argument, the
total. With a numeric argument only the checks up to that test id run, and
``SUCCESS`` is printed as soon as they pass.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .treemap import TreeMap, TreeNode, minimum

MAX_SCORE = 70


@dataclass
class Word:
    """A word tagged with a numeric id; the id is used as its key."""

    id: int
    word: str


def lower_than_int(key1: int, key2: int) -> bool:
    """Return True when ``key1`` is lower than ``key2``."""
    return key1 < key2


def _err(msg: str) -> None:
    print(f"   [FAILED] {msg}")


def _ok(msg: str) -> None:
    print(f"   [OK] {msg}")


def _info(msg: str) -> None:
    print(f"   [ INFO ] {msg}")


def _attach(parent: TreeNode, side: str, word: Word) -> TreeNode:
    node = TreeNode.create(word.id, word)
    setattr(parent, side, node)
    node.parent = parent
    return node


def initialize_tree() -> TreeMap:
    """Build the fixed four-node tree the checks run against.

    The layout is 5239 at the root, 1273 on its left, 8213 on its right and
    6980 as the left child of 8213.
    """
    _info("initializing the tree...")
    tree = TreeMap(lower_than_int)
    root_word = Word(5239, "auto")
    tree.root = TreeNode.create(root_word.id, root_word)
    right = _attach(tree.root, "right", Word(8213, "rayo"))
    _attach(right, "left", Word(6980, "hoja"))
    _attach(tree.root, "left", Word(1273, "reto"))
    return tree


def _check_create(_tree: Optional[TreeMap]) -> bool:
    tree = TreeMap(lower_than_int)
    _ok("TreeMap() returns an object")
    if tree.root is not None:
        _err("root must be None")
        return False
    _ok("root is None")
    if tree.lower_than is not lower_than_int or not tree.lower_than(10, 15):
        _err("the lower_than function was not stored correctly")
        return False
    _ok("comparison function initialized correctly")
    return True


def _search_check(key: int, expected_node: Callable[[TreeMap], Optional[TreeNode]]):
    def check(tree: Optional[TreeMap]) -> bool:
        assert tree is not None
        pair = tree.search(key)
        if pair is None or pair.value.id != key:
            _err(f"does not find data with key {key}")
            return False
        _ok(f"finds data with key {key}")
        if tree.current is not expected_node(tree):
            _err(f"current is not updated correctly ({key})")
            return False
        _ok("current updated correctly")
        return True

    return check


def _check_search_missing(tree: Optional[TreeMap]) -> bool:
    assert tree is not None
    key = 7010
    if tree.search(key) is not None:
        _err(f"returns data for a key that does not exist ({key})")
        return False
    _ok(f"returns None: search(key={key})")
    return True


def _check_insert_duplicate(tree: Optional[TreeMap]) -> bool:
    assert tree is not None and tree.root is not None
    word = Word(1273, "repetido")
    tree.insert(word.id, word)
    node = tree.root.left
    if node is None or node.left is not None or node.right is not None:
        _err("a duplicate key was inserted")
        return False
    _ok("duplicate key is not inserted")
    return True


def _check_insert_new(_tree: Optional[TreeMap]) -> bool:
    tree = initialize_tree()
    word = Word(900, "maicol")
    _info("inserting data with key 900")
    tree.insert(word.id, word)
    parent = tree.root.left
    node = parent.left
    if node is None or node.pair.value is not word:
        _err("inserted data is not at root.left.left")
        return False
    _ok("data inserted correctly")
    if node.pair.key != word.id:
        _err("the key of the data is not stored correctly")
        return False
    if node.parent is not parent:
        _err("the parent of the new node is not set")
        return False
    if tree.current is not node:
        _err("current is not updated")
        return False
    _ok("current updated correctly")
    return True


def _check_minimum(_tree: Optional[TreeMap]) -> bool:
    tree = initialize_tree()
    node = minimum(tree.root)
    if node.pair.key != 1273:
        _err(f"minimum returns the node with key {node.pair.key} (expected 1273)")
        return False
    _ok("minimum returns the node with key 1273")
    _info("adding node with key 100")
    _attach(tree.root.left, "left", Word(100, "first_word"))
    node = minimum(tree.root)
    if node.pair.key != 100:
        _err(f"minimum returns the node with key {node.pair.key} (expected 100)")
        return False
    _ok("minimum returns the node with key 100")
    return True


def _check_erase_leaf(_tree: Optional[TreeMap]) -> bool:
    tree = initialize_tree()
    _info("erasing data with key 1273 (node without children)")
    tree.erase(1273)
    if tree.root.left is not None:
        _err("the data was not erased correctly: root.left is not None")
        return False
    _ok("data erased correctly")
    return True


def _check_erase_one_child(_tree: Optional[TreeMap]) -> bool:
    tree = initialize_tree()
    _info("erasing data with key 8213 (node with one child)")
    tree.erase(8213)
    right = tree.root.right
    if right is None or right.pair.key != 6980:
        _err("the data was not erased correctly: root.right is not 6980")
        return False
    if right.parent is not tree.root:
        _err("the parent of node 6980 was not updated")
        return False
    _ok("data erased correctly")
    return True


def _check_erase_two_children(_tree: Optional[TreeMap]) -> bool:
    tree = initialize_tree()
    _info("erasing data with key 5239 (node with two children)")
    tree.erase(5239)
    if tree.root is None or tree.root.pair.key != 6980:
        _err("the data was not erased correctly: root is not 6980")
        return False
    if tree.root.right is None or tree.root.right.pair.key != 8213:
        _err("the data was not erased correctly: root.right is not 8213")
        return False
    _ok("data erased correctly")
    return True


def _check_first(tree: Optional[TreeMap]) -> bool:
    assert tree is not None
    pair = tree.first()
    if pair is None:
        _err("first returns None")
        return False
    if pair.value.id != 1273:
        _err("first does not return node 1273")
        return False
    _ok("first returns node 1273")
    return True


def _check_first_deeper(_tree: Optional[TreeMap]) -> bool:
    tree = initialize_tree()
    _info("adding node with key 100")
    _attach(tree.root.left, "left", Word(100, "first_word"))
    pair = tree.first()
    if pair is None or pair.value.id != 100:
        _err("first does not return node 100")
        return False
    _ok("first returns node 100")
    return True


def _expect_next(tree: TreeMap, expected: Optional[int]) -> bool:
    pair = tree.next()
    if expected is None:
        if pair is not None:
            _err("next does not return None")
            return False
        _ok("next returns None")
        return True
    if pair is None or pair.value.id != expected:
        _err(f"next does not return node {expected}")
        return False
    _ok(f"next returns node {expected}")
    return True


def _check_next_right_child(_tree: Optional[TreeMap]) -> bool:
    tree = initialize_tree()
    _info("adding node with key 2000")
    _attach(tree.root.left, "right", Word(2000, "next_word"))
    _info("moving current to node 1273")
    tree.current = tree.root.left
    return _expect_next(tree, 2000)


def _check_next_from_root(_tree: Optional[TreeMap]) -> bool:
    tree = initialize_tree()
    _info("moving current to root")
    tree.current = tree.root
    return all(_expect_next(tree, key) for key in (6980, 8213, None))


def _check_next_up(_tree: Optional[TreeMap]) -> bool:
    tree = initialize_tree()
    _info("adding node with key 2000")
    node = _attach(tree.root.left, "right", Word(2000, "next_word"))
    _info("moving current to node 2000")
    tree.current = node
    return _expect_next(tree, 5239)


def _upper_bound_check(key: int, expected: Optional[int]):
    def check(tree: Optional[TreeMap]) -> bool:
        assert tree is not None
        pair = tree.upper_bound(key)
        if expected is None:
            if pair is not None:
                _err(f"upper bound of {key} returns {pair.value.id}")
                return False
            _ok(f"upper bound of {key} returns None")
            return True
        if pair is None:
            _err(f"upper bound of {key} returns None")
            return False
        if pair.value.id != expected:
            _err(f"upper bound of {key} returns {pair.value.id}")
            return False
        _ok(f"upper bound of {key} returns {pair.value.id}")
        return True

    return check


_Check = Callable[[Optional[TreeMap]], bool]


@dataclass(frozen=True)
class _Stage:
    checks: tuple[_Check, ...]
    points: int
    test_id: Optional[int]


@dataclass(frozen=True)
class _Group:
    title: str
    test_ids: Optional[range]
    total: int
    shared_tree: bool
    stages: tuple[_Stage, ...]


_GROUPS = (
    _Group("create", range(0, 1), 5, True, (_Stage((_check_create,), 5, 0),)),
    _Group(
        "search",
        range(1, 2),
        10,
        True,
        (
            _Stage(
                (
                    _search_check(5239, lambda t: t.root),
                    _search_check(8213, lambda t: t.root.right),
                    _search_check(6980, lambda t: t.root.right.left),
                    _check_search_missing,
                ),
                10,
                1,
            ),
        ),
    ),
    _Group(
        "insert",
        range(2, 3),
        10,
        True,
        (_Stage((_check_insert_duplicate, _check_insert_new), 10, 2),),
    ),
    _Group("minimum", None, 0, False, (_Stage((_check_minimum,), 0, None),)),
    _Group(
        "erase",
        range(3, 6),
        15,
        False,
        (
            _Stage((_check_erase_leaf,), 5, 3),
            _Stage((_check_erase_one_child,), 5, 4),
            _Stage((_check_erase_two_children,), 5, 5),
        ),
    ),
    _Group(
        "first",
        range(6, 7),
        5,
        True,
        (_Stage((_check_first, _check_first_deeper), 5, 6),),
    ),
    _Group(
        "next",
        range(7, 10),
        15,
        False,
        (
            _Stage((_check_next_right_child,), 5, 7),
            _Stage((_check_next_from_root,), 5, 8),
            _Stage((_check_next_up,), 5, 9),
        ),
    ),
    _Group(
        "upper_bound",
        range(10, 12),
        10,
        True,
        (
            _Stage(
                (
                    _upper_bound_check(6980, 6980),
                    _upper_bound_check(6979, 6980),
                    _upper_bound_check(6981, 8213),
                ),
                5,
                10,
            ),
            _Stage((_upper_bound_check(8214, None),), 5, 11),
        ),
    ),
)


def run_checks(test_id: int = -1) -> int:
    """Run the checks selected by ``test_id`` and return the score gathered.

    ``-1`` runs every group. Any other id runs its group, stopping with
    ``SUCCESS`` once the checks up to that id pass. The minimum check runs
    whatever the id.
    """
    total = 0
    for group in _GROUPS:
        scored = group.test_ids is not None
        if scored and test_id != -1 and test_id not in group.test_ids:
            continue
        print(f"\nTest {group.title}...")
        tree = initialize_tree() if group.shared_tree else None
        score = 0
        for stage in group.stages:
            if not all(check(tree) for check in stage.checks):
                break
            score += stage.points
            if stage.test_id is not None and stage.test_id == test_id:
                print("SUCCESS")
                return total
        if scored:
            print(f"   partial_score: {score}/{group.total}")
            total += score
    return total


def _parse_test_id(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the checks; an optional first argument selects a test id."""
    args = list(sys.argv[1:] if argv is None else argv)
    test_id = _parse_test_id(args[0]) if args else -1
    total = run_checks(test_id)
    if not args:
        print(f"\ntotal_score: {total}/{MAX_SCORE}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())