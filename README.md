# bstmap

An ordered map kept in a plain binary search tree. The tree is not
rebalanced. Keys are ordered by a comparison function that you supply,
`lower_than(a, b)`, which returns a true value when `a` sorts before `b`.
Two keys count as equal when neither one is lower than the other.

The map keeps a cursor, `current`, on the node it touched last. Searching,
inserting, `first`, `next` and `upper_bound` all move that cursor, so you
can step through the keys in order from any position.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from bstmap.treemap import TreeMap

tree = TreeMap(lambda a, b: a < b)
for word in ["saco", "cese", "case", "cosa"]:
    tree.insert(word, word.upper())

pair = tree.search("cosa")          # Pair with key "cosa", or None
print(pair.value)                   # COSA

pair = tree.upper_bound("cat")      # smallest key that is not lower than "cat"
print(pair.key)                     # cese

tree.erase("cese")

pair = tree.first()                 # smallest key, None for an empty map
while pair is not None:
    print(pair.key, pair.value)
    pair = tree.next()              # next key in order, None at the end

for pair in tree:                   # the same walk, as an iterator
    print(pair.key)
```

- `TreeMap(lower_than)` starts empty; its `root`, `current` and
  `lower_than` attributes are plain attributes.
- `insert(key, value)` adds an entry and leaves the cursor on it. Inserting
  a key that is already present leaves the map unchanged.
- `search(key)` returns the `Pair` (with `key` and `value`) or `None`; the
  cursor is left on the found node, or on the last node visited.
- `upper_bound(key)` returns the pair with the smallest key that is not
  lower than `key`, or `None` if every key is lower.
- `erase(key)` removes the entry; erasing an absent key does nothing.
- `is_equal(key1, key2)` applies the map's notion of key equality.
- `minimum(node)` returns the leftmost `TreeNode` under a given node, and
  `TreeMap.remove_node(node)` unlinks one node while keeping the order of
  the rest.

## Commands

`bstmap-demo` (or `python -m bstmap.demo`) inserts a fixed list of nine
four-letter words and prints them in sorted order, one per line:

```
bstmap-demo
```

`bstmap-grader` (or `python -m bstmap.grader`) runs groups of checks
against the tree map on a small fixed tree, printing `[OK]`, `[FAILED]` or
`[ INFO ]` lines, a partial score per group and a total out of 70:

```
bstmap-grader
bstmap-grader 7
```

With a test id (0 to 11) only the group holding that id runs, together with
the unscored minimum check, and no total is printed. The checks in that
group run up to the given id, and `SUCCESS` is printed once they all pass.