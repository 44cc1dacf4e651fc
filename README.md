# treelab

A small collection of tree and graph data structures, usable as a library or
from interactive command-line prompts.

## Installation

```
pip install .
```

## Library use

### Binary search tree dictionary — `treelab.bst_dict`

`BSTDictionary` maps keywords to meanings in an unbalanced binary search tree.

```python
from treelab.bst_dict import BSTDictionary

words = BSTDictionary()
words.insert("testWord", "life")   # True
words.insert("test2", "sdfj")      # True
words.insert("test2", "other")     # False: already present
words.update("test2", "val")
words.search("test2")              # 'val'
print(list(words.items()))         # [('test2', 'val'), ('testWord', 'life')]
words.delete("testWord")
```

`search`, `update` and `delete` raise `KeyError` for a missing keyword. The
dictionary also supports `in`, `len()` and iteration over keywords in
ascending order.

### Height-balanced dictionary — `treelab.avl_dict`

`AVLDictionary` keeps keywords in an AVL tree.

```python
from treelab.avl_dict import AVLDictionary

avl = AVLDictionary()
for key in "abcdefg":
    avl.insert(key, key.upper())
list(avl.ascending())     # [('a', 'A'), ('b', 'B'), ...]
list(avl.descending())    # [('g', 'G'), ('f', 'F'), ...]
avl.height()              # 2
avl.is_balanced()         # True
"c" in avl                # True
avl.delete("c")
```

`insert` returns `False` and leaves the entry unchanged if the keyword exists;
`delete` raises `KeyError` for a missing keyword. `height()` counts edges
(`-1` for an empty tree), so a lookup needs at most `height() + 1` key
comparisons.

### Expression trees — `treelab.prefix_tree`

Builds a tree from a prefix expression of single letters and `+ - * /`
(other characters are ignored) and walks it in postorder without recursion.

```python
from treelab.prefix_tree import ExpressionTree, build_from_prefix, iter_postorder

tree = ExpressionTree()
tree.build("+--a*bc/def")
tree.postfix()            # 'abc*-de/-f+'
tree.delete()             # node values in the order they were released

root = build_from_prefix("*ab")
[node.data for node in iter_postorder(root)]   # ['a', 'b', '*']
```

A malformed expression (an operator missing operands, leftover operands, or
no operands at all) raises `ValueError`.

### Near-shortest routes — `treelab.routes`

`RoadMap` is an undirected network of cities numbered `0..n-1`.
`routes(start, end)` lists every simple path whose length is the shortest or
one road longer, in depth-first search order; `min_steps` returns the fewest
roads, or `None` if the destination is unreachable.

```python
from treelab.routes import RoadMap

roads = RoadMap(5)
for u, v in [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (1, 2)]:
    roads.add_road(u, v)
roads.min_steps(0, 4)     # 3
roads.routes(0, 4)
```

City numbers outside the map raise `ValueError`.

### Optimal binary search trees — `treelab.obst`

`build_obst(identifiers, success, failure)` takes one success weight per
identifier and one more failure weight (for the gaps between keys) and
returns an `OptimalBST`.

```python
from treelab.obst import build_obst

obst = build_obst(["A", "B", "C"], [3, 3, 1], [2, 3, 1, 1])
obst.preorder()           # ['B', 'A', 'C']
obst.root_of(0, 3)        # 2
obst.cost, obst.weight
for i, j, cell in obst.cells():
    print(i, j, cell.weight, cell.cost, cell.root)
```

## Command-line tools

| Command           | What it does                                             |
|-------------------|----------------------------------------------------------|
| `treelab-bst`     | Menu-driven keyword dictionary on a binary search tree   |
| `treelab-avl`     | Menu-driven keyword dictionary on an AVL tree            |
| `treelab-prefix`  | Build an expression tree from prefix, print postfix      |
| `treelab-routes`  | Read a road map and list near-shortest routes            |
| `treelab-obst`    | Read identifiers and weights, print the optimal tree     |

Each tool reads whitespace-separated answers from standard input, so it can be
used interactively or fed a prepared input, for example:

```
printf '5 6\n0 1\n0 2\n1 3\n2 3\n3 4\n1 2\n0 4\n' | treelab-routes
```

## Limitations

The dictionaries live in memory only; nothing is saved between runs of the
command-line tools. Keywords and meanings entered at the prompts are single
whitespace-free words.

## Running the tests

```
pip install .[test]
pytest
```