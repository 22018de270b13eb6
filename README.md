# algokit

A small collection of classic algorithms and data structures written in plain
Python, with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.search` | `find_match` (naive substring search), `binary_search`, `main` |
| `algokit.arith` | `power` (exponentiation by repeated squaring), `main` |
| `algokit.hashing` | `hash_sequence`, `hash_string` (polynomial hashes over rotated input) |
| `algokit.structures` | `ListNode`, `demonstrate_linked_list`, `BoundedQueue`, `QueueOverflowError` |
| `algokit.sorting` | `insertion_sort`, `quicksort` (random pivot), `merge`, `merge_sort` |
| `algokit.partition` | `partition_vectors` (split a sequence around a slice) |
| `algokit.heap` | `PriorityQueue` (binary min-heap) |
| `algokit.graph` | `Graph`, `EdgeNode`, `read_graph` (adjacency lists) |
| `algokit.mst` | `WeightedGraph`, `WeightedEdge`, `SpanningTree`, `prim` |
| `algokit.unionfind` | `UnionFind` (path compression and union by size) |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Searching:

```python
from algokit.search import find_match, binary_search

find_match("lo", "hello")              # 3
find_match("xyz", "hello")             # -1
binary_search([1, 2, 5, 6, 9], 6)      # 3; a missing key raises IndexError
```

Powers, sorting and partitioning:

```python
from algokit.arith import power
from algokit.sorting import insertion_sort, quicksort, merge_sort
from algokit.partition import partition_vectors

power(2, 10)                           # 1024; a negative exponent raises ValueError

data = [7, 3, 5, 2, 9, 1, 4]
insertion_sort(data)                   # data is now [1, 2, 3, 4, 5, 7, 9]

people = [("Ann", 20), ("Bob", 19)]
quicksort(people, lambda a, b: a[1] < b[1])   # sorted by age, in place

values = [38, 27, 43, 3, 9, 82, 10]
merge_sort(values)                     # [3, 9, 10, 27, 38, 43, 82]

partition_vectors([1, 2, 3, 4, 5, 6, 7, 8, 9], 3, 5)
# ([4, 5, 6], [1, 2, 3, 7, 8, 9])
```

`quicksort` takes an optional `rng` object with a `randrange` method, which
makes its pivot choices reproducible. `merge` buffers each run in a
`BoundedQueue` of capacity 1000, so merging a longer run raises
`QueueOverflowError`.

Queues and heaps:

```python
from algokit.structures import BoundedQueue
from algokit.heap import PriorityQueue

q = BoundedQueue(capacity=2)
q.enqueue(1)
q.enqueue(2)
q.format()                             # "1 2"
q.dequeue()                            # 1; an empty queue raises IndexError

pq = PriorityQueue([9, 3, 4, 1, 5, 6, 2])
pq.bubble_down(0)                      # restore heap order from the root
pq.levels()                            # elements grouped 1, 2, 4, ... per level
pq.extract_min()                       # 3; an empty heap raises IndexError
```

Graphs:

```python
import io
from algokit.graph import read_graph

g = read_graph(io.StringIO("3 2\n1 2\n2 3\n"), directed=False)
list(g.neighbours(2))                  # [3, 1], most recently added first
print(g.format())
# 1:  2
# 2:  3 1
# 3:  2
```

The input is whitespace-separated integers: the vertex count, the edge count,
then one `x y` pair per edge. Vertex numbers must lie below 100.

Minimum spanning tree with Prim's algorithm:

```python
from algokit.mst import WeightedGraph, prim

g = WeightedGraph(3, False)
g.insert_edge(1, 2, 4, False)
g.insert_edge(2, 3, 1, False)
g.insert_edge(1, 3, 2, False)
tree = prim(g, 1)
tree.edges                             # [(1, 3), (3, 2)]
tree.weight                            # 3
```

Vertices that cannot be reached from the start vertex are left out of the tree.

Disjoint sets:

```python
from algokit.unionfind import UnionFind

uf = UnionFind(5)
uf.union(1, 2)
uf.same_component(1, 2)                # True
uf.size_of(1)                          # 2
len(uf)                                # 5
```

## Command-line tools

Two interactive commands are installed with the package:

```
algokit-search
```

asks for a text and a pattern and reports where the pattern first occurs.

```
algokit-power
```

asks for a base and an exponent and prints the power.

## Limits

- `Graph` and `read_graph` store no edge weights and hold vertices `0..99`;
  `WeightedGraph` holds at most 100 vertices numbered from 1.
- Graph reading takes a text stream only; there is no command for it, and
  graphs are not written back to any file format.