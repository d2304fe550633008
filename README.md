# grafolab

Small graph tools for the command line, each also usable as a Python
module. A graph is a mapping from a vertex to the list of its neighbours.
No third-party libraries are needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### `grafolab-graph [PATH] [--source N] [--root N] [--target N]`

Reads an undirected edge list (one `u v` pair of integers per line; blank
lines skipped) from `PATH`, `edges.txt` by default. It prints:

- the adjacency list, one `[u] : n1 n2 ` line per vertex;
- `dist(s,v) = d` for every vertex, measured from `--source` (default 0);
  unreachable vertices show `2147483647`;
- a depth-first trace from `--root` (default 5): a
  `do verticie u para v demorou 0` line for each edge examined, then a
  `v 0` line for each vertex in the order its search finished, and finally
  `1` or `0` depending on whether `--target` (default 8) was reached.

### `grafolab-connectivity [INPUT]`

Reads whitespace-separated tokens from `INPUT`, or from standard input when
it is `-` (the default): a count followed by that many vertex names, a count
followed by that many undirected edges (pairs of names), and a count
followed by that many queries (pairs of names). For each query it prints
`true a b` or `false a b`, depending on whether a path joins `a` and `b`.

### `grafolab-triangles [PATH]`

Reads cases from `PATH` (`test.txt` by default). Each case is a nonzero
header number followed by directed edges `k j`, ended by `0 0`; a zero
header ends the input. For each case it prints `NAO` when some vertex has
neighbours `a` and `b` (with `a` listed before `b`) and an edge `a -> b`,
and `SIM` otherwise. The adjacency list of the last case is printed after
the answers.

### `grafolab-bipartite [PATH] [--bipartite-answer {NAO,SIM}] [--no-graph]`

Reads cases in the same layout as `grafolab-triangles`, but with undirected
edges, from `PATH` (`test.txt` by default, `-` for standard input). Each
case is two-coloured breadth first, starting from its first vertex; only
that vertex's component is examined. A two-colourable case prints the word
given by `--bipartite-answer` (default `SIM`), any other case the other
word. The adjacency list of the last case follows unless `--no-graph` is
given.

### `grafolab-bacon [PATH] [--source NAME] [--include-source]`

Reads `actor;film;actor` lines from `PATH` (standard input by default, or
`-`) up to the first empty line. Missing fields count as empty and fields
after the third are ignored; when a pair of actors appears more than once,
the later film is kept. A breadth-first search from `--source` (default
`Kevin Bacon`) then prints, sorted by actor name,

```
O numero de bacon de <actor> é <number> pelo filme <film>
```

where `<film>` links the actor to the co-star through whom the search found
them. With `--include-source`, a line for the source itself (number 0, no
film) is added when it has any co-star.

### `grafolab-fields [PATH]`

Reads `PATH` (`dados.txt` by default) and, for every non-empty line, prints
`Linha N | K campos: `, one `  Campo i: "value"` line per `;`-separated
field, and a line of dashes. A trailing `;` does not add an empty field.

`grafolab-triangles`, `grafolab-bipartite`, `grafolab-bacon` and
`grafolab-fields` print an error message and exit with status 1 when the
input file cannot be opened.

## Library use

```python
from grafolab.graph import read_edges, load_edges, format_graph, bfs_distances, dfs_trace
from grafolab.connectivity import build_graph, has_path, parse_input, run
from grafolab.triangles import has_triangle
from grafolab.bipartite import is_bipartite
from grafolab.bacon import CastGraph, parse_credits, bacon_tree, report_lines
from grafolab.fields import split_fields, describe_lines

graph = read_edges(["0 1", "1 2"])
bfs_distances(graph, 0)        # {0: 0, 1: 1, 2: 2}; unreachable vertices map to None
dfs_trace(graph, 0, 2).found   # True

g = build_graph(["a", "b", "c"], [("a", "b")])
has_path(g, "a", "b")          # True
has_path(g, "a", "c")          # False

run("3 a b c 1 a b 1 a c")     # ["false a c"]

split_fields("x;;y")           # ["x", "", "y"]
```

`triangles.read_cases`, `triangles.answers`, `bipartite.read_cases` and
`bipartite.answers` take the whole input text and return the parsed cases
or the answer words. `CastGraph.add_credit` links two actors through a film
and `CastGraph.film_between` looks the film up in either order.

## What it does not do

The graphs are plain unweighted adjacency lists held in memory: there are
no edge weights, no shortest-path routes (only distances and search trees),
no drawing or export of graphs, and no storage beyond reading the input
files described above.