"""Undirected integer graphs: loading edge lists, BFS distances and a traced DFS."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

Graph = dict[int, list[int]]

# Printed for vertices that the search never reaches.
UNREACHABLE_MARK = 2147483647


def read_edges(lines: Iterable[str]) -> Graph:
    """Build an undirected adjacency list from lines holding ``u v`` pairs.

    Blank lines are skipped; anything after the second number is ignored.
    """
    graph: Graph = {}
    for number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) < 2:
            raise ValueError(f"line {number}: expected two vertices, got {line.strip()!r}")
        try:
            u, v = int(tokens[0]), int(tokens[1])
        except ValueError as exc:
            raise ValueError(f"line {number}: vertices must be integers: {line.strip()!r}") from exc
        graph.setdefault(u, []).append(v)
        graph.setdefault(v, []).append(u)
    return graph


def load_edges(path: str | Path) -> Graph:
    """Read an undirected edge list from a file."""
    with open(path, encoding="utf-8") as handle:
        return read_edges(handle)


def format_graph(graph: Mapping[Hashable, Sequence[Hashable]]) -> str:
    """Render each vertex as ``[u] : n1 n2 `` on its own line."""
    return "".join(
        f"[{vertex}] : " + "".join(f"{neighbour} " for neighbour in neighbours) + "\n"
        for vertex, neighbours in graph.items()
    )


def bfs_distances(graph: Mapping[int, Sequence[int]], source: int) -> dict[int, int | None]:
    """Return the edge count from ``source`` to every vertex; ``None`` if unreachable."""
    if source not in graph:
        raise KeyError(source)
    distances: dict[int, int | None] = dict.fromkeys(graph)
    distances[source] = 0
    queue = deque([source])
    while queue:
        vertex = queue.popleft()
        for neighbour in graph[vertex]:
            if neighbour in graph and distances[neighbour] is None:
                distances[neighbour] = distances[vertex] + 1
                queue.append(neighbour)
    return distances


@dataclass
class DfsTrace:
    """What a depth-first search from one root saw."""

    found: bool
    steps: list[tuple[int, int]] = field(default_factory=list)
    finished: list[int] = field(default_factory=list)


def dfs_trace(graph: Mapping[int, Sequence[int]], root: int, target: int) -> DfsTrace:
    """Search the whole component of ``root``, recording every edge examined.

    A step ``(u, v)`` is recorded once the neighbour ``v`` of ``u`` has been
    dealt with (after its own search, if it was unvisited). ``finished`` lists
    vertices in the order their search completed.
    """
    trace = DfsTrace(found=root == target)
    visited = {root}
    stack = [(root, iter(graph[root]))]
    while stack:
        vertex, neighbours = stack[-1]
        for neighbour in neighbours:
            if neighbour not in graph:
                raise KeyError(neighbour)
            if neighbour not in visited:
                visited.add(neighbour)
                if neighbour == target:
                    trace.found = True
                stack.append((neighbour, iter(graph[neighbour])))
                break
            trace.steps.append((vertex, neighbour))
        else:
            stack.pop()
            trace.finished.append(vertex)
            if stack:
                trace.steps.append((stack[-1][0], vertex))
    return trace


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print an edge list, BFS distances and a DFS trace.")
    parser.add_argument("path", nargs="?", default="edges.txt", help="edge list file")
    parser.add_argument("--source", type=int, default=0, help="BFS source vertex")
    parser.add_argument("--root", type=int, default=5, help="DFS root vertex")
    parser.add_argument("--target", type=int, default=8, help="DFS target vertex")
    args = parser.parse_args(argv)

    graph = load_edges(args.path)
    print("Adjacency list:")
    print(format_graph(graph), end="")
    print("-------------------")
    for vertex, distance in bfs_distances(graph, args.source).items():
        shown = UNREACHABLE_MARK if distance is None else distance
        print(f"dist({args.source},{vertex}) = {shown}")

    trace = dfs_trace(graph, args.root, args.target)
    for vertex, neighbour in trace.steps:
        print(f"do verticie {vertex} para {neighbour} demorou 0")
    for vertex in trace.finished:
        print(f"{vertex} 0")
    print(int(trace.found), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())