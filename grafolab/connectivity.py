"""Path queries between named vertices of an undirected graph."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Mapping, Sequence

Graph = dict[str, list[str]]


def build_graph(vertices: Iterable[str], edges: Iterable[tuple[str, str]]) -> Graph:
    """Build an undirected graph with the given vertices and edges."""
    graph: Graph = {vertex: [] for vertex in vertices}
    for first, second in edges:
        graph.setdefault(first, []).append(second)
        graph.setdefault(second, []).append(first)
    return graph


def has_path(graph: Mapping[str, Sequence[str]], root: str, target: str) -> bool:
    """Tell whether ``target`` can be reached from ``root``."""
    if root == target:
        return True
    visited = {root}
    stack = [iter(graph[root])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in graph:
                raise KeyError(neighbour)
            if neighbour == target:
                return True
            if neighbour not in visited:
                visited.add(neighbour)
                stack.append(iter(graph[neighbour]))
                break
        else:
            stack.pop()
    return False


def _take(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"input ended while reading {what}") from None


def _take_count(tokens: Iterator[str], what: str) -> int:
    token = _take(tokens, what)
    try:
        return int(token)
    except ValueError as exc:
        raise ValueError(f"expected a count of {what}, got {token!r}") from exc


def parse_input(text: str) -> tuple[Graph, list[tuple[str, str]]]:
    """Read vertices, edges and queries, each section preceded by its count."""
    tokens = iter(text.split())
    vertices = [_take(tokens, "vertices") for _ in range(_take_count(tokens, "vertices"))]
    edges = [
        (_take(tokens, "edges"), _take(tokens, "edges"))
        for _ in range(_take_count(tokens, "edges"))
    ]
    queries = [
        (_take(tokens, "queries"), _take(tokens, "queries"))
        for _ in range(_take_count(tokens, "queries"))
    ]
    return build_graph(vertices, edges), queries


def run(text: str) -> list[str]:
    """Answer every query as ``true a b`` or ``false a b``."""
    graph, queries = parse_input(text)
    return [
        f"{'true' if has_path(graph, root, target) else 'false'} {root} {target}"
        for root, target in queries
    ]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Answer path queries on an undirected graph.")
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for standard input")
    args = parser.parse_args(argv)
    if args.input == "-":
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    for line in run(text):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())