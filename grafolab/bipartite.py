"""Two-colouring checks for undirected integer graphs, one case per block."""

from __future__ import annotations

import argparse
import re
import sys
from collections import deque
from collections.abc import Iterator, Mapping, Sequence

from grafolab.graph import format_graph

Graph = dict[int, list[int]]

_INTEGER = re.compile(r"[+-]?\d+")
_OPPOSITE = {"SIM": "NAO", "NAO": "SIM"}


def _integers(text: str) -> Iterator[int]:
    """Yield integers from ``text`` until the first token that is not one."""
    for token in text.split():
        if not _INTEGER.fullmatch(token):
            return
        yield int(token)


def read_cases(text: str) -> list[Graph]:
    """Read cases: a nonzero header, then undirected ``k j`` edges ended by ``0 0``.

    Reading stops at a zero header, at the end of input or at a token that is
    not an integer; a case cut short that way is still kept.
    """
    numbers = _integers(text)
    cases: list[Graph] = []
    while True:
        header = next(numbers, None)
        if header is None or header == 0:
            return cases
        graph: Graph = {}
        while True:
            first = next(numbers, None)
            second = next(numbers, None)
            if first is None or second is None or (first == 0 and second == 0):
                break
            graph.setdefault(first, []).append(second)
            graph.setdefault(second, []).append(first)
        cases.append(graph)


def is_bipartite(graph: Mapping[int, Sequence[int]], start: int) -> bool:
    """Two-colour the component of ``start`` breadth first.

    Only the component that holds ``start`` is examined.
    """
    if start not in graph:
        raise KeyError(start)
    side = {start: 0}
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        for neighbour in graph[vertex]:
            if neighbour not in graph:
                raise KeyError(neighbour)
            if neighbour not in side:
                side[neighbour] = 1 - side[vertex]
                queue.append(neighbour)
            elif side[neighbour] == side[vertex]:
                return False
    return True


def _first_component_bipartite(graph: Mapping[int, Sequence[int]]) -> bool:
    if not graph:
        return True
    return is_bipartite(graph, next(iter(graph)))


def _answer(graph: Mapping[int, Sequence[int]], bipartite_answer: str) -> str:
    if bipartite_answer not in _OPPOSITE:
        raise ValueError(f"answer must be one of {sorted(_OPPOSITE)}, got {bipartite_answer!r}")
    if _first_component_bipartite(graph):
        return bipartite_answer
    return _OPPOSITE[bipartite_answer]


def answers(text: str, bipartite_answer: str = "SIM") -> list[str]:
    """Answer each case with ``bipartite_answer`` when two-colourable, the other word otherwise."""
    if bipartite_answer not in _OPPOSITE:
        raise ValueError(f"answer must be one of {sorted(_OPPOSITE)}, got {bipartite_answer!r}")
    return [_answer(graph, bipartite_answer) for graph in read_cases(text)]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check each case of an edge list for a two-colouring.")
    parser.add_argument("path", nargs="?", default="test.txt", help="input file, '-' for standard input")
    parser.add_argument(
        "--bipartite-answer",
        choices=sorted(_OPPOSITE),
        default="SIM",
        help="word printed for a two-colourable case",
    )
    parser.add_argument("--no-graph", action="store_true", help="do not print the last case's graph")
    args = parser.parse_args(argv)

    if args.path == "-":
        text = sys.stdin.read()
    else:
        try:
            with open(args.path, encoding="utf-8") as handle:
                text = handle.read()
        except OSError:
            print(f"Erro: Nao foi possivel abrir o arquivo '{args.path}'", file=sys.stderr)
            return 1

    cases = read_cases(text)
    for graph in cases:
        print(_answer(graph, args.bipartite_answer))
    if not args.no_graph:
        print(format_graph(cases[-1] if cases else {}), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())