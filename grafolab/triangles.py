"""Detect triangles in directed edge lists, one case per block."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator, Mapping, Sequence
from itertools import combinations

from grafolab.graph import format_graph

Graph = dict[int, list[int]]

_INTEGER = re.compile(r"[+-]?\d+")


def _integers(text: str) -> Iterator[int]:
    """Yield integers from ``text`` until the first token that is not one."""
    for token in text.split():
        if not _INTEGER.fullmatch(token):
            return
        yield int(token)


def read_cases(text: str) -> list[Graph]:
    """Read cases: a nonzero header, then ``k j`` edges ended by ``0 0``.

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
        cases.append(graph)


def has_triangle(graph: Mapping[int, Sequence[int]]) -> bool:
    """Tell whether some vertex has neighbours ``a`` before ``b`` with an edge ``a -> b``."""
    return any(
        later in graph.get(earlier, ())
        for neighbours in graph.values()
        for earlier, later in combinations(neighbours, 2)
    )


def answers(text: str) -> list[str]:
    """Answer ``NAO`` for every case with a triangle and ``SIM`` otherwise."""
    return ["NAO" if has_triangle(graph) else "SIM" for graph in read_cases(text)]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check each case of an edge list for triangles.")
    parser.add_argument("path", nargs="?", default="test.txt", help="input file")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print(f"Erro: Nao foi possivel abrir o arquivo '{args.path}'", file=sys.stderr)
        return 1
    cases = read_cases(text)
    for graph in cases:
        print("NAO" if has_triangle(graph) else "SIM")
    print(format_graph(cases[-1] if cases else {}), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())