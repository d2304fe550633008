"""Bacon numbers over a co-star graph built from ``actor;film;actor`` lines."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

DEFAULT_SOURCE = "Kevin Bacon"


def _pair(first: str, second: str) -> tuple[str, str]:
    return (min(first, second), max(first, second))


@dataclass
class CastGraph:
    """Undirected co-star graph with the film that links each pair."""

    adjacency: dict[str, list[str]] = field(default_factory=dict)
    films: dict[tuple[str, str], str] = field(default_factory=dict)

    def add_credit(self, actor: str, film: str, other: str) -> None:
        """Link two actors through a film; a later film replaces an earlier one."""
        self.adjacency.setdefault(actor, []).append(other)
        self.adjacency.setdefault(other, []).append(actor)
        self.films[_pair(actor, other)] = film

    def film_between(self, first: str, second: str) -> str:
        """Return the film recorded for a pair of actors, in either order."""
        return self.films[_pair(first, second)]


def parse_credits(lines: Iterable[str]) -> CastGraph:
    """Read ``actor;film;actor`` lines up to the first empty one.

    Missing fields are empty strings and fields after the third are ignored.
    """
    graph = CastGraph()
    for raw in lines:
        line = raw.removesuffix("\n")
        if not line:
            break
        parts = line.split(";")[:3]
        parts += [""] * (3 - len(parts))
        graph.add_credit(*parts)
    return graph


def bacon_tree(graph: CastGraph, source: str = DEFAULT_SOURCE) -> dict[str, tuple[str, int]]:
    """Map every actor reached from ``source`` to the co-star it was found through and its number.

    Actors appear in breadth-first order; ``source`` itself is not included.
    """
    if source not in graph.adjacency:
        raise KeyError(source)
    numbers = {source: 0}
    tree: dict[str, tuple[str, int]] = {}
    queue = deque([source])
    while queue:
        actor = queue.popleft()
        for costar in graph.adjacency[actor]:
            if costar not in numbers:
                numbers[costar] = numbers[actor] + 1
                tree[costar] = (actor, numbers[costar])
                queue.append(costar)
    return tree


def _report(graph: CastGraph, source: str, include_source: bool) -> list[str]:
    tree = bacon_tree(graph, source)
    entries = [
        (actor, number, graph.film_between(actor, parent))
        for actor, (parent, number) in tree.items()
    ]
    if include_source and any(parent == source for parent, _ in tree.values()):
        entries.append((source, 0, ""))
    entries.sort(key=lambda entry: entry[0])
    return [
        f"O numero de bacon de {actor} é {number} pelo filme {film}"
        for actor, number, film in entries
    ]


def report_lines(graph: CastGraph, source: str = DEFAULT_SOURCE) -> list[str]:
    """One line per reached actor, sorted by name, with number and linking film."""
    return _report(graph, source, include_source=False)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print Bacon numbers from actor;film;actor lines.")
    parser.add_argument("path", nargs="?", default="-", help="input file, '-' for standard input")
    parser.add_argument("--source", default=DEFAULT_SOURCE, help="actor whose number is zero")
    parser.add_argument("--include-source", action="store_true", help="also print the source's own line")
    args = parser.parse_args(argv)

    if args.path == "-":
        graph = parse_credits(sys.stdin)
    else:
        try:
            with open(args.path, encoding="utf-8") as handle:
                graph = parse_credits(handle)
        except OSError:
            print(f"Erro: Nao foi possivel abrir o arquivo '{args.path}'", file=sys.stderr)
            return 1

    for line in _report(graph, args.source, args.include_source):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())