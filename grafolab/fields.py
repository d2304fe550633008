"""Split semicolon-separated lines into fields and describe them."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

SEPARATOR_LINE = "------------------------"


def split_fields(line: str) -> list[str]:
    """Split on ``;``; a trailing separator does not start an extra empty field."""
    fields = line.split(";")
    if fields[-1] == "":
        fields.pop()
    return fields


def describe_lines(lines: Iterable[str]) -> list[str]:
    """Describe the fields of every non-empty line, numbering those lines from 1."""
    output: list[str] = []
    number = 0
    for raw in lines:
        line = raw.removesuffix("\n")
        if not line:
            continue
        number += 1
        fields = split_fields(line)
        output.append(f"Linha {number} | {len(fields)} campos: ")
        output.extend(f'  Campo {index}: "{value}"' for index, value in enumerate(fields))
        output.append(SEPARATOR_LINE)
    return output


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show the semicolon-separated fields of each line.")
    parser.add_argument("path", nargs="?", default="dados.txt", help="input file")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            output = describe_lines(handle)
    except OSError:
        print("Erro ao abrir o arquivo.", file=sys.stderr)
        return 1
    for line in output:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())