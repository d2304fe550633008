import pytest

from grafolab.fields import describe_lines, main, split_fields


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("a;;b", ["a", "", "b"]),
        ("a;b;", ["a", "b"]),
        ("a;b;;", ["a", "b", ""]),
        (";a", ["", "a"]),
        (";", [""]),
        ("", []),
    ],
)
def test_split_fields(line, expected):
    assert split_fields(line) == expected


@pytest.mark.parametrize("line", ["x", "x;y", ";x;;y", "a b;c d"])
def test_split_fields_round_trip(line):
    assert ";".join(split_fields(line)) == line


def test_describe_lines_skips_empty_lines():
    assert describe_lines(["x;y\n", "\n", "z\n"]) == [
        "Linha 1 | 2 campos: ",
        '  Campo 0: "x"',
        '  Campo 1: "y"',
        "------------------------",
        "Linha 2 | 1 campos: ",
        '  Campo 0: "z"',
        "------------------------",
    ]


def test_describe_lines_field_count_matches():
    lines = ["a;b;c\n", ";\n", "q;\n"]
    output = describe_lines(lines)
    field_lines = [entry for entry in output if entry.startswith("  Campo ")]
    assert len(field_lines) == sum(len(split_fields(line.rstrip("\n"))) for line in lines)
    assert output.count("------------------------") == len(lines)


def test_main_prints_description(tmp_path, capsys):
    path = tmp_path / "dados.txt"
    path.write_text("x;y\n\nz\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == describe_lines(["x;y\n", "\n", "z\n"])


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert capsys.readouterr().err.strip() == "Erro ao abrir o arquivo."