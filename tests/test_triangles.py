from grafolab.triangles import answers, has_triangle, main, read_cases


def test_read_cases_directed_edges():
    assert read_cases("3 1 2 2 3 0 0 0") == [{1: [2], 2: [3]}]


def test_read_cases_multiple_and_stops_at_zero():
    cases = read_cases("2 1 2 0 0 2 4 5 0 0 0 9 9 0 0")
    assert cases == [{1: [2]}, {4: [5]}]


def test_read_cases_keeps_truncated_case():
    assert read_cases("1 7 8 9") == [{7: [8]}]


def test_read_cases_stops_at_non_integer():
    assert read_cases("1 1 2 x 3 0 0") == [{1: [2]}]


def test_read_cases_empty():
    assert read_cases("") == []


def test_has_triangle_found():
    assert has_triangle({1: [2, 3], 2: [3]}) is True


def test_has_triangle_needs_edge_from_earlier_neighbour():
    assert has_triangle({1: [2, 3], 3: [2]}) is False
    assert has_triangle({1: [3, 2], 2: [3]}) is False


def test_has_triangle_none():
    assert has_triangle({1: [2], 2: [3], 3: [4]}) is False


def test_answers():
    text = "3 1 2 1 3 2 3 0 0 2 1 2 2 3 0 0 0"
    assert answers(text) == ["NAO", "SIM"]


def test_answers_length_matches_cases():
    text = "1 1 2 0 0 1 3 4 0 0 1 5 6 0 0 0"
    assert len(answers(text)) == len(read_cases(text))


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Erro" in capsys.readouterr().err


def test_main_prints_answers_and_last_graph(tmp_path, capsys):
    path = tmp_path / "test.txt"
    path.write_text("3\n1 2\n1 3\n2 3\n0 0\n0\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["NAO", "[1] : 2 3 ", "[2] : 3 "]