import pytest

from grafolab.graph import (
    UNREACHABLE_MARK,
    bfs_distances,
    dfs_trace,
    format_graph,
    load_edges,
    main,
    read_edges,
)

EDGES = ["0 1", "1 2", "2 3", "1 3", "5 6", "6 8", "8 5"]


def test_read_edges_is_symmetric():
    graph = read_edges(EDGES)
    for line in EDGES:
        u, v = map(int, line.split())
        assert v in graph[u]
        assert u in graph[v]


def test_read_edges_keeps_insertion_order():
    assert read_edges(["1 2", "2 3"]) == {1: [2], 2: [1, 3], 3: [2]}


def test_read_edges_skips_blank_lines():
    assert read_edges(["1 2", "", "   "]) == read_edges(["1 2"])


@pytest.mark.parametrize("line", ["7", "a b", "1 x"])
def test_read_edges_rejects_malformed(line):
    with pytest.raises(ValueError):
        read_edges([line])


def test_load_edges_matches_read_edges(tmp_path):
    path = tmp_path / "edges.txt"
    path.write_text("\n".join(EDGES) + "\n", encoding="utf-8")
    assert load_edges(path) == read_edges(EDGES)


def test_load_edges_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_edges(tmp_path / "absent.txt")


def test_format_graph_layout():
    assert format_graph({1: [2, 3], 4: []}) == "[1] : 2 3 \n[4] : \n"


def test_bfs_source_is_zero_and_edges_differ_by_at_most_one():
    graph = read_edges(EDGES)
    distances = bfs_distances(graph, 0)
    assert distances[0] == 0
    for vertex, neighbours in graph.items():
        for neighbour in neighbours:
            if distances[vertex] is not None:
                assert abs(distances[vertex] - distances[neighbour]) <= 1


def test_bfs_unreachable_vertices_are_none():
    graph = read_edges(EDGES)
    distances = bfs_distances(graph, 0)
    assert {v for v, d in distances.items() if d is None} == {5, 6, 8}
    assert set(distances) == set(graph)


def test_bfs_chain_distances_match_positions():
    graph = read_edges([f"{i} {i + 1}" for i in range(10)])
    distances = bfs_distances(graph, 0)
    assert all(distances[i] == i for i in range(11))


def test_bfs_missing_source():
    with pytest.raises(KeyError):
        bfs_distances(read_edges(EDGES), 42)


def test_dfs_finds_target_in_component():
    graph = read_edges(EDGES)
    assert dfs_trace(graph, 5, 8).found is True
    assert dfs_trace(graph, 5, 0).found is False


def test_dfs_root_equal_target():
    assert dfs_trace(read_edges(EDGES), 2, 2).found is True


def test_dfs_steps_cover_every_adjacency_of_component():
    graph = read_edges(EDGES)
    trace = dfs_trace(graph, 0, 99)
    component = {0, 1, 2, 3}
    assert set(trace.finished) == component
    assert trace.finished[-1] == 0
    assert len(trace.steps) == sum(len(graph[v]) for v in component)
    for u, v in trace.steps:
        assert v in graph[u]


def test_dfs_deep_chain():
    graph = read_edges([f"{i} {i + 1}" for i in range(5000)])
    trace = dfs_trace(graph, 0, 5000)
    assert trace.found is True
    assert trace.finished[0] == 5000


def test_dfs_missing_root():
    with pytest.raises(KeyError):
        dfs_trace(read_edges(EDGES), 77, 0)


def test_main_prints_report(tmp_path, capsys):
    path = tmp_path / "edges.txt"
    path.write_text("\n".join(EDGES) + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    lines = out.split("\n")
    assert lines[0] == "Adjacency list:"
    assert "-------------------" in lines
    assert f"dist(0,5) = {UNREACHABLE_MARK}" in lines
    assert out.endswith("1")