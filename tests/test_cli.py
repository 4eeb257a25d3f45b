import pytest

from max_spacing.__main__ import main
from max_spacing.pipeline import ClusteringConfig
from max_spacing.runner import cluster_file


@pytest.fixture
def path_graph(tmp_path):
    path = tmp_path / "clustering.txt"
    path.write_text("4\n1 2 1\n2 3 2\n3 4 3\n1 4 10\n")
    return path


def test_cluster_file(path_graph):
    result = cluster_file(path_graph, ClusteringConfig(k=2, use_tqdm=False))
    assert result.max_distance == 2
    assert result.stats.declared_vertices == 4


def test_main_prints_single_integer(path_graph, capsys):
    assert main([str(path_graph), "2", "--disable-tqdm"]) == 0
    assert capsys.readouterr().out == "2\n"


def test_main_defaults_to_three_clusters(path_graph, capsys):
    assert main([str(path_graph), "--disable-tqdm"]) == 0
    assert capsys.readouterr().out == "1\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt"), "--disable-tqdm"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("ERROR: Input file not found")


def test_main_malformed_line(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("3\n1 2 3\n2 three 4\n")
    assert main([str(path), "--disable-tqdm"]) == 1
    assert "not an integer" in capsys.readouterr().err


def test_main_exhausted_edges(tmp_path, capsys):
    path = tmp_path / "split.txt"
    path.write_text("4\n1 2 1\n3 4 1\n")
    assert main([str(path), "1", "--disable-tqdm"]) == 1
    assert "ran out of edges" in capsys.readouterr().err


def test_main_rejects_zero_clusters(path_graph, capsys):
    assert main([str(path_graph), "0", "--disable-tqdm"]) == 1
    assert "Invalid cluster count" in capsys.readouterr().err


def test_main_rejects_invalid_utf8(tmp_path, capsys):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"2\n1 2 \xff\xfe\n")
    assert main([str(path), "1", "--disable-tqdm"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "is not valid UTF-8 text" in captured.err


def test_main_rejects_out_of_range_cost(tmp_path, capsys):
    path = tmp_path / "huge.txt"
    path.write_text("2\n1 2 99999999999999999999\n")
    assert main([str(path), "1", "--disable-tqdm"]) == 1
    assert "out of range" in capsys.readouterr().err
