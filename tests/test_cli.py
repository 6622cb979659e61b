import io

import pytest

from zooknn import cli
from zooknn.knn import (
    Animal,
    Metric,
    distance_functions,
    find_accuracy,
    find_k_nearest_neighbors,
    format_animal,
    predict_class,
)


def _zoo():
    return [
        Animal(f"animal{i}", tuple((i >> bit) & 1 for bit in range(16)), i % 7 + 1)
        for i in range(100)
    ]


@pytest.fixture
def zoo_file(tmp_path):
    path = tmp_path / "zoo.txt"
    path.write_text("\n".join(format_animal(a) for a in _zoo()) + "\n")
    return path


def _run(monkeypatch, capsys, argv, keys):
    monkeypatch.setattr("sys.stdin", io.StringIO(keys))
    status = cli.main(argv)
    return status, capsys.readouterr().out


def test_task_before_reading_ends(monkeypatch, capsys, zoo_file):
    status, out = _run(monkeypatch, capsys, [str(zoo_file)], "2\n")
    assert status == 0
    assert "Please choose 1 first, program is ending!" in out
    assert "Hamming" not in out


def test_distance_report(monkeypatch, capsys, zoo_file):
    _, out = _run(monkeypatch, capsys, [str(zoo_file)], "1 2 0")
    result = distance_functions(cli.VECTOR1, cli.VECTOR2)
    expected = (
        f"Hamming Distance: {result.hamming}\n"
        f"Euclidean Distance: {result.euclidean:.2f}\n"
        f"Jaccard Similarity: {result.jaccard:.2f}\n"
    )
    assert expected in out
    assert "Hamming Distance: 8\n" in out


def test_neighbour_report(monkeypatch, capsys, zoo_file):
    _, out = _run(monkeypatch, capsys, [str(zoo_file)], "1\n3\n0\n")
    data = _zoo()
    for metric in Metric:
        neighbours = find_k_nearest_neighbors(data, cli.NEW_SAMPLE, cli.K, metric)
        listed = "".join(f"{i} " for i in neighbours)
        assert f"Nearest neighbors for new sample with {metric.label}: {listed}\n" in out


def test_accuracy_report(monkeypatch, capsys, zoo_file):
    _, out = _run(monkeypatch, capsys, [str(zoo_file)], "1\n5\n0\n")
    data = _zoo()
    for metric in Metric:
        accuracy = find_accuracy(data, metric, cli.TEST_DATA, cli.K)
        assert f"Accuracy for {metric.label}: {accuracy:.6f}\n" in out


def test_missing_file_leaves_data_unread(monkeypatch, capsys, tmp_path):
    status, out = _run(monkeypatch, capsys, [str(tmp_path / "absent.txt")], "1\n2\n")
    assert status == 0
    assert "Error opening file" in out
    assert "Please choose 1 first, program is ending!" in out


def test_menu_is_shown(monkeypatch, capsys, zoo_file):
    _, out = _run(monkeypatch, capsys, [str(zoo_file)], "1\n9\n")
    assert out.count("=== Main Menu ===") == 2
    assert out.rstrip().endswith("Program is ending!")


def test_non_numeric_choice_ends(monkeypatch, capsys, zoo_file):
    status, out = _run(monkeypatch, capsys, [str(zoo_file)], "1\nquit\n2\n")
    assert status == 0
    assert "Program is ending!" in out
    assert "Hamming" not in out


def test_missing_argument(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert cli.main([]) == 2
    assert "usage" in capsys.readouterr().err