import csv

import pytest

from knapsolve.compare import (
    SUMMARY_FILE,
    FileComparison,
    compare_file,
    main,
    run_directory,
)

SMALL = "3 10\n5 10\n4 40\n6 30\n"
HEADER = "File,BestValue_BnB,Weight_BnB,Time_BnB_ms,BestValue_GA,Weight_GA,Time_GA_ms"


@pytest.fixture
def small_file(tmp_path):
    path = tmp_path / "small.txt"
    path.write_text(SMALL)
    return path


def test_compare_file_finds_optimum(small_file):
    result = compare_file(small_file)
    assert isinstance(result, FileComparison)
    assert result.bnb.best_value == 70
    assert result.bnb.total_weight() == 10
    assert result.ga.best_value == result.bnb.best_value


def test_compare_file_names(small_file):
    result = compare_file(small_file)
    assert result.filename == "small.txt"
    assert result.stem == "small"


def test_compare_file_empty_instance(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("0 10\n")
    assert compare_file(path) is None


def test_compare_file_truncated_raises(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("3 10\n5 10\n")
    with pytest.raises(ValueError):
        compare_file(path)


def test_summary_row_matches_results(small_file):
    result = compare_file(small_file)
    row = result.summary_row()
    assert row[0] == "small.txt"
    assert row[1] == result.bnb.best_value
    assert row[2] == result.bnb.total_weight()
    assert row[3] == result.bnb_time_ms
    assert row[4] == result.ga.best_value
    assert row[5] == result.ga.total_weight()
    assert row[6] == result.ga_time_ms
    assert row[2] <= 10 and row[5] <= 10


def test_detail_rows_consistent(small_file):
    result = compare_file(small_file)
    bnb_row, ga_row = result.detail_rows()
    assert bnb_row[0] == "BnB"
    assert ga_row[0] == "GA"
    assert len(bnb_row) == 4 and len(ga_row) == 4
    assert sum(bnb_row[1:]) == result.bnb.total_weight()
    assert sum(ga_row[1:]) == result.ga.total_weight()
    original_weights = [5, 4, 6]
    for chosen, weight in zip(ga_row[1:], original_weights):
        assert chosen in (0, weight)


def test_run_directory_writes_reports(tmp_path, small_file):
    data = small_file.parent
    (data / "empty.txt").write_text("0 5\n")
    (data / "sub").mkdir()
    summary = tmp_path.parent / (tmp_path.name + "_summary.csv")
    details = tmp_path.parent / (tmp_path.name + "_details")

    results = run_directory(data, summary, details)

    assert [r.filename for r in results] == ["small.txt"]
    lines = summary.read_text().splitlines()
    assert lines[0] == HEADER
    assert len(lines) == 2
    rows = list(csv.reader(lines[1:]))
    assert rows[0][0] == "small.txt"
    assert int(rows[0][1]) == results[0].bnb.best_value

    detail_lines = (details / "small.csv").read_text().splitlines()
    assert len(detail_lines) == 2
    assert detail_lines[0].startswith("BnB,")
    assert detail_lines[1].startswith("GA,")
    assert not (details / "empty.csv").exists()


def test_run_directory_skips_unreadable(tmp_path):
    data = tmp_path / "data"
    data.mkdir()
    (data / "broken.txt").write_text("two 10\n")
    (data / "ok.txt").write_text(SMALL)
    results = run_directory(data, tmp_path / "s.csv", tmp_path / "d")
    assert [r.stem for r in results] == ["ok"]


def test_run_directory_missing_dir(tmp_path):
    with pytest.raises(NotADirectoryError):
        run_directory(tmp_path / "nope", tmp_path / "s.csv", tmp_path / "d")


def test_main_missing_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert not (tmp_path / SUMMARY_FILE).exists()


def test_main_runs_default_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    data = tmp_path / "data"
    data.mkdir()
    (data / "small.txt").write_text(SMALL)
    assert main([]) == 0
    lines = (tmp_path / SUMMARY_FILE).read_text().splitlines()
    assert lines[0] == HEADER
    assert lines[1].startswith("small.txt,")
    assert (tmp_path / "knapsack_individual_results" / "small.csv").is_file()