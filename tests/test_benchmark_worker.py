import pandas as pd

from benchmark_worker import run_single_benchmark


def test_appends_rows_to_csv(tmp_path):
    src = tmp_path / "sample.txt"
    src.write_bytes(b"abababababab" * 100)
    csv_path = tmp_path / "results.csv"

    row = run_single_benchmark("Sample", str(src), str(csv_path))
    assert row["Match"]
    assert row["Encoded"] < row["Bytes"]
    run_single_benchmark("Sample again", str(src), str(csv_path))

    df = pd.read_csv(csv_path)
    assert list(df["Text"]) == ["Sample", "Sample again"]
    assert df["Match"].all()
    assert (df["Entropy"] - 1.0).abs().max() < 1e-9


def test_missing_file_returns_none(tmp_path):
    assert run_single_benchmark("Missing", str(tmp_path / "nope"), str(tmp_path / "r.csv")) is None
    assert not (tmp_path / "r.csv").exists()
