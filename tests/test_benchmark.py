import pandas as pd
import pytest

from monotone_triang.benchmark import COLUMNS, run_benchmark, summarize


def test_run_benchmark(tmp_path):
    csv = tmp_path / "out" / "bench.csv"
    df = run_benchmark([10, 20], shapes=["convex", "star"], runs=2, csv_path=csv)

    assert list(df.columns) == COLUMNS
    assert len(df) == 2 * 2 * 2
    assert (df["triangles"] == df["n"] - 2).all()
    assert (df.loc[df["shape"] == "convex", "pieces"] == 1).all()
    assert (df["pieces"] == df["diagonals"] + 1).all()
    assert (df["time_ms"] >= 0).all()

    assert pd.read_csv(csv).shape == df.shape


def test_summarize():
    df = run_benchmark([12], shapes=["random", "comb"], runs=3)
    summary = summarize(df)
    assert list(summary.columns) == ["shape", "n", "time_mean", "time_std", "pieces", "triangles"]
    assert len(summary) == 2
    assert sorted(summary["shape"]) == ["comb", "random"]


def test_run_benchmark_needs_a_run():
    with pytest.raises(ValueError):
        run_benchmark([8], shapes=["convex"], runs=0)
