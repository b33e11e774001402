"""Tests for polish_notation.batch."""

import math

import pandas as pd
from polish_notation import evaluate, evaluate_many, results_to_frame, save_results


def test_columns_and_order():
    df = evaluate_many(["+ 5 2", "", "- 5 2"])
    assert list(df.columns) == ["expression", "value", "error"]
    assert list(df["expression"]) == ["+ 5 2", "", "- 5 2"]


def test_values_and_errors():
    df = evaluate_many(["+ 5 2", "* + 5 1 - 7", "/ 5 0"])
    assert df.loc[0, "value"] == 7.0
    assert df.loc[0, "error"] is None
    assert math.isnan(df.loc[1, "value"])
    assert df.loc[1, "error"] == "not enough operands"
    assert df.loc[2, "value"] == math.inf


def test_empty_input():
    df = evaluate_many([])
    assert df.empty
    assert list(df.columns) == ["expression", "value", "error"]


def test_save_results(tmp_path):
    path = tmp_path / "results.csv"
    save_results(evaluate_many(["+ 5 2", "5 2"]), path)
    loaded = pd.read_csv(path)
    assert list(loaded.columns) == ["expression", "value", "error"]
    assert loaded.loc[0, "value"] == 7.0
    assert loaded.loc[1, "error"] == "failed calculate"


def test_results_to_frame():
    results = [evaluate("* 5 2"), evaluate("5 2")]
    df = results_to_frame(results)
    assert list(df["expression"]) == ["* 5 2", "5 2"]
    assert df.loc[0, "value"] == 10.0
    assert df.loc[1, "error"] == "failed calculate"
