"""Tests for batch conversion, run metrics and the command line entry point."""

import pandas as pd
import pytest

import main
from config.config import BATCH_CONFIG, validate_config
from converter import convert_frame, load_expressions, save_results
from utils.metrics import (
    error_kind_counts, max_nesting_depth, success_rate, summarize_batch, token_count_stats
)


@pytest.fixture
def frame():
    return pd.DataFrame({"expression": ["a+b*c", "(a+b", "", "x-y-z"]})


def test_convert_frame_adds_result_and_error_columns(frame):
    converted = convert_frame(frame, kind="infix-to-postfix")
    assert list(converted["result"][[0, 2, 3]]) == ["a b c * +", "", "x y - z -"]
    assert converted["error"][1] == "MismatchedParenUnclosed"
    assert converted["error"][[0, 2, 3]].isna().all()
    assert "Unclosed" in converted["error_message"][1]
    # 原数据集不被修改
    assert "result" not in frame.columns


def test_kind_column_overrides_default():
    dataset = pd.DataFrame({
        "expression": ["a b +", "+ a b", "a+b"],
        "kind": ["postfix-to-prefix", "prefix-to-postfix", ""],
    })
    converted = convert_frame(dataset, kind="infix-to-prefix")
    assert list(converted["result"]) == ["+ a b", "a b +", "+ a b"]


def test_unknown_kind_in_frame_raises():
    dataset = pd.DataFrame({"expression": ["a+b"], "kind": ["sideways"]})
    with pytest.raises(ValueError):
        convert_frame(dataset)


def test_missing_column_raises(frame):
    with pytest.raises(ValueError):
        convert_frame(frame, column="formula")


def test_nan_cell_is_blank_input():
    dataset = pd.DataFrame({"expression": ["a+b", None]})
    converted = convert_frame(dataset)
    assert converted["result"][1] == ""
    assert pd.isna(converted["error"][1])


def test_load_text_file_drops_blank_lines(tmp_path):
    path = tmp_path / "expressions.txt"
    path.write_text("a+b\n\n  (a+b)*c  \n", encoding="utf-8")
    dataset = load_expressions(str(path))
    assert list(dataset["expression"]) == ["a+b", "(a+b)*c"]


def test_load_csv_and_save_round_trip(tmp_path):
    source = tmp_path / "in.csv"
    pd.DataFrame({"formula": ["a*b", "a b"]}).to_csv(source, index=False)
    dataset = load_expressions(str(source), column="formula")
    converted = convert_frame(dataset, kind="infix-to-prefix", column="formula")
    out = save_results(converted, str(tmp_path / "out.csv"))
    saved = pd.read_csv(out)
    assert saved["result"][0] == "* a b"
    # "a b" 是两个相邻操作数，调度场不校验操作数个数
    assert saved["result"][1] == "a b"


def test_load_csv_missing_column(tmp_path):
    source = tmp_path / "in.csv"
    pd.DataFrame({"other": ["a"]}).to_csv(source, index=False)
    with pytest.raises(ValueError):
        load_expressions(str(source))


def test_metrics(frame):
    converted = convert_frame(frame)
    assert success_rate(converted["error"]) == 0.75
    assert error_kind_counts(converted["error"]) == {"MismatchedParenUnclosed": 1}
    assert token_count_stats(converted["result"]) == {"mean": 5.0, "max": 5}

    summary = summarize_batch(converted)
    assert summary["total"] == 4
    assert summary["max_input_depth"] == 1


def test_metrics_on_empty_input():
    assert success_rate([]) == 0.0
    assert token_count_stats([]) == {"mean": 0.0, "max": 0}


@pytest.mark.parametrize("text,depth", [
    ("", 0), ("a+b", 0), ("(a+b)", 1), ("((a + b) * (c - (d / e)))", 3), (")(", 0),
])
def test_max_nesting_depth(text, depth):
    assert max_nesting_depth(text) == depth


def test_validate_config():
    assert validate_config()
    assert BATCH_CONFIG["result_column"] == "result"


def test_cli_single_expression(capsys):
    args = main.build_parser().parse_args(["--kind", "infix-to-prefix", "--expression", "a+b*c"])
    assert main.main(args) == 0
    assert capsys.readouterr().out.strip() == "+ a * b c"


def test_cli_single_expression_error(capsys):
    args = main.build_parser().parse_args(["--expression", "a+b)"])
    assert main.main(args) == 1
    assert capsys.readouterr().out == ""


def test_cli_batch(tmp_path, capsys):
    source = tmp_path / "expressions.txt"
    source.write_text("a+b\n(a\n", encoding="utf-8")
    output = tmp_path / "out.csv"
    args = main.build_parser().parse_args([
        "--input_path", str(source), "--save_results", "--output_path", str(output)
    ])
    assert main.main(args) == 0
    saved = pd.read_csv(output)
    assert saved["result"][0] == "a b +"
    assert saved["error"][1] == "MismatchedParenUnclosed"


def test_cli_requires_input():
    args = main.build_parser().parse_args([])
    assert main.main(args) == 2


def test_summary_reads_custom_expression_column():
    dataset = pd.DataFrame({"formula": ["((a+b))*c", "a"]})
    converted = convert_frame(dataset, column="formula")
    summary = summarize_batch(converted, column="formula")
    assert summary["max_input_depth"] == 2
