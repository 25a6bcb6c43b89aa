import json

import pandas as pd
import pytest

pytest.importorskip("typer")
from typer.testing import CliRunner

from benford_engine.cli import main as cli_main
from benford_engine.cli.main import app
from benford_engine.exceptions import ConfigValidationError, DataSourceError, InsufficientDataError
from benford_engine.simulation.synthetic import benford_values, uniform_digit_values

runner = CliRunner()


def _write_csv(path, values):
    pd.DataFrame({"amount": values}).to_csv(path, index=False)
    return path


def test_analyze_csv_column_json(tmp_path):
    path = _write_csv(tmp_path / "ledger.csv", benford_values(500, seed=4))
    res = runner.invoke(app, ["analyze", str(path), "--column", "amount", "--json"])
    assert res.exit_code == 0, res.output
    payload = json.loads(res.stdout)
    assert payload["status"] == "ok"
    assert payload["total_count"] == 500
    assert payload["conformity_band"] == "Close conformity"
    assert payload["goodness_of_fit_verdict"] == "fails to reject conformity"


def test_analyze_renders_table_for_nonconforming_data(tmp_path):
    path = _write_csv(tmp_path / "ledger.csv", uniform_digit_values(2_000, seed=8))
    res = runner.invoke(app, ["analyze", str(path), "--column", "amount"])
    assert res.exit_code == 0, res.output
    assert "Nonconformity" in res.stdout
    assert "rejects conformity" in res.stdout


def test_analyze_text_file_two_digit_mode(tmp_path):
    text = " ".join(f"{v:.4f}" for v in benford_values(2_000, "first_two_digit", seed=5))
    path = tmp_path / "report.txt"
    path.write_text(text)
    res = runner.invoke(app, ["analyze", str(path), "--mode", "first_two_digit", "--json"])
    assert res.exit_code == 0, res.output
    payload = json.loads(res.stdout)
    assert payload["mode"] == "first_two_digit"
    assert len(payload["buckets"]) == 90
    assert payload["conformity_band"] is None
    assert payload["degrees_of_freedom"] == 89


def test_insufficient_inline_text_exits_with_code_2():
    res = runner.invoke(app, ["analyze", "Revenue was 1,234,567 in 2023", "--text", "--json"])
    assert res.exit_code == 2
    assert '"insufficient_data"' in res.stdout


def test_output_directory_receives_run_meta(tmp_path):
    path = _write_csv(tmp_path / "ledger.csv", benford_values(300, seed=6))
    out = tmp_path / "runs"
    res = runner.invoke(app, ["analyze", str(path), "--column", "amount", "--json", "--output", str(out)])
    assert res.exit_code == 0, res.output
    saved = json.loads((out / "benford_result.json").read_text())
    assert saved["source"] == str(path)
    assert saved["config"]["mode"] == "first_digit"
    assert saved["result"]["status"] == "ok"


def test_config_file_and_cli_override(tmp_path):
    cfg = tmp_path / "benford.yml"
    cfg.write_text("analysis:\n  minimum_total_count: 5000\n")
    path = _write_csv(tmp_path / "ledger.csv", benford_values(300, seed=6))
    res = runner.invoke(app, ["analyze", str(path), "--column", "amount", "--config", str(cfg), "--json"])
    assert res.exit_code == 2
    res = runner.invoke(
        app, ["analyze", str(path), "--column", "amount", "--config", str(cfg), "--min-count", "100", "--json"]
    )
    assert res.exit_code == 0, res.output


def test_text_and_column_conflict():
    res = runner.invoke(app, ["analyze", "1 2 3", "--text", "--column", "amount"])
    assert res.exit_code != 0
    assert isinstance(res.exception, ConfigValidationError)


@pytest.mark.parametrize("extra", [[], ["--column", "amount"]])
def test_missing_input_file_is_a_data_source_error(tmp_path, extra):
    missing = tmp_path / "missing.csv"
    res = runner.invoke(app, ["analyze", str(missing), *extra])
    assert res.exit_code != 0
    assert isinstance(res.exception, DataSourceError)


def test_main_exits_3_for_missing_input(tmp_path, monkeypatch):
    monkeypatch.setattr(cli_main, "configure_logging", lambda **kwargs: None)
    monkeypatch.setattr("sys.argv", ["benford", "analyze", str(tmp_path / "missing.txt")])
    with pytest.raises(SystemExit) as info:
        cli_main.main()
    assert info.value.code == 3


def test_generate_writes_csv(tmp_path):
    target = tmp_path / "synthetic.csv"
    res = runner.invoke(app, ["generate", "--output", str(target), "--kind", "uniform", "--count", "250", "--seed", "1"])
    assert res.exit_code == 0, res.output
    df = pd.read_csv(target)
    assert list(df.columns) == ["value"]
    assert len(df) == 250


@pytest.mark.parametrize(
    "exc,code",
    [
        (ConfigValidationError("bad"), 1),
        (InsufficientDataError("few"), 2),
        (DataSourceError("missing"), 3),
        (RuntimeError("boom"), 255),
    ],
)
def test_main_maps_exceptions_to_exit_codes(monkeypatch, exc, code):
    def _raise():
        raise exc

    monkeypatch.setattr(cli_main, "configure_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli_main, "app", _raise)
    with pytest.raises(SystemExit) as info:
        cli_main.main()
    assert info.value.code == code
