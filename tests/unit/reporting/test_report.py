import io

from rich.console import Console

from benford_engine.analysis.pipeline import analyze_values
from benford_engine.reporting.report import build_bucket_table, render_result, summary_lines
from benford_engine.simulation.synthetic import benford_values


def test_table_has_one_row_per_digit():
    result = analyze_values(benford_values(400, seed=1))
    table = build_bucket_table(result)
    assert table.row_count == 9
    assert len(table.columns) == 6


def test_summary_for_ok_and_insufficient_results():
    ok = summary_lines(analyze_values(benford_values(400, seed=1)))
    assert any("MAD" in line and "Close conformity" in line for line in ok)
    assert any("fails to reject conformity" in line for line in ok)

    short = summary_lines(analyze_values([1, 2, 3]))
    assert "insufficient_data" in short[0]


def test_render_result_to_console():
    buffer = io.StringIO()
    render_result(analyze_values(benford_values(400, seed=1)), Console(file=buffer, width=120))
    output = buffer.getvalue()
    assert "Verdict" in output
    assert "Chi-squared" in output
