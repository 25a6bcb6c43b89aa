import math

import pytest

from benford_engine.data.loader import load_csv_column, load_text
from benford_engine.exceptions import DataSourceError, SchemaError


def test_load_csv_column_handles_separators_and_blanks(tmp_path):
    path = tmp_path / "ledger.csv"
    path.write_text('id,amount\n1,"1,234"\n2,\n3,abc\n4,56.5\n5,-7\n')
    values = load_csv_column(path, "amount")
    assert values[0] == 1234.0
    assert math.isnan(values[1]) and math.isnan(values[2])
    assert values[3:] == [56.5, -7.0]


def test_missing_column(tmp_path):
    path = tmp_path / "ledger.csv"
    path.write_text("id,amount\n1,2\n")
    with pytest.raises(SchemaError):
        load_csv_column(path, "total")


def test_missing_files(tmp_path):
    with pytest.raises(DataSourceError):
        load_csv_column(tmp_path / "absent.csv", "amount")
    with pytest.raises(DataSourceError):
        load_text(tmp_path / "absent.txt")


def test_load_text(tmp_path):
    path = tmp_path / "report.txt"
    path.write_text("Revenue 1,234 and costs 567")
    assert load_text(path) == "Revenue 1,234 and costs 567"
