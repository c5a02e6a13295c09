"""Unit tests for reading sample tables from data files."""

import pytest
import numpy as np
import pandas as pd

from pyinterplib.parsing.io.data_handler import load_table_data


def _config(path, x_column="T", y_column="cp"):
    return {"file_path": str(path), "x_column": x_column, "y_column": y_column}


class TestLoadTableData:
    """Test cases for load_table_data."""
    def test_csv_by_name(self, tmp_path):
        path = tmp_path / "heat_capacity.csv"
        path.write_text("T,cp,rho\n300,450.0,7900\n400,480.5,7880\n500,500.0,7850\n")
        x, y = load_table_data(_config(path))
        np.testing.assert_array_equal(x, [300.0, 400.0, 500.0])
        np.testing.assert_array_equal(y, [450.0, 480.5, 500.0])

    def test_txt_by_index_without_header(self, tmp_path):
        path = tmp_path / "columns.txt"
        path.write_text("0.0  1.0  5.0\n1.0  2.0  6.0\n2.0  4.0  7.0\n")
        x, y = load_table_data(_config(path, 0, 2), header=False)
        np.testing.assert_array_equal(x, [0.0, 1.0, 2.0])
        np.testing.assert_array_equal(y, [5.0, 6.0, 7.0])

    def test_xlsx(self, tmp_path):
        path = tmp_path / "sheet.xlsx"
        pd.DataFrame({"T": [1.0, 2.0, 3.0], "cp": [10.0, 20.0, 30.0]}).to_excel(path, index=False)
        x, y = load_table_data(_config(path))
        np.testing.assert_array_equal(y, [10.0, 20.0, 30.0])

    def test_sorted_by_x(self, tmp_path):
        path = tmp_path / "unsorted.csv"
        path.write_text("T,cp\n3,30\n1,10\n2,20\n")
        x, y = load_table_data(_config(path))
        np.testing.assert_array_equal(x, [1.0, 2.0, 3.0])
        np.testing.assert_array_equal(y, [10.0, 20.0, 30.0])

    def test_duplicate_x_keeps_first(self, tmp_path, caplog):
        path = tmp_path / "repeated.csv"
        path.write_text("T,cp\n1,10\n2,20\n2,25\n3,30\n")
        x, y = load_table_data(_config(path))
        np.testing.assert_array_equal(x, [1.0, 2.0, 3.0])
        np.testing.assert_array_equal(y, [10.0, 20.0, 30.0])
        assert "duplicate x entries" in caplog.text

    def test_missing_values_dropped(self, tmp_path):
        path = tmp_path / "gaps.csv"
        path.write_text("T,cp\n1,10\n2,NaN\n3,30\n4,40\n")
        x, y = load_table_data(_config(path))
        np.testing.assert_array_equal(x, [1.0, 3.0, 4.0])

    def test_too_many_missing_values(self, tmp_path):
        path = tmp_path / "mostly_empty.csv"
        path.write_text("T,cp\n1,10\n2,NaN\n3,n/a\n4,\n")
        with pytest.raises(ValueError, match="Too many missing values"):
            load_table_data(_config(path))

    def test_unknown_column(self, tmp_path):
        path = tmp_path / "named.csv"
        path.write_text("T,k\n1,10\n2,20\n")
        with pytest.raises(ValueError, match="y column 'cp' not found.*Available columns: T, k"):
            load_table_data(_config(path))

    def test_column_index_out_of_bounds(self, tmp_path):
        path = tmp_path / "narrow.csv"
        path.write_text("T,cp\n1,10\n2,20\n")
        with pytest.raises(ValueError, match="out of bounds"):
            load_table_data(_config(path, 0, 5))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_table_data(_config(tmp_path / "absent.csv"))

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "table.json"
        path.write_text("{}")
        with pytest.raises(ValueError, match="Unsupported file type"):
            load_table_data(_config(path))

    def test_missing_config_keys(self):
        with pytest.raises(ValueError, match="Missing required configuration keys"):
            load_table_data({"file_path": "table.csv"})

    def test_too_few_rows(self, tmp_path):
        path = tmp_path / "single.csv"
        path.write_text("T,cp\n1,10\n")
        with pytest.raises(ValueError, match="Insufficient valid data points"):
            load_table_data(_config(path))
