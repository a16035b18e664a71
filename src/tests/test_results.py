"""
===============================================================================
PRIMITIVE TIMING - Results Loading and Plotting Tests
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from primitive_timing.core.csv_writer import CSVWriter
from primitive_timing.performance.results import load_results, plot_results


@pytest.fixture
def access_csv(tmp_path):
    """Small access-style file: size, index, time per access."""
    path = tmp_path / "array-access-times.csv"
    with CSVWriter(path) as csv:
        csv.add_row("array size", "index value", "time per access")
        csv.add_row(10, 3, 40)
        csv.add_row(20, 17, 38)
        csv.add_row(30, 2, 41)
    return str(path)


class TestLoadResults:

    def test_columns_and_values(self, access_csv):
        df = load_results(access_csv)
        assert list(df.columns) == ["array size", "index value", "time per access"]
        assert df["array size"].tolist() == [10, 20, 30]
        assert df["time per access"].tolist() == [40, 38, 41]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_results(str(tmp_path / "absent.csv"))


class TestPlotResults:

    def test_default_png_next_to_csv(self, access_csv):
        png = plot_results(access_csv)
        assert png == os.path.splitext(access_csv)[0] + ".png"
        assert os.path.getsize(png) > 0

    def test_explicit_column_and_output(self, access_csv, tmp_path):
        target = str(tmp_path / "custom.png")
        assert plot_results(access_csv, target, value_column="index value") == target
        assert os.path.exists(target)

    def test_positional_output_path_plots_time_column(self, access_csv, tmp_path):
        target = str(tmp_path / "out.png")
        assert plot_results(access_csv, target) == target
        assert os.path.getsize(target) > 0

    def test_value_column_is_keyword_only(self, access_csv, tmp_path):
        with pytest.raises(TypeError):
            plot_results(access_csv, str(tmp_path / "a.png"), "index value")

    def test_unknown_column(self, access_csv):
        with pytest.raises(ValueError):
            plot_results(access_csv, value_column="nope")

    def test_no_timing_column(self, tmp_path):
        path = tmp_path / "plain.csv"
        with CSVWriter(path) as csv:
            csv.add_row("size", "value")
            csv.add_row(1, 2)
        with pytest.raises(ValueError):
            plot_results(str(path))
