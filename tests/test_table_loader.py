"""Tests for the TSV table loader.

Covers header handling, label stripping, and every way a table can be
rejected: missing file, empty file, ragged rows, non-numeric fields.
"""

import numpy as np
import pytest
from pathlib import Path

from pairmatrix.errors import (
    EmptyTableError,
    InputNotFoundError,
    PairMatrixError,
    TableFormatError,
    TableParseError,
)
from pairmatrix.ingest import FeatureTable, load_table


def _write_tsv(path: Path, lines) -> Path:
    """Write lines joined by newline, with a trailing newline."""
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def two_row_table(tmp_path):
    return _write_tsv(tmp_path / "two.tsv", [
        "ID\tLabel\tA\tB\tC",
        "x1\tlab1\t1.0\t2.0\t3.0",
        "x2\tlab2\t4.0\t6.0\t8.0",
    ])


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------

class TestLoadTable:

    def test_dimensions(self, two_row_table):
        table = load_table(two_row_table)
        assert table.row == 2
        assert table.col == 3
        assert table.values.shape == (2, 3)

    def test_header_verbatim(self, two_row_table):
        table = load_table(two_row_table)
        assert table.header == ("ID", "Label", "A", "B", "C")
        assert table.feature_names == ("A", "B", "C")
        assert table.col == len(table.header) - 2

    def test_labels_stripped_from_features(self, two_row_table):
        table = load_table(two_row_table)
        assert table.labels == (("x1", "lab1"), ("x2", "lab2"))
        np.testing.assert_array_equal(
            table.values, [[1.0, 2.0, 3.0], [4.0, 6.0, 8.0]]
        )
        assert table.values.dtype == np.float64

    def test_values_read_only(self, two_row_table):
        table = load_table(two_row_table)
        with pytest.raises(ValueError):
            table.values[0, 0] = 99.0

    def test_accepts_str_path(self, two_row_table):
        table = load_table(str(two_row_table))
        assert table.row == 2

    def test_header_only(self, tmp_path):
        path = _write_tsv(tmp_path / "header.tsv", ["ID\tLabel\tA\tB"])
        table = load_table(path)
        assert table.row == 0
        assert table.col == 2
        assert table.values.shape == (0, 2)
        assert table.labels == ()

    def test_blank_lines_skipped(self, tmp_path):
        path = _write_tsv(tmp_path / "blank.tsv", [
            "ID\tLabel\tA",
            "r1\tl\t1.5",
            "",
            "r2\tl\t2.5",
            "",
        ])
        table = load_table(path)
        assert table.row == 2
        np.testing.assert_array_equal(table.values[:, 0], [1.5, 2.5])

    def test_no_trailing_newline(self, tmp_path):
        path = tmp_path / "nonl.tsv"
        path.write_text("ID\tLabel\tA\nr1\tl\t7.25", encoding="utf-8")
        table = load_table(path)
        assert table.values[0, 0] == 7.25

    def test_label_columns_may_be_anything(self, tmp_path):
        path = _write_tsv(tmp_path / "labels.tsv", [
            "ID\tLabel\tA",
            "\"quoted\"\tNA\t1.0",
        ])
        table = load_table(path)
        assert table.labels == (('"quoted"', "NA"),)

    def test_scientific_notation(self, tmp_path):
        path = _write_tsv(tmp_path / "sci.tsv", [
            "ID\tLabel\tA\tB",
            "r1\tl\t1e-3\t-2.5E2",
        ])
        table = load_table(path)
        np.testing.assert_allclose(table.values, [[0.001, -250.0]])

    def test_long_decimals_round_correctly(self, tmp_path):
        texts = ["-938.8200339328929", "0.30000000000000004", "7.0710678118654755"]
        path = _write_tsv(tmp_path / "digits.tsv", [
            "ID\tLabel\tA\tB\tC",
            "r1\tl\t" + "\t".join(texts),
        ])
        table = load_table(path)
        assert table.values[0].tolist() == [float(t) for t in texts]

    def test_reads_back_written_matrix_values_exactly(self, tmp_path):
        np.random.seed(7)
        numbers = np.random.uniform(-1000.0, 1000.0, size=(20, 5))
        lines = ["ID\tLabel\t" + "\t".join(f"f{j}" for j in range(5))]
        for i, row in enumerate(numbers):
            lines.append(f"r{i}\tl\t" + "\t".join(repr(float(v)) for v in row))
        table = load_table(_write_tsv(tmp_path / "repr.tsv", lines))
        np.testing.assert_array_equal(table.values, numbers)

    def test_bundled_sample(self):
        sample = Path(__file__).resolve().parents[1] / "data" / "iris.txt"
        table = load_table(sample)
        assert table.col == 4
        assert table.row == 15
        assert table.feature_names == (
            "SepalLength", "SepalWidth", "PetalLength", "PetalWidth",
        )


# ---------------------------------------------------------------------------
# Rejections
# ---------------------------------------------------------------------------

class TestLoadTableErrors:

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputNotFoundError) as info:
            load_table(tmp_path / "nope.tsv")
        assert isinstance(info.value, FileNotFoundError)
        assert info.value.exit_code == 1
        assert "nope.tsv" in str(info.value)

    def test_directory_is_not_a_table(self, tmp_path):
        with pytest.raises(InputNotFoundError):
            load_table(tmp_path)

    def test_name_too_long(self, tmp_path):
        with pytest.raises(InputNotFoundError):
            load_table(tmp_path / ("x" * 300 + ".tsv"))

    def test_path_through_a_file(self, tmp_path):
        regular = tmp_path / "file.tsv"
        regular.write_text("ID\tLabel\tA\n", encoding="utf-8")
        with pytest.raises(InputNotFoundError) as info:
            load_table(regular / "x")
        assert info.value.exit_code == 1

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.tsv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(EmptyTableError):
            load_table(path)

    def test_header_without_label_columns(self, tmp_path):
        path = _write_tsv(tmp_path / "narrow.tsv", ["ID"])
        with pytest.raises(TableFormatError, match="label columns"):
            load_table(path)

    def test_non_numeric_field(self, tmp_path):
        path = _write_tsv(tmp_path / "bad.tsv", [
            "ID\tLabel\tA\tB",
            "r1\tl\t1.0\t2.0",
            "r2\tl\t3.0\tabc",
        ])
        with pytest.raises(TableParseError) as info:
            load_table(path)
        err = info.value
        assert err.data_row == 2
        assert err.column == "B"
        assert err.text == "abc"
        assert err.label == "r2"
        assert "'abc'" in str(err)
        assert isinstance(err, ValueError)
        assert err.exit_code == 3

    def test_first_bad_field_in_reading_order(self, tmp_path):
        path = _write_tsv(tmp_path / "bad2.tsv", [
            "ID\tLabel\tA\tB",
            "r1\tl\t1.0\toops",
            "r2\tl\tjunk\t2.0",
        ])
        with pytest.raises(TableParseError) as info:
            load_table(path)
        assert info.value.data_row == 1
        assert info.value.column == "B"

    def test_empty_feature_field(self, tmp_path):
        path = _write_tsv(tmp_path / "hole.tsv", [
            "ID\tLabel\tA\tB",
            "r1\tl\t\t2.0",
        ])
        with pytest.raises(TableParseError) as info:
            load_table(path)
        assert info.value.column == "A"

    def test_short_row(self, tmp_path):
        path = _write_tsv(tmp_path / "short.tsv", [
            "ID\tLabel\tA\tB",
            "r1\tl\t1.0",
        ])
        with pytest.raises(TableFormatError, match="data row 1"):
            load_table(path)

    def test_long_row(self, tmp_path):
        path = _write_tsv(tmp_path / "long.tsv", [
            "ID\tLabel\tA",
            "r1\tl\t1.0\t2.0",
        ])
        with pytest.raises(TableFormatError):
            load_table(path)

    def test_all_errors_share_base(self, tmp_path):
        with pytest.raises(PairMatrixError):
            load_table(tmp_path / "missing.tsv")


# ---------------------------------------------------------------------------
# FeatureTable invariants
# ---------------------------------------------------------------------------

class TestFeatureTable:

    def test_width_must_match_header(self):
        with pytest.raises(TableFormatError):
            FeatureTable(
                header=("ID", "Label", "A"),
                labels=(("r", "l"),),
                values=np.zeros((1, 2)),
            )

    def test_label_count_must_match_rows(self):
        with pytest.raises(TableFormatError):
            FeatureTable(
                header=("ID", "Label", "A"),
                labels=(),
                values=np.zeros((1, 1)),
            )
