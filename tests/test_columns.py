"""Tests for the column model: width allocation and cell rendering."""

import random

import pytest
from rich.text import Span

from depview.formatters.palette import CellStyle, StylePalette
from depview.table.columns import (
    Column,
    StyledCell,
    allocate_widths,
    render_cells,
    render_header,
    render_row,
)
from depview.utils.string_utils import Alignment


def make_column(min_width, max_width, text="x", alignment=Alignment.LEFT, name="c"):
    return Column(name, min_width, max_width, lambda row: StyledCell(text), alignment)


class TestColumn:
    """Tests for Column construction."""

    def test_min_above_max_rejected(self):
        """A column cannot have a minimum larger than its maximum."""
        with pytest.raises(ValueError):
            make_column(5, 4)

    def test_negative_min_rejected(self):
        """Widths are non-negative."""
        with pytest.raises(ValueError):
            make_column(-1, 4)


class TestAllocateWidths:
    """Tests for allocate_widths."""

    def test_slack_fills_left_to_right(self):
        """Slack grows earlier columns first, each up to its maximum."""
        columns = [make_column(2, 5), make_column(3, 3), make_column(1, 10)]
        assert allocate_widths(columns, 20) == [5, 3, 10]
        assert allocate_widths(columns, 10) == [5, 3, 2]

    def test_unconsumed_slack_left_unused(self):
        """The last column is not stretched past its maximum."""
        columns = [make_column(2, 3), make_column(2, 4)]
        assert allocate_widths(columns, 50) == [3, 4]

    def test_exact_minimum_fit(self):
        """When the minimums fit exactly, every column gets its minimum."""
        columns = [make_column(2, 5), make_column(3, 3), make_column(1, 10)]
        assert allocate_widths(columns, 6) == [2, 3, 1]

    def test_narrow_surface_hides_suffix(self):
        """Too narrow: a prefix keeps its minimums, the rest is hidden."""
        columns = [make_column(2, 5), make_column(3, 3), make_column(1, 10)]
        assert allocate_widths(columns, 5) == [2, 3, 0]
        assert allocate_widths(columns, 4) == [2, 0, 0]
        assert allocate_widths(columns, 1) == [0, 0, 0]
        assert allocate_widths(columns, 0) == [0, 0, 0]

    def test_hidden_prefix_stops_at_first_misfit(self):
        """A later narrow column is not shown after a wider one was hidden."""
        columns = [make_column(4, 4), make_column(5, 5), make_column(1, 1)]
        assert allocate_widths(columns, 8) == [4, 0, 0]

    def test_spacing_counts_between_columns(self):
        """Separators are paid by each visible column after the first."""
        columns = [make_column(3, 3), make_column(3, 3), make_column(3, 3)]
        assert allocate_widths(columns, 10, spacing=1) == [3, 3, 0]
        assert allocate_widths(columns, 11, spacing=1) == [3, 3, 3]

    def test_negative_available_treated_as_zero(self):
        """A negative width never produces negative allocations."""
        assert allocate_widths([make_column(1, 2)], -3) == [0]

    def test_no_columns(self):
        """An empty column set allocates nothing."""
        assert allocate_widths([], 80) == []

    def test_bounds_hold_for_random_column_sets(self):
        """Allocations respect bounds and the available width."""
        rng = random.Random(42)
        for _ in range(300):
            columns = []
            for _ in range(rng.randint(1, 8)):
                low = rng.randint(0, 12)
                columns.append(make_column(low, low + rng.randint(0, 20)))
            available = rng.randint(0, 150)
            widths = allocate_widths(columns, available)

            assert sum(widths) <= available
            minimum = sum(c.min_width for c in columns)
            if available >= minimum:
                for column, width in zip(columns, widths):
                    assert column.min_width <= width <= column.max_width
            else:
                cumulative = 0
                prefix = 0
                for column in columns:
                    if cumulative + column.min_width > available:
                        break
                    cumulative += column.min_width
                    prefix += 1
                assert widths[:prefix] == [c.min_width for c in columns[:prefix]]
                assert widths[prefix:] == [0] * (len(columns) - prefix)


class TestRendering:
    """Tests for cell and row rendering."""

    def test_cells_fitted_to_widths(self):
        """Cells are padded or truncated per alignment."""
        columns = [
            make_column(4, 4, "ab", Alignment.LEFT),
            make_column(4, 4, "cd", Alignment.RIGHT),
            make_column(3, 3, "toolong", Alignment.CENTER),
        ]
        cells = render_cells(columns, [4, 4, 3], row=None)
        assert [cell.text for cell in cells] == ["ab  ", "  cd", "too"]

    def test_hidden_columns_not_evaluated(self):
        """Cell functions of hidden columns are never called."""

        def explode(row):
            raise AssertionError("hidden column rendered")

        columns = [make_column(2, 2, "ok"), Column("hidden", 3, 3, explode)]
        cells = render_cells(columns, [2, 0], row=None)
        assert [cell.text for cell in cells] == ["ok"]

    def test_row_joins_cells_with_separator(self):
        """A row is one line of cells separated by a single space."""
        columns = [
            make_column(4, 4, "ab", Alignment.LEFT),
            make_column(4, 4, "cd", Alignment.RIGHT),
        ]
        line = render_row(columns, [4, 4], None, StylePalette.default())
        assert line.plain == "ab     cd"

    def test_row_applies_palette_styles(self):
        """Cell style tags resolve through the palette."""
        palette = StylePalette.default()
        columns = [Column("t", 4, 4, lambda row: StyledCell("high", CellStyle.GOOD))]
        line = render_row(columns, [4], None, palette)
        assert Span(0, 4, palette.good) in line.spans

    def test_cell_receives_row(self):
        """Cell functions are called with the row being rendered."""
        columns = [Column("name", 6, 6, lambda row: StyledCell(row["name"]))]
        line = render_row(columns, [6], {"name": "serde"}, StylePalette.plain())
        assert line.plain == "serde "

    def test_header_skips_hidden_columns(self):
        """Header names are centered and hidden columns left out."""
        columns = [make_column(5, 5, name="ab"), make_column(3, 3, name="cd")]
        header = render_header(columns, [5, 0])
        assert header.plain == " ab  "
