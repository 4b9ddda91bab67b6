"""Unit tests for grid layouts and page mode selection."""

import pytest

from calendarpage.page.layout import (
    MONTH_LAYOUTS,
    QUARTER_LAYOUT,
    ColumnCount,
    resolve_column_count,
    resolve_month_layout,
)
from calendarpage.page.mode import (
    DayGridMode,
    MonthGridMode,
    QuarterGridMode,
    WeekListMode,
    select_page_mode,
)
from calendarpage.page.models import PageOptions


class TestMonthLayouts:
    """Tests for the fixed month grid tables."""

    def test_three_column_layout(self):
        layout = MONTH_LAYOUTS[ColumnCount.THREE]
        assert layout.rows == ((0, 1, 2), (3, 4, 5), (6, 7, 8), (9, 10, 11))
        assert layout.vertical_offset == 3

    def test_two_and_four_column_layouts(self):
        assert MONTH_LAYOUTS[ColumnCount.TWO].rows[-1] == (10, 11)
        assert len(MONTH_LAYOUTS[ColumnCount.TWO].rows) == 6
        assert MONTH_LAYOUTS[ColumnCount.FOUR].rows == ((0, 1, 2, 3), (4, 5, 6, 7), (8, 9, 10, 11))

    def test_every_layout_covers_all_months_once(self):
        for layout in MONTH_LAYOUTS.values():
            assert sorted(layout.indices) == list(range(12))

    def test_layout_table_is_read_only(self):
        with pytest.raises(TypeError):
            MONTH_LAYOUTS[ColumnCount.TWO] = QUARTER_LAYOUT  # type: ignore[index]

    def test_row_of(self):
        layout = MONTH_LAYOUTS[ColumnCount.FOUR]
        assert layout.row_of(5) == 1
        with pytest.raises(ValueError):
            layout.row_of(12)

    @pytest.mark.parametrize(
        ("four", "two", "expected"),
        [
            (False, False, ColumnCount.THREE),
            (False, True, ColumnCount.TWO),
            (True, False, ColumnCount.FOUR),
            (True, True, ColumnCount.FOUR),
        ],
    )
    def test_resolve_column_count(self, four, two, expected):
        assert resolve_column_count(four, two) is expected

    def test_resolve_month_layout(self):
        assert resolve_month_layout(two_columns=True) is MONTH_LAYOUTS[ColumnCount.TWO]

    def test_quarter_layout(self):
        assert QUARTER_LAYOUT.rows == ((1, 2, 3, 4),)


class TestSelectPageMode:
    """Tests for choosing the page mode from option flags."""

    def test_defaults_to_day_grid(self):
        assert isinstance(select_page_mode(PageOptions()), DayGridMode)

    def test_month_picker_carries_layout(self):
        mode = select_page_mode(
            PageOptions(
                show_month_year_picker=True,
                show_four_column_month_year_picker=True,
                show_full_month_year_picker=True,
            )
        )
        assert isinstance(mode, MonthGridMode)
        assert mode.layout is MONTH_LAYOUTS[ColumnCount.FOUR]
        assert mode.full_month_text is True

    def test_month_picker_wins_over_quarter_and_week(self):
        mode = select_page_mode(
            PageOptions(
                show_month_year_picker=True, show_quarter_year_picker=True, show_week_picker=True
            )
        )
        assert mode.name == "month"

    def test_quarter_picker_wins_over_week(self):
        mode = select_page_mode(PageOptions(show_quarter_year_picker=True, show_week_picker=True))
        assert isinstance(mode, QuarterGridMode)
        assert mode.layout is QUARTER_LAYOUT

    def test_week_picker(self):
        assert isinstance(select_page_mode(PageOptions(show_week_picker=True)), WeekListMode)
