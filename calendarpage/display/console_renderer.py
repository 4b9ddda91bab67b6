"""Console-based renderer for calendar page previews."""

import logging
from typing import Optional

from ..page.controller import PageView
from ..page.models import CellState, DayCell, MonthCell, QuarterCell, WeekRow
from ..page.mode import DayGridMode, WeekListMode

logger = logging.getLogger(__name__)

DAY_HEADERS = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")


class ConsoleRenderer:
    """Renders a calendar page as plain text for the terminal.

    Disabled cells are wrapped in square brackets, selected cells in asterisks
    and today's cell is suffixed with a dot.
    """

    def __init__(self, width: int = 40, show_week_numbers: bool = False) -> None:
        """Initialize console renderer.

        Args:
            width: Width of the header rule
            show_week_numbers: Prefix week rows with their week number
        """
        self.width = width
        self.show_week_numbers = show_week_numbers

        logger.debug("Console renderer initialized")

    def render_page(self, view: PageView, first_weekday: Optional[int] = None) -> str:
        """Render a page view to a string.

        Args:
            view: Page snapshot from ``CalendarPageController.render``
            first_weekday: Week start (0 = Sunday) used for the day headers

        Returns:
            Formatted string for console display
        """
        lines = ["=" * self.width, view.aria_label.center(self.width).rstrip(), "=" * self.width]

        if view.month_rows:
            lines.extend(self._render_month_rows(view.month_rows))
        elif view.quarter_cells:
            lines.append(self._render_quarter_row(view.quarter_cells))
        elif isinstance(view.mode, (DayGridMode, WeekListMode)):
            lines.extend(self._render_week_rows(view.week_rows, first_weekday))

        if view.selecting_range:
            lines.append("-" * self.width)
            lines.append("Selecting range")

        lines.append("=" * self.width)
        return "\n".join(lines)

    def _format_cell(self, text: str, state: CellState, width: int) -> str:
        if state.disabled:
            text = f"[{text}]"
        elif state.selected or state.range_start or state.range_end:
            text = f"*{text}*"
        elif state.in_range or state.in_selecting_range:
            text = f"~{text}~"
        if state.today:
            text = f"{text}."
        return text.center(width)

    def _render_month_rows(self, rows: tuple[tuple[MonthCell, ...], ...]) -> list[str]:
        cell_width = max(len(cell.content) for row in rows for cell in row) + 4
        return [
            "".join(self._format_cell(cell.content, cell.state, cell_width) for cell in row).rstrip()
            for row in rows
        ]

    def _render_quarter_row(self, cells: tuple[QuarterCell, ...]) -> str:
        return "".join(self._format_cell(cell.content, cell.state, 8) for cell in cells).rstrip()

    def _render_day(self, day: DayCell) -> str:
        text = str(day.date.day)
        if day.outside_month and not day.state.disabled:
            text = f"({day.date.day})"
        return self._format_cell(text, day.state, 6)

    def _render_week_rows(
        self, rows: tuple[WeekRow, ...], first_weekday: Optional[int]
    ) -> list[str]:
        start = first_weekday or 0
        headers = DAY_HEADERS[start:] + DAY_HEADERS[:start]
        prefix_width = 4 if self.show_week_numbers else 0

        lines = [" " * prefix_width + "".join(header.center(6) for header in headers).rstrip()]
        for row in rows:
            prefix = f"{row.week_number:>2}  " if self.show_week_numbers else ""
            marker = " <" if row.selected else ""
            lines.append(prefix + "".join(self._render_day(day) for day in row.days).rstrip() + marker)
        return lines
