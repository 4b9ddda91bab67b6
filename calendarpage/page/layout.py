"""Fixed grid layouts for the month and quarter pickers."""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

logger = logging.getLogger(__name__)

MONTH_COUNT = 12
QUARTER_COUNT = 4


class ColumnCount(Enum):
    """Number of columns in the month picker grid."""

    TWO = 2
    THREE = 3
    FOUR = 4


@dataclass(frozen=True)
class GridLayout:
    """Rows of logical indices plus the row-to-row index delta.

    Attributes:
        rows: Indices in display order, one tuple per row
        vertical_offset: Index difference between vertically adjacent cells
    """

    rows: tuple[tuple[int, ...], ...]
    vertical_offset: int

    @property
    def first_row(self) -> tuple[int, ...]:
        return self.rows[0]

    @property
    def last_row(self) -> tuple[int, ...]:
        return self.rows[-1]

    @property
    def indices(self) -> tuple[int, ...]:
        """All indices in display order."""
        return tuple(index for row in self.rows for index in row)

    def row_of(self, index: int) -> int:
        """Return the row number containing ``index``.

        Raises:
            ValueError: If the index is not part of the layout
        """
        for row_number, row in enumerate(self.rows):
            if index in row:
                return row_number
        raise ValueError(f"Index {index} is not part of this layout")


def _month_layout(columns: int) -> GridLayout:
    rows = tuple(
        tuple(range(start, start + columns)) for start in range(0, MONTH_COUNT, columns)
    )
    return GridLayout(rows=rows, vertical_offset=columns)


MONTH_LAYOUTS = MappingProxyType(
    {column_count: _month_layout(column_count.value) for column_count in ColumnCount}
)

QUARTER_LAYOUT = GridLayout(rows=((1, 2, 3, 4),), vertical_offset=QUARTER_COUNT)


def resolve_column_count(four_columns: bool = False, two_columns: bool = False) -> ColumnCount:
    """Pick the month grid column count; four columns win over two, three is the default."""
    if four_columns:
        return ColumnCount.FOUR
    if two_columns:
        return ColumnCount.TWO
    return ColumnCount.THREE


def resolve_month_layout(four_columns: bool = False, two_columns: bool = False) -> GridLayout:
    """Look up the month grid layout for the given column flags."""
    column_count = resolve_column_count(four_columns, two_columns)
    logger.debug(f"Resolved month grid layout: {column_count.value} columns")
    return MONTH_LAYOUTS[column_count]
