"""Calendar Page - controller logic for one page of a date-picker calendar.

Computes the cells of a day, month, quarter or week page, derives each cell's
disabled/selected/range state and drives keyboard navigation across the grid.
"""

__version__ = "1.0.0"
__author__ = "CalendarPage Team"
__email__ = "support@calendarpage.local"
__description__ = "Calendar page controller for date-picker widgets"

# Package metadata
__all__ = [
    "__author__",
    "__description__",
    "__email__",
    "__version__",
]
