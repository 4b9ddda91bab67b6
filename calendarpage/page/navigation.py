"""Keyboard navigation state for month and quarter grids."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date
from enum import Enum
from typing import Any, Optional

from ..utils import date_utils
from .constraints import ConstraintEvaluator
from .keyboard import KeyCode
from .layout import MONTH_COUNT, QUARTER_COUNT, QUARTER_LAYOUT, GridLayout
from .models import NavigationInstruction

logger = logging.getLogger(__name__)

MONTH_NAVIGATION_HORIZONTAL_OFFSET = 1


class NavigationStateKind(Enum):
    """Whether a grid currently has a keyboard-focused cell."""

    IDLE = "idle"
    FOCUSED = "focused"


class FocusRegistry:
    """Per-index focus targets registered once when the grid is mounted."""

    def __init__(self, indices: Iterable[int]) -> None:
        self._indices = frozenset(indices)
        self._refs: dict[int, Any] = {}

    def register(self, index: int, ref: Any) -> None:
        """Register the focus target for a cell.

        Args:
            index: Month (0-11) or quarter (1-4) index
            ref: Host object that receives focus for this cell

        Raises:
            ValueError: If the index does not belong to the grid
        """
        if index not in self._indices:
            raise ValueError(f"Index {index} is not part of this grid")
        if index in self._refs:
            logger.debug(f"Focus target for index {index} already registered, keeping first")
            return
        self._refs[index] = ref

    def get(self, index: int) -> Optional[Any]:
        return self._refs.get(index)

    def clear(self) -> None:
        """Forget all targets, e.g. when the grid is unmounted."""
        self._refs.clear()

    def __len__(self) -> int:
        return len(self._refs)


def month_target_index(index: int, key_code: KeyCode, layout: GridLayout) -> Optional[int]:
    """Return the month index an arrow key moves to, wrapping around the year.

    Args:
        index: Current month index (0-11)
        key_code: Arrow key pressed
        layout: Month grid layout supplying the vertical offset

    Returns:
        Target month index, or None for keys that do not move
    """
    offset = layout.vertical_offset
    if key_code == KeyCode.RIGHT_ARROW:
        return 0 if index == MONTH_COUNT - 1 else index + MONTH_NAVIGATION_HORIZONTAL_OFFSET
    if key_code == KeyCode.LEFT_ARROW:
        return MONTH_COUNT - 1 if index == 0 else index - MONTH_NAVIGATION_HORIZONTAL_OFFSET
    if key_code == KeyCode.UP_ARROW:
        if index in layout.first_row:
            return index + MONTH_COUNT - offset
        return index - offset
    if key_code == KeyCode.DOWN_ARROW:
        if index in layout.last_row:
            return index - MONTH_COUNT + offset
        return index + offset
    return None


def quarter_target_index(index: int, key_code: KeyCode) -> Optional[int]:
    """Return the quarter an arrow key moves to; only the horizontal axis exists."""
    if key_code == KeyCode.RIGHT_ARROW:
        return 1 if index == QUARTER_COUNT else index + 1
    if key_code == KeyCode.LEFT_ARROW:
        return QUARTER_COUNT if index == 1 else index - 1
    return None


class GridNavigator(ABC):
    """Shared navigation state machine for month and quarter grids.

    The machine is IDLE until a key event arrives for a cell, after which it is
    FOCUSED on that cell. A move whose target date is disabled or excluded is
    dropped without changing state; no search for the next enabled cell is made.
    """

    unit = "cell"

    def __init__(
        self,
        evaluator: ConstraintEvaluator,
        layout: GridLayout,
        focus_registry: Optional[FocusRegistry] = None,
    ) -> None:
        self.evaluator = evaluator
        self.layout = layout
        self.focus_registry = focus_registry or FocusRegistry(layout.indices)
        self._focused_index: Optional[int] = None

    @property
    def state(self) -> NavigationStateKind:
        if self._focused_index is None:
            return NavigationStateKind.IDLE
        return NavigationStateKind.FOCUSED

    @property
    def focused_index(self) -> Optional[int]:
        return self._focused_index

    def focus(self, index: int) -> None:
        """Enter FOCUSED state on a cell the host reports as focused."""
        self._focused_index = index

    def reset(self) -> None:
        """Return to IDLE."""
        self._focused_index = None

    @abstractmethod
    def target_for(
        self, index: int, key_code: KeyCode, pre_selection: date
    ) -> Optional[tuple[int, date]]:
        """Compute the (index, date) an arrow key leads to; None for other keys."""

    def is_blocked(self, target_date: date) -> bool:
        return self.evaluator.is_disabled(target_date) or self.evaluator.is_excluded(target_date)

    def navigate(
        self, index: int, key_code: KeyCode, pre_selection: Optional[date]
    ) -> Optional[NavigationInstruction]:
        """Apply an arrow key pressed on cell ``index``.

        Args:
            index: Cell the key was pressed on
            key_code: Key pressed
            pre_selection: Current provisional date; without one arrows are ignored

        Returns:
            NavigationInstruction for the new focus target, or None when the key
            does not move or the target is blocked
        """
        self.focus(index)

        if pre_selection is None:
            logger.debug(f"Ignoring {key_code} on {self.unit} {index}: no pre-selection")
            return None

        target = self.target_for(index, key_code, pre_selection)
        if target is None:
            return None

        new_index, new_date = target
        if self.is_blocked(new_date):
            logger.debug(
                f"Blocked {self.unit} navigation {index} -> {new_index}: {new_date} unavailable"
            )
            return None

        self._focused_index = new_index
        logger.verbose(  # type: ignore[attr-defined]
            f"{self.unit.capitalize()} navigation {index} -> {new_index} ({new_date})"
        )
        return NavigationInstruction(
            index=new_index, date=new_date, cell_ref=self.focus_registry.get(new_index)
        )


class MonthNavigator(GridNavigator):
    """Arrow-key movement across the twelve month cells."""

    unit = "month"

    def target_for(
        self, index: int, key_code: KeyCode, pre_selection: date
    ) -> Optional[tuple[int, date]]:
        new_index = month_target_index(index, key_code, self.layout)
        if new_index is None:
            return None

        offset = self.layout.vertical_offset
        month_delta = {
            KeyCode.RIGHT_ARROW: MONTH_NAVIGATION_HORIZONTAL_OFFSET,
            KeyCode.LEFT_ARROW: -MONTH_NAVIGATION_HORIZONTAL_OFFSET,
            KeyCode.UP_ARROW: -offset,
            KeyCode.DOWN_ARROW: offset,
        }[key_code]
        return new_index, date_utils.add_months(pre_selection, month_delta)


class QuarterNavigator(GridNavigator):
    """Arrow-key movement across the four quarter cells."""

    unit = "quarter"

    def __init__(
        self,
        evaluator: ConstraintEvaluator,
        layout: GridLayout = QUARTER_LAYOUT,
        focus_registry: Optional[FocusRegistry] = None,
    ) -> None:
        super().__init__(evaluator, layout, focus_registry)

    def target_for(
        self, index: int, key_code: KeyCode, pre_selection: date
    ) -> Optional[tuple[int, date]]:
        new_index = quarter_target_index(index, key_code)
        if new_index is None:
            return None
        if key_code == KeyCode.RIGHT_ARROW:
            return new_index, date_utils.add_quarters(pre_selection, 1)
        return new_index, date_utils.sub_quarters(pre_selection, 1)
