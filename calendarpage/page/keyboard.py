"""Key events consumed by the page navigation state machine."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ..utils import date_utils

logger = logging.getLogger(__name__)


class KeyCode(Enum):
    """Key codes for navigation commands."""

    LEFT_ARROW = "left"
    RIGHT_ARROW = "right"
    UP_ARROW = "up"
    DOWN_ARROW = "down"
    SPACE = "space"
    ENTER = "enter"
    TAB = "tab"
    UNKNOWN = "unknown"


# Mapping of host key names to KeyCodes
_KEY_MAPPINGS = {
    "ArrowLeft": KeyCode.LEFT_ARROW,
    "Left": KeyCode.LEFT_ARROW,
    "ArrowRight": KeyCode.RIGHT_ARROW,
    "Right": KeyCode.RIGHT_ARROW,
    "ArrowUp": KeyCode.UP_ARROW,
    "Up": KeyCode.UP_ARROW,
    "ArrowDown": KeyCode.DOWN_ARROW,
    "Down": KeyCode.DOWN_ARROW,
    "Enter": KeyCode.ENTER,
    "\r": KeyCode.ENTER,
    "\n": KeyCode.ENTER,
    "Tab": KeyCode.TAB,
    "\t": KeyCode.TAB,
}


def parse_key(key: str) -> KeyCode:
    """Translate a host key name into a KeyCode.

    Accepts DOM-style names (``"ArrowLeft"``), the lower-case KeyCode values
    (``"left"``) and a few raw control characters.

    Args:
        key: Key name reported by the host

    Returns:
        Corresponding KeyCode, ``KeyCode.UNKNOWN`` if unmapped
    """
    if not key:
        return KeyCode.UNKNOWN
    if date_utils.is_space_key(key):
        return KeyCode.SPACE
    if key in _KEY_MAPPINGS:
        return _KEY_MAPPINGS[key]
    try:
        return KeyCode(key.lower())
    except ValueError:
        return KeyCode.UNKNOWN


@dataclass
class KeyEvent:
    """A key press delivered to a page cell.

    Attributes:
        key: Key name as reported by the host
        source: Optional host event object passed through to callbacks
        default_prevented: Set once the controller suppresses the default action
    """

    key: str
    source: Optional[Any] = None
    default_prevented: bool = field(default=False)

    @property
    def code(self) -> KeyCode:
        return parse_key(self.key)

    def prevent_default(self) -> None:
        self.default_prevented = True
