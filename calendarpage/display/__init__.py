"""Display renderers for calendar page previews."""

from .console_renderer import ConsoleRenderer

__all__ = ["ConsoleRenderer"]
