"""Navigation and editing services plus their keymap handlers."""

from .editing import EditingService
from .navigation import NavigationService, report_blocked
from .words import WORD_BOUNDARIES, is_word_boundary, word_end, word_start

__all__ = [
    "EditingService",
    "NavigationService",
    "WORD_BOUNDARIES",
    "is_word_boundary",
    "report_blocked",
    "word_end",
    "word_start",
]
