"""UI screen modules for the workout log."""

from .log_screen import LogScreen
from .history_screen import HistoryScreen
from .edit_session_screen import EditSessionScreen

__all__ = [
    "EditSessionScreen",
    "HistoryScreen",
    "LogScreen",
]
