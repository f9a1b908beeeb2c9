"""
Connection domain module
"""
from .models import ConnectionRecord, ConnectionStore, ConnectionChoice
from .selector import format_choices, matches, resolve_selection
from .presenter import render_table
from .service import ConnectionService

__all__ = [
    "ConnectionRecord",
    "ConnectionStore",
    "ConnectionChoice",
    "format_choices",
    "matches",
    "resolve_selection",
    "render_table",
    "ConnectionService",
]
