"""blessed terminal host for list navigation."""

from .app import ListApp, run_list
from .list_view import ListView, RowViewport

__all__ = ["ListApp", "ListView", "RowViewport", "run_list"]
