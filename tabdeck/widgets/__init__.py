"""Textual widgets for tabdeck."""

from .tabs import PaneView, TabBar, TabButton, tab_label

__all__ = [
    "PaneView",
    "TabBar",
    "TabButton",
    "tab_label",
]
