"""Custom widgets for the dashboard."""

from sagrading.tui.widgets.menu_bar import MenuBar

__all__ = ["MenuBar"]
