"""Mixins for the TUI application."""

from sagrading.tui.mixins.dashboard_loop import DashboardLoopMixin

__all__ = ["DashboardLoopMixin"]
