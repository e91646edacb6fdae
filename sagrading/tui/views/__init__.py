"""Panels drawn by the dashboard app."""

from sagrading.tui.views.groups import GroupsPanel
from sagrading.tui.views.home import HomePanel

__all__ = ["GroupsPanel", "HomePanel"]
