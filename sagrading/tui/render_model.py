"""
Render models handed from the dashboard controller to the view layer.

The controller decides what is shown; the views decide how. Nothing here
encodes layout or styling.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from sagrading.data_formats import Group
from sagrading.tui.selection import MenuItem


@dataclass(frozen=True)
class HomeView:
    """Static welcome content."""


@dataclass(frozen=True)
class GroupDetail:
    """Detail pane content for the selected group."""

    name: str
    assignment: int
    feedback_text: str

    @classmethod
    def from_group(cls, group: Group) -> GroupDetail:
        return cls(
            name=group.name,
            assignment=group.assignment,
            feedback_text=group.feedback_text,
        )


@dataclass(frozen=True)
class GroupsView:
    """Group list with the selected row and its detail.

    ``selected_index`` and ``detail`` are None when the store is empty.
    """

    names: tuple[str, ...] = ()
    selected_index: int | None = None
    detail: GroupDetail | None = None

    @property
    def is_empty(self) -> bool:
        return not self.names


View = Union[HomeView, GroupsView]


@dataclass(frozen=True)
class Frame:
    """Everything needed to draw one screen."""

    tab: MenuItem
    body: View = field(default_factory=HomeView)
    notice: str | None = None
