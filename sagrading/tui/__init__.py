"""
SAGrading terminal dashboard.

A Textual-based terminal UI for browsing, adding and deleting graded groups
stored in a flat JSON file.

Usage:
    python -m sagrading.tui.app --db data/db.json

Components:
    - DashboardApp: Main application class
    - Dashboard: Controller applying events to the store and selection
    - EventSource: Merged keyboard and tick event producer
    - SelectionState: Active tab and selected row
"""
