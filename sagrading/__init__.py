"""SAGrading: terminal dashboard for browsing and editing graded groups."""

__version__ = "0.1.0"
