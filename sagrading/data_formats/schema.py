"""
Group record schema.

The store persists each group as a JSON object with exactly these fields,
in this order:

    {"name": str, "assignment": int, "feedback": [str, ...], "footnote": str}

Any structural deviation (missing or extra fields, wrong types) is rejected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Persisted field order
FIELD_NAMES: tuple[str, ...] = ("name", "assignment", "feedback", "footnote")


class SchemaError(ValueError):
    """Raised when a decoded value does not match the group schema."""


@dataclass
class Group:
    """One graded group: name, assignment id, feedback lines and footnote."""

    name: str
    assignment: int
    feedback: list[str] = field(default_factory=list)
    footnote: str = ""

    @property
    def feedback_text(self) -> str:
        """Return the feedback lines joined for display."""
        return "".join(self.feedback)

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a dict with fields in persisted order."""
        return {
            "name": self.name,
            "assignment": self.assignment,
            "feedback": list(self.feedback),
            "footnote": self.footnote,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Group:
        """Build a Group from a decoded JSON object.

        Args:
            data: The decoded value for one record.

        Returns:
            The validated Group.

        Raises:
            SchemaError: If the value is not an object with exactly the
                group fields and the expected types.

        Examples:
            >>> Group.from_dict({"name": "Group 1", "assignment": 2,
            ...                  "feedback": ["ok"], "footnote": ""}).name
            'Group 1'
        """
        if not isinstance(data, dict):
            raise SchemaError(f"expected an object (got {type(data).__name__})")

        missing = [name for name in FIELD_NAMES if name not in data]
        if missing:
            raise SchemaError(f"missing field(s): {', '.join(missing)}")
        extra = sorted(set(data) - set(FIELD_NAMES))
        if extra:
            raise SchemaError(f"unexpected field(s): {', '.join(extra)}")

        name = data["name"]
        assignment = data["assignment"]
        feedback = data["feedback"]
        footnote = data["footnote"]

        if not isinstance(name, str):
            raise SchemaError("'name' must be a string")
        # bool is a subclass of int but true/false is not an assignment id
        if not isinstance(assignment, int) or isinstance(assignment, bool):
            raise SchemaError("'assignment' must be an integer")
        if assignment < 0:
            raise SchemaError("'assignment' must not be negative")
        if not isinstance(feedback, list) or not all(
            isinstance(line, str) for line in feedback
        ):
            raise SchemaError("'feedback' must be a list of strings")
        if not isinstance(footnote, str):
            raise SchemaError("'footnote' must be a string")

        return cls(
            name=name,
            assignment=assignment,
            feedback=list(feedback),
            footnote=footnote,
        )
