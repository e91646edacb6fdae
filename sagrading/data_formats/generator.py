"""Demo record generator used by the dashboard's add command."""

from __future__ import annotations

import random
from typing import Callable

from sagrading.data_formats.schema import Group

DEFAULT_FOOTNOTE = "This assignment was graded by: SAGrading CLI."

# Generated names are "Group 0" .. "Group 9"
NAME_LABELS = 10
MAX_ASSIGNMENT = 10


def generate_group(
    rng: random.Random | None = None,
    footnote: str = DEFAULT_FOOTNOTE,
) -> Group:
    """Synthesize a placeholder group.

    Args:
        rng: Random source. A fresh unseeded generator is used if None.
        footnote: Footnote identifying the grader.

    Returns:
        A new Group with a random name and assignment id.
    """
    rng = rng or random.Random()
    return Group(
        name=f"Group {rng.randrange(NAME_LABELS)}",
        assignment=rng.randrange(MAX_ASSIGNMENT),
        feedback=["feedback"],
        footnote=footnote,
    )


def make_generator(
    rng: random.Random | None = None,
    footnote: str = DEFAULT_FOOTNOTE,
) -> Callable[[], Group]:
    """Return a zero-argument generator suitable for RecordStore.append."""
    rng = rng or random.Random()
    return lambda: generate_group(rng, footnote)
