"""Pytest configuration and shared fixtures for the dashboard tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from sagrading.data_formats import Group, JSONRecordStore


def make_group(idx: int, feedback: list[str] | None = None) -> Group:
    """Create a test group with predictable fields."""
    return Group(
        name=f"Group {idx}",
        assignment=idx,
        feedback=feedback if feedback is not None else [f"Feedback {idx}"],
        footnote="Graded by: test",
    )


def make_group_dict(idx: int) -> dict[str, Any]:
    """Create the persisted form of a test group."""
    return {
        "name": f"Group {idx}",
        "assignment": idx,
        "feedback": [f"Feedback {idx}"],
        "footnote": "Graded by: test",
    }


def write_store(path: Path, records: list[Any]) -> None:
    """Helper to write raw records to a store file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(records, f, ensure_ascii=False)


def read_store(path: Path) -> list[Any]:
    """Helper to read the raw store file."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


class FixedGenerator:
    """Generator returning numbered groups, counting calls."""

    def __init__(self, start: int = 100) -> None:
        self.calls = 0
        self._next = start

    def __call__(self) -> Group:
        self.calls += 1
        group = make_group(self._next)
        self._next += 1
        return group


@pytest.fixture
def store_path(tmp_path) -> Path:
    """Return the path of a store file holding five groups."""
    path = tmp_path / "db.json"
    write_store(path, [make_group_dict(i) for i in range(5)])
    return path


@pytest.fixture
def store(store_path) -> JSONRecordStore:
    """Return a store with five groups."""
    return JSONRecordStore(store_path)


@pytest.fixture
def make_store(tmp_path):
    """Return a factory creating a store with ``count`` groups."""

    def _make(count: int) -> JSONRecordStore:
        path = tmp_path / f"db_{count}.json"
        write_store(path, [make_group_dict(i) for i in range(count)])
        return JSONRecordStore(path)

    return _make


@pytest.fixture
def generator() -> FixedGenerator:
    return FixedGenerator()
