"""
Record store for graded groups.

This module provides the Group record type and the flat-file store that
persists the ordered sequence of groups as a single JSON array.

Usage:
    from sagrading.data_formats import JSONRecordStore, make_generator

    store = JSONRecordStore("data/db.json")
    groups = store.load()
    store.append(make_generator())
"""

from sagrading.data_formats.base import ParseError, ReadError, RecordStore, StoreError
from sagrading.data_formats.generator import DEFAULT_FOOTNOTE, generate_group, make_generator
from sagrading.data_formats.json_store import JSONRecordStore
from sagrading.data_formats.schema import FIELD_NAMES, Group, SchemaError

__all__ = [
    # Records
    "Group",
    "FIELD_NAMES",
    "SchemaError",
    # Store
    "RecordStore",
    "JSONRecordStore",
    # Errors
    "StoreError",
    "ReadError",
    "ParseError",
    # Generation
    "DEFAULT_FOOTNOTE",
    "generate_group",
    "make_generator",
]
