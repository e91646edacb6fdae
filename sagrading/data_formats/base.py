"""
Abstract base class for group record stores.

This module defines the RecordStore interface and the error taxonomy shared
by every store implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from sagrading.data_formats.schema import Group


class StoreError(Exception):
    """Base class for failures while reading or writing the record store."""


class ReadError(StoreError):
    """The store file is missing, unreadable or could not be written."""


class ParseError(StoreError):
    """The store contents are not a well-formed encoding of the record schema."""

    def __init__(self, message: str, index: int | None = None) -> None:
        self.index = index
        if index is not None:
            message = f"record {index}: {message}"
        super().__init__(message)


class RecordStore(ABC):
    """Abstract base class for the group record store.

    Every operation is a full transaction against the backing storage: the
    store never caches records between calls, so each read sees the current
    contents and each mutation rewrites the whole sequence.
    """

    @property
    @abstractmethod
    def path(self) -> str:
        """Return the location of the backing storage."""
        pass

    @abstractmethod
    def load(self) -> list[Group]:
        """Load every stored record.

        Returns:
            The stored records in order.

        Raises:
            ReadError: If the storage cannot be read.
            ParseError: If the contents do not match the record schema.
        """
        pass

    @abstractmethod
    def save(self, records: list[Group]) -> None:
        """Replace the stored records with ``records``.

        Raises:
            ReadError: If the storage cannot be written.
        """
        pass

    def append(self, generator: Callable[[], Group]) -> list[Group]:
        """Load, push one generated record, save.

        Args:
            generator: Zero-argument callable producing the new record.

        Returns:
            The new sequence of records.

        Raises:
            ReadError: If the storage cannot be read or written.
            ParseError: If the current contents are malformed.
        """
        records = self.load()
        records.append(generator())
        self.save(records)
        return records

    def remove_at(self, index: int) -> bool:
        """Remove the record at ``index``.

        The store always keeps at least one record: when exactly one record
        is stored nothing is removed.

        Args:
            index: Position of the record in the freshly loaded sequence.

        Returns:
            True if a record was removed, False if the singleton floor
            refused the removal.

        Raises:
            IndexError: If index is out of range for the current contents.
            ReadError: If the storage cannot be read or written.
            ParseError: If the current contents are malformed.
        """
        records = self.load()
        if len(records) == 1:
            return False
        if index < 0 or index >= len(records):
            raise IndexError(
                f"Group index {index} out of range (0-{len(records) - 1})"
            )
        del records[index]
        self.save(records)
        return True
