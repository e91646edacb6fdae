"""
JSON flat-file record store.

This module provides the JSONRecordStore class, which keeps the full sequence
of group records as one JSON array in a single file.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from sagrading.data_formats.base import ParseError, ReadError, RecordStore
from sagrading.data_formats.schema import Group, SchemaError

logger = logging.getLogger(__name__)


class JSONRecordStore(RecordStore):
    """Record store backed by a JSON array in a flat file.

    The file is read in full on every load and rewritten in full on every
    save. Saves go through a temporary file in the same directory that is
    then renamed over the store, so a crash mid-write never leaves a
    truncated store behind.

    Examples:
        >>> store = JSONRecordStore("data/db.json")
        >>> groups = store.load()
        >>> store.remove_at(0)
        True
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = str(path)

    @property
    def path(self) -> str:
        """Return the path of the store file."""
        return self._path

    def exists(self) -> bool:
        """Return True if the store file exists."""
        return os.path.isfile(self._path)

    def initialize(self) -> bool:
        """Create an empty store if the file does not exist yet.

        Returns:
            True if a new store file was created.

        Raises:
            ReadError: If the directory or the file cannot be created.
        """
        if self.exists():
            return False
        directory = os.path.dirname(self._path)
        if directory:
            try:
                os.makedirs(directory, exist_ok=True)
            except OSError as e:
                raise ReadError(f"error creating the store directory {directory}: {e}") from e
        self.save([])
        logger.info("Created empty store at %s", self._path)
        return True

    def _read_text(self) -> str:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f"error reading the store file {self._path}: {e}") from e

    def load(self) -> list[Group]:
        """Load and validate every record in the store file.

        Returns:
            The stored groups in file order.

        Raises:
            ReadError: If the file is missing or unreadable.
            ParseError: If the file is not a JSON array of group records.
        """
        content = self._read_text()

        try:
            data = json.loads(content)
        except (json.JSONDecodeError, RecursionError) as e:
            # Arrays nested deeper than the interpreter's recursion limit
            # fail in the decoder rather than in validation
            raise ParseError(f"error parsing the store file {self._path}: {e}") from e

        if not isinstance(data, list):
            raise ParseError(
                f"store file must contain an array of groups (got {type(data).__name__})"
            )

        groups = []
        for i, item in enumerate(data):
            try:
                groups.append(Group.from_dict(item))
            except SchemaError as e:
                raise ParseError(str(e), index=i) from e

        logger.debug("Loaded %d groups from %s", len(groups), self._path)
        return groups

    def save(self, records: list[Group]) -> None:
        """Write the full sequence of records to the store file.

        Args:
            records: The groups to persist, in order.

        Raises:
            ReadError: If the file cannot be written.
        """
        # ASCII escapes keep lone surrogates encodable
        payload = json.dumps([record.to_dict() for record in records])
        directory = os.path.dirname(os.path.abspath(self._path))

        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{Path(self._path).name}.", suffix=".tmp", dir=directory
            )
        except OSError as e:
            raise ReadError(f"error writing the store file {self._path}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
        except (OSError, UnicodeError) as e:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise ReadError(f"error writing the store file {self._path}: {e}") from e

        logger.debug("Saved %d groups to %s", len(records), self._path)
