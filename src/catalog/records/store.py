"""In-memory record repository with append-only writes."""

import threading
from collections.abc import Iterable

import structlog

from catalog.records.schemas import Record, RecordCreate

logger = structlog.get_logger()


class RecordStore:
    """Ordered, append-only collection of records.

    Appends are serialized by a lock covering both the id counter and the
    backing list. Readers get tuple snapshots, so a search never sees a
    record appended after it started.
    """

    def __init__(
        self,
        records: Iterable[Record] = (),
        next_id: int | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            records: Initial records, kept in the given order.
            next_id: First id to assign. Defaults to one past the highest
                initial id (or 1 when empty).

        Raises:
            ValueError: If initial ids repeat or next_id would reuse one.
        """
        self._records: list[Record] = list(records)
        self._lock = threading.Lock()

        ids = [record.id for record in self._records]
        if len(set(ids)) != len(ids):
            raise ValueError("record ids must be unique")

        highest = max(ids, default=0)
        if next_id is None:
            next_id = highest + 1
        elif next_id <= highest:
            raise ValueError(f"next_id {next_id} would reuse an existing id")
        self._next_id = next_id

    def __len__(self) -> int:
        return len(self._records)

    @property
    def version(self) -> int:
        """Id the next appended record will receive; changes on every append."""
        return self._next_id

    def list_records(self) -> tuple[Record, ...]:
        """Return an immutable snapshot in insertion order."""
        with self._lock:
            return tuple(self._records)

    def get_record(self, record_id: int) -> Record | None:
        """Retrieve a record by id.

        Args:
            record_id: Identifier assigned on insert.

        Returns:
            The record if present, None otherwise.
        """
        for record in self.list_records():
            if record.id == record_id:
                return record
        return None

    def add_record(self, payload: RecordCreate) -> Record:
        """Append a record, assigning the next id.

        Args:
            payload: Validated record fields.

        Returns:
            The stored record including its id.
        """
        with self._lock:
            record = Record(id=self._next_id, **payload.model_dump())
            self._records.append(record)
            self._next_id += 1

        logger.info("record_added", record_id=record.id, tag_count=len(record.tags))
        return record
