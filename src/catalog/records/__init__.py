"""Catalog records and their in-memory repository."""

from catalog.records.sample import SAMPLE_RECORDS
from catalog.records.schemas import Record, RecordCreate
from catalog.records.store import RecordStore

__all__ = [
    "Record",
    "RecordCreate",
    "RecordStore",
    "SAMPLE_RECORDS",
]
