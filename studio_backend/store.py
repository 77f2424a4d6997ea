"""
Record storage abstraction and the in-memory implementation.

Each user owns one list per record kind, newest first. Isolation between
users comes from keying the lists by user id; nothing reaches across keys.
"""

from __future__ import annotations

import threading
import time
import uuid
from collections import defaultdict
from dataclasses import asdict, dataclass, field, fields, replace
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, Generic, List, Optional, Protocol, Type, TypeVar


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2026-10-17T09:30:00.123Z."""
    return (
        datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def new_record_id(prefix: str) -> str:
    return f"{prefix}-{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"


@dataclass
class ProgrammeRecord:
    ID_PREFIX: ClassVar[str] = "programme"
    MUTABLE_FIELDS: ClassVar[tuple[str, ...]] = (
        "name",
        "genre",
        "targetAudience",
        "episodeLength",
        "styleReferences",
    )

    id: str
    createdAt: str
    name: Optional[str] = None
    genre: Optional[str] = None
    targetAudience: Optional[str] = None
    episodeLength: Any = None
    styleReferences: List[str] = field(default_factory=list)
    updatedAt: Optional[str] = None

    def __post_init__(self):
        if self.styleReferences is None:
            self.styleReferences = []

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class ScriptRecord:
    ID_PREFIX: ClassVar[str] = "script"
    MUTABLE_FIELDS: ClassVar[tuple[str, ...]] = ("content", "sources")

    id: str
    createdAt: str
    programmeId: Optional[str] = None
    topic: Optional[str] = None
    content: Optional[str] = None
    sources: Any = None
    updatedAt: Optional[str] = None

    def as_dict(self) -> dict:
        return asdict(self)


R = TypeVar("R", ProgrammeRecord, ScriptRecord)


class RecordStore(Protocol[R]):
    """Interface the routes need from per-user record storage."""

    def list(self, user_id: str) -> List[R]:
        ...

    def create(self, user_id: str, values: dict) -> R:
        ...

    def update(self, user_id: str, record_id: str, values: dict) -> Optional[R]:
        ...

    def delete(self, user_id: str, record_id: str) -> bool:
        ...


class InMemoryRecordStore(Generic[R]):
    """
    Process-memory store for one record kind.

    Route handlers run in a threadpool, so every user's list has its own
    lock and each operation holds it from lookup through mutation.
    """

    def __init__(self, record_cls: Type[R]):
        self.record_cls = record_cls
        self.records: Dict[str, List[R]] = {}
        self._locks: Dict[str, threading.Lock] = defaultdict(threading.Lock)
        self._guard = threading.Lock()

    def _lock_for(self, user_id: str) -> threading.Lock:
        with self._guard:
            return self._locks[user_id]

    def _creatable_fields(self) -> set[str]:
        return {f.name for f in fields(self.record_cls)} - {"id", "createdAt", "updatedAt"}

    def list(self, user_id: str) -> List[R]:
        with self._lock_for(user_id):
            return list(self.records.get(user_id, []))

    def create(self, user_id: str, values: dict) -> R:
        allowed = self._creatable_fields()
        record = self.record_cls(
            id=new_record_id(self.record_cls.ID_PREFIX),
            createdAt=utc_timestamp(),
            **{k: v for k, v in values.items() if k in allowed},
        )
        with self._lock_for(user_id):
            self.records.setdefault(user_id, []).insert(0, record)
        return record

    def update(self, user_id: str, record_id: str, values: dict) -> Optional[R]:
        with self._lock_for(user_id):
            items = self.records.get(user_id, [])
            for index, existing in enumerate(items):
                if existing.id == record_id:
                    updated = replace(
                        existing,
                        updatedAt=utc_timestamp(),
                        **{name: values.get(name) for name in self.record_cls.MUTABLE_FIELDS},
                    )
                    items[index] = updated
                    return updated
        return None

    def delete(self, user_id: str, record_id: str) -> bool:
        with self._lock_for(user_id):
            items = self.records.get(user_id, [])
            for index, existing in enumerate(items):
                if existing.id == record_id:
                    del items[index]
                    return True
        return False

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        with self._guard:
            self.records.clear()
