"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

from studio_backend.config import get_settings
from studio_backend.store import (
    InMemoryRecordStore,
    ProgrammeRecord,
    RecordStore,
    ScriptRecord,
)
from studio_models import ProviderAdapter

_programme_store: RecordStore[ProgrammeRecord] | None = None
_script_store: RecordStore[ScriptRecord] | None = None
_provider_adapter: ProviderAdapter | None = None


def get_programme_store() -> RecordStore[ProgrammeRecord]:
    """
    Return a singleton store so programmes persist across requests.
    """
    global _programme_store
    if _programme_store:
        return _programme_store
    _programme_store = InMemoryRecordStore(ProgrammeRecord)
    return _programme_store


def get_script_store() -> RecordStore[ScriptRecord]:
    global _script_store
    if _script_store:
        return _script_store
    _script_store = InMemoryRecordStore(ScriptRecord)
    return _script_store


def get_provider_adapter() -> ProviderAdapter:
    """
    Return a singleton adapter; credentials are read once from settings.
    """
    global _provider_adapter
    if _provider_adapter:
        return _provider_adapter
    settings = get_settings()
    _provider_adapter = ProviderAdapter(settings.provider_credentials())
    return _provider_adapter
