"""
HTTP routes for the relay API.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel
from fastapi.responses import JSONResponse

from studio_backend.auth import require_user
from studio_backend.dependencies import (
    get_programme_store,
    get_provider_adapter,
    get_script_store,
)
from studio_backend.schemas import (
    GenerateRequest,
    HealthResponse,
    ProgrammeFields,
    ProgrammeResponse,
    ScriptCreateRequest,
    ScriptResponse,
    ScriptUpdateRequest,
)
from studio_backend.store import ProgrammeRecord, RecordStore, ScriptRecord
from studio_models import ProviderAdapter, ProviderError, UnsupportedProviderError

logger = logging.getLogger(__name__)

router = APIRouter()


def _fields(payload: Optional[BaseModel], schema: type[BaseModel]) -> dict:
    # A bodiless POST/PUT counts as an empty object.
    return (payload or schema()).model_dump()


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@router.post("/generate")
def generate(
    payload: GenerateRequest,
    user_id: str = Depends(require_user),
    adapter: ProviderAdapter = Depends(get_provider_adapter),
):
    """
    Forward the prompt to the requested provider and relay its JSON as-is.
    """
    try:
        result = adapter.invoke(payload.model, payload.prompt)
    except UnsupportedProviderError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ProviderError as e:
        logger.error("Generation error for %s: %s", user_id, e)
        raise HTTPException(status_code=500, detail=str(e))
    return JSONResponse(content=result)


# Programmes


@router.get(
    "/programmes",
    response_model=list[ProgrammeResponse],
    response_model_exclude_none=True,
)
def list_programmes(
    user_id: str = Depends(require_user),
    store: RecordStore[ProgrammeRecord] = Depends(get_programme_store),
):
    return [record.as_dict() for record in store.list(user_id)]


@router.post(
    "/programmes",
    response_model=ProgrammeResponse,
    response_model_exclude_none=True,
    status_code=201,
)
def create_programme(
    payload: Optional[ProgrammeFields] = None,
    user_id: str = Depends(require_user),
    store: RecordStore[ProgrammeRecord] = Depends(get_programme_store),
):
    return store.create(user_id, _fields(payload, ProgrammeFields)).as_dict()


@router.put(
    "/programmes/{programme_id}",
    response_model=ProgrammeResponse,
    response_model_exclude_none=True,
)
def update_programme(
    programme_id: str,
    payload: Optional[ProgrammeFields] = None,
    user_id: str = Depends(require_user),
    store: RecordStore[ProgrammeRecord] = Depends(get_programme_store),
):
    record = store.update(user_id, programme_id, _fields(payload, ProgrammeFields))
    if not record:
        raise HTTPException(status_code=404, detail="Programme not found")
    return record.as_dict()


@router.delete("/programmes/{programme_id}", status_code=204)
def delete_programme(
    programme_id: str,
    user_id: str = Depends(require_user),
    store: RecordStore[ProgrammeRecord] = Depends(get_programme_store),
):
    if not store.delete(user_id, programme_id):
        raise HTTPException(status_code=404, detail="Programme not found")
    return Response(status_code=204)


# Scripts


@router.get(
    "/scripts",
    response_model=list[ScriptResponse],
    response_model_exclude_none=True,
)
def list_scripts(
    user_id: str = Depends(require_user),
    store: RecordStore[ScriptRecord] = Depends(get_script_store),
):
    return [record.as_dict() for record in store.list(user_id)]


@router.post(
    "/scripts",
    response_model=ScriptResponse,
    response_model_exclude_none=True,
    status_code=201,
)
def create_script(
    payload: Optional[ScriptCreateRequest] = None,
    user_id: str = Depends(require_user),
    store: RecordStore[ScriptRecord] = Depends(get_script_store),
):
    return store.create(user_id, _fields(payload, ScriptCreateRequest)).as_dict()


@router.put(
    "/scripts/{script_id}",
    response_model=ScriptResponse,
    response_model_exclude_none=True,
)
def update_script(
    script_id: str,
    payload: Optional[ScriptUpdateRequest] = None,
    user_id: str = Depends(require_user),
    store: RecordStore[ScriptRecord] = Depends(get_script_store),
):
    record = store.update(user_id, script_id, _fields(payload, ScriptUpdateRequest))
    if not record:
        raise HTTPException(status_code=404, detail="Script not found")
    return record.as_dict()


@router.delete("/scripts/{script_id}", status_code=204)
def delete_script(
    script_id: str,
    user_id: str = Depends(require_user),
    store: RecordStore[ScriptRecord] = Depends(get_script_store),
):
    if not store.delete(user_id, script_id):
        raise HTTPException(status_code=404, detail="Script not found")
    return Response(status_code=204)
