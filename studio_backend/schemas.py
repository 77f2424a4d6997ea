"""
Pydantic schemas for the relay API.

Field names follow the camelCase the web client sends and expects back.

Record responses are rendered with `exclude_none`, so a field the client
sent as an explicit null comes back absent, the same as a field it never
sent. Stored records do not distinguish the two.
"""

from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: Literal["ok"]


class ErrorResponse(BaseModel):
    error: str


class GenerateRequest(BaseModel):
    model: str = Field(..., min_length=1)
    # Forwarded as-is, empty string included.
    prompt: str


class ProgrammeFields(BaseModel):
    name: Optional[str] = None
    genre: Optional[str] = None
    targetAudience: Optional[str] = None
    episodeLength: Optional[Union[int, float, str]] = None
    styleReferences: Optional[list[str]] = None


class ProgrammeResponse(ProgrammeFields):
    id: str
    styleReferences: list[str] = Field(default_factory=list)
    createdAt: str
    updatedAt: Optional[str] = None


class ScriptCreateRequest(BaseModel):
    programmeId: Optional[str] = None
    topic: Optional[str] = None
    content: Optional[str] = None
    sources: Optional[Any] = None


class ScriptUpdateRequest(BaseModel):
    content: Optional[str] = None
    sources: Optional[Any] = None


class ScriptResponse(ScriptCreateRequest):
    id: str
    createdAt: str
    updatedAt: Optional[str] = None
