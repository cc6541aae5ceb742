"""
Pydantic schemas for the roster admin API.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class AuthRequest(BaseModel):
    # Anything that is not the exact secret string is a mismatch.
    password: Any = None


class MessageResponse(BaseModel):
    success: bool
    message: str


class PlayerPayload(BaseModel):
    # Players are schemaless apart from id and timestamps.
    player: dict[str, Any] = Field(default_factory=dict)


class PlayerResponse(BaseModel):
    success: bool = True
    player: dict[str, Any]


class UploadResponse(BaseModel):
    success: bool = True
    imageUrl: str


class SettingsUpdate(BaseModel):
    welcomeScreen: Optional[bool] = None
    contactUsButton: Optional[bool] = None


class SettingsUpdateResponse(BaseModel):
    message: str
    settings: dict[str, Any]
