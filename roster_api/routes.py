"""
HTTP routes for the roster admin API.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from roster_api.config import Settings
from roster_api.dependencies import (
    get_app_settings,
    get_image_store,
    get_player_repository,
    get_settings_repository,
)
from roster_api.errors import AuthenticationError, UploadError
from roster_api.players import PlayerRepository
from roster_api.schemas import (
    AuthRequest,
    MessageResponse,
    PlayerPayload,
    PlayerResponse,
    SettingsUpdate,
    SettingsUpdateResponse,
    UploadResponse,
)
from roster_api.settings_store import SettingsRepository
from roster_api.storage import MAX_UPLOAD_BYTES, ImageStore, check_payload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/auth", response_model=MessageResponse)
def authenticate(
    payload: Optional[AuthRequest] = None,
    settings: Settings = Depends(get_app_settings),
):
    password = payload.password if payload else None
    if password != settings.admin_password:
        raise AuthenticationError("Invalid password")
    return MessageResponse(success=True, message="Authentication successful")


@router.get("/players")
def list_players(players: PlayerRepository = Depends(get_player_repository)):
    return players.list_players()


@router.post("/players", response_model=PlayerResponse)
def add_player(
    payload: PlayerPayload,
    players: PlayerRepository = Depends(get_player_repository),
):
    logger.debug("Create player body: %s", payload.player)
    return PlayerResponse(player=players.create_player(payload.player))


@router.put("/players/{player_id}", response_model=PlayerResponse)
def update_player(
    player_id: str,
    payload: PlayerPayload,
    players: PlayerRepository = Depends(get_player_repository),
):
    return PlayerResponse(player=players.update_player(player_id, payload.player))


@router.delete("/players/{player_id}", response_model=MessageResponse)
def delete_player(
    player_id: str,
    players: PlayerRepository = Depends(get_player_repository),
):
    players.delete_player(player_id)
    return MessageResponse(success=True, message="Player deleted successfully")


@router.post("/upload", response_model=UploadResponse)
async def upload_image(
    image: Optional[UploadFile] = File(None),
    images: ImageStore = Depends(get_image_store),
):
    if image is None or not image.filename:
        raise UploadError("No file uploaded")

    # One byte past the limit is enough to tell an oversized upload apart.
    payload = await image.read(MAX_UPLOAD_BYTES + 1)
    check_payload(payload)
    content_type = image.content_type or "application/octet-stream"
    image_url = images.upload_image(payload, content_type, image.filename)
    return UploadResponse(imageUrl=image_url)


@router.get("/settings")
def get_settings(store: SettingsRepository = Depends(get_settings_repository)):
    return store.get_settings()


@router.put("/settings", response_model=SettingsUpdateResponse)
def put_settings(
    payload: SettingsUpdate,
    store: SettingsRepository = Depends(get_settings_repository),
):
    settings = store.put_settings(payload.welcomeScreen, payload.contactUsButton)
    return SettingsUpdateResponse(
        message="Settings updated successfully", settings=settings
    )
