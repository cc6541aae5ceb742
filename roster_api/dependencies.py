"""
Dependency wiring for the FastAPI app.

Store clients are built once by ``build_stores`` when the app is created and
kept on ``app.state``; the ``get_*`` functions hand them to route handlers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import Request

from roster_api.config import Settings
from roster_api.players import (
    DynamoPlayerRepository,
    InMemoryPlayerRepository,
    PlayerRepository,
)
from roster_api.settings_store import (
    InMemorySettingsRepository,
    SettingsRepository,
    SqlSettingsRepository,
)
from roster_api.storage import ImageStore, InMemoryImageStore, S3ImageStore

logger = logging.getLogger(__name__)


@dataclass
class Stores:
    players: PlayerRepository
    images: ImageStore
    settings: SettingsRepository


def build_player_repository(settings: Settings) -> PlayerRepository:
    if settings.use_in_memory_backends:
        return InMemoryPlayerRepository()
    return DynamoPlayerRepository(
        table_name=settings.players_table,
        region=settings.aws_region,
        endpoint_url=settings.dynamodb_endpoint_url,
        access_key_id=settings.aws_access_key_id,
        secret_access_key=settings.aws_secret_access_key,
    )


def build_image_store(settings: Settings) -> ImageStore:
    if settings.use_in_memory_backends:
        return InMemoryImageStore()
    return S3ImageStore(
        bucket=settings.images_bucket,
        region=settings.aws_region,
        endpoint=settings.s3_endpoint_url,
        access_key_id=settings.aws_access_key_id,
        secret_access_key=settings.aws_secret_access_key,
        public_base_url=settings.images_public_base_url,
    )


def build_settings_repository(settings: Settings) -> SettingsRepository:
    if settings.use_in_memory_backends or not settings.database_url:
        return InMemorySettingsRepository()
    return SqlSettingsRepository(settings.database_url)


def build_stores(settings: Settings) -> Stores:
    stores = Stores(
        players=build_player_repository(settings),
        images=build_image_store(settings),
        settings=build_settings_repository(settings),
    )
    logger.info(
        "Stores: players=%s images=%s settings=%s",
        stores.players.__class__.__name__,
        stores.images.__class__.__name__,
        stores.settings.__class__.__name__,
    )
    return stores


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_player_repository(request: Request) -> PlayerRepository:
    return request.app.state.stores.players


def get_image_store(request: Request) -> ImageStore:
    return request.app.state.stores.images


def get_settings_repository(request: Request) -> SettingsRepository:
    return request.app.state.stores.settings
