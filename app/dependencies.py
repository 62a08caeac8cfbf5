# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The MongoConnection and Settings live on app.state (set in create_app /
# lifespan), so handlers never reach for module globals.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from core.services.image_service import IMAGES_COLLECTION, ImageService
from core.services.storage_service import StorageService
from lib.mongo_client import MongoConnection


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def get_mongo(request: Request) -> MongoConnection:
    """
    Get the application's MongoDB connection handle.

    Created during lifespan startup.
    """
    return request.app.state.mongo


def get_image_service(
    mongo: Annotated[MongoConnection, Depends(get_mongo)],
) -> ImageService:
    return ImageService(mongo.collection(IMAGES_COLLECTION))


def get_storage_service(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> StorageService:
    return StorageService(settings.PUBLIC_DIR, settings.UPLOAD_DIR_NAME)


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
MongoDep = Annotated[MongoConnection, Depends(get_mongo)]
ImageServiceDep = Annotated[ImageService, Depends(get_image_service)]
StorageDep = Annotated[StorageService, Depends(get_storage_service)]
