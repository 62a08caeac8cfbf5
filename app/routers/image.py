# =============================================================================
# app/routers/image.py - Image Route Group
# =============================================================================
# Mounted at "/image". Single-image view, rename and delete.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Path
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from app.dependencies import ImageServiceDep, StorageDep
from core.models.image import ImageResponse, ImageUpdate

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Image"])

ImageId = Annotated[str, Path(description="Image ObjectId (24 hex characters)")]


class DeleteResponse(BaseModel):
    msg: str
    id: str
    file_removed: bool


@router.get("/{image_id}", response_model=ImageResponse)
async def get_image(image_id: ImageId, images: ImageServiceDep):
    """Return one image."""
    return await images.get_image(image_id)


@router.put("/{image_id}", response_model=ImageResponse)
async def rename_image(image_id: ImageId, body: ImageUpdate, images: ImageServiceDep):
    """
    Rename an image.

    Body: {"name": "<new name>"}
    """
    return await images.rename_image(image_id, body.name)


@router.delete("/{image_id}", response_model=DeleteResponse)
async def delete_image(image_id: ImageId, images: ImageServiceDep, storage: StorageDep):
    """
    Delete an image document and its stored file.
    """
    deleted = await images.delete_image(image_id)
    removed = await run_in_threadpool(storage.remove, deleted.path)
    return DeleteResponse(msg="Image deleted", id=deleted.id, file_removed=removed)
