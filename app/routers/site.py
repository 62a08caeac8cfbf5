# =============================================================================
# app/routers/site.py - Site Route Group
# =============================================================================
# Mounted at "/". Serves the gallery listing and the upload form target,
# plus the health endpoints. Any non-static path outside /image lands here.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, File, Query, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from app.dependencies import ImageServiceDep, SettingsDep, StorageDep
from app.exceptions import EmptyUploadError, FileTooLargeError, InvalidFileTypeError
from app.routers.health import router as health_router
from core.models.image import ImageCreate, ImageList, ImageResponse

logger = logging.getLogger(__name__)

router = APIRouter()
router.include_router(health_router)

UPLOAD_CHUNK_SIZE = 1024 * 1024


async def read_limited(upload: UploadFile, limit: int) -> bytes:
    """
    Read an upload in chunks, stopping as soon as it grows past limit.

    Raises:
        FileTooLargeError: If the body is larger than limit bytes
    """
    chunks = []
    size = 0
    while chunk := await upload.read(UPLOAD_CHUNK_SIZE):
        size += len(chunk)
        if size > limit:
            raise FileTooLargeError(size / (1024 * 1024), limit // (1024 * 1024))
        chunks.append(chunk)
    return b"".join(chunks)


# =============================================================================
# Response Models
# =============================================================================

class UploadResponse(BaseModel):
    """Response when an image upload is accepted."""
    msg: str
    image: ImageResponse


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/", response_model=ImageList, tags=["Site"])
async def list_images(
    images: ImageServiceDep,
    msg: Annotated[str | None, Query(description="Status message to echo back")] = None,
):
    """
    Gallery home.

    Returns every stored image, newest first. `msg` carries the status
    message from a previous upload, as the original page did.
    """
    items = await images.list_images()
    return ImageList(images=items, count=len(items), msg=msg)


@router.post("/upload", response_model=UploadResponse, status_code=status.HTTP_201_CREATED, tags=["Site"])
async def upload_image(
    image: Annotated[UploadFile, File(description="Image file to upload")],
    images: ImageServiceDep,
    storage: StorageDep,
    settings: SettingsDep,
):
    """
    Upload an image.

    This endpoint:
    1. Validates the file (extension, size)
    2. Writes it under the public directory
    3. Stores an image document pointing at it
    """
    filename = image.filename or ""
    if not filename:
        raise EmptyUploadError()

    file_ext = "." + filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    if file_ext not in settings.allowed_extensions_list:
        raise InvalidFileTypeError(filename, settings.allowed_extensions_list)

    content = await read_limited(image, settings.max_upload_size_bytes)
    size = len(content)
    if size == 0:
        raise EmptyUploadError()

    logger.info(f"Processing upload: {filename} ({size} bytes)")

    path = await run_in_threadpool(storage.save, content, filename)
    try:
        stored = await images.create_image(ImageCreate(name=filename, size=size, path=path))
    except Exception:
        # Don't leave an orphaned file behind
        await run_in_threadpool(storage.remove, path)
        raise

    return UploadResponse(msg="File uploaded successfully", image=stored)
