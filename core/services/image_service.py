# =============================================================================
# core/services/image_service.py - Image Business Logic
# =============================================================================
# Handles image CRUD over the MongoDB "images" collection.
# Separates HTTP concerns from database/business logic.
#
# The service is built per request from the collection on the shared
# MongoConnection (see app/dependencies.py), so it holds no global state.
# =============================================================================

import logging
from typing import Any

from pymongo import DESCENDING, ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection

from app.exceptions import ImageNotFoundError, InvalidImageIdError
from core.models.image import ImageCreate, ImageResponse
from lib.utils import parse_object_id

logger = logging.getLogger(__name__)

IMAGES_COLLECTION = "images"


class ImageService:
    """
    Service for gallery image operations.

    Provides a clean interface between API routes and database.
    """

    def __init__(self, collection: AsyncCollection):
        self.collection = collection

    def _object_id(self, image_id: str):
        oid = parse_object_id(image_id)
        if oid is None:
            raise InvalidImageIdError(image_id)
        return oid

    async def list_images(self) -> list[ImageResponse]:
        """Return every image, newest first."""
        cursor = self.collection.find({}).sort("_id", DESCENDING)
        docs = await cursor.to_list(length=None)
        return [ImageResponse.from_document(doc) for doc in docs]

    async def get_image(self, image_id: str) -> ImageResponse:
        """
        Fetch one image.

        Raises:
            InvalidImageIdError: If image_id is not an ObjectId
            ImageNotFoundError: If no document has that id
        """
        doc = await self.collection.find_one({"_id": self._object_id(image_id)})
        if doc is None:
            raise ImageNotFoundError(image_id)
        return ImageResponse.from_document(doc)

    async def create_image(self, image: ImageCreate) -> ImageResponse:
        doc: dict[str, Any] = image.model_dump()
        result = await self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info(f"Stored image {result.inserted_id} ({image.name}, {image.size} bytes)")
        return ImageResponse.from_document(doc)

    async def rename_image(self, image_id: str, name: str) -> ImageResponse:
        """
        Change an image's display name.

        Returns:
            The updated image
        """
        doc = await self.collection.find_one_and_update(
            {"_id": self._object_id(image_id)},
            {"$set": {"name": name}},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            raise ImageNotFoundError(image_id)
        return ImageResponse.from_document(doc)

    async def delete_image(self, image_id: str) -> ImageResponse:
        """
        Remove an image document.

        Returns:
            The deleted image, so the caller can remove the stored file
        """
        doc = await self.collection.find_one_and_delete({"_id": self._object_id(image_id)})
        if doc is None:
            raise ImageNotFoundError(image_id)
        logger.info(f"Deleted image {image_id}")
        return ImageResponse.from_document(doc)
