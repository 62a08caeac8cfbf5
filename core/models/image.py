# =============================================================================
# core/models/image.py - Image Schemas
# =============================================================================
# These models define the API contract for gallery images:
# - ImageCreate: Fields stored when an upload is accepted
# - ImageUpdate: JSON body for renaming an image
# - ImageResponse: Output when returning an image to clients
# - ImageList: Output for the gallery listing
#
# An image document in MongoDB looks like:
#   {"_id": ObjectId, "name": str, "size": int, "path": "images/abc.png",
#    "created_at": datetime}
# The file itself lives under the public directory at `path`.
# =============================================================================

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field


class ImageCreate(BaseModel):
    """Schema for a newly uploaded image."""
    name: str = Field(..., min_length=1, description="Display name (original filename)")
    size: int = Field(..., ge=0, description="File size in bytes")
    path: str = Field(..., description="Path relative to the public directory")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ImageUpdate(BaseModel):
    """
    Schema for renaming an image.

    Example:
        {"name": "Sunset over the lake"}
    """
    name: str = Field(..., min_length=1, max_length=255, description="New display name")

    model_config = {
        "json_schema_extra": {
            "example": {"name": "Sunset over the lake"}
        }
    }


class ImageResponse(BaseModel):
    """Schema returned to clients for one image."""
    id: str = Field(..., description="MongoDB ObjectId as hex string")
    name: str
    size: int
    path: str
    url: str = Field(..., description="URL the static handler serves the file at")
    created_at: datetime | None = None

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "ImageResponse":
        """Build a response from a raw MongoDB document."""
        path = str(doc.get("path", ""))
        return cls(
            id=str(doc["_id"]),
            name=str(doc.get("name", "")),
            size=int(doc.get("size") or 0),
            path=path,
            url="/" + path.lstrip("/"),
            created_at=doc.get("created_at"),
        )


class ImageList(BaseModel):
    """Gallery listing, newest first."""
    images: list[ImageResponse]
    count: int
    msg: str | None = None
