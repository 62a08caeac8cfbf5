# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# - image.py: Image document and API schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .image import (
    ImageCreate,
    ImageList,
    ImageResponse,
    ImageUpdate,
)

__all__ = [
    "ImageCreate",
    "ImageList",
    "ImageResponse",
    "ImageUpdate",
]
