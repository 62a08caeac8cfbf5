# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .image_service import IMAGES_COLLECTION, ImageService
from .storage_service import StorageService, safe_filename

__all__ = [
    "IMAGES_COLLECTION",
    "ImageService",
    "StorageService",
    "safe_filename",
]
