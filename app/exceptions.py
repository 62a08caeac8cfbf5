# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from lib.mongo_client import MongoConnectionError

logger = logging.getLogger(__name__)


class GalleryException(Exception):
    """
    Base exception for the gallery API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "GALLERY_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Image Exceptions
# =============================================================================

class ImageNotFoundError(GalleryException):
    """Raised when an image ID doesn't exist."""

    def __init__(self, image_id: str):
        super().__init__(
            message=f"Image not found: {image_id}",
            code="IMAGE_NOT_FOUND",
            status_code=404,
            suggestion="List images with GET / to find a valid id",
            details={"image_id": image_id}
        )


class InvalidImageIdError(GalleryException):
    """Raised when an image ID is not a valid ObjectId."""

    def __init__(self, image_id: str):
        super().__init__(
            message=f"Invalid image id: {image_id}",
            code="INVALID_IMAGE_ID",
            status_code=400,
            suggestion="Image ids are 24-character hex strings",
            details={"image_id": image_id}
        )


# =============================================================================
# Upload Exceptions
# =============================================================================

class InvalidFileTypeError(GalleryException):
    """Raised when uploaded file type is not allowed."""

    def __init__(self, filename: str, allowed: list[str]):
        super().__init__(
            message=f"Invalid file type: {filename}",
            code="INVALID_FILE_TYPE",
            status_code=400,
            suggestion=f"Only these file types are supported: {', '.join(allowed)}",
            details={"filename": filename, "allowed_types": allowed}
        )


class FileTooLargeError(GalleryException):
    """Raised when uploaded file exceeds size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"File too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            code="FILE_TOO_LARGE",
            status_code=413,
            suggestion=f"Upload a file smaller than {max_mb}MB",
            details={"size_mb": size_mb, "max_mb": max_mb}
        )


class EmptyUploadError(GalleryException):
    """Raised when the upload form has no file content."""

    def __init__(self):
        super().__init__(
            message="No file selected",
            code="EMPTY_UPLOAD",
            status_code=400,
            suggestion="Send the image in the 'image' field of a multipart form",
        )


class StorageUploadError(GalleryException):
    """Raised when an upload cannot be written to disk."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to store uploaded file: {error}",
            code="STORAGE_UPLOAD_ERROR",
            status_code=500,
            suggestion="Check that PUBLIC_DIR is writable",
            details={"error": error}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def gallery_exception_handler(
    request: Request,
    exc: GalleryException
) -> JSONResponse:
    """
    Convert GalleryException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def database_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle driver errors and requests made while no client exists."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    content = {
        "detail": "Database unavailable",
        "code": "DATABASE_ERROR",
    }
    if isinstance(exc, MongoConnectionError) and exc.suggestion:
        content["suggestion"] = exc.suggestion
    return JSONResponse(status_code=503, content=content)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors, including malformed JSON bodies.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc)
        }
    )


DATABASE_ERRORS = (PyMongoError, MongoConnectionError)
