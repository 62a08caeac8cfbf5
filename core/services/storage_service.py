# =============================================================================
# core/services/storage_service.py - Public Directory File Storage
# =============================================================================
# Writes uploaded images under the public directory so the static file
# handler serves them, and removes them when their document is deleted.
# =============================================================================

import logging
import re
from pathlib import Path
from uuid import uuid4

from app.exceptions import StorageUploadError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def safe_filename(filename: str) -> str:
    """
    Reduce a client-supplied filename to a safe basename.

    Example:
        safe_filename("../My Photo (1).PNG")  # "My_Photo_1_.PNG"
    """
    name = Path(filename.replace("\\", "/")).name
    name = _UNSAFE_CHARS.sub("_", name).strip("._")
    return name or "upload"


class StorageService:
    """
    Stores files in a subdirectory of the public directory.

    Paths handed back are relative to the public directory, e.g.
    "images/3f2a..._sunset.png", which is also the URL path the static
    handler serves them at.
    """

    def __init__(self, public_dir: Path, upload_dir_name: str = "images"):
        self.public_dir = Path(public_dir)
        self.upload_dir_name = upload_dir_name

    @property
    def upload_dir(self) -> Path:
        return self.public_dir / self.upload_dir_name

    def save(self, content: bytes, filename: str) -> str:
        """
        Write an uploaded file.

        Args:
            content: Raw file bytes
            filename: Original filename from the client

        Returns:
            Path relative to the public directory

        Raises:
            StorageUploadError: If the file cannot be written
        """
        stored_name = f"{uuid4().hex[:12]}_{safe_filename(filename)}"
        target = self.upload_dir / stored_name
        try:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as e:
            raise StorageUploadError(str(e))

        logger.info(f"Saved upload to {target}")
        return f"{self.upload_dir_name}/{stored_name}"

    def remove(self, relative_path: str) -> bool:
        """
        Delete a stored file if it is inside the upload directory.

        Returns:
            True if a file was removed
        """
        upload_root = self.upload_dir.resolve()
        target = (self.public_dir / relative_path).resolve()
        if not target.is_relative_to(upload_root) or not target.is_file():
            logger.warning(f"Not removing {relative_path}: no such upload")
            return False

        target.unlink()
        logger.info(f"Removed upload {relative_path}")
        return True
