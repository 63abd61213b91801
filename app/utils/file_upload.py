"""
File Upload Utility - store uploaded images and CVs on disk.

Supported uploads:
- Images (.jpg, .jpeg, .png, .gif, .webp), max 5MB, saved to <public>/images
- CVs (.pdf, .doc, .docx), max 10MB, saved to <public>/cv

Stored names are <prefix>-<epoch ms>-<random><ext>, e.g. hero-1700000000000-123456789.png
"""

import logging
import os
import random
import time
from typing import NamedTuple

from fastapi import HTTPException, UploadFile

from app.core.config import get_settings

logger = logging.getLogger(__name__)

MAX_IMAGE_SIZE_MB = 5
MAX_CV_SIZE_MB = 10

ALLOWED_IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}
IMAGE_MIME_SUBTYPES = ("jpeg", "jpg", "png", "gif", "webp")

ALLOWED_CV_EXTENSIONS = {".pdf", ".doc", ".docx"}
ALLOWED_CV_MIMES = {
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

IMAGE_PREFIXES = {"hero", "about", "project"}


class StoredFile(NamedTuple):
    filename: str
    original_name: str
    path: str
    size: int
    mime_type: str


def get_file_extension(filename: str) -> str:
    """Get lowercase file extension."""
    if "." not in filename:
        return ""
    return "." + filename.rsplit(".", 1)[1].lower()


def make_stored_filename(prefix: str, original_name: str) -> str:
    """Unique on-disk name keeping the original extension."""
    unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    ext = os.path.splitext(original_name)[1]
    return f"{prefix}-{unique_suffix}{ext}"


def is_allowed_image(filename: str, content_type: str) -> bool:
    mime = (content_type or "").lower()
    if mime and any(subtype in mime for subtype in IMAGE_MIME_SUBTYPES):
        return True
    return get_file_extension(filename) in ALLOWED_IMAGE_EXTENSIONS


def is_allowed_cv(filename: str, content_type: str) -> bool:
    if (content_type or "").lower() in ALLOWED_CV_MIMES:
        return True
    return get_file_extension(filename) in ALLOWED_CV_EXTENSIONS


async def _store(file: UploadFile, directory: str, prefix: str, max_size_mb: int) -> StoredFile:
    content = await file.read()

    if len(content) > max_size_mb * 1024 * 1024:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size: {max_size_mb}MB"
        )

    os.makedirs(directory, exist_ok=True)
    filename = make_stored_filename(prefix, file.filename)
    path = os.path.join(directory, filename)
    with open(path, "wb") as fh:
        fh.write(content)

    if not os.path.exists(path):
        raise HTTPException(status_code=500, detail="File was not saved correctly. Please try again.")

    logger.info("Stored upload %s (%d bytes) as %s", file.filename, len(content), path)
    return StoredFile(
        filename=filename,
        original_name=file.filename,
        path=path,
        size=len(content),
        mime_type=file.content_type or "application/octet-stream",
    )


async def save_image_upload(file: UploadFile, prefix: str = "project") -> StoredFile:
    """
    Validate and store an uploaded image.

    Args:
        file: FastAPI UploadFile
        prefix: hero, about or project

    Raises:
        HTTPException on validation errors
    """
    if prefix not in IMAGE_PREFIXES:
        raise ValueError(f"Unknown image prefix: {prefix}")

    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="Please upload an image file")

    if not is_allowed_image(file.filename, file.content_type):
        raise HTTPException(
            status_code=400,
            detail="Invalid file type. Only image files (.jpg, .jpeg, .png, .gif, .webp) are allowed."
        )

    return await _store(file, get_settings().images_dir, prefix, MAX_IMAGE_SIZE_MB)


async def save_cv_upload(file: UploadFile) -> StoredFile:
    """Validate and store an uploaded CV (PDF or Word document)."""
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="Please upload a file")

    if not is_allowed_cv(file.filename, file.content_type):
        raise HTTPException(
            status_code=400,
            detail="Invalid file type. Only PDF and Word documents (.pdf, .doc, .docx) are allowed."
        )

    return await _store(file, get_settings().cv_dir, "cv", MAX_CV_SIZE_MB)


def delete_file(path: str) -> bool:
    """Remove a stored file. Missing files and OS errors are logged, not raised."""
    if not path or not os.path.exists(path):
        return False
    try:
        os.remove(path)
        return True
    except OSError as e:
        logger.error("Error deleting file %s: %s", path, e)
        return False


def get_upload_limits() -> dict:
    """Accepted formats and size limits, for the dashboard."""
    return {
        "image": {
            "extensions": sorted(ALLOWED_IMAGE_EXTENSIONS),
            "max_size_mb": MAX_IMAGE_SIZE_MB,
        },
        "cv": {
            "extensions": sorted(ALLOWED_CV_EXTENSIONS),
            "max_size_mb": MAX_CV_SIZE_MB,
        },
    }
