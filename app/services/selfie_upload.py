"""
Identity-verification selfie uploads.

Validates an uploaded image, gives it a collision-free name and hands it to
the configured storage backend.
"""

import logging
import os
import re
import time
from typing import BinaryIO, Dict, Optional

from fastapi import UploadFile

from app.core.config import settings
from app.core.storage import StorageBackend

logger = logging.getLogger(__name__)

SELFIE_FOLDER = "selfies"
DEFAULT_EXTENSION = ".jpg"
_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]")


class SelfieUploadError(ValueError):
    """Client-side problem with the uploaded file (bad type, too large, missing)"""


def build_selfie_key(original_filename: Optional[str], timestamp_ms: Optional[int] = None) -> str:
    """
    Storage key for a selfie: selfies/<sanitized stem>_<epoch ms><ext>.

    >>> build_selfie_key("my face.png", 1700000000000)
    'selfies/my_face_1700000000000.png'
    """
    name = os.path.basename(original_filename or "")
    stem, ext = os.path.splitext(name)
    stem = _UNSAFE_CHARS.sub("_", stem or "selfie")
    ext = ext or DEFAULT_EXTENSION
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{SELFIE_FOLDER}/{stem}_{timestamp_ms}{ext}"


def _size_of(file: BinaryIO) -> int:
    file.seek(0, os.SEEK_END)
    size = file.tell()
    file.seek(0)
    return size


def public_url(path: str) -> str:
    base = settings.FILE_BASE_URL.rstrip("/")
    return f"{base}{path}" if base else path


def store_selfie(upload: Optional[UploadFile], storage: StorageBackend) -> Dict[str, str]:
    """
    Validate and persist a selfie.

    Raises:
        SelfieUploadError: missing file, non-image content type or file too large
        StorageError: the backend could not write the file

    Returns:
        {"path": ..., "url": ...} for the stored file
    """
    if upload is None or not upload.filename:
        raise SelfieUploadError("No file uploaded")

    if not (upload.content_type or "").lower().startswith("image/"):
        raise SelfieUploadError("Invalid file type")

    size = _size_of(upload.file)
    if size > settings.SELFIE_MAX_BYTES:
        raise SelfieUploadError(
            f"File too large ({size} bytes, limit {settings.SELFIE_MAX_BYTES})"
        )

    key = build_selfie_key(upload.filename)
    path = storage.save(upload.file, key, upload.content_type)
    logger.info(f"Stored selfie {key} ({size} bytes)")

    return {"path": path, "url": public_url(path)}
