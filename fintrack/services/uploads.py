import logging
import secrets
import time
from pathlib import Path

from fastapi import UploadFile

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".gif", ".webp"}
MAX_IMAGE_BYTES = 5 * 1024 * 1024


class UploadError(ValueError):
    pass


def build_upload_name(original_name: str) -> str:
    suffix = Path(original_name).suffix.lower()
    return f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{suffix}"


async def save_profile_image(upload: UploadFile, upload_dir: str) -> str:
    """Store an uploaded image and return its public ``/uploads/...`` path."""
    filename = upload.filename or ""
    if Path(filename).suffix.lower() not in ALLOWED_IMAGE_SUFFIXES:
        raise UploadError("Unsupported image type")

    content = await upload.read()
    if not content:
        raise UploadError("Uploaded file is empty")
    if len(content) > MAX_IMAGE_BYTES:
        raise UploadError("Uploaded file is too large")

    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)
    stored_name = build_upload_name(filename)
    (directory / stored_name).write_bytes(content)

    logger.info("Stored profile image %s (%d bytes)", stored_name, len(content))
    return f"/uploads/{stored_name}"
