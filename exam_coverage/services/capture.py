"""
File capture

Turns user-selected files into ``UploadedFile`` records holding a base64
data-URI payload, the same shape a browser FileReader produces.
"""

import base64
import os
import uuid
from typing import Optional

from exam_coverage.config import ALLOWED_EXTENSIONS, ALLOWED_MIME_TYPES, MAX_UPLOAD_BYTES
from exam_coverage.core.exceptions import UnsupportedFileError
from exam_coverage.models import UploadedFile

EXTENSION_MIME_TYPES = {
    ".pdf": "application/pdf",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
    ".heic": "image/heic",
    ".heif": "image/heif",
}


def resolve_mime_type(filename: str, content_type: Optional[str]) -> str:
    """
    Pick the mime type for an upload.

    The declared content type wins when it is allowed; otherwise the file
    extension decides.

    Raises:
        UnsupportedFileError: If neither identifies a supported format
    """
    declared = (content_type or "").split(";", 1)[0].strip().lower()
    if declared in ALLOWED_MIME_TYPES:
        return "image/jpeg" if declared == "image/jpg" else declared

    file_ext = os.path.splitext(filename or "")[1].lower()
    if file_ext in ALLOWED_EXTENSIONS:
        return EXTENSION_MIME_TYPES[file_ext]

    raise UnsupportedFileError(
        f"File type {content_type or 'unknown'} not supported. Upload scanned pages as images or PDF."
    )


def capture_file(
    filename: str,
    content_type: Optional[str],
    data: bytes,
    max_bytes: int = MAX_UPLOAD_BYTES,
) -> UploadedFile:
    """Build an UploadedFile from raw bytes."""
    mime_type = resolve_mime_type(filename, content_type)

    if not data:
        raise UnsupportedFileError(f"File {filename or '<unnamed>'} is empty")
    if len(data) > max_bytes:
        raise UnsupportedFileError(
            f"File {filename or '<unnamed>'} is too large. Max allowed: {max_bytes // (1024 * 1024)}MB"
        )

    encoded = base64.b64encode(data).decode("ascii")
    return UploadedFile(
        id=uuid.uuid4().hex,
        mime_type=mime_type,
        payload=f"data:{mime_type};base64,{encoded}",
        name=os.path.basename(filename or ""),
    )
