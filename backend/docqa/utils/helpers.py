"""Helper utility functions"""
import logging
import os
import traceback
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional

from fastapi.responses import JSONResponse

from ..models.response import ErrorResponse

logger = logging.getLogger(__name__)

SCRATCH_PREFIX = "upload-"


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def error_response(
    status_code: int,
    error: str,
    message: str,
    exc: Optional[BaseException] = None,
    include_details: bool = False,
) -> JSONResponse:
    """
    Build the JSON error envelope

    Args:
        status_code: HTTP status to return
        error: Short error title
        message: Human-readable explanation
        exc: Exception behind the failure, rendered into ``details`` when allowed
        include_details: Whether debugging details may be exposed

    Returns:
        JSONResponse carrying an ErrorResponse body
    """
    details = None
    if include_details and exc is not None:
        details = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__, chain=False))
    body = ErrorResponse(error=error, message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def scratch_path(upload_dir: str, filename: Optional[str]) -> str:
    """Unique per-request path for a transient upload file"""
    ext = os.path.splitext(filename or "")[1].lower()
    return os.path.join(upload_dir, f"{SCRATCH_PREFIX}{uuid.uuid4().hex}{ext}")


def cleanup_file(file_path: str) -> None:
    """Delete a transient upload file, logging instead of raising on failure"""
    try:
        os.remove(file_path)
        logger.info(f"Cleaned up temporary file: {file_path}")
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.error(f"Error deleting file {file_path}: {e}")


@contextmanager
def scratch_file(upload_dir: str, filename: Optional[str] = None) -> Iterator[str]:
    """Yield a scratch file path that is removed on every exit path"""
    os.makedirs(upload_dir, exist_ok=True)
    path = scratch_path(upload_dir, filename)
    try:
        yield path
    finally:
        cleanup_file(path)


def purge_upload_dir(upload_dir: str) -> int:
    """Remove leftover scratch files, returning how many were deleted"""
    if not os.path.isdir(upload_dir):
        return 0
    removed = 0
    for name in os.listdir(upload_dir):
        if not name.startswith(SCRATCH_PREFIX):
            continue
        path = os.path.join(upload_dir, name)
        if os.path.isfile(path):
            cleanup_file(path)
            removed += 1
    return removed
