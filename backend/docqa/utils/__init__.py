"""Utility functions and helpers"""
from .helpers import (
    cleanup_file,
    error_response,
    purge_upload_dir,
    scratch_file,
    utc_timestamp,
)

__all__ = [
    "cleanup_file",
    "error_response",
    "purge_upload_dir",
    "scratch_file",
    "utc_timestamp",
]
