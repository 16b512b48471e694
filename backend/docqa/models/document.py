"""Document data models"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class MediaType(str, Enum):
    """Media types accepted for upload"""
    PDF = "application/pdf"
    XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    XLS = "application/vnd.ms-excel"

    @property
    def is_spreadsheet(self) -> bool:
        return self in (MediaType.XLSX, MediaType.XLS)

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["MediaType"]:
        """Return the matching member, or None for anything outside the allow-list"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class UploadedDocument(BaseModel):
    """Uploaded file held in memory for the duration of one extraction"""
    data: bytes
    media_type: MediaType
    original_name: str
    size_bytes: int


class ExtractedContent(BaseModel):
    """Plain text produced from an uploaded document"""
    model_config = ConfigDict(frozen=True)

    text: str
    source_name: str
