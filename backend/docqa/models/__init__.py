"""Data models for the application"""
from .document import ExtractedContent, MediaType, UploadedDocument
from .gemini import GenerateContentRequest, GenerateContentResponse
from .response import (
    AskMetadata,
    AskRequest,
    AskResponse,
    ErrorResponse,
    HealthResponse,
    MemoryUsage,
    StatsResponse,
    UploadMetadata,
    UploadResponse,
)

__all__ = [
    "ExtractedContent",
    "MediaType",
    "UploadedDocument",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "AskMetadata",
    "AskRequest",
    "AskResponse",
    "ErrorResponse",
    "HealthResponse",
    "MemoryUsage",
    "StatsResponse",
    "UploadMetadata",
    "UploadResponse",
]
