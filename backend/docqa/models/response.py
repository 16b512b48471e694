"""API request and response models"""
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes field names in camelCase, as the browser client expects"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UploadMetadata(CamelModel):
    original_name: str
    mime_type: str
    size: int
    content_length: int


class UploadResponse(CamelModel):
    """Response for document upload"""
    success: bool = True
    content: str
    metadata: UploadMetadata


class AskRequest(BaseModel):
    """Request for a question about previously extracted content.

    Both fields are optional here so that missing values reach the handler's
    own validation and get the 400 error envelope.
    """
    content: Optional[str] = None
    question: Optional[str] = None


class AskMetadata(CamelModel):
    question_length: int
    response_length: int
    timestamp: str


class AskResponse(CamelModel):
    """Response for a question"""
    success: bool = True
    answer: str
    metadata: AskMetadata


class ErrorResponse(BaseModel):
    """Error envelope shared by every endpoint"""
    error: str
    message: str
    details: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "healthy"
    timestamp: str
    uptime: float
    environment: str


class CpuUsage(BaseModel):
    user: float
    system: float


class MemoryUsage(BaseModel):
    rss: int
    vms: int


class StatsResponse(CamelModel):
    uptime: float
    memory: MemoryUsage
    cpu: CpuUsage
    platform: str
    python_version: str
    pid: int
    timestamp: str
