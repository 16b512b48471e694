"""Document upload and extraction endpoint"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.concurrency import run_in_threadpool

from ...config import Settings
from ...models.document import MediaType, UploadedDocument
from ...models.response import UploadMetadata, UploadResponse
from ...services import ContentExtractor
from ...utils.errors import ExtractionError, ValidationError
from ...utils.helpers import error_response, scratch_file
from ..dependencies import get_content_extractor, get_app_settings

logger = logging.getLogger(__name__)
router = APIRouter(tags=["documents"])

CHUNK_SIZE = 1024 * 1024


@router.post("/upload", response_model=UploadResponse)
async def upload_document(
    file: Optional[UploadFile] = File(None),
    settings: Settings = Depends(get_app_settings),
    content_extractor: ContentExtractor = Depends(get_content_extractor),
):
    """
    Upload a PDF or Excel file and return its extracted text

    Steps:
    1. Validate media type against the allow-list
    2. Stream the upload to a scratch file, enforcing the size ceiling
    3. Extract text in a worker thread
    4. Remove the scratch file, whatever the outcome
    """
    if file is None or not file.filename:
        raise ValidationError("No file uploaded", "Please select a file to upload")

    media_type = MediaType.parse(file.content_type)
    if media_type is None:
        logger.warning(f"Rejected upload {file.filename} with media type {file.content_type}")
        raise ValidationError(
            "Invalid file type",
            "Invalid file type. Only PDF and Excel files are allowed.",
        )

    logger.info(f"Processing file: {file.filename}")

    with scratch_file(settings.upload_dir, file.filename) as file_path:
        size = 0
        with open(file_path, "wb") as buffer:
            while True:
                chunk = await file.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > settings.max_file_size:
                    raise ValidationError(
                        "File too large",
                        f"File size must be less than {settings.max_file_size // (1024 * 1024)}MB",
                    )
                buffer.write(chunk)

        with open(file_path, "rb") as buffer:
            data = buffer.read()

        document = UploadedDocument(
            data=data,
            media_type=media_type,
            original_name=file.filename,
            size_bytes=size,
        )

        try:
            extracted = await run_in_threadpool(content_extractor.extract_document, document)
        except ExtractionError as e:
            logger.error(f"Upload error ({e.kind}) for {file.filename}: {e}")
            return error_response(
                e.status_code,
                "Failed to process file",
                e.message,
                exc=e,
                include_details=settings.is_development,
            )

    return UploadResponse(
        content=extracted.text,
        metadata=UploadMetadata(
            original_name=extracted.source_name,
            mime_type=media_type.value,
            size=size,
            content_length=len(extracted.text),
        ),
    )
