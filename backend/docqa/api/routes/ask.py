"""Question answering endpoint"""
import logging

from fastapi import APIRouter, Depends

from ...config import Settings
from ...models.response import AskMetadata, AskRequest, AskResponse
from ...services import AnswerClient, build_prompt
from ...utils.errors import AskError, ValidationError
from ...utils.helpers import error_response, utc_timestamp
from ..dependencies import get_answer_client, get_app_settings

logger = logging.getLogger(__name__)
router = APIRouter(tags=["ask"])


def validate_ask_request(request: AskRequest, max_question_length: int) -> None:
    """Reject blank or oversized fields before any prompt is built"""
    if not request.content or not request.content.strip():
        raise ValidationError("Missing content", "Please upload a document first")

    if not request.question or not request.question.strip():
        raise ValidationError("Missing question", "Please provide a question")

    if len(request.question) > max_question_length:
        raise ValidationError(
            "Question too long",
            f"Please keep your question under {max_question_length} characters",
        )


@router.post("/ask", response_model=AskResponse)
async def ask_question(
    request: AskRequest,
    settings: Settings = Depends(get_app_settings),
    answer_client: AnswerClient = Depends(get_answer_client),
):
    """
    Answer a question about previously extracted document content

    Error mapping: RateLimited -> 429, Forbidden and MissingCredential -> 403,
    any other provider failure -> 500.
    """
    validate_ask_request(request, settings.max_question_length)

    logger.info(f"Processing question: {request.question[:50]}...")

    prompt = build_prompt(request.content, request.question, settings.max_content_length)

    try:
        answer = await answer_client.ask(prompt)
    except AskError as e:
        logger.error(f"AI API error ({e.kind}): {e}")
        return error_response(
            e.status_code,
            "Failed to generate response",
            e.message,
            exc=e,
            include_details=settings.is_development,
        )

    return AskResponse(
        answer=answer,
        metadata=AskMetadata(
            question_length=len(request.question),
            response_length=len(answer),
            timestamp=utc_timestamp(),
        ),
    )
