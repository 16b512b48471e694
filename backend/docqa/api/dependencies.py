"""Dependency injection for API routes"""
from fastapi import Request

from ..config import Settings
from ..services import AnswerClient, ContentExtractor


# Singleton instances
_content_extractor = None


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with"""
    return request.app.state.settings


def get_content_extractor() -> ContentExtractor:
    """Get ContentExtractor singleton"""
    global _content_extractor
    if _content_extractor is None:
        _content_extractor = ContentExtractor()
    return _content_extractor


def get_answer_client(request: Request) -> AnswerClient:
    """Get the AnswerClient bound to the app's settings"""
    answer_client = getattr(request.app.state, "answer_client", None)
    if answer_client is None:
        answer_client = AnswerClient(settings=request.app.state.settings)
        request.app.state.answer_client = answer_client
    return answer_client
