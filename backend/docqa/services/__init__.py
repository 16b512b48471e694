"""Service layer for business logic"""
from .content_extractor import ContentExtractor
from .prompt_builder import build_prompt, truncate_content
from .answer_client import AnswerClient

__all__ = [
    "ContentExtractor",
    "build_prompt",
    "truncate_content",
    "AnswerClient",
]
