"""Prompt composition for document question answering"""
from langchain_core.prompts import PromptTemplate

MAX_CONTENT_LENGTH = 30000
TRUNCATION_MARKER = "... [content truncated]"

QA_PROMPT = PromptTemplate(
    template="""Based on the following document content, please answer the question accurately and concisely.

Document Content:
{content}

Question: {question}

Please provide a clear and helpful answer based on the information in the document. If the answer cannot be found in the document, please state that clearly.""",
    input_variables=["content", "question"],
)


def truncate_content(content: str, limit: int = MAX_CONTENT_LENGTH) -> str:
    """Cut content to ``limit`` characters, appending the truncation marker when cut"""
    if len(content) > limit:
        return content[:limit] + TRUNCATION_MARKER
    return content


def build_prompt(content: str, question: str, max_content_length: int = MAX_CONTENT_LENGTH) -> str:
    """
    Combine document content and a question into the prompt sent to the model

    Args:
        content: Extracted document text
        question: User question, embedded verbatim
        max_content_length: Character ceiling for the document section

    Returns:
        Prompt text
    """
    return QA_PROMPT.format(
        content=truncate_content(content, max_content_length),
        question=question,
    )
