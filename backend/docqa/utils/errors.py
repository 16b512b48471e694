"""Error taxonomy for extraction, answering and request validation"""
from typing import Any, Dict, Optional


class DocQAError(Exception):
    """Base exception for all service errors"""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    @property
    def kind(self) -> str:
        """Stable name of the failure, e.g. ``RateLimited``"""
        return type(self).__name__

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Extraction
# =============================================================================


class ExtractionError(DocQAError):
    """Base exception for document-to-text extraction failures"""


class UnsupportedType(ExtractionError):
    """Declared media type is not PDF or a spreadsheet"""

    status_code = 400

    def __init__(self, media_type: Optional[str]):
        super().__init__(
            "Invalid file type. Only PDF and Excel files are allowed.",
            {"media_type": media_type},
        )
        self.media_type = media_type


class ParseFailure(ExtractionError):
    """The document buffer could not be decoded.

    ``cause`` keeps the low-level error for logging; it never reaches the client.
    """

    MESSAGES = {
        "pdf": "Failed to parse PDF file. Please ensure it contains readable text.",
        "spreadsheet": "Failed to parse Excel file. Please ensure it's a valid file.",
    }

    def __init__(self, format: str, cause: Optional[BaseException] = None):
        super().__init__(
            self.MESSAGES.get(format, f"Failed to parse {format} file."),
            {"format": format},
        )
        self.format = format
        self.cause = cause


class NoTextContent(ExtractionError):
    """The document parsed fine but holds no extractable text"""

    def __init__(self, format: str):
        if format == "pdf":
            message = "No text content found in PDF. Scanned or image-only PDFs are not supported."
        else:
            message = "No content could be extracted from the file"
        super().__init__(message, {"format": format})
        self.format = format


# =============================================================================
# Answering
# =============================================================================


class AskError(DocQAError):
    """Base exception for question-answering provider failures"""


class MissingCredential(AskError):
    status_code = 403

    def __init__(self):
        super().__init__("Gemini API key is not configured")


class Timeout(AskError):
    def __init__(self, timeout: float):
        super().__init__(
            "The AI service did not respond in time. Please try again.",
            {"timeout": timeout},
        )


class ProviderError(AskError):
    """Provider answered 2xx but reported an error object in the body"""

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message or "API returned an error", details)


class MalformedResponse(AskError):
    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("Invalid response structure from Gemini API", details)


class InvalidRequest(AskError):
    def __init__(self):
        super().__init__("Invalid API request. Please check your API key.", {"status": 400})


class Forbidden(AskError):
    status_code = 403

    def __init__(self):
        super().__init__("API key is invalid or doesn't have proper permissions.", {"status": 403})


class ModelUnavailable(AskError):
    def __init__(self):
        super().__init__("Model not found. Please contact support.", {"status": 404})


class RateLimited(AskError):
    status_code = 429

    def __init__(self):
        super().__init__("API rate limit exceeded. Please try again later.", {"status": 429})


class UpstreamError(AskError):
    """Any other non-2xx status, or a transport failure when ``status`` is None"""

    def __init__(self, status: Optional[int] = None, message: Optional[str] = None):
        if message is None:
            message = (
                f"API returned error: {status}"
                if status is not None
                else "Failed to get response from AI. Please try again."
            )
        super().__init__(message, {"status": status})
        self.status = status


# =============================================================================
# Request validation
# =============================================================================


class ValidationError(DocQAError):
    """Missing, blank or oversized request fields.

    ``error`` is the short envelope title, ``message`` the user-facing hint.
    """

    status_code = 400

    def __init__(self, error: str, message: str):
        super().__init__(message)
        self.error = error
