"""Gemini generateContent request and response schema"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Part(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: Optional[str] = None


class Content(BaseModel):
    model_config = ConfigDict(extra="ignore")

    parts: List[Part] = Field(default_factory=list)
    role: Optional[str] = None


class GenerationConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    temperature: float = 0.7
    top_k: int = Field(default=40, alias="topK")
    top_p: float = Field(default=0.95, alias="topP")
    max_output_tokens: int = Field(default=2048, alias="maxOutputTokens")


class SafetySetting(BaseModel):
    category: str
    threshold: str = "BLOCK_MEDIUM_AND_ABOVE"


SAFETY_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)


class GenerateContentRequest(BaseModel):
    """Body of a single-turn generateContent call"""
    model_config = ConfigDict(populate_by_name=True)

    contents: List[Content]
    generation_config: GenerationConfig = Field(
        default_factory=GenerationConfig, alias="generationConfig"
    )
    safety_settings: List[SafetySetting] = Field(
        default_factory=lambda: [SafetySetting(category=c) for c in SAFETY_CATEGORIES],
        alias="safetySettings",
    )

    @classmethod
    def from_prompt(cls, prompt: str) -> "GenerateContentRequest":
        return cls(contents=[Content(parts=[Part(text=prompt)])])

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class Candidate(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    content: Optional[Content] = None
    finish_reason: Optional[str] = Field(default=None, alias="finishReason")


class ErrorBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    code: Optional[int] = None
    message: Optional[str] = None
    status: Optional[str] = None


class GenerateContentResponse(BaseModel):
    """Envelope returned by generateContent.

    Every field is optional so that validation never fails on shape alone;
    ``answer_text`` decides whether the envelope actually carries an answer.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    candidates: Optional[List[Candidate]] = None
    error: Optional[ErrorBody] = None

    @property
    def answer_text(self) -> Optional[str]:
        """Text of the first part of the first candidate, if non-empty"""
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        text = content.parts[0].text
        return text if text else None

    @property
    def finish_reason(self) -> Optional[str]:
        if not self.candidates:
            return None
        return self.candidates[0].finish_reason
