# src/providers/models.py — v1
"""Request/response schemas for the two image providers.

Each provider's wire format is a fixed pydantic structure; responses are
validated against it rather than probed field by field.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Wire(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ErrorBody(_Wire):
    """Error envelope shared by both providers: {"error": {"message": ...}}."""

    message: str | None = None


# === OPENAI: POST /images/generations ===


class OpenAIImageRequest(_Wire):
    model: str
    prompt: str
    size: str | None = None
    quality: str | None = None
    response_format: str | None = "b64_json"


class OpenAIImageDatum(_Wire):
    b64_json: str | None = None
    url: str | None = None


class OpenAIImageResponse(_Wire):
    data: list[OpenAIImageDatum] | None = None
    error: ErrorBody | None = None


# === GOOGLE: POST /models/{model}:generateContent ===


class GeminiInlineData(_Wire):
    mime_type: str | None = Field(default=None, alias="mimeType")
    data: str | None = None


class GeminiSnakeInlineData(_Wire):
    mime_type: str | None = None
    data: str | None = None


class GeminiPart(_Wire):
    text: str | None = None
    inline_data: GeminiInlineData | None = Field(default=None, alias="inlineData")
    inline_data_snake: GeminiSnakeInlineData | None = Field(
        default=None, alias="inline_data",
    )

    @property
    def image_data(self) -> str | None:
        """Base64 payload from either spelling of the inline data field."""
        if self.inline_data is not None and self.inline_data.data:
            return self.inline_data.data
        if self.inline_data_snake is not None and self.inline_data_snake.data:
            return self.inline_data_snake.data
        return None


class GeminiContent(_Wire):
    parts: list[GeminiPart] | None = None


class GeminiCandidate(_Wire):
    content: GeminiContent | None = None


class GeminiGenerateRequest(_Wire):
    contents: list[GeminiContent]

    @classmethod
    def from_prompt(cls, prompt: str) -> GeminiGenerateRequest:
        return cls(contents=[GeminiContent(parts=[GeminiPart(text=prompt)])])


class GeminiGenerateResponse(_Wire):
    candidates: list[GeminiCandidate] | None = None
    error: ErrorBody | None = None

    def first_image_data(self) -> str | None:
        for candidate in self.candidates or []:
            if candidate.content is None:
                continue
            for part in candidate.content.parts or []:
                data = part.image_data
                if data:
                    return data
        return None
