from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional


class TextRequest(BaseModel):
    """Text analysis request."""
    text: Optional[str] = Field(default=None, description="The text to analyze")
    provider: Optional[str] = Field(default=None, description="google (default), openai or deepseek")

    @field_validator("provider", mode="before")
    @classmethod
    def ignore_non_string_provider(cls, value: Any) -> Optional[str]:
        # Anything that is not a provider name falls back to the default provider
        return value if isinstance(value, str) else None


class ApiResponse(BaseModel):
    response: Optional[str] = Field(default=None, description="The model's answer")
    error: Optional[str] = Field(default=None, description="Error message if the request failed")
