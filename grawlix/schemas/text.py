from pydantic import BaseModel, Field
from typing import List, Optional


class TextFilterRequest(BaseModel):
    """Request model shared by check-text and censor-text."""
    content: Optional[str] = Field(None, description="Text to inspect; placeholder used when absent")
    extra_filters: Optional[List[str]] = Field(None, description="Terms disallowed for this request only")
    exclude_filters: Optional[List[str]] = Field(None, description="Terms allowed for this request only")


class ReplaceTextRequest(TextFilterRequest):
    """Request model for replace-text."""
    grawlix: str = Field(..., min_length=1, description="Literal replacement for every matched term")
