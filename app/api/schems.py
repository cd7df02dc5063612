from pydantic import BaseModel
from typing import Optional, Literal


class SummarizeRequest(BaseModel):
    """Model for requesting video summarization."""
    url: Optional[str] = None


class SummaryResponse(BaseModel):
    """Model for summary responses."""
    success: bool = True
    summary: str
    method: Optional[Literal["transcript", "video"]] = None


class HealthResponse(BaseModel):
    """Model for health check responses."""
    status: str
    model: str
    fallback_policy: str
