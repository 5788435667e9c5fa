# RessourcesMG API Response Models
# ================================
"""Response envelope shared by all endpoints."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class MetaInfo(BaseModel):
    """Response metadata."""
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())


class ErrorDetail(BaseModel):
    """Error details."""
    code: str
    message: str


class APIResponse(BaseModel):
    """Standard API response wrapper."""
    success: bool = True
    data: Optional[Any] = None
    error: Optional[ErrorDetail] = None
    meta: MetaInfo = Field(default_factory=MetaInfo)


def envelope(data: Any = None) -> Dict[str, Any]:
    """Wrap a payload in the success envelope."""
    return APIResponse(data=data).model_dump(exclude={"error"})
