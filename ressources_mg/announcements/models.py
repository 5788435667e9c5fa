"""
Announcement Models
===================

Pydantic models for site-wide announcement banners.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class AnnouncementType(str, Enum):
    """Banner style."""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Announcement(BaseModel):
    """A banner shown at the top of the directory."""
    id: str
    title: str
    message: str
    type: AnnouncementType = AnnouncementType.INFO
    is_active: bool = True
    created_at: str
    updated_at: Optional[str] = None


class AnnouncementCreate(BaseModel):
    title: str
    message: str
    type: AnnouncementType = AnnouncementType.INFO
    is_active: bool = True


class AnnouncementUpdate(BaseModel):
    """Partial update; unset fields are left untouched."""
    title: Optional[str] = None
    message: Optional[str] = None
    type: Optional[AnnouncementType] = None
    is_active: Optional[bool] = None
