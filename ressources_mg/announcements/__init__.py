"""
RessourcesMG Announcements
==========================

Banners managed by the webmaster; visitors only see active ones.
"""

from .models import Announcement, AnnouncementCreate, AnnouncementType, AnnouncementUpdate
from .database import AnnouncementsDB
from .service import AnnouncementService, get_announcement_service

__all__ = [
    "Announcement",
    "AnnouncementCreate",
    "AnnouncementType",
    "AnnouncementUpdate",
    "AnnouncementsDB",
    "AnnouncementService",
    "get_announcement_service",
]
