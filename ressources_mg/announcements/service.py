"""
Announcements Service
=====================
"""

import logging
from typing import List, Optional

from ..exceptions import NotFoundError, ValidationError
from .database import AnnouncementsDB
from .models import Announcement, AnnouncementCreate, AnnouncementUpdate

logger = logging.getLogger(__name__)


# Singleton instance
_announcement_service: Optional["AnnouncementService"] = None


def get_announcement_service() -> "AnnouncementService":
    """Get or create the global announcement service instance."""
    global _announcement_service
    if _announcement_service is None:
        _announcement_service = AnnouncementService()
    return _announcement_service


class AnnouncementService:
    """Service for announcement banners."""

    def __init__(self, db_path: Optional[str] = None):
        self.db = AnnouncementsDB(db_path)

    def list_announcements(self, include_inactive: bool = False) -> List[Announcement]:
        """Active announcements, or all of them for the webmaster."""
        rows = self.db.list_announcements(active_only=not include_inactive)
        return [Announcement(**row) for row in rows]

    def create(self, data: AnnouncementCreate) -> Announcement:
        title = (data.title or "").strip()
        message = (data.message or "").strip()
        if not title or not message:
            raise ValidationError("title et message requis")

        record = self.db.insert(title, message, data.type.value, data.is_active)
        logger.info(f"Announcement created: {record['id']} ({data.type.value})")
        return Announcement(**record)

    def update(self, announcement_id: str, update: AnnouncementUpdate) -> Announcement:
        fields = {}
        if update.title is not None:
            fields["title"] = update.title.strip()
        if update.message is not None:
            fields["message"] = update.message.strip()
        if update.type is not None:
            fields["type"] = update.type.value
        if update.is_active is not None:
            fields["is_active"] = update.is_active

        if not self.db.update(announcement_id, fields):
            raise NotFoundError("Annonce introuvable")
        return Announcement(**self.db.get(announcement_id))

    def delete(self, announcement_id: str):
        if not self.db.delete(announcement_id):
            raise NotFoundError("Annonce introuvable")
        logger.info(f"Announcement deleted: {announcement_id}")
