# RessourcesMG API - Announcements Router
# =======================================
"""Announcement banners: public read, webmaster write."""

from typing import Optional

from fastapi import APIRouter, Depends, status

from ...announcements import AnnouncementCreate, AnnouncementUpdate, get_announcement_service
from ..models.responses import envelope
from .auth import optional_webmaster, require_webmaster

router = APIRouter()


@router.get("")
async def list_announcements(webmaster: Optional[dict] = Depends(optional_webmaster)):
    """Active announcements; the webmaster also sees inactive ones."""
    announcements = get_announcement_service().list_announcements(include_inactive=webmaster is not None)
    return envelope({"announcements": [a.model_dump() for a in announcements]})


@router.post("", status_code=status.HTTP_201_CREATED)
async def create(body: AnnouncementCreate, _: dict = Depends(require_webmaster)):
    announcement = get_announcement_service().create(body)
    return envelope(announcement.model_dump())


@router.patch("/{announcement_id}")
async def update(announcement_id: str, body: AnnouncementUpdate, _: dict = Depends(require_webmaster)):
    announcement = get_announcement_service().update(announcement_id, body)
    return envelope(announcement.model_dump())


@router.delete("/{announcement_id}")
async def delete(announcement_id: str, _: dict = Depends(require_webmaster)):
    get_announcement_service().delete(announcement_id)
    return envelope({"id": announcement_id})
