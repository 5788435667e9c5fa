# RessourcesMG API - Search Router
# ================================
"""Catalog search and question-based resource suggestions."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...catalog import get_catalog_service
from ...search import search_catalog, suggest_resources
from ...search.suggestions import MIN_QUESTION_LENGTH
from ..models.requests import SuggestRequest
from ..models.responses import envelope
from .auth import optional_webmaster

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def search(
    q: str = Query("", description="Search query"),
    category: Optional[str] = Query(None, description="Restrict to one category id"),
    webmaster: Optional[dict] = Depends(optional_webmaster),
):
    """
    Search the catalog.

    - **q**: words are matched with French synonyms, accents ignored
    - **category**: optional category id filter

    When nothing matches every word, `did_you_mean` lists close category or
    resource names and `partial` results match only some of the words.
    """
    categories = get_catalog_service().get_catalog(include_hidden=webmaster is not None)
    result = search_catalog(
        categories,
        q,
        selected_category=category,
        include_hidden=webmaster is not None,
    )
    return envelope(result.to_dict())


@router.post("/suggest")
async def suggest(body: SuggestRequest):
    """
    Suggest resources for a clinical question.

    Uses the hosted suggestion service when configured, the local matcher
    otherwise (or when the service fails).
    """
    question = (body.question or "").strip()
    if len(question) < MIN_QUESTION_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"code": "QUESTION_TOO_SHORT", "message": "Question trop courte"}
        )

    categories = get_catalog_service().get_catalog()
    result = suggest_resources(question, categories)
    logger.info(f"Suggestions ({result.source}): {len(result.suggestions)} for '{question[:80]}'")
    return envelope(result.to_dict())
