"""Routes for financial reports, news and reference catalogs."""

import logging
from typing import Optional
from fastapi import APIRouter
from ..schemas.game_schemas import CatalogResponse, FinancialReportResponse, NewsResponse
from ..services.singleton import get_game_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["status"])


@router.get("/games/{game_id}/financials", response_model=FinancialReportResponse)
def get_financials(game_id: str):
    """
    Projected revenue and expenses for the current quarter.

    Returns:
        Revenue, expense breakdown, profit and per-route estimates
    """
    report = get_game_service().get_financials(game_id)
    return FinancialReportResponse(**report)


@router.get("/games/{game_id}/news", response_model=NewsResponse)
def get_news(game_id: str, limit: Optional[int] = 20):
    """
    Recent news headlines.

    Args:
        limit: Number of recent entries to return (default: 20, use 0 or None for all)
    """
    news = get_game_service().get_state(game_id).news_log
    if limit and limit > 0:
        news = news[-limit:]
    return NewsResponse(news=news)


@router.get("/catalog", response_model=CatalogResponse)
def get_catalog():
    """Aircraft types, airports, rival profiles and event templates."""
    return CatalogResponse(**get_game_service().get_catalog())
