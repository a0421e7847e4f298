"""API schemas for request/response models."""

from .game_schemas import (
    AdvertisingRequest,
    AircraftTypeRequest,
    CatalogResponse,
    CreateRouteRequest,
    EmergencyLoanRequest,
    FinancialReportResponse,
    GameListResponse,
    GameResponse,
    LoanRequest,
    NewGameRequest,
    NewsResponse,
)
from .save_schemas import LoadRequest, SaveRequest, SaveSlotsResponse

__all__ = [
    "AdvertisingRequest",
    "AircraftTypeRequest",
    "CatalogResponse",
    "CreateRouteRequest",
    "EmergencyLoanRequest",
    "FinancialReportResponse",
    "GameListResponse",
    "GameResponse",
    "LoanRequest",
    "NewGameRequest",
    "NewsResponse",
    "LoadRequest",
    "SaveRequest",
    "SaveSlotsResponse",
]
