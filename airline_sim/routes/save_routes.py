"""Routes for save slots."""

import logging
from fastapi import APIRouter, HTTPException
from ..save_manager import SaveMetadata
from ..schemas.game_schemas import GameResponse
from ..schemas.save_schemas import LoadRequest, SaveRequest, SaveSlotsResponse
from ..services.singleton import get_game_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["saves"])


@router.get("/saves", response_model=SaveSlotsResponse)
def list_saves():
    return SaveSlotsResponse(slots=get_game_service().list_saves())


@router.post("/games/{game_id}/save", response_model=SaveMetadata)
def save_game(game_id: str, request: SaveRequest):
    """
    Save a game to a slot, overwriting it.

    Args:
        game_id: Game to save
        request: Target slot

    Returns:
        Metadata of the written save
    """
    return get_game_service().save_game(game_id, request.slot)


@router.post("/saves/load", response_model=GameResponse, status_code=201)
def load_game(request: LoadRequest):
    """
    Resume a saved game as a new session.

    Returns:
        The new game id and the restored state
    """
    game_service = get_game_service()
    session = game_service.load_game(request.slot, seed=request.seed)
    return GameResponse(game_id=session.game_id, state=game_service.get_state(session.game_id))


@router.delete("/saves/{slot}", status_code=204)
def delete_save(slot: int):
    if not get_game_service().delete_save(slot):
        raise HTTPException(status_code=404, detail=f"No save found in slot {slot}")
