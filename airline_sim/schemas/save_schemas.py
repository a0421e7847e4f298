"""Schemas for save slot endpoints."""

from pydantic import BaseModel, Field
from typing import List, Optional

from ..config import MAX_SAVE_SLOTS
from ..save_manager import SaveMetadata


class SaveRequest(BaseModel):
    """Request model for saving a game."""

    slot: int = Field(0, ge=0, lt=MAX_SAVE_SLOTS, description="Slot number, 0 is autosave")


class LoadRequest(BaseModel):
    """Request model for loading a saved game."""

    slot: int = Field(0, ge=0, lt=MAX_SAVE_SLOTS)
    seed: Optional[int] = None


class SaveSlotsResponse(BaseModel):
    """Metadata for every slot, null where a slot is empty."""

    slots: List[Optional[SaveMetadata]]
