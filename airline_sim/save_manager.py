"""Save slots: versioned JSON snapshots of a game state on disk."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union
from pydantic import BaseModel, ValidationError

from .config import AUTOSAVE_SLOT, MAX_SAVE_SLOTS, SAVE_VERSION
from .models.game_state import GameState
from .validator import Validator

logger = logging.getLogger(__name__)


class SaveFormatError(Exception):
    """Raised when a save file cannot be read back into a game state."""


class SaveNotFoundError(Exception):
    """Raised when loading from an empty slot."""


class InvalidSlotError(ValueError):
    """Raised for a slot number outside the save slot range."""


class SaveMetadata(BaseModel):
    """Summary stored next to the state, readable without loading the game."""

    slot: int
    airline_name: str
    year: int
    quarter: int
    cash: float
    saved_at: datetime
    version: str


class SaveFile(BaseModel):
    """On-disk layout of a save slot."""

    metadata: SaveMetadata
    state: GameState


class SaveManager:
    """Reads and writes save slots under one directory."""

    def __init__(self, save_dir: Union[str, Path]):
        """
        Initialize save manager.

        Args:
            save_dir: Directory holding the slot files (created on first save)
        """
        self.save_dir = Path(save_dir)

    def _slot_path(self, slot: int) -> Path:
        if not 0 <= slot < MAX_SAVE_SLOTS:
            raise InvalidSlotError(f"Save slot must be between 0 and {MAX_SAVE_SLOTS - 1}, got {slot}")
        return self.save_dir / f"slot_{slot}.json"

    def save(self, state: GameState, slot: int = AUTOSAVE_SLOT) -> SaveMetadata:
        """
        Write a game state to a slot, replacing what was there.

        Args:
            state: Game state to save
            slot: Slot number (0 is the autosave slot)

        Returns:
            Metadata of the written save
        """
        path = self._slot_path(slot)
        save_file = SaveFile(
            metadata=SaveMetadata(
                slot=slot,
                airline_name=state.airline_name,
                year=state.year,
                quarter=state.quarter,
                cash=state.cash,
                saved_at=datetime.now(),
                version=SAVE_VERSION,
            ),
            state=state,
        )

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(save_file.model_dump_json(indent=2), encoding="utf-8")
        logger.info(f"Saved {state.airline_name} {state.get_date_string()} to slot {slot}")
        return save_file.metadata

    def autosave(self, state: GameState) -> SaveMetadata:
        return self.save(state, AUTOSAVE_SLOT)

    def _read(self, slot: int) -> dict:
        path = self._slot_path(slot)
        if not path.exists():
            raise SaveNotFoundError(f"No save found in slot {slot}")
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise SaveFormatError(f"Slot {slot} is not valid JSON: {e}") from e

    def load(self, slot: int = AUTOSAVE_SLOT) -> GameState:
        """
        Load the game state stored in a slot.

        Args:
            slot: Slot number

        Returns:
            The saved GameState

        Raises:
            SaveNotFoundError: If the slot is empty
            SaveFormatError: If the file is malformed, inconsistent or from another version
        """
        data = self._read(slot)
        metadata = data.get("metadata") if isinstance(data, dict) else None
        version = metadata.get("version") if isinstance(metadata, dict) else None
        if version != SAVE_VERSION:
            logger.warning(f"Save version mismatch in slot {slot}: {version} vs {SAVE_VERSION}")
            raise SaveFormatError(
                f"Slot {slot} was saved with version {version}, expected {SAVE_VERSION}"
            )

        try:
            save_file = SaveFile.model_validate(data)
        except ValidationError as e:
            logger.error(f"Corrupt save in slot {slot}: {e}")
            raise SaveFormatError(f"Slot {slot} does not contain a valid game state") from e

        report = Validator().validate_state_integrity(save_file.state)
        if not report.is_valid():
            logger.error(f"Inconsistent save in slot {slot}: {report.errors}")
            raise SaveFormatError(f"Slot {slot} is inconsistent: {report.first_error}")

        logger.info(f"Loaded slot {slot}: {save_file.metadata.airline_name}")
        return save_file.state

    def get_metadata(self, slot: int) -> Optional[SaveMetadata]:
        """Metadata for a slot, or None when the slot is empty or unreadable."""
        try:
            data = self._read(slot)
            return SaveMetadata.model_validate(data.get("metadata"))
        except SaveNotFoundError:
            return None
        except (SaveFormatError, ValidationError, AttributeError) as e:
            logger.warning(f"Unreadable metadata in slot {slot}: {e}")
            return None

    def list_slots(self) -> List[Optional[SaveMetadata]]:
        """Metadata for every slot in order, None for empty ones."""
        return [self.get_metadata(slot) for slot in range(MAX_SAVE_SLOTS)]

    def delete(self, slot: int) -> bool:
        """
        Remove a save slot.

        Returns:
            True if a file was deleted
        """
        path = self._slot_path(slot)
        if not path.exists():
            return False
        path.unlink()
        logger.info(f"Deleted slot {slot}")
        return True
