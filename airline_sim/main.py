"""FastAPI application exposing the airline simulation."""

import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Config, UnknownDifficultyError
from .logger import configure_logging
from .routes import game_router, save_router, status_router
from .save_manager import InvalidSlotError, SaveFormatError, SaveNotFoundError
from .services.game_service import GameNotFoundError
from .turn_engine import GameOverError

config = Config()

# Configure logging
configure_logging(config.LOG_LEVEL, config.LOG_FILE)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(title="Airline Simulation API", version="1.0.0")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.exception_handler(GameNotFoundError)
async def game_not_found_handler(request: Request, exc: GameNotFoundError):
    return _error(404, exc)


@app.exception_handler(SaveNotFoundError)
async def save_not_found_handler(request: Request, exc: SaveNotFoundError):
    return _error(404, exc)


@app.exception_handler(GameOverError)
async def game_over_handler(request: Request, exc: GameOverError):
    return _error(409, exc)


@app.exception_handler(SaveFormatError)
async def save_format_handler(request: Request, exc: SaveFormatError):
    logger.error(f"Error loading save: {exc}")
    return _error(422, exc)


@app.exception_handler(InvalidSlotError)
async def invalid_slot_handler(request: Request, exc: InvalidSlotError):
    return _error(400, exc)


@app.exception_handler(UnknownDifficultyError)
async def unknown_difficulty_handler(request: Request, exc: UnknownDifficultyError):
    return _error(400, exc)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Airline Simulation API", "status": "running"}


app.include_router(game_router)
app.include_router(status_router)
app.include_router(save_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
