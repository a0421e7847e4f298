"""Data loader module for parsing the aircraft and airport catalog CSV files."""

import logging
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from .config import AIRCRAFT_TYPES_CSV, AIRPORTS_CSV
from .models.aircraft import AircraftType
from .models.airport import Airport

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

AIRCRAFT_REQUIRED_COLUMNS = [
    "name", "category", "capacity", "range", "price", "operating_cost", "lease_per_quarter",
]
AIRPORT_REQUIRED_COLUMNS = ["code", "name", "x", "y", "region", "market_size"]


class CatalogError(ValueError):
    """Raised when a catalog file is missing required data."""


def _read_catalog(csv_path: PathLike, required_cols: List[str]) -> pd.DataFrame:
    """
    Read a semicolon separated catalog and check its header.

    Args:
        csv_path: Path to CSV file
        required_cols: Columns that must be present

    Returns:
        Parsed data frame
    """
    df = pd.read_csv(csv_path, sep=";")
    logger.info(f"Loaded {Path(csv_path).name} with {len(df)} rows")

    for col in required_cols:
        if col not in df.columns:
            raise CatalogError(f"Missing required column: {col}")

    return df


def load_aircraft_types(csv_path: PathLike = AIRCRAFT_TYPES_CSV) -> Dict[str, AircraftType]:
    """
    Parse aircraft_types.csv and produce AircraftType instances.

    Args:
        csv_path: Path to aircraft types CSV file

    Returns:
        Dictionary mapping type name to AircraftType, in catalog order
    """
    df = _read_catalog(csv_path, AIRCRAFT_REQUIRED_COLUMNS)
    aircraft_types = {}

    for _, row in df.iterrows():
        name = str(row["name"])
        cargo = row.get("cargo_capacity", 0)
        aircraft_types[name] = AircraftType(
            name=name,
            category=str(row["category"]),
            capacity=int(row["capacity"]),
            cargo_capacity=0 if pd.isna(cargo) else int(cargo),
            range=int(row["range"]),
            price=float(row["price"]),
            operating_cost=float(row["operating_cost"]),
            lease_per_quarter=float(row["lease_per_quarter"]),
        )

    logger.info(f"Loaded {len(aircraft_types)} aircraft types")
    return aircraft_types


def load_airports(csv_path: PathLike = AIRPORTS_CSV) -> Dict[str, Airport]:
    """
    Parse airports.csv and produce Airport instances.

    The ``player_hub`` column marks airports the player starts with.

    Args:
        csv_path: Path to airports CSV file

    Returns:
        Dictionary mapping airport code to Airport, in catalog order
    """
    df = _read_catalog(csv_path, AIRPORT_REQUIRED_COLUMNS)
    airports = {}

    for _, row in df.iterrows():
        code = str(row["code"])
        if code in airports:
            raise CatalogError(f"Duplicate airport code: {code}")
        slots = row.get("slots_available", 0)
        hub = row.get("player_hub", 0)
        airports[code] = Airport(
            code=code,
            name=str(row["name"]),
            x=float(row["x"]),
            y=float(row["y"]),
            region=str(row["region"]),
            market_size=int(row["market_size"]),
            slots_available=0 if pd.isna(slots) else int(slots),
            owned=not pd.isna(hub) and bool(int(hub)),
        )

    logger.info(f"Loaded {len(airports)} airports")
    return airports
