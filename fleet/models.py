"""
fleet/models.py -- Domain dataclass for the vehicle registry.

Pure data container with zero logic. Field rules (non-empty name and brand,
year >= 1950) are enforced by core/validation.py before anything reaches the
store; the store itself does not check them.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Vehicle:
    """A registered vehicle.

    id is None before the record is written to the database.
    """

    name: str
    brand: str
    year: int
    id: Optional[int] = None
