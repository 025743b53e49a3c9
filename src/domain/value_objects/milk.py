from __future__ import annotations

from enum import Enum


class Species(str, Enum):
    COW = "cow"
    BUFFALO = "buffalo"


class Shift(str, Enum):
    MORNING = "morning"
    EVENING = "evening"


def shift_field(species: Species, shift: Shift) -> str:
    """Name of the per-day mapping for a species/shift pair, e.g. ``cow_morning``."""
    return f"{Species(species).value}_{Shift(shift).value}"


# cow_morning, cow_evening, buffalo_morning, buffalo_evening
SHIFT_FIELDS: tuple[str, ...] = tuple(shift_field(sp, sh) for sp in Species for sh in Shift)
