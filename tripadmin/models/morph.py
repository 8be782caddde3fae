"""
Polymorphic references stored as a tagged variant: a short kind tag plus an id.
"""
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from tripadmin.core.db import Base

# kind tag -> mapped class name
MORPH_MAP = {
    "trip": "Trip",
    "place": "Place",
    "map_checkpoint": "MapCheckpoint",
    "trip_diary": "TripDiary",
}


def model_for(kind: str):
    class_name = MORPH_MAP.get(kind)
    if class_name is None:
        return None
    for mapper in Base.registry.mappers:
        if mapper.class_.__name__ == class_name:
            return mapper.class_
    return None


class MorphTarget:
    """The set of kinds a polymorphic column pair may point at."""

    def __init__(self, *kinds: str):
        unknown = [k for k in kinds if k not in MORPH_MAP]
        if unknown:
            raise ValueError(f"Unknown morph kinds: {', '.join(unknown)}")
        self.kinds: Tuple[str, ...] = kinds

    def __contains__(self, kind: str) -> bool:
        return kind in self.kinds

    def __iter__(self):
        return iter(self.kinds)

    def resolve(self, session: Optional[Session], kind: str, identifier: int):
        """Load the referenced record, or None when it is missing or unreachable."""
        if session is None or kind not in self.kinds or identifier is None:
            return None
        model = model_for(kind)
        if model is None:
            return None
        return session.get(model, identifier)
