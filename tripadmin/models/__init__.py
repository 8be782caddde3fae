"""
Persisted entities of the trip planner.

Importing this package registers every model on the declarative Base.
"""

from .user import User
from .personal_access_token import PersonalAccessToken
from .trip import Trip
from .place import Place
from .checklist_item import ChecklistItem
from .map_checkpoint import MapCheckpoint
from .checkpoint_image import CheckpointImage
from .comment import Comment
from .review import Review
from .favorite import Favorite
from .itinerary_item import ItineraryItem
from .notification import Notification
from .share import Share
from .translation import Translation
from .trip_diary import TripDiary
from .trip_participant import TripParticipant
from .morph import MorphTarget

__all__ = [
    "User",
    "PersonalAccessToken",
    "Trip",
    "Place",
    "ChecklistItem",
    "MapCheckpoint",
    "CheckpointImage",
    "Comment",
    "Review",
    "Favorite",
    "ItineraryItem",
    "Notification",
    "Share",
    "Translation",
    "TripDiary",
    "TripParticipant",
    "MorphTarget",
]
