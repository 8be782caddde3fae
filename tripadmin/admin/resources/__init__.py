"""Admin resources, one per managed entity, in navigation order."""

from .checklist_items import ChecklistItemResource
from .checkpoint_images import CheckpointImageResource
from .comments import CommentResource
from .favorites import FavoriteResource
from .itinerary_items import ItineraryItemResource
from .map_checkpoints import MapCheckpointResource
from .notifications import NotificationResource
from .places import PlaceResource
from .reviews import ReviewResource
from .shares import ShareResource
from .translations import TranslationResource
from .trip_diaries import TripDiaryResource
from .trip_participants import TripParticipantResource
from .trips import TripResource

RESOURCES = [
    TripResource,
    TripParticipantResource,
    ItineraryItemResource,
    MapCheckpointResource,
    CheckpointImageResource,
    ChecklistItemResource,
    TripDiaryResource,
    ShareResource,
    PlaceResource,
    ReviewResource,
    CommentResource,
    FavoriteResource,
    NotificationResource,
    TranslationResource,
]

__all__ = [resource.__name__ for resource in RESOURCES] + ["RESOURCES"]
