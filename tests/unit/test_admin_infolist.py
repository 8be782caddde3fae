"""
Unit tests for infolist rendering on view pages
"""
from datetime import date, datetime

from tripadmin.admin.fields import BOOLEAN_FALSE_ICON, BOOLEAN_TRUE_ICON, IconEntry, TextEntry
from tripadmin.admin.resources import ItineraryItemResource, MapCheckpointResource, PlaceResource, TripResource
from tripadmin.models import ItineraryItem, MapCheckpoint


def _by_name(entries):
    return {entry["name"]: entry for entry in entries}


def test_absent_optional_values_render_placeholder(db_session, trip):
    item = ItineraryItem(trip_id=trip.id, title="Arrive at Kansai airport", day_number=1)
    db_session.add(item)
    db_session.commit()

    entries = _by_name(ItineraryItemResource().infolist().render(item))

    assert entries["trip.title"]["value"] == "Spring in Kyoto"
    assert entries["trip.title"]["label"] == "Trip"
    assert entries["start_time"]["value"] == "-"
    assert entries["end_time"]["value"] == "-"
    assert entries["place.name"]["value"] == "-"
    assert entries["note"]["value"] == "-"
    assert entries["day_number"]["value"] == 1


def test_entries_without_placeholder_render_none():
    entry = TextEntry("title")

    assert entry.render(ItineraryItem(title=None))["value"] is None


def test_empty_string_renders_placeholder():
    entry = TextEntry("category", placeholder="-")

    rendered = entry.render(PlaceResource.model(category=""))

    assert rendered["value"] == "-"
    assert rendered["state"] == ""


def test_date_and_datetime_formatting(db_session, trip, test_user):
    checkpoint = MapCheckpoint(
        trip_id=trip.id,
        user_id=test_user.id,
        title="Torii gates",
        lat=34.9671,
        lng=135.7727,
        checked_in_at=datetime(2026, 4, 2, 8, 15, 0),
    )
    db_session.add(checkpoint)
    db_session.commit()

    checkpoint_entries = _by_name(MapCheckpointResource().infolist().render(checkpoint))
    trip_entries = _by_name(TripResource().infolist().render(trip))

    assert checkpoint_entries["checked_in_at"]["value"] == "2026-04-02 08:15:00"
    assert checkpoint_entries["checked_in_at"]["state"] == "2026-04-02T08:15:00"
    assert checkpoint_entries["user.name"]["value"] == "Traveler"
    assert checkpoint_entries["place.name"]["value"] == "-"
    assert trip_entries["start_date"]["value"] == "2026-04-01"
    assert trip_entries["progress"]["value"] == "-"
    assert trip_entries["start_date"]["state"] == date(2026, 4, 1).isoformat()


def test_boolean_icon_entry(trip):
    entries = _by_name(TripResource().infolist().render(trip))

    assert entries["is_group"]["value"] is False
    assert entries["is_group"]["icon"] == BOOLEAN_FALSE_ICON

    trip.is_group = True
    rendered = IconEntry("is_group", boolean=True).render(trip)
    assert rendered["icon"] == BOOLEAN_TRUE_ICON
    assert rendered["color"] == "success"


def test_entries_keep_schema_order(trip):
    names = [entry["name"] for entry in TripResource().infolist().render(trip)]

    assert names[:3] == ["user_id", "title", "destination_country"]
    assert names[-2:] == ["created_at", "updated_at"]
