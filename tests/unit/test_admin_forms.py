"""
Unit tests for admin form validation
"""
from datetime import date, datetime

import pytest

from tripadmin.admin.forms import FormValidator
from tripadmin.admin.resources import (
    ChecklistItemResource,
    CommentResource,
    MapCheckpointResource,
    PlaceResource,
    TranslationResource,
    TripParticipantResource,
    TripResource,
)
from tripadmin.core.exceptions import FormValidationError


def _validator(resource):
    return FormValidator(resource.form(), resource.model)


def _messages(exc_info):
    return {error["field"]: error["message"] for error in exc_info.value.errors}


def test_empty_submission_reports_every_required_field(db_session):
    with pytest.raises(FormValidationError) as exc_info:
        _validator(PlaceResource()).validate(db_session, {})

    assert exc_info.value.fields() == {"external_place_id", "name", "address", "lat", "lng"}
    assert exc_info.value.status_code == 422
    assert _messages(exc_info)["name"] == "The name field is required."


def test_blank_strings_count_as_missing(db_session):
    with pytest.raises(FormValidationError) as exc_info:
        _validator(PlaceResource()).validate(
            db_session,
            {"external_place_id": "naver-1", "name": "   ", "address": "Kyoto", "lat": 1, "lng": 2},
        )

    assert exc_info.value.fields() == {"name"}


def test_numeric_fields_reject_text(db_session):
    with pytest.raises(FormValidationError) as exc_info:
        _validator(PlaceResource()).validate(
            db_session,
            {"external_place_id": "naver-1", "name": "Gion", "address": "Kyoto", "lat": "north", "lng": "135.77"},
        )

    assert _messages(exc_info) == {"lat": "The lat field must be a number."}


@pytest.mark.parametrize("value", ["nan", "inf", "-inf", float("nan")])
def test_numeric_fields_reject_non_finite_values(db_session, value):
    with pytest.raises(FormValidationError) as exc_info:
        _validator(PlaceResource()).validate(
            db_session,
            {"external_place_id": "naver-1", "name": "Gion", "address": "Kyoto", "lat": value, "lng": "135.77"},
        )

    assert _messages(exc_info) == {"lat": "The lat field must be a number."}


def test_numeric_fields_coerce_strings(db_session):
    cleaned = _validator(PlaceResource()).validate(
        db_session,
        {"external_place_id": 1001, "name": "Gion", "address": "Kyoto", "lat": "35.0037", "lng": "135.7788"},
    )

    assert cleaned["lat"] == pytest.approx(35.0037)
    assert cleaned["lng"] == pytest.approx(135.7788)
    assert cleaned["external_place_id"] == "1001"
    assert cleaned["category"] is None


def test_relationship_fields_reject_missing_records(db_session, test_user):
    with pytest.raises(FormValidationError) as exc_info:
        _validator(MapCheckpointResource()).validate(
            db_session,
            {"trip_id": 999, "user_id": test_user.id, "title": "Gate", "lat": 35.0, "lng": 135.0},
        )

    assert _messages(exc_info) == {"trip_id": "The selected trip id is invalid."}


def test_numeric_foreign_keys_are_checked(db_session):
    with pytest.raises(FormValidationError) as exc_info:
        _validator(TranslationResource()).validate(
            db_session,
            {
                "user_id": 42,
                "source_type": "text",
                "source_language": "ja",
                "translated_text": "Hello",
                "target_language": "en",
            },
        )

    assert exc_info.value.fields() == {"user_id"}


def test_defaults_fill_missing_values(db_session, trip, test_user):
    cleaned = _validator(TripParticipantResource()).validate(
        db_session,
        {"trip_id": trip.id, "user_id": test_user.id, "joined_at": "2026-04-01T09:30:00"},
    )

    assert cleaned["role"] == "viewer"
    assert cleaned["joined_at"] == datetime(2026, 4, 1, 9, 30)


def test_trip_status_defaults_to_planning(db_session, test_user):
    cleaned = _validator(TripResource()).validate(
        db_session,
        {
            "user_id": test_user.id,
            "title": "Seoul food tour",
            "destination_country": "Korea",
            "destination_city": "Seoul",
            "start_date": "2026-05-01",
            "end_date": "2026-05-04",
        },
    )

    assert cleaned["status"] == "planning"
    assert cleaned["is_group"] is False
    assert cleaned["start_date"] == date(2026, 5, 1)


def test_date_fields_reject_garbage(db_session, test_user):
    with pytest.raises(FormValidationError) as exc_info:
        _validator(TripResource()).validate(
            db_session,
            {
                "user_id": test_user.id,
                "title": "Seoul food tour",
                "destination_country": "Korea",
                "destination_city": "Seoul",
                "start_date": "next spring",
                "end_date": "2026-05-04",
            },
        )

    assert _messages(exc_info) == {"start_date": "The start date field must be a valid date."}


def test_toggle_rejects_non_boolean(db_session, trip, test_user):
    with pytest.raises(FormValidationError) as exc_info:
        _validator(ChecklistItemResource()).validate(
            db_session,
            {"trip_id": trip.id, "user_id": test_user.id, "content": "Passport", "is_checked": "maybe"},
        )

    assert _messages(exc_info) == {"is_checked": "The is checked field must be true or false."}


def test_morph_type_must_be_allowed(db_session, test_user, place):
    with pytest.raises(FormValidationError) as exc_info:
        _validator(CommentResource()).validate(
            db_session,
            {"user_id": test_user.id, "entity_type": "place", "entity_id": place.id, "content": "Lovely"},
        )

    assert exc_info.value.fields() == {"entity_type"}
    assert "trip, map_checkpoint, trip_diary" in _messages(exc_info)["entity_type"]


def test_morph_target_must_exist(db_session, test_user):
    with pytest.raises(FormValidationError) as exc_info:
        _validator(CommentResource()).validate(
            db_session,
            {"user_id": test_user.id, "entity_type": "trip", "entity_id": 999, "content": "Lovely"},
        )

    assert _messages(exc_info) == {"entity_id": "The selected entity id is invalid."}


def test_morph_reference_to_existing_record(db_session, test_user, trip):
    cleaned = _validator(CommentResource()).validate(
        db_session,
        {
            "user_id": test_user.id,
            "entity_type": "trip",
            "entity_id": str(trip.id),
            "content": "See you there",
            "moderation_results": {"adult": {"confidence": 0.1}},
        },
    )

    assert cleaned["entity_id"] == trip.id
    assert cleaned["is_flagged"] is False
    assert cleaned["moderation_results"] == {"adult": {"confidence": 0.1}}


def test_edit_merges_record_values(db_session, place):
    cleaned = _validator(PlaceResource()).validate(db_session, {"name": "Inari Shrine"}, record=place)

    assert cleaned["name"] == "Inari Shrine"
    assert cleaned["lat"] == pytest.approx(place.lat)
    assert cleaned["address"] == place.address


def test_edit_cannot_clear_required_field(db_session, place):
    with pytest.raises(FormValidationError) as exc_info:
        _validator(PlaceResource()).validate(db_session, {"name": ""}, record=place)

    assert exc_info.value.fields() == {"name"}
