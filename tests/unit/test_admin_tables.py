"""
Unit tests for list page queries
"""
from datetime import date

import pytest

from tripadmin.admin.resources import MapCheckpointResource, PlaceResource, TripDiaryResource
from tripadmin.admin.tables import TableQuery, TableRenderer
from tripadmin.core.exceptions import InvalidTableQueryError
from tripadmin.models import MapCheckpoint, Place, TripDiary


@pytest.fixture
def places(db_session):
    rows = [
        Place(external_place_id="p-1", name="Kinkaku-ji", address="Kita Ward", lat=35.0394, lng=135.7292, category="temple"),
        Place(external_place_id="p-2", name="Nishiki Market", address="Nakagyo Ward", lat=35.0050, lng=135.7649, category="market"),
        Place(external_place_id="p-3", name="Ginkaku-ji", address="Sakyo Ward", lat=35.0270, lng=135.7982, category="temple"),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows


def _renderer(resource, max_per_page=100):
    return TableRenderer(resource.table(), resource.model, max_per_page=max_per_page)


def _names(page):
    return [row["columns"]["name"] for row in page.rows]


def test_lists_all_rows_in_id_order(db_session, places):
    page = _renderer(PlaceResource()).paginate(db_session, TableQuery())

    assert page.total == 3
    assert _names(page) == ["Kinkaku-ji", "Nishiki Market", "Ginkaku-ji"]
    assert page.last_page == 1


def test_search_is_case_insensitive_across_searchable_columns(db_session, places):
    page = _renderer(PlaceResource()).paginate(db_session, TableQuery(search="TEMPLE"))

    assert page.total == 2
    assert set(_names(page)) == {"Kinkaku-ji", "Ginkaku-ji"}

    page = _renderer(PlaceResource()).paginate(db_session, TableQuery(search="nakagyo"))
    assert _names(page) == ["Nishiki Market"]


def test_sort_by_sortable_column(db_session, places):
    page = _renderer(PlaceResource()).paginate(db_session, TableQuery(sort="lat", direction="desc"))

    assert _names(page) == ["Kinkaku-ji", "Ginkaku-ji", "Nishiki Market"]


def test_pagination(db_session, places):
    renderer = _renderer(PlaceResource())

    first = renderer.paginate(db_session, TableQuery(per_page=2, page=1))
    second = renderer.paginate(db_session, TableQuery(per_page=2, page=2))

    assert first.total == second.total == 3
    assert first.last_page == 2
    assert len(first.rows) == 2
    assert _names(second) == ["Ginkaku-ji"]


def test_hidden_columns_only_when_requested(db_session, places):
    renderer = _renderer(PlaceResource())

    default = renderer.paginate(db_session, TableQuery())
    toggled = renderer.paginate(db_session, TableQuery(columns=("created_at",)))

    assert "created_at" not in default.rows[0]["columns"]
    assert "created_at" in toggled.rows[0]["columns"]
    assert "updated_at" not in toggled.rows[0]["columns"]


def test_relationship_columns_join_related_table(db_session, trip, test_user, places):
    db_session.add_all([
        MapCheckpoint(trip_id=trip.id, user_id=test_user.id, place_id=places[0].id, title="Golden pavilion", lat=35.03, lng=135.72),
        MapCheckpoint(trip_id=trip.id, user_id=test_user.id, title="Hotel", lat=35.0, lng=135.75),
    ])
    db_session.commit()

    page = _renderer(MapCheckpointResource()).paginate(db_session, TableQuery(search="kinkaku"))

    assert page.total == 1
    assert page.rows[0]["columns"]["title"] == "Golden pavilion"
    assert page.rows[0]["columns"]["place.name"] == "Kinkaku-ji"


def test_date_columns_sort_and_format(db_session, trip, test_user):
    db_session.add_all([
        TripDiary(trip_id=trip.id, user_id=test_user.id, entry_date=date(2026, 4, 3), mood="tired"),
        TripDiary(trip_id=trip.id, user_id=test_user.id, entry_date=date(2026, 4, 1), mood="excited"),
    ])
    db_session.commit()

    page = _renderer(TripDiaryResource()).paginate(db_session, TableQuery(sort="entry_date"))

    assert [row["columns"]["entry_date"] for row in page.rows] == ["2026-04-01", "2026-04-03"]
    assert page.rows[0]["columns"]["trip.title"] == "Spring in Kyoto"


@pytest.mark.parametrize(
    "query",
    [
        TableQuery(sort="name_reversed"),
        TableQuery(sort="address"),
        TableQuery(sort="name"),
        TableQuery(sort="lat", direction="sideways"),
        TableQuery(columns=("rating",)),
        TableQuery(page=0),
        TableQuery(per_page=0),
        TableQuery(per_page=500),
    ],
)
def test_invalid_queries_are_rejected(db_session, query):
    with pytest.raises(InvalidTableQueryError) as exc_info:
        _renderer(PlaceResource()).paginate(db_session, query)

    assert exc_info.value.status_code == 400


def test_bulk_delete_counts_existing_rows(db_session, places):
    deleted = _renderer(PlaceResource()).bulk_delete(db_session, [places[0].id, places[2].id, 999])

    assert deleted == 2
    assert db_session.query(Place).count() == 1
