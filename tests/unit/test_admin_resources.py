"""
Unit tests for resource descriptors and the resource registry
"""
from types import SimpleNamespace

import pytest
from sqlalchemy import inspect

from tripadmin.admin.pages import CreateRecord, EditRecord, ListRecords, ViewRecord
from tripadmin.admin.registry import ResourceRegistry, default_registry
from tripadmin.admin.resources import PlaceResource, ReviewResource, TripDiaryResource
from tripadmin.core.exceptions import UnknownResourceError

EXPECTED_SLUGS = {
    "checklist-items",
    "checkpoint-images",
    "comments",
    "favorites",
    "itinerary-items",
    "map-checkpoints",
    "notifications",
    "places",
    "reviews",
    "shares",
    "translations",
    "trip-diaries",
    "trip-participants",
    "trips",
}

RESOURCES = default_registry.all()


def test_default_registry_holds_every_resource():
    assert {resource.slug for resource in RESOURCES} == EXPECTED_SLUGS
    assert len(default_registry) == 14


@pytest.mark.parametrize("resource", RESOURCES, ids=lambda r: r.slug)
def test_page_map_has_exactly_four_pages(resource):
    pages = resource.get_pages()

    assert {name: route.path for name, route in pages.items()} == {
        "index": "/",
        "create": "/create",
        "view": "/{record}",
        "edit": "/{record}/edit",
    }
    assert isinstance(pages["index"].page, ListRecords)
    assert isinstance(pages["create"].page, CreateRecord)
    assert isinstance(pages["view"].page, ViewRecord)
    assert isinstance(pages["edit"].page, EditRecord)
    for route in pages.values():
        assert route.page.resource is resource


@pytest.mark.parametrize("resource", RESOURCES, ids=lambda r: r.slug)
def test_schemas_bind_to_model_attributes(resource):
    mapper = inspect(resource.model)
    columns = set(mapper.columns.keys())
    relationships = set(mapper.relationships.keys())

    for name in resource.form().names():
        assert name in columns, f"{resource.slug} form field {name}"

    components = list(resource.infolist().components) + list(resource.table().columns)
    for component in components:
        head = component.name.split(".")[0]
        assert head in columns or head in relationships, f"{resource.slug} {component.name}"


@pytest.mark.parametrize("resource", RESOURCES, ids=lambda r: r.slug)
def test_tables_offer_view_edit_and_bulk_delete(resource):
    table = resource.table()

    assert [action.name for action in table.record_actions] == ["view", "edit"]
    assert [action.name for action in table.bulk_actions()] == ["delete"]
    assert resource.navigation_icon == "heroicon-o-rectangle-stack"


def test_get_url_expands_routes_under_admin_prefix():
    resource = PlaceResource()

    assert resource.get_url("index") == "/admin/places"
    assert resource.get_url("create") == "/admin/places/create"
    assert resource.get_url("view", 7) == "/admin/places/7"
    assert resource.get_url("edit", SimpleNamespace(id=7)) == "/admin/places/7/edit"


def test_get_url_requires_record_for_record_pages():
    with pytest.raises(ValueError):
        PlaceResource().get_url("edit")


def test_labels_and_record_titles():
    diary = TripDiaryResource()
    assert diary.slug == "trip-diaries"
    assert diary.get_label() == "Trip Diary"
    assert diary.get_plural_label() == "Trip Diaries"

    assert PlaceResource().get_record_title(SimpleNamespace(id=1, name="Gion")) == "Gion"
    assert ReviewResource().get_record_title(SimpleNamespace(id=3)) == "Review #3"


def test_registry_rejects_duplicate_slugs():
    registry = ResourceRegistry([PlaceResource()])

    with pytest.raises(ValueError):
        registry.register(PlaceResource())


def test_registry_unknown_slug():
    registry = ResourceRegistry([PlaceResource()])

    assert "places" in registry
    with pytest.raises(UnknownResourceError) as exc_info:
        registry.get("hotels")
    assert exc_info.value.status_code == 404
