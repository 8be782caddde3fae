from tripadmin.admin.fields import (
    PLACEHOLDER,
    DateTimePicker,
    Select,
    TextColumn,
    TextEntry,
    TextInput,
    Textarea,
)
from tripadmin.admin.resource import Resource
from tripadmin.admin.resources.common import timestamp_columns, timestamp_entries
from tripadmin.admin.schemas import Form, Infolist, Table
from tripadmin.models import MapCheckpoint


class MapCheckpointResource(Resource):
    model = MapCheckpoint
    record_title_attribute = "title"

    def form(self) -> Form:
        return Form([
            Select("trip_id", required=True, relationship="trip", title_attribute="title"),
            Select("place_id", relationship="place", title_attribute="name"),
            Select("user_id", required=True, relationship="user", title_attribute="name"),
            TextInput("title", required=True),
            TextInput("lat", required=True, numeric=True),
            TextInput("lng", required=True, numeric=True),
            DateTimePicker("checked_in_at"),
            Textarea("note", column_span_full=True),
        ])

    def infolist(self) -> Infolist:
        return Infolist([
            TextEntry("trip.title", label="Trip"),
            TextEntry("place.name", label="Place", placeholder=PLACEHOLDER),
            TextEntry("user.name", label="User"),
            TextEntry("title"),
            TextEntry("lat", numeric=True),
            TextEntry("lng", numeric=True),
            TextEntry("checked_in_at", date_time=True, placeholder=PLACEHOLDER),
            TextEntry("note", placeholder=PLACEHOLDER, column_span_full=True),
            *timestamp_entries(),
        ])

    def table(self) -> Table:
        return Table([
            TextColumn("trip.title", label="Trip", searchable=True),
            TextColumn("place.name", label="Place", searchable=True),
            TextColumn("user.name", label="User", searchable=True),
            TextColumn("title", searchable=True, sortable=True),
            TextColumn("lat", numeric=True, sortable=True),
            TextColumn("lng", numeric=True, sortable=True),
            TextColumn("checked_in_at", date_time=True, sortable=True),
            *timestamp_columns(),
        ])
