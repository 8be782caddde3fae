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
from tripadmin.models import ItineraryItem


class ItineraryItemResource(Resource):
    model = ItineraryItem
    record_title_attribute = "title"

    def form(self) -> Form:
        return Form([
            Select("trip_id", required=True, relationship="trip", title_attribute="title"),
            TextInput("title", required=True),
            TextInput("day_number", required=True, numeric=True),
            DateTimePicker("start_time"),
            DateTimePicker("end_time"),
            Select("place_id", relationship="place", title_attribute="name"),
            Textarea("note", column_span_full=True),
        ])

    def infolist(self) -> Infolist:
        return Infolist([
            TextEntry("trip.title", label="Trip"),
            TextEntry("title"),
            TextEntry("day_number", numeric=True),
            TextEntry("start_time", date_time=True, placeholder=PLACEHOLDER),
            TextEntry("end_time", date_time=True, placeholder=PLACEHOLDER),
            TextEntry("place.name", label="Place", placeholder=PLACEHOLDER),
            TextEntry("note", placeholder=PLACEHOLDER, column_span_full=True),
            *timestamp_entries(),
        ])

    def table(self) -> Table:
        return Table([
            TextColumn("trip.title", label="Trip", searchable=True),
            TextColumn("title", searchable=True),
            TextColumn("day_number", numeric=True, sortable=True),
            TextColumn("start_time", date_time=True, sortable=True),
            TextColumn("end_time", date_time=True, sortable=True),
            TextColumn("place.name", label="Place", searchable=True),
            *timestamp_columns(),
        ])
