from tripadmin.admin.fields import (
    PLACEHOLDER,
    DatePicker,
    IconEntry,
    TextColumn,
    TextEntry,
    TextInput,
    Toggle,
)
from tripadmin.admin.resource import Resource
from tripadmin.admin.resources.common import timestamp_columns, timestamp_entries
from tripadmin.admin.schemas import Form, Infolist, Table
from tripadmin.models import Trip
from tripadmin.models.trip import DEFAULT_TRIP_STATUS


class TripResource(Resource):
    model = Trip
    record_title_attribute = "title"

    def form(self) -> Form:
        return Form([
            TextInput("user_id", required=True, numeric=True),
            TextInput("title", required=True),
            TextInput("destination_country", required=True),
            TextInput("destination_city", required=True),
            DatePicker("start_date", required=True),
            DatePicker("end_date", required=True),
            TextInput("status", required=True, default=DEFAULT_TRIP_STATUS),
            Toggle("is_group", required=True),
            TextInput("progress"),
        ])

    def infolist(self) -> Infolist:
        return Infolist([
            TextEntry("user_id", numeric=True),
            TextEntry("title"),
            TextEntry("destination_country"),
            TextEntry("destination_city"),
            TextEntry("start_date", date=True),
            TextEntry("end_date", date=True),
            TextEntry("status"),
            IconEntry("is_group", boolean=True),
            TextEntry("progress", placeholder=PLACEHOLDER),
            *timestamp_entries(),
        ])

    def table(self) -> Table:
        return Table(
            [
                TextColumn("user_id", numeric=True, sortable=True),
                TextColumn("title", searchable=True, sortable=True),
                TextColumn("destination_country", searchable=True),
                TextColumn("destination_city", searchable=True),
                TextColumn("start_date", date=True, sortable=True),
                TextColumn("end_date", date=True, sortable=True),
                TextColumn("status", searchable=True),
                TextColumn("is_group", boolean=True),
                TextColumn("progress", searchable=True),
                *timestamp_columns(),
            ],
            default_sort="start_date",
            default_sort_direction="desc",
        )
