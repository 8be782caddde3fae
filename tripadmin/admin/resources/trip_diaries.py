from tripadmin.admin.fields import PLACEHOLDER, DatePicker, Select, TextColumn, TextEntry, TextInput, Textarea
from tripadmin.admin.resource import Resource
from tripadmin.admin.resources.common import timestamp_columns, timestamp_entries
from tripadmin.admin.schemas import Form, Infolist, Table
from tripadmin.models import TripDiary


class TripDiaryResource(Resource):
    model = TripDiary
    plural_label = "Trip Diaries"

    def form(self) -> Form:
        return Form([
            Select("trip_id", required=True, relationship="trip", title_attribute="title"),
            Select("user_id", required=True, relationship="user", title_attribute="name"),
            DatePicker("entry_date", required=True),
            Textarea("text", column_span_full=True),
            TextInput("mood"),
        ])

    def infolist(self) -> Infolist:
        return Infolist([
            TextEntry("trip.title", label="Trip"),
            TextEntry("user.name", label="User"),
            TextEntry("entry_date", date=True),
            TextEntry("text", placeholder=PLACEHOLDER, column_span_full=True),
            TextEntry("mood", placeholder=PLACEHOLDER),
            *timestamp_entries(),
        ])

    def table(self) -> Table:
        return Table([
            TextColumn("trip.title", label="Trip", searchable=True),
            TextColumn("user.name", label="User", searchable=True),
            TextColumn("entry_date", date=True, sortable=True),
            TextColumn("mood", searchable=True),
            *timestamp_columns(),
        ])
