from tripadmin.admin.fields import IconEntry, Select, TextColumn, TextEntry, TextInput, Toggle
from tripadmin.admin.resource import Resource
from tripadmin.admin.resources.common import timestamp_columns, timestamp_entries
from tripadmin.admin.schemas import Form, Infolist, Table
from tripadmin.models import ChecklistItem


class ChecklistItemResource(Resource):
    model = ChecklistItem
    record_title_attribute = "content"

    def form(self) -> Form:
        return Form([
            Select("trip_id", required=True, relationship="trip", title_attribute="title"),
            Select("user_id", required=True, relationship="user", title_attribute="name"),
            TextInput("content", required=True),
            Toggle("is_checked", required=True),
        ])

    def infolist(self) -> Infolist:
        return Infolist([
            TextEntry("trip.title", label="Trip"),
            TextEntry("user.name", label="User"),
            TextEntry("content"),
            IconEntry("is_checked", boolean=True),
            *timestamp_entries(),
        ])

    def table(self) -> Table:
        return Table([
            TextColumn("trip.title", label="Trip", searchable=True),
            TextColumn("user.name", label="User", searchable=True),
            TextColumn("content", searchable=True),
            TextColumn("is_checked", boolean=True),
            *timestamp_columns(),
        ])
