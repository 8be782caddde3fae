from tripadmin.admin.fields import (
    PLACEHOLDER,
    DateTimePicker,
    KeyValue,
    Select,
    TextColumn,
    TextEntry,
    TextInput,
)
from tripadmin.admin.resource import Resource
from tripadmin.admin.resources.common import timestamp_columns, timestamp_entries
from tripadmin.admin.schemas import Form, Infolist, Table
from tripadmin.models import Notification


class NotificationResource(Resource):
    model = Notification
    record_title_attribute = "type"

    def form(self) -> Form:
        return Form([
            Select("user_id", required=True, relationship="user", title_attribute="name"),
            TextInput("type", required=True),
            TextInput("content", required=True),
            KeyValue("data"),
            DateTimePicker("read_at"),
        ])

    def infolist(self) -> Infolist:
        return Infolist([
            TextEntry("user.name", label="User"),
            TextEntry("type"),
            TextEntry("content"),
            TextEntry("read_at", date_time=True, placeholder=PLACEHOLDER),
            *timestamp_entries(),
        ])

    def table(self) -> Table:
        return Table([
            TextColumn("user.name", label="User", searchable=True),
            TextColumn("type", searchable=True),
            TextColumn("content", searchable=True),
            TextColumn("read_at", date_time=True, sortable=True),
            *timestamp_columns(),
        ])
