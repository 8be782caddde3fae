from tripadmin.admin.fields import (
    PLACEHOLDER,
    DateTimePicker,
    IconEntry,
    KeyValue,
    Select,
    TextColumn,
    TextEntry,
    TextInput,
    Toggle,
)
from tripadmin.admin.resource import Resource
from tripadmin.admin.resources.common import timestamp_columns, timestamp_entries
from tripadmin.admin.schemas import Form, Infolist, Table
from tripadmin.models import CheckpointImage


class CheckpointImageResource(Resource):
    model = CheckpointImage
    record_title_attribute = "file_path"

    def form(self) -> Form:
        return Form([
            TextInput("map_checkpoint_id", required=True, numeric=True),
            Select("user_id", required=True, relationship="user", title_attribute="name"),
            TextInput("file_path", required=True),
            TextInput("caption"),
            KeyValue("moderation_results"),
            Toggle("is_flagged", required=True),
            DateTimePicker("uploaded_at", required=True),
        ])

    def infolist(self) -> Infolist:
        return Infolist([
            TextEntry("map_checkpoint_id", numeric=True),
            TextEntry("user.name", label="User"),
            TextEntry("file_path"),
            TextEntry("caption", placeholder=PLACEHOLDER),
            IconEntry("is_flagged", boolean=True),
            TextEntry("uploaded_at", date_time=True),
            *timestamp_entries(),
        ])

    def table(self) -> Table:
        return Table([
            TextColumn("map_checkpoint_id", numeric=True, sortable=True),
            TextColumn("user.name", label="User", searchable=True),
            TextColumn("file_path", searchable=True),
            TextColumn("caption", searchable=True),
            TextColumn("is_flagged", boolean=True),
            TextColumn("uploaded_at", date_time=True, sortable=True),
            *timestamp_columns(),
        ])
