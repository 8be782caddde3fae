from tripadmin.admin.fields import PLACEHOLDER, TextColumn, TextEntry, TextInput, Textarea
from tripadmin.admin.resource import Resource
from tripadmin.admin.resources.common import timestamp_columns, timestamp_entries
from tripadmin.admin.schemas import Form, Infolist, Table
from tripadmin.models import Translation


class TranslationResource(Resource):
    model = Translation

    def form(self) -> Form:
        return Form([
            TextInput("user_id", required=True, numeric=True),
            TextInput("source_type", required=True),
            Textarea("source_text", column_span_full=True),
            TextInput("source_language", required=True),
            Textarea("translated_text", required=True, column_span_full=True),
            TextInput("target_language", required=True),
            TextInput("file_path"),
        ])

    def infolist(self) -> Infolist:
        return Infolist([
            TextEntry("user_id", numeric=True),
            TextEntry("source_type"),
            TextEntry("source_text", placeholder=PLACEHOLDER, column_span_full=True),
            TextEntry("source_language"),
            TextEntry("translated_text", column_span_full=True),
            TextEntry("target_language"),
            TextEntry("file_path", placeholder=PLACEHOLDER),
            *timestamp_entries(),
        ])

    def table(self) -> Table:
        return Table([
            TextColumn("user_id", numeric=True, sortable=True),
            TextColumn("source_type", searchable=True),
            TextColumn("source_language", searchable=True),
            TextColumn("target_language", searchable=True),
            TextColumn("file_path", searchable=True),
            *timestamp_columns(),
        ])
