from tripadmin.admin.fields import (
    IconEntry,
    MorphTypeSelect,
    Select,
    TextColumn,
    TextEntry,
    TextInput,
    Textarea,
)
from tripadmin.admin.resource import Resource
from tripadmin.admin.resources.common import moderation_fields, timestamp_columns, timestamp_entries
from tripadmin.admin.schemas import Form, Infolist, Table
from tripadmin.models import Comment


class CommentResource(Resource):
    model = Comment

    def form(self) -> Form:
        return Form([
            Select("user_id", required=True, relationship="user", title_attribute="name"),
            MorphTypeSelect(
                "entity_type",
                required=True,
                options=tuple(Comment.TARGETS),
                id_field="entity_id",
            ),
            TextInput("entity_id", required=True, numeric=True),
            Textarea("content", required=True, column_span_full=True),
            *moderation_fields(),
        ])

    def infolist(self) -> Infolist:
        return Infolist([
            TextEntry("user.name", label="User"),
            TextEntry("entity_type"),
            TextEntry("entity_id", numeric=True),
            TextEntry("content", column_span_full=True),
            IconEntry("is_flagged", boolean=True),
            *timestamp_entries(),
        ])

    def table(self) -> Table:
        return Table([
            TextColumn("user.name", label="User", searchable=True),
            TextColumn("entity_type", searchable=True),
            TextColumn("entity_id", numeric=True, sortable=True),
            TextColumn("content", searchable=True),
            TextColumn("is_flagged", boolean=True),
            *timestamp_columns(),
        ])
