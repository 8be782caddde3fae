from tripadmin.admin.fields import (
    PLACEHOLDER,
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
from tripadmin.models import Review


class ReviewResource(Resource):
    model = Review

    def form(self) -> Form:
        return Form([
            Select("user_id", required=True, relationship="user", title_attribute="name"),
            MorphTypeSelect(
                "reviewable_type",
                required=True,
                options=tuple(Review.TARGETS),
                id_field="reviewable_id",
            ),
            TextInput("reviewable_id", required=True, numeric=True),
            TextInput("rating", required=True, numeric=True),
            Textarea("comment", column_span_full=True),
            *moderation_fields(),
        ])

    def infolist(self) -> Infolist:
        return Infolist([
            TextEntry("user.name", label="User"),
            TextEntry("reviewable_type"),
            TextEntry("reviewable_id", numeric=True),
            TextEntry("rating", numeric=True),
            TextEntry("comment", placeholder=PLACEHOLDER, column_span_full=True),
            IconEntry("is_flagged", boolean=True),
            *timestamp_entries(),
        ])

    def table(self) -> Table:
        return Table([
            TextColumn("user.name", label="User", searchable=True),
            TextColumn("reviewable_type", searchable=True),
            TextColumn("reviewable_id", numeric=True, sortable=True),
            TextColumn("rating", numeric=True, sortable=True),
            TextColumn("is_flagged", boolean=True),
            *timestamp_columns(),
        ])
