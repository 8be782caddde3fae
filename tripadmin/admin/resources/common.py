"""Entries and columns every resource shares."""

from typing import List

from tripadmin.admin.fields import PLACEHOLDER, KeyValue, TextColumn, TextEntry, Toggle


def timestamp_entries() -> List[TextEntry]:
    return [
        TextEntry("created_at", date_time=True, placeholder=PLACEHOLDER),
        TextEntry("updated_at", date_time=True, placeholder=PLACEHOLDER),
    ]


def timestamp_columns() -> List[TextColumn]:
    return [
        TextColumn("created_at", date_time=True, sortable=True, toggleable=True, toggled_hidden_by_default=True),
        TextColumn("updated_at", date_time=True, sortable=True, toggleable=True, toggled_hidden_by_default=True),
    ]


def moderation_fields() -> list:
    return [
        KeyValue("images"),
        KeyValue("moderation_results"),
        Toggle("is_flagged", required=True),
    ]
