from tripadmin.admin.fields import Select, TextColumn, TextEntry, TextInput
from tripadmin.admin.resource import Resource
from tripadmin.admin.resources.common import timestamp_columns, timestamp_entries
from tripadmin.admin.schemas import Form, Infolist, Table
from tripadmin.models import Share
from tripadmin.models.share import DEFAULT_SHARE_PERMISSION


class ShareResource(Resource):
    model = Share
    record_title_attribute = "token"

    def form(self) -> Form:
        return Form([
            Select("trip_id", required=True, relationship="trip", title_attribute="title"),
            Select("user_id", required=True, relationship="user", title_attribute="name"),
            TextInput("permission", required=True, default=DEFAULT_SHARE_PERMISSION),
            TextInput("token", required=True),
        ])

    def infolist(self) -> Infolist:
        return Infolist([
            TextEntry("trip.title", label="Trip"),
            TextEntry("user.name", label="User"),
            TextEntry("permission"),
            TextEntry("token"),
            *timestamp_entries(),
        ])

    def table(self) -> Table:
        return Table([
            TextColumn("trip.title", label="Trip", searchable=True),
            TextColumn("user.name", label="User", searchable=True),
            TextColumn("permission", searchable=True),
            TextColumn("token", searchable=True),
            *timestamp_columns(),
        ])
