from tripadmin.admin.fields import MorphTypeSelect, Select, TextColumn, TextEntry, TextInput
from tripadmin.admin.resource import Resource
from tripadmin.admin.resources.common import timestamp_columns, timestamp_entries
from tripadmin.admin.schemas import Form, Infolist, Table
from tripadmin.models import Favorite


class FavoriteResource(Resource):
    model = Favorite

    def form(self) -> Form:
        return Form([
            Select("user_id", required=True, relationship="user", title_attribute="name"),
            MorphTypeSelect(
                "favoritable_type",
                required=True,
                options=tuple(Favorite.TARGETS),
                id_field="favoritable_id",
            ),
            TextInput("favoritable_id", required=True, numeric=True),
        ])

    def infolist(self) -> Infolist:
        return Infolist([
            TextEntry("user.name", label="User"),
            TextEntry("favoritable_type"),
            TextEntry("favoritable_id", numeric=True),
            *timestamp_entries(),
        ])

    def table(self) -> Table:
        return Table([
            TextColumn("user.name", label="User", searchable=True),
            TextColumn("favoritable_type", searchable=True),
            TextColumn("favoritable_id", numeric=True, sortable=True),
            *timestamp_columns(),
        ])
