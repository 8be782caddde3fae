from tripadmin.admin.fields import PLACEHOLDER, TextColumn, TextEntry, TextInput
from tripadmin.admin.resource import Resource
from tripadmin.admin.resources.common import timestamp_columns, timestamp_entries
from tripadmin.admin.schemas import Form, Infolist, Table
from tripadmin.models import Place


class PlaceResource(Resource):
    model = Place
    record_title_attribute = "name"

    def form(self) -> Form:
        return Form([
            TextInput("external_place_id", required=True),
            TextInput("name", required=True),
            TextInput("address", required=True),
            TextInput("lat", required=True, numeric=True),
            TextInput("lng", required=True, numeric=True),
            TextInput("category"),
        ])

    def infolist(self) -> Infolist:
        return Infolist([
            TextEntry("external_place_id"),
            TextEntry("name"),
            TextEntry("address"),
            TextEntry("lat", numeric=True),
            TextEntry("lng", numeric=True),
            TextEntry("category", placeholder=PLACEHOLDER),
            *timestamp_entries(),
        ])

    def table(self) -> Table:
        return Table([
            TextColumn("external_place_id", searchable=True),
            TextColumn("name", searchable=True),
            TextColumn("address", searchable=True),
            TextColumn("lat", numeric=True, sortable=True),
            TextColumn("lng", numeric=True, sortable=True),
            TextColumn("category", searchable=True),
            *timestamp_columns(),
        ])
