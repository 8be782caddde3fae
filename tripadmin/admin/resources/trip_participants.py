from tripadmin.admin.fields import DateTimePicker, TextColumn, TextEntry, TextInput
from tripadmin.admin.resource import Resource
from tripadmin.admin.resources.common import timestamp_columns, timestamp_entries
from tripadmin.admin.schemas import Form, Infolist, Table
from tripadmin.models import TripParticipant
from tripadmin.models.trip_participant import DEFAULT_PARTICIPANT_ROLE


class TripParticipantResource(Resource):
    model = TripParticipant

    def form(self) -> Form:
        return Form([
            TextInput("trip_id", required=True, numeric=True),
            TextInput("user_id", required=True, numeric=True),
            TextInput("role", required=True, default=DEFAULT_PARTICIPANT_ROLE),
            DateTimePicker("joined_at", required=True),
        ])

    def infolist(self) -> Infolist:
        return Infolist([
            TextEntry("trip_id", numeric=True),
            TextEntry("user_id", numeric=True),
            TextEntry("role"),
            TextEntry("joined_at", date_time=True),
            *timestamp_entries(),
        ])

    def table(self) -> Table:
        return Table([
            TextColumn("trip_id", numeric=True, sortable=True),
            TextColumn("user_id", numeric=True, sortable=True),
            TextColumn("role", searchable=True),
            TextColumn("joined_at", date_time=True, sortable=True),
            *timestamp_columns(),
        ])
