"""
Declarative widget descriptors for admin forms, infolists and tables.

A descriptor only says which attribute it binds to and how it is rendered;
validation lives in ``tripadmin.admin.forms`` and list queries in
``tripadmin.admin.tables``. Infolist entries render themselves.
"""

from dataclasses import dataclass, field, fields as dataclass_fields
from datetime import date, datetime
from typing import Any, ClassVar, Dict, Optional, Tuple

PLACEHOLDER = "-"

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

BOOLEAN_TRUE_ICON = "heroicon-o-check-circle"
BOOLEAN_FALSE_ICON = "heroicon-o-x-circle"


def default_label(name: str) -> str:
    """``trip.title`` -> ``Title``, ``checked_in_at`` -> ``Checked in at``"""
    last = name.rsplit(".", 1)[-1].replace("_", " ")
    return last[:1].upper() + last[1:]


def resolve_state(record: Any, name: str) -> Any:
    """Follow a dotted attribute path; a missing link yields None."""
    value = record
    for part in name.split("."):
        if value is None:
            return None
        value = getattr(value, part, None)
    return value


def format_date(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    return str(value)


def format_datetime(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.strftime(DATETIME_FORMAT)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day).strftime(DATETIME_FORMAT)
    return str(value)


def _serialize(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value


class Component:
    """Shared serialisation for every descriptor."""

    kind: ClassVar[str] = "component"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.kind}
        for f in dataclass_fields(self):
            if f.name.startswith("_"):
                continue
            data[f.name] = _serialize(getattr(self, f.name))
        data["label"] = self.get_label()
        return data

    def get_label(self) -> str:
        label = getattr(self, "label", None)
        return label or default_label(getattr(self, "name", self.kind))


# Form fields

@dataclass
class FormField(Component):
    name: str
    label: Optional[str] = None
    required: bool = False
    default: Any = None
    column_span_full: bool = False

    kind: ClassVar[str] = "field"
    python_type: ClassVar[Optional[type]] = str


@dataclass
class TextInput(FormField):
    numeric: bool = False
    placeholder: Optional[str] = None

    kind: ClassVar[str] = "text_input"


@dataclass
class Textarea(FormField):
    rows: int = 3

    kind: ClassVar[str] = "textarea"


@dataclass
class Select(FormField):
    """Select bound to a relationship of the model, e.g. ``trip`` for ``trip_id``."""
    relationship: Optional[str] = None
    title_attribute: str = "id"
    searchable: bool = True

    kind: ClassVar[str] = "select"
    python_type: ClassVar[Optional[type]] = int


@dataclass
class MorphTypeSelect(FormField):
    """Kind tag of a polymorphic reference; ``id_field`` holds the paired identifier."""
    options: Tuple[str, ...] = ()
    id_field: str = ""

    kind: ClassVar[str] = "morph_type_select"


@dataclass
class Toggle(FormField):
    default: Any = False

    kind: ClassVar[str] = "toggle"
    python_type: ClassVar[Optional[type]] = bool


@dataclass
class DatePicker(FormField):
    kind: ClassVar[str] = "date_picker"
    python_type: ClassVar[Optional[type]] = date


@dataclass
class DateTimePicker(FormField):
    kind: ClassVar[str] = "date_time_picker"
    python_type: ClassVar[Optional[type]] = datetime


@dataclass
class KeyValue(FormField):
    """Free-form JSON payload (object or list)."""
    kind: ClassVar[str] = "key_value"
    python_type: ClassVar[Optional[type]] = None


# Infolist entries

@dataclass
class Entry(Component):
    name: str
    label: Optional[str] = None
    placeholder: Optional[str] = None
    column_span_full: bool = False

    kind: ClassVar[str] = "entry"

    def format(self, value: Any) -> Any:
        return value

    def render(self, record: Any) -> Dict[str, Any]:
        state = resolve_state(record, self.name)
        value = self.format(state)
        if value is None or value == "":
            value = self.placeholder
        return {"name": self.name, "label": self.get_label(), "value": value, "state": _serialize(state)}


@dataclass
class TextEntry(Entry):
    numeric: bool = False
    date: bool = False
    date_time: bool = False

    kind: ClassVar[str] = "text_entry"

    def format(self, value: Any) -> Any:
        if value is None:
            return None
        if self.date:
            return format_date(value)
        if self.date_time:
            return format_datetime(value)
        if self.numeric:
            return value
        return str(value)


@dataclass
class IconEntry(Entry):
    boolean: bool = True

    kind: ClassVar[str] = "icon_entry"

    def render(self, record: Any) -> Dict[str, Any]:
        value = resolve_state(record, self.name)
        rendered = {
            "name": self.name,
            "label": self.get_label(),
            "value": None if value is None else bool(value),
            "state": value,
        }
        if value is None:
            rendered["value"] = self.placeholder
            rendered["icon"] = None
        elif self.boolean:
            rendered["icon"] = BOOLEAN_TRUE_ICON if value else BOOLEAN_FALSE_ICON
            rendered["color"] = "success" if value else "danger"
        return rendered


# Table columns

@dataclass
class TextColumn(Component):
    name: str
    label: Optional[str] = None
    searchable: bool = False
    sortable: bool = False
    numeric: bool = False
    date: bool = False
    date_time: bool = False
    boolean: bool = False
    toggleable: bool = False
    toggled_hidden_by_default: bool = False

    kind: ClassVar[str] = "text_column"

    def format(self, value: Any) -> Any:
        if value is None:
            return None
        if self.date:
            return format_date(value)
        if self.date_time:
            return format_datetime(value)
        if self.boolean:
            return bool(value)
        if self.numeric:
            return value
        return str(value)


# Actions

@dataclass
class Action(Component):
    name: str
    label: Optional[str] = None
    requires_confirmation: bool = False

    kind: ClassVar[str] = "action"


@dataclass
class ViewAction(Action):
    name: str = "view"


@dataclass
class EditAction(Action):
    name: str = "edit"


@dataclass
class DeleteBulkAction(Action):
    name: str = "delete"
    label: Optional[str] = "Delete selected"
    requires_confirmation: bool = True


@dataclass
class BulkActionGroup(Component):
    actions: Tuple[Action, ...] = field(default_factory=tuple)

    kind: ClassVar[str] = "bulk_action_group"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "actions": [a.to_dict() for a in self.actions]}

    def get_label(self) -> str:
        return "Bulk actions"
