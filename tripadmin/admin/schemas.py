"""Form, infolist and table schemas: ordered collections of descriptors."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from tripadmin.admin.fields import (
    Action,
    BulkActionGroup,
    EditAction,
    Entry,
    FormField,
    TextColumn,
    ViewAction,
    DeleteBulkAction,
)


@dataclass
class Form:
    components: Sequence[FormField]

    def field(self, name: str) -> Optional[FormField]:
        for component in self.components:
            if component.name == name:
                return component
        return None

    def names(self) -> List[str]:
        return [component.name for component in self.components]

    def defaults(self) -> Dict[str, Any]:
        return {c.name: c.default for c in self.components if c.default is not None}

    def to_dict(self) -> Dict[str, Any]:
        return {"components": [c.to_dict() for c in self.components]}


@dataclass
class Infolist:
    components: Sequence[Entry]

    def render(self, record: Any) -> List[Dict[str, Any]]:
        return [entry.render(record) for entry in self.components]


def _default_record_actions() -> Tuple[Action, ...]:
    return (ViewAction(), EditAction())


def _default_toolbar_actions() -> Tuple[BulkActionGroup, ...]:
    return (BulkActionGroup(actions=(DeleteBulkAction(),)),)


@dataclass
class Table:
    columns: Sequence[TextColumn]
    filters: Sequence[Any] = ()
    record_actions: Sequence[Action] = field(default_factory=_default_record_actions)
    toolbar_actions: Sequence[BulkActionGroup] = field(default_factory=_default_toolbar_actions)
    default_sort: Optional[str] = None
    default_sort_direction: str = "asc"

    def column(self, name: str) -> Optional[TextColumn]:
        for column in self.columns:
            if column.name == name:
                return column
        return None

    def searchable_columns(self) -> List[TextColumn]:
        return [c for c in self.columns if c.searchable]

    def sortable_columns(self) -> List[TextColumn]:
        return [c for c in self.columns if c.sortable]

    def visible_columns(self, toggled: Optional[Sequence[str]] = None) -> List[TextColumn]:
        toggled = set(toggled or ())
        return [
            c for c in self.columns
            if not c.toggled_hidden_by_default or c.name in toggled
        ]

    def bulk_actions(self) -> List[Action]:
        return [action for group in self.toolbar_actions for action in group.actions]

    def to_dict(self, toggled: Optional[Sequence[str]] = None) -> Dict[str, Any]:
        visible = {c.name for c in self.visible_columns(toggled)}
        columns = []
        for column in self.columns:
            data = column.to_dict()
            data["visible"] = column.name in visible
            columns.append(data)
        return {
            "columns": columns,
            "filters": list(self.filters),
            "record_actions": [a.to_dict() for a in self.record_actions],
            "toolbar_actions": [g.to_dict() for g in self.toolbar_actions],
        }
