"""
Form validation for admin create/edit pages.

Each form field is checked in three passes: presence (required fields),
type coercion through a pydantic ``TypeAdapter`` chosen from the widget and
the mapped column, and referential checks (foreign keys must point at an
existing record, polymorphic tags must be allowed and resolvable).
"""

import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import ConfigDict, TypeAdapter, ValidationError
from sqlalchemy import inspect
from sqlalchemy.orm import Session

from tripadmin.admin.fields import (
    DatePicker,
    DateTimePicker,
    FormField,
    KeyValue,
    MorphTypeSelect,
    Select,
    TextInput,
    Toggle,
)
from tripadmin.admin.schemas import Form
from tripadmin.core.db import Base
from tripadmin.core.exceptions import FormValidationError
from tripadmin.models.morph import model_for

logger = logging.getLogger(__name__)

_STRING_CONFIG = ConfigDict(coerce_numbers_to_str=True, str_strip_whitespace=True)
_FLOAT_CONFIG = ConfigDict(allow_inf_nan=False)


def _type_message(component: FormField, label: str) -> str:
    if isinstance(component, Toggle):
        return f"The {label} field must be true or false."
    if isinstance(component, DateTimePicker):
        return f"The {label} field must be a valid date and time."
    if isinstance(component, DatePicker):
        return f"The {label} field must be a valid date."
    if isinstance(component, KeyValue):
        return f"The {label} field must be an object or a list."
    if isinstance(component, Select) or getattr(component, "numeric", False):
        return f"The {label} field must be a number."
    return f"The {label} field must be a string."


class FormValidator:
    """Validates submitted data against one resource form."""

    def __init__(self, form: Form, model):
        self.form = form
        self.model = model
        self._mapper = inspect(model)
        self._adapters: Dict[str, TypeAdapter] = {
            component.name: self._adapter_for(component) for component in form.components
        }

    def _column(self, name: str):
        return self._mapper.columns.get(name)

    def _python_type(self, component: FormField):
        if isinstance(component, TextInput) and component.numeric:
            column = self._column(component.name)
            try:
                column_type = column.type.python_type if column is not None else float
            except NotImplementedError:
                column_type = float
            return int if column_type is int else float
        if isinstance(component, Select):
            return int
        return component.python_type

    def _adapter_for(self, component: FormField) -> TypeAdapter:
        python_type = self._python_type(component)
        if python_type is None:
            return TypeAdapter(Optional[Union[Dict[str, Any], List[Any]]])
        if python_type is str:
            return TypeAdapter(Optional[str], config=_STRING_CONFIG)
        if python_type is float:
            return TypeAdapter(Optional[float], config=_FLOAT_CONFIG)
        return TypeAdapter(Optional[python_type])

    def _related_model(self, component: FormField):
        if isinstance(component, Select) and component.relationship:
            relationship = self._mapper.relationships.get(component.relationship)
            if relationship is not None:
                return relationship.mapper.class_
        column = self._column(component.name)
        if column is None:
            return None
        for foreign_key in column.foreign_keys:
            for mapper in Base.registry.mappers:
                if mapper.local_table is foreign_key.column.table:
                    return mapper.class_
        return None

    def _raw_value(self, component: FormField, data: Dict[str, Any], record: Any) -> Any:
        if component.name in data:
            raw = data[component.name]
        elif record is not None:
            raw = getattr(record, component.name, None)
        else:
            raw = component.default
        if isinstance(raw, str) and raw.strip() == "":
            return None
        return raw

    def validate(self, session: Session, data: Dict[str, Any], record: Any = None) -> Dict[str, Any]:
        """
        Validate submitted data.

        Args:
            session: Database session used for referential checks
            data: Submitted values keyed by field name
            record: Existing record when editing; its values fill fields
                    missing from ``data``

        Returns:
            Cleaned values for every field of the form

        Raises:
            FormValidationError: one entry per failing field
        """
        errors: List[Dict[str, str]] = []
        cleaned: Dict[str, Any] = {}
        failed = set()

        for component in self.form.components:
            label = component.get_label().lower()
            raw = self._raw_value(component, data, record)

            if raw is None:
                if component.required:
                    errors.append({"field": component.name, "message": f"The {label} field is required."})
                    failed.add(component.name)
                else:
                    cleaned[component.name] = None
                continue

            try:
                value = self._adapters[component.name].validate_python(raw)
            except ValidationError:
                errors.append({"field": component.name, "message": _type_message(component, label)})
                failed.add(component.name)
                continue

            cleaned[component.name] = value

        for component in self.form.components:
            if component.name in failed or cleaned.get(component.name) is None:
                continue
            label = component.get_label().lower()

            if isinstance(component, MorphTypeSelect):
                self._check_morph(session, component, cleaned, failed, errors)
                continue

            related = self._related_model(component)
            if related is not None and session.get(related, cleaned[component.name]) is None:
                errors.append({"field": component.name, "message": f"The selected {label} is invalid."})
                failed.add(component.name)

        if errors:
            logger.debug(
                f"{self.model.__name__} form rejected: {len(errors)} field errors",
                extra={"fields": sorted(failed)},
            )
            raise FormValidationError(errors)

        return cleaned

    def _check_morph(
        self,
        session: Session,
        component: MorphTypeSelect,
        cleaned: Dict[str, Any],
        failed: set,
        errors: List[Dict[str, str]],
    ) -> None:
        kind = cleaned[component.name]
        if kind not in component.options:
            errors.append({
                "field": component.name,
                "message": f"The {component.get_label().lower()} must be one of: {', '.join(component.options)}.",
            })
            failed.add(component.name)
            return

        identifier = cleaned.get(component.id_field)
        if identifier is None or component.id_field in failed:
            return
        target = model_for(kind)
        if target is None or session.get(target, identifier) is None:
            id_component = self.form.field(component.id_field)
            id_label = id_component.get_label().lower() if id_component else component.id_field
            errors.append({"field": component.id_field, "message": f"The selected {id_label} is invalid."})
            failed.add(component.id_field)
