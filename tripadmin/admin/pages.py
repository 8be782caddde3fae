"""
Generic admin pages. A page instance is bound to one resource and renders a
single interaction mode for it: browse, create, inspect or edit.
"""

import logging
from typing import Any, Dict, Sequence, TYPE_CHECKING

from sqlalchemy.orm import Session

from tripadmin.admin.forms import FormValidator
from tripadmin.admin.tables import TableQuery, TableRenderer
from tripadmin.core.exceptions import RecordNotFoundError

if TYPE_CHECKING:  # pragma: no cover
    from tripadmin.admin.resource import Resource

logger = logging.getLogger(__name__)


class PageRoute:
    """A page class registered under a path relative to its resource."""

    def __init__(self, page: "Page", path: str):
        self.page = page
        self.path = path

    def __repr__(self) -> str:  # pragma: no cover
        return f"<PageRoute {type(self.page).__name__} {self.path}>"


class Page:
    name: str = ""
    title_template: str = "{label}"

    def __init__(self, resource: "Resource"):
        self.resource = resource

    @classmethod
    def route(cls, resource: "Resource", path: str) -> PageRoute:
        return PageRoute(cls(resource), path)

    def get_title(self, record: Any = None) -> str:
        return self.title_template.format(
            label=self.resource.get_plural_label(),
            singular=self.resource.get_label(),
            record=self.resource.get_record_title(record) if record is not None else "",
        )

    def find_record(self, session: Session, record_id: int):
        record = session.get(self.resource.model, record_id)
        if record is None:
            raise RecordNotFoundError(self.resource.get_label(), record_id)
        return record

    def _page(self, **data) -> Dict[str, Any]:
        return {"page": self.name, "resource": self.resource.slug, **data}


class ListRecords(Page):
    name = "index"

    def __init__(self, resource: "Resource"):
        super().__init__(resource)
        self.table = resource.table()

    def renderer(self, max_per_page: int) -> TableRenderer:
        return TableRenderer(self.table, self.resource.model, max_per_page=max_per_page)

    def render(self, session: Session, query: TableQuery, max_per_page: int = 100) -> Dict[str, Any]:
        result = self.renderer(max_per_page).paginate(session, query)
        for row in result.rows:
            row["actions"] = {
                action.name: self.resource.get_url(action.name, row["id"])
                for action in self.table.record_actions
            }
        return self._page(
            title=self.get_title(),
            create_url=self.resource.get_url("create"),
            table=self.table.to_dict(query.columns),
            rows=result.rows,
            pagination={
                "total": result.total,
                "page": result.page,
                "per_page": result.per_page,
                "last_page": result.last_page,
            },
        )

    def bulk_delete(self, session: Session, ids: Sequence[int]) -> int:
        return self.renderer(max_per_page=len(ids) or 1).bulk_delete(session, ids)


class CreateRecord(Page):
    name = "create"
    title_template = "Create {singular}"

    def render(self) -> Dict[str, Any]:
        form = self.resource.form()
        return self._page(
            title=self.get_title(),
            form=form.to_dict(),
            data=form.defaults(),
            submit_url=self.resource.get_url("index"),
        )

    def handle(self, session: Session, data: Dict[str, Any]):
        validator = FormValidator(self.resource.form(), self.resource.model)
        values = validator.validate(session, data)
        record = self.resource.model(**values)
        session.add(record)
        session.commit()
        session.refresh(record)
        logger.info(f"Created {self.resource.model.__name__} {record.id}", extra={"resource": self.resource.slug})
        return record


class ViewRecord(Page):
    name = "view"
    title_template = "View {record}"

    def render(self, session: Session, record_id: int) -> Dict[str, Any]:
        record = self.find_record(session, record_id)
        return self.render_record(record)

    def render_record(self, record) -> Dict[str, Any]:
        return self._page(
            title=self.get_title(record),
            record=record.id,
            infolist=self.resource.infolist().render(record),
            edit_url=self.resource.get_url("edit", record.id),
        )


class EditRecord(Page):
    name = "edit"
    title_template = "Edit {record}"

    def render(self, session: Session, record_id: int) -> Dict[str, Any]:
        record = self.find_record(session, record_id)
        form = self.resource.form()
        return self._page(
            title=self.get_title(record),
            record=record.id,
            form=form.to_dict(),
            data=self.form_data(form, record),
            view_url=self.resource.get_url("view", record.id),
            submit_url=self.resource.get_url("view", record.id),
        )

    @staticmethod
    def form_data(form, record) -> Dict[str, Any]:
        data = {}
        for name in form.names():
            value = getattr(record, name, None)
            data[name] = value.isoformat() if hasattr(value, "isoformat") else value
        return data

    def handle(self, session: Session, record_id: int, data: Dict[str, Any]):
        record = self.find_record(session, record_id)
        validator = FormValidator(self.resource.form(), self.resource.model)
        values = validator.validate(session, data, record=record)
        for name, value in values.items():
            setattr(record, name, value)
        session.commit()
        session.refresh(record)
        logger.info(f"Updated {self.resource.model.__name__} {record.id}", extra={"resource": self.resource.slug})
        return record

    def delete(self, session: Session, record_id: int) -> None:
        record = self.find_record(session, record_id)
        session.delete(record)
        session.commit()
        logger.info(f"Deleted {self.resource.model.__name__} {record_id}", extra={"resource": self.resource.slug})
