"""
Admin resource descriptors.

A resource ties a model to its form, infolist and table schemas and to the
four generic pages that serve it. Concrete resources live in
``tripadmin.admin.resources``.
"""

import re
from typing import Any, Dict, Optional

from tripadmin.admin.pages import CreateRecord, EditRecord, ListRecords, PageRoute, ViewRecord
from tripadmin.admin.schemas import Form, Infolist, Table
from tripadmin.config import get_settings

DEFAULT_NAVIGATION_ICON = "heroicon-o-rectangle-stack"


def _words(name: str) -> str:
    """``MapCheckpoint`` -> ``Map Checkpoint``"""
    return re.sub(r"(?<!^)(?=[A-Z])", " ", name)


def _pluralize(label: str) -> str:
    if label.endswith("y") and label[-2:-1] not in "aeiou":
        return label[:-1] + "ies"
    return label + "s"


class Resource:
    """Base class for admin resources."""

    model: Any = None
    slug: Optional[str] = None
    navigation_icon: str = DEFAULT_NAVIGATION_ICON
    record_title_attribute: Optional[str] = None
    label: Optional[str] = None
    plural_label: Optional[str] = None

    def __init__(self):
        if self.model is None:
            raise TypeError(f"{type(self).__name__} does not declare a model")
        if self.slug is None:
            self.slug = _pluralize(_words(self.model.__name__)).lower().replace(" ", "-")
        self._pages: Optional[Dict[str, PageRoute]] = None

    def __repr__(self) -> str:  # pragma: no cover
        return f"<{type(self).__name__} {self.slug}>"

    # Schemas

    def form(self) -> Form:
        raise NotImplementedError

    def infolist(self) -> Infolist:
        raise NotImplementedError

    def table(self) -> Table:
        raise NotImplementedError

    # Labels

    def get_label(self) -> str:
        return self.label or _words(self.model.__name__)

    def get_plural_label(self) -> str:
        return self.plural_label or _pluralize(self.get_label())

    def get_record_title(self, record: Any) -> str:
        if self.record_title_attribute:
            title = getattr(record, self.record_title_attribute, None)
            if title not in (None, ""):
                return str(title)
        return f"{self.get_label()} #{record.id}"

    # Pages

    def get_pages(self) -> Dict[str, PageRoute]:
        if self._pages is None:
            self._pages = {
                "index": ListRecords.route(self, "/"),
                "create": CreateRecord.route(self, "/create"),
                "view": ViewRecord.route(self, "/{record}"),
                "edit": EditRecord.route(self, "/{record}/edit"),
            }
        return self._pages

    def get_url(self, name: str = "index", record: Any = None) -> str:
        """
        Absolute URL of one of the resource pages.

        Args:
            name: Page key from ``get_pages()``
            record: Record or record id for the view and edit pages

        Raises:
            KeyError: unknown page name
            ValueError: the page needs a record and none was given
        """
        path = self.get_pages()[name].path
        if "{record}" in path:
            if record is None:
                raise ValueError(f"Page '{name}' of {self.slug} needs a record")
            record_id = getattr(record, "id", record)
            path = path.replace("{record}", str(record_id))
        url = f"{get_settings().admin.path.rstrip('/')}/{self.slug}{path}"
        return url.rstrip("/") if path == "/" else url

    def navigation(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "label": self.get_plural_label(),
            "icon": self.navigation_icon,
            "url": self.get_url("index"),
        }
