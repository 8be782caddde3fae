"""
List page queries: search, sort, pagination and visible columns.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import String, cast, func, or_, select
from sqlalchemy.orm import Session, aliased

from tripadmin.admin.fields import TextColumn, resolve_state
from tripadmin.admin.schemas import Table
from tripadmin.core.exceptions import InvalidTableQueryError

logger = logging.getLogger(__name__)

SORT_DIRECTIONS = ("asc", "desc")


@dataclass
class TableQuery:
    """Query string of a list page."""
    search: Optional[str] = None
    sort: Optional[str] = None
    direction: str = "asc"
    page: int = 1
    per_page: int = 25
    columns: Sequence[str] = field(default_factory=tuple)


@dataclass
class TablePage:
    rows: List[Dict[str, Any]]
    total: int
    page: int
    per_page: int

    @property
    def last_page(self) -> int:
        if self.total == 0:
            return 1
        return (self.total + self.per_page - 1) // self.per_page


class TableRenderer:
    """Runs a table schema against the model's rows."""

    def __init__(self, table: Table, model, max_per_page: int = 100):
        self.table = table
        self.model = model
        self.max_per_page = max_per_page

    def _check(self, query: TableQuery) -> None:
        if query.sort is not None:
            column = self.table.column(query.sort)
            if column is None or not column.sortable:
                raise InvalidTableQueryError(
                    f"Column '{query.sort}' is not sortable",
                    details={"sortable": [c.name for c in self.table.sortable_columns()]},
                )
        if query.direction not in SORT_DIRECTIONS:
            raise InvalidTableQueryError(
                f"Sort direction must be one of: {', '.join(SORT_DIRECTIONS)}",
                details={"direction": query.direction},
            )
        unknown = [name for name in query.columns if self.table.column(name) is None]
        if unknown:
            raise InvalidTableQueryError(
                f"Unknown columns: {', '.join(unknown)}",
                details={"columns": unknown},
            )
        if query.page < 1:
            raise InvalidTableQueryError("Page must be 1 or greater", details={"page": query.page})
        if not 1 <= query.per_page <= self.max_per_page:
            raise InvalidTableQueryError(
                f"Per page must be between 1 and {self.max_per_page}",
                details={"per_page": query.per_page},
            )

    def _attribute(self, stmt, joins: Dict[str, Any], column: TextColumn):
        """Resolve a column name to a SQL expression, joining relationships as needed."""
        if "." not in column.name:
            return stmt, getattr(self.model, column.name)
        relationship_name, attribute = column.name.split(".", 1)
        if relationship_name not in joins:
            relationship = getattr(self.model, relationship_name)
            target = aliased(relationship.property.mapper.class_)
            stmt = stmt.outerjoin(relationship.of_type(target))
            joins[relationship_name] = target
        return stmt, getattr(joins[relationship_name], attribute)

    def _filtered(self, query: TableQuery):
        stmt = select(self.model)
        joins: Dict[str, Any] = {}

        if query.search:
            term = f"%{query.search.strip().lower()}%"
            conditions = []
            for column in self.table.searchable_columns():
                stmt, expression = self._attribute(stmt, joins, column)
                conditions.append(func.lower(cast(expression, String)).like(term))
            if conditions:
                stmt = stmt.where(or_(*conditions))

        sort = query.sort or self.table.default_sort
        if sort:
            direction = query.direction if query.sort else self.table.default_sort_direction
            stmt, expression = self._attribute(stmt, joins, self.table.column(sort))
            stmt = stmt.order_by(expression.desc() if direction == "desc" else expression.asc())
        stmt = stmt.order_by(self.model.id.asc())
        return stmt

    def render_row(self, record: Any, columns: Sequence[TextColumn]) -> Dict[str, Any]:
        return {
            "id": record.id,
            "columns": {column.name: column.format(resolve_state(record, column.name)) for column in columns},
        }

    def paginate(self, session: Session, query: TableQuery) -> TablePage:
        self._check(query)
        stmt = self._filtered(query)

        total = session.execute(
            select(func.count()).select_from(stmt.order_by(None).subquery())
        ).scalar_one()

        offset = (query.page - 1) * query.per_page
        records = session.execute(stmt.offset(offset).limit(query.per_page)).scalars().unique().all()

        columns = self.table.visible_columns(query.columns)
        logger.debug(
            f"{self.model.__name__} list page {query.page}: {len(records)} of {total} rows",
            extra={"search": query.search, "sort": query.sort},
        )
        return TablePage(
            rows=[self.render_row(record, columns) for record in records],
            total=total,
            page=query.page,
            per_page=query.per_page,
        )

    def bulk_delete(self, session: Session, ids: Sequence[int]) -> int:
        if not ids:
            return 0
        records = session.execute(select(self.model).where(self.model.id.in_(list(ids)))).scalars().all()
        for record in records:
            session.delete(record)
        session.commit()
        logger.info(f"Bulk deleted {len(records)} {self.model.__name__} records", extra={"ids": list(ids)})
        return len(records)
