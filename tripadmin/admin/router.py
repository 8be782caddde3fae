"""
Admin panel HTTP routes.

Every registered resource is served by the same handlers: the slug selects the
resource and the handler dispatches to the page bound under the matching key
of ``Resource.get_pages()``.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from tripadmin.admin.registry import ResourceRegistry, default_registry
from tripadmin.admin.resource import Resource
from tripadmin.admin.tables import TableQuery
from tripadmin.config import get_settings
from tripadmin.core.db import get_db
from tripadmin.core.dependencies import get_current_admin
from tripadmin.schemas.base import Envelope

logger = logging.getLogger(__name__)


class BulkDeleteRequest(BaseModel):
    ids: List[int] = Field(default_factory=list)


def _envelope(data=None, error: str | None = None, status: str = "ok"):
    return {"status": status, "data": data, "error": error}


def _columns(raw: Optional[str]) -> tuple:
    if not raw:
        return ()
    return tuple(name.strip() for name in raw.split(",") if name.strip())


def build_admin_router(registry: ResourceRegistry = default_registry) -> APIRouter:
    """Create the admin router for every resource in ``registry``."""
    settings = get_settings()
    router = APIRouter(
        prefix=settings.admin.path,
        tags=["admin"],
        dependencies=[Depends(get_current_admin)],
    )

    def get_resource(slug: str) -> Resource:
        return registry.get(slug)

    def page(resource: Resource, name: str):
        return resource.get_pages()[name].page

    @router.get("", response_model=Envelope)
    def navigation():
        return _envelope(data={
            "title": settings.app_name,
            "resources": [resource.navigation() for resource in registry.all()],
        })

    @router.get("/{slug}", response_model=Envelope)
    def list_records(
        resource: Resource = Depends(get_resource),
        search: Optional[str] = None,
        sort: Optional[str] = None,
        direction: str = "asc",
        page_number: int = Query(1, alias="page"),
        per_page: Optional[int] = None,
        columns: Optional[str] = None,
        db: Session = Depends(get_db),
    ):
        query = TableQuery(
            search=search,
            sort=sort,
            direction=direction.lower(),
            page=page_number,
            per_page=settings.admin.per_page if per_page is None else per_page,
            columns=_columns(columns),
        )
        data = page(resource, "index").render(db, query, max_per_page=settings.admin.max_per_page)
        return _envelope(data=data)

    @router.get("/{slug}/create", response_model=Envelope)
    def create_form(resource: Resource = Depends(get_resource)):
        return _envelope(data=page(resource, "create").render())

    @router.post("/{slug}", response_model=Envelope, status_code=201)
    def create_record(
        resource: Resource = Depends(get_resource),
        data: Dict[str, Any] = Body(...),
        db: Session = Depends(get_db),
    ):
        record = page(resource, "create").handle(db, data)
        return _envelope(data=page(resource, "view").render_record(record))

    @router.post("/{slug}/bulk-delete", response_model=Envelope)
    def bulk_delete(
        payload: BulkDeleteRequest,
        resource: Resource = Depends(get_resource),
        db: Session = Depends(get_db),
    ):
        deleted = page(resource, "index").bulk_delete(db, payload.ids)
        return _envelope(data={"deleted": deleted})

    @router.get("/{slug}/{record}", response_model=Envelope)
    def view_record(record: int, resource: Resource = Depends(get_resource), db: Session = Depends(get_db)):
        return _envelope(data=page(resource, "view").render(db, record))

    @router.get("/{slug}/{record}/edit", response_model=Envelope)
    def edit_form(record: int, resource: Resource = Depends(get_resource), db: Session = Depends(get_db)):
        return _envelope(data=page(resource, "edit").render(db, record))

    @router.put("/{slug}/{record}", response_model=Envelope)
    def update_record(
        record: int,
        resource: Resource = Depends(get_resource),
        data: Dict[str, Any] = Body(...),
        db: Session = Depends(get_db),
    ):
        updated = page(resource, "edit").handle(db, record, data)
        return _envelope(data=page(resource, "view").render_record(updated))

    @router.delete("/{slug}/{record}", response_model=Envelope)
    def delete_record(record: int, resource: Resource = Depends(get_resource), db: Session = Depends(get_db)):
        page(resource, "edit").delete(db, record)
        return _envelope(data={"message": f"{resource.get_label()} deleted"})

    logger.debug(f"Admin router mounted at {settings.admin.path} for {len(registry)} resources")
    return router
