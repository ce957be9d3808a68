"""
Router factory for the shared CRUD contract.

GET    {prefix}          list (filters from the query string)
GET    {prefix}?id=...   single entity
POST   {prefix}          create
PATCH  {prefix}?id=...   partial update
DELETE {prefix}?id=...   hard delete
"""
from typing import Optional, Type

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..database import get_db
from ..responses import deleted, success
from ..services.crud import EntityService


def to_data(schema: Type[BaseModel], entity) -> dict:
    """Serialize an ORM row through its response schema."""
    return schema.model_validate(entity).model_dump(mode="json")


def crud_router(
    service: EntityService,
    *,
    prefix: str,
    tags: list,
    response_schema: Type[BaseModel],
    create_schema: Optional[Type[BaseModel]] = None,
    update_schema: Optional[Type[BaseModel]] = None,
    router: Optional[APIRouter] = None,
) -> APIRouter:
    """Build the four CRUD endpoints; pass create_schema=None to leave POST to a custom route."""
    router = router or APIRouter(prefix=prefix, tags=tags)

    @router.get("")
    def read(
        request: Request,
        entity_id: Optional[str] = Query(None, alias="id"),
        db: Session = Depends(get_db),
    ):
        if entity_id:
            return success(to_data(response_schema, service.get(db, entity_id)))
        filters = {name: request.query_params.get(name) for name in service.filters}
        return success([to_data(response_schema, e) for e in service.list(db, **filters)])

    if create_schema is not None:
        @router.post("", status_code=201)
        def create(payload: create_schema, db: Session = Depends(get_db)):
            entity = service.create(db, payload.model_dump())
            return success(to_data(response_schema, entity), f"{service.label} created")

    if update_schema is not None:
        @router.patch("")
        def update(
            payload: update_schema,
            entity_id: str = Query(..., alias="id"),
            db: Session = Depends(get_db),
        ):
            entity = service.update(db, entity_id, payload.model_dump(exclude_unset=True))
            return success(to_data(response_schema, entity), f"{service.label} updated")

    @router.delete("")
    def remove(
        entity_id: str = Query(..., alias="id"),
        db: Session = Depends(get_db),
    ):
        service.delete(db, entity_id)
        return deleted(service.label)

    return router
