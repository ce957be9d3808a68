"""
Generic create/read/update/delete service shared by every content entity.

Each entity is described once (model, required fields, relations wired by
id, list filters) and gets the same four operations. Database failures are
rolled back, logged and re-raised as ServiceError so nothing unexpected
reaches the HTTP layer.
"""
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import Base
from ..logging_config import db_logger
from .exceptions import NotFoundError, PortalError, ServiceError, ValidationError

ModelT = TypeVar("ModelT", bound=Base)


@dataclass(frozen=True)
class Relation:
    """A payload field that connects the entity to a parent row by id."""
    field: str      # payload key, e.g. "category_id"
    attribute: str  # relationship attribute on the model, e.g. "category"
    model: Type[Base]
    label: str


def _is_blank(value: Any) -> bool:
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return value is None


class EntityService(Generic[ModelT]):
    def __init__(
        self,
        model: Type[ModelT],
        label: str,
        required: Iterable[str] = (),
        relations: Iterable[Relation] = (),
        filters: Iterable[str] = (),
        newest_first: bool = True,
    ):
        self.model = model
        self.label = label
        self.required = tuple(required)
        self.relations = tuple(relations)
        self.filters = tuple(filters)
        self.newest_first = newest_first

    @contextmanager
    def _guard(self, db: Session, action: str):
        """Translate persistence failures into ServiceError."""
        try:
            yield
        except PortalError:
            db.rollback()
            raise
        except SQLAlchemyError as e:
            db.rollback()
            db_logger.error(f"Failed to {action} {self.label}", error=e, entity=self.label)
            raise ServiceError(f"Failed to {action} {self.label.lower()}")

    # ------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------

    def _apply_children(self, db: Session, entity: ModelT, children: Dict[str, Any]) -> None:
        """Persist child collections popped from the payload. No-op by default."""

    def _split_children(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Remove child-collection keys from the payload before column assignment."""
        return {}

    def _before_delete(self, db: Session, entity: ModelT) -> None:
        """Remove dependent rows that have no cascade rule."""

    # ------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------

    def _check_required(self, values: Dict[str, Any], partial: bool) -> None:
        for name in self.required:
            if partial and name not in values:
                continue
            if _is_blank(values.get(name)):
                raise ValidationError(f"{self.label} {name} is required")

    def _connect(self, db: Session, entity: ModelT, payload: Dict[str, Any]) -> None:
        """Attach related rows named by id, leaving absent relations untouched."""
        for relation in self.relations:
            if relation.field not in payload:
                continue
            related_id = payload.pop(relation.field)
            if related_id is None:
                continue
            related = db.get(relation.model, related_id)
            if related is None:
                raise ValidationError(f"{relation.label} '{related_id}' does not exist")
            setattr(entity, relation.attribute, related)

    # ------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------

    def create(self, db: Session, payload: Dict[str, Any]) -> ModelT:
        data = dict(payload)
        self._check_required(data, partial=False)
        children = self._split_children(data)

        with self._guard(db, "create"):
            entity = self.model()
            self._connect(db, entity, data)
            for key, value in data.items():
                if value is not None:
                    setattr(entity, key, value)
            db.add(entity)
            db.flush()
            self._apply_children(db, entity, children)
            db.commit()
            db.refresh(entity)

        db_logger.info(f"{self.label} created", entity=self.label, id=entity.id)
        return entity

    def get(self, db: Session, entity_id: str) -> ModelT:
        with self._guard(db, "fetch"):
            entity = db.get(self.model, entity_id)
        if entity is None:
            raise NotFoundError(f"{self.label} not found")
        return entity

    def list(self, db: Session, **filters: Optional[str]) -> List[ModelT]:
        with self._guard(db, "fetch"):
            query = db.query(self.model)
            for name in self.filters:
                value = filters.get(name)
                if value:
                    query = query.filter(getattr(self.model, name) == value)
            if self.newest_first:
                query = query.order_by(self.model.created_at.desc())
            return query.all()

    def update(self, db: Session, entity_id: str, changes: Dict[str, Any]) -> ModelT:
        data = {key: value for key, value in changes.items() if value is not None}
        self._check_required(data, partial=True)
        entity = self.get(db, entity_id)
        fields = sorted(data)
        children = self._split_children(data)

        with self._guard(db, "update"):
            self._connect(db, entity, data)
            for key, value in data.items():
                setattr(entity, key, value)
            self._apply_children(db, entity, children)
            db.commit()
            db.refresh(entity)

        db_logger.info(f"{self.label} updated", entity=self.label, id=entity.id, fields=fields)
        return entity

    def delete(self, db: Session, entity_id: str) -> None:
        entity = self.get(db, entity_id)
        with self._guard(db, "delete"):
            self._before_delete(db, entity)
            db.delete(entity)
            db.commit()

        db_logger.info(f"{self.label} deleted", entity=self.label, id=entity_id)
