"""
Tests for the generic entity service.
"""
import pytest
from unittest.mock import patch

from admin_portal.models import Blog, Category
from admin_portal.services.entities import blog_service, category_service
from admin_portal.services.exceptions import NotFoundError, ValidationError


class TestEntityService:
    """Test create/get/list/update/delete on the shared service."""

    def test_create_then_get(self, db):
        created = category_service.create(db, {"name": "Dev", "category_for": "blog"})
        fetched = category_service.get(db, created.id)
        assert fetched.id == created.id
        assert fetched.name == "Dev"
        assert fetched.category_for == "blog"
        assert fetched.created_at is not None

    def test_required_field_missing(self, db):
        with pytest.raises(ValidationError):
            category_service.create(db, {"category_for": "blog"})
        assert db.query(Category).count() == 0

    def test_required_field_blank(self, db):
        with pytest.raises(ValidationError):
            category_service.create(db, {"name": "   "})

    def test_get_unknown_id(self, db):
        with pytest.raises(NotFoundError) as exc_info:
            category_service.get(db, "missing")
        assert exc_info.value.message == "Category not found"

    def test_partial_update_keeps_other_fields(self, db):
        created = category_service.create(db, {"name": "Dev", "category_for": "blog"})
        updated = category_service.update(db, created.id, {"name": "Design"})
        assert updated.name == "Design"
        assert updated.category_for == "blog"

    def test_update_cannot_blank_required_field(self, db):
        created = category_service.create(db, {"name": "Dev"})
        with pytest.raises(ValidationError):
            category_service.update(db, created.id, {"name": ""})
        assert category_service.get(db, created.id).name == "Dev"

    def test_update_unknown_id(self, db):
        with pytest.raises(NotFoundError):
            category_service.update(db, "missing", {"name": "x"})

    def test_delete_then_get(self, db):
        created = category_service.create(db, {"name": "Dev"})
        category_service.delete(db, created.id)
        with pytest.raises(NotFoundError):
            category_service.get(db, created.id)

    def test_delete_unknown_id(self, db):
        with pytest.raises(NotFoundError):
            category_service.delete(db, "missing")

    def test_list_filters(self, db):
        category_service.create(db, {"name": "Dev", "category_for": "blog"})
        category_service.create(db, {"name": "Web", "category_for": "portfolio"})
        names = [c.name for c in category_service.list(db, category_for="portfolio")]
        assert names == ["Web"]
        assert len(category_service.list(db)) == 2


class TestRelations:
    """Test connect-by-id relations."""

    def test_connects_category(self, db):
        category = category_service.create(db, {"name": "Dev"})
        blog = blog_service.create(
            db, {"title": "Hello", "content": "World", "category_id": category.id}
        )
        assert blog.category.name == "Dev"
        assert blog.category_id == category.id

    def test_unknown_related_id(self, db):
        with pytest.raises(ValidationError) as exc_info:
            blog_service.create(db, {"title": "Hello", "content": "World", "category_id": "nope"})
        assert "does not exist" in exc_info.value.message
        assert db.query(Blog).count() == 0

    def test_update_without_relation_keeps_it(self, db):
        category = category_service.create(db, {"name": "Dev"})
        blog = blog_service.create(
            db, {"title": "Hello", "content": "World", "category_id": category.id}
        )
        updated = blog_service.update(db, blog.id, {"title": "Renamed"})
        assert updated.category_id == category.id


class TestUpdateLogging:
    def test_logs_only_applied_fields(self, db):
        created = category_service.create(db, {"name": "Dev"})
        with patch("admin_portal.services.crud.db_logger") as logger:
            category_service.update(db, created.id, {"name": "Design", "category_for": None})
        logger.info.assert_called_once()
        assert logger.info.call_args.kwargs["fields"] == ["name"]
