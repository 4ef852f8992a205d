"""Tests for content queries, admin CRUD and image uploads."""

from datetime import datetime, timedelta

import pytest

from lilian.models.content import Content, ContentCreate
from lilian.services.content_service import UPCOMING_LIMIT, ContentService
from lilian.services.errors import (
    ImageTooLargeError,
    InvalidInputError,
    NotFoundError,
    UnprocessableImageError,
)
from tests.fakes import InMemoryContentStore

BASE_TIME = datetime(2026, 5, 1, 9, 0)


@pytest.fixture
def store():
    return InMemoryContentStore()


@pytest.fixture
def service(store):
    return ContentService(store)


def _row(store, section, minutes, published=True, **fields):
    created = BASE_TIME + timedelta(minutes=minutes)
    return store.add(
        Content(section=section, published=published, created_at=created, updated_at=created, **fields)
    )


class TestCreate:
    def test_published_defaults_to_true(self, service):
        created = service.create(ContentCreate(section="hero", title="Welcome"))
        assert created.id is not None
        assert created.published is True
        assert created.created_at == created.updated_at

    def test_explicit_unpublished_is_kept(self, service):
        created = service.create(ContentCreate(section="hero", published=False))
        assert created.published is False

    def test_incoming_id_is_ignored(self, service, store):
        existing = _row(store, "hero", 0, title="Original")
        incoming = Content(id=existing.id, section="about", title="New")

        created = service.create(incoming)

        assert created.id != existing.id
        assert store.get(existing.id).title == "Original"
        assert store.count() == 2

    def test_section_is_required(self, service, store):
        with pytest.raises(InvalidInputError):
            service.create(Content(section=""))
        assert store.count() == 0


class TestCreateWithImage:
    def test_without_image(self, service):
        created = service.create_with_image(section="events", title="Fundraiser")
        assert created.image_data is None
        assert created.image_type is None
        assert created.published is True

    def test_empty_image_is_ignored(self, service):
        created = service.create_with_image(section="events", image_file=b"")
        assert created.image_data is None

    def test_image_is_compressed_and_attached(self, service, make_image):
        created = service.create_with_image(
            section="hero",
            title="Hero",
            button_text1="Donate",
            button_url1="/donate",
            published=False,
            image_file=make_image(1600, 1200, fmt="PNG"),
        )
        assert created.image_data is not None
        assert created.image_data[:2] == b"\xff\xd8"  # JPEG SOI marker
        assert created.image_type == "image/jpeg"
        assert created.published is False
        assert created.button_text1 == "Donate"

    def test_oversized_image_saves_nothing(self, service, store):
        with pytest.raises(ImageTooLargeError):
            service.create_with_image(section="hero", image_file=b"\x00" * (6 * 1024 * 1024))
        assert store.count() == 0

    def test_broken_image_saves_nothing(self, service, store):
        with pytest.raises(UnprocessableImageError):
            service.create_with_image(section="hero", image_file=b"not an image")
        assert store.count() == 0

    def test_blank_section_is_rejected(self, service, store):
        with pytest.raises(InvalidInputError):
            service.create_with_image(section="")
        assert store.count() == 0


class TestQueries:
    def test_get_published_and_all(self, service, store):
        _row(store, "hero", 0)
        _row(store, "hero", 1, published=False)

        assert len(service.get_published()) == 1
        assert len(service.get_all()) == 2

    def test_get_by_section_returns_published_only(self, service, store):
        _row(store, "events", 0, title="A")
        _row(store, "events", 1, title="B", published=False)
        _row(store, "talks", 2, title="C")

        assert [c.title for c in service.get_by_section("events")] == ["A"]

    def test_single_by_section_is_most_recent_published(self, service, store):
        _row(store, "hero", 0, title="old")
        _row(store, "hero", 10, title="new")
        _row(store, "hero", 20, title="draft", published=False)

        assert service.get_single_by_section("hero").title == "new"
        assert service.get_single_by_section("about") is None

    def test_get_by_id(self, service, store):
        row = _row(store, "hero", 0)
        assert service.get_by_id(row.id) is row
        assert service.get_by_id(999) is None


class TestUpcoming:
    def test_only_upcoming_sections_newest_first(self, service, store):
        _row(store, "events", 0, title="e0")
        _row(store, "talks", 5, title="t5")
        _row(store, "social-posts", 3, title="s3")
        _row(store, "hero", 10, title="hero")
        _row(store, "events", 7, title="draft", published=False)

        upcoming = service.get_upcoming()
        assert [c.title for c in upcoming] == ["t5", "s3", "e0"]

    def test_truncated_to_eight(self, service, store):
        sections = ["events", "talks", "social-posts"]
        for i in range(12):
            _row(store, sections[i % 3], i, title=f"item{i}")

        upcoming = service.get_upcoming()
        assert len(upcoming) == UPCOMING_LIMIT == 8
        assert [c.title for c in upcoming] == [f"item{i}" for i in range(11, 3, -1)]
        assert all(c.published for c in upcoming)
        assert all(c.section in sections for c in upcoming)


class TestUpdate:
    def test_unknown_id_fails(self, service):
        with pytest.raises(NotFoundError):
            service.update(404, ContentCreate(section="hero"))

    def test_full_overwrite_clears_missing_fields(self, service, store):
        row = _row(store, "events", 0, title="Old", subtitle="Sub", link="https://example.org", date="May 5")
        before = row.updated_at

        updated = service.update(row.id, ContentCreate(section="talks", title="New"))

        assert updated.section == "talks"
        assert updated.title == "New"
        assert updated.subtitle is None
        assert updated.link is None
        assert updated.date is None
        assert updated.published is None
        assert updated.updated_at != before

    def test_image_is_preserved_without_new_bytes(self, service, store):
        row = _row(store, "hero", 0, image_data=b"old-bytes", image_type="image/png")

        updated = service.update(row.id, ContentCreate(section="hero", title="t"))

        assert updated.image_data == b"old-bytes"
        assert updated.image_type == "image/png"

    def test_image_is_replaced_with_new_bytes(self, service, store):
        row = _row(store, "hero", 0, image_data=b"old-bytes", image_type="image/png")

        updated = service.update(
            row.id, Content(section="hero", image_data=b"new-bytes", image_type="image/jpeg")
        )

        assert updated.image_data == b"new-bytes"
        assert updated.image_type == "image/jpeg"


class TestDelete:
    def test_delete_removes_row(self, service, store):
        row = _row(store, "hero", 0)
        service.delete(row.id)
        assert service.get_by_id(row.id) is None

    def test_delete_is_idempotent(self, service, store):
        row = _row(store, "hero", 0)
        service.delete(row.id)
        service.delete(row.id)
        service.delete(987654)
        assert store.count() == 0
