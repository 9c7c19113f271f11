"""Shared fixtures: a fake testimonial store and bearer tokens."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from testimonials_api.api.params import PaginationOptions
from testimonials_api.auth.roles import RoleEnum
from testimonials_api.auth.tokens import create_access_token
from testimonials_api.main import app
from testimonials_api.models.testimonials import (
    Testimonial,
    TestimonialCreate,
    TestimonialUpdate,
)
from testimonials_api.services.testimonials import get_testimonials_service

CREATED_AT = datetime(2024, 1, 1, 12, 0, 0)


def make_testimonial(testimonial_id: int, is_active: bool = True, **overrides: Any) -> Testimonial:
    values: Dict[str, Any] = {
        "id": testimonial_id,
        "author_name": f"Author {testimonial_id}",
        "author_title": "CTO",
        "content": "Great service.",
        "rating": 5,
        "avatar_url": None,
        "is_active": is_active,
        "created_at": CREATED_AT,
        "updated_at": CREATED_AT,
    }
    values.update(overrides)
    return Testimonial(**values)


class FakeStore:
    """In-memory store that records every call it receives."""

    def __init__(self) -> None:
        self.items: Dict[int, Testimonial] = {}
        self.calls: List[Tuple[str, Any]] = []
        self.next_id = 1

    def add(self, testimonial: Testimonial) -> Testimonial:
        self.items[testimonial.id] = testimonial
        self.next_id = max(self.next_id, testimonial.id + 1)
        return testimonial

    def create(self, data: TestimonialCreate) -> Testimonial:
        self.calls.append(("create", data))
        return self.add(make_testimonial(self.next_id, **data.model_dump()))

    def find_all_with_pagination(self, options: PaginationOptions) -> List[Testimonial]:
        self.calls.append(("find_all_with_pagination", options))
        ordered = [self.items[k] for k in sorted(self.items)]
        return ordered[options.offset:options.offset + options.limit]

    def find_all_active(self) -> List[Testimonial]:
        self.calls.append(("find_all_active", None))
        return [t for _, t in sorted(self.items.items()) if t.is_active]

    def find_one(self, testimonial_id: Optional[int]) -> Optional[Testimonial]:
        self.calls.append(("find_one", testimonial_id))
        return self.items.get(testimonial_id)

    def update(self, testimonial_id: Optional[int], data: TestimonialUpdate) -> Optional[Testimonial]:
        self.calls.append(("update", (testimonial_id, data)))
        current = self.items.get(testimonial_id)
        if current is None:
            return None
        updated = current.model_copy(update=data.model_dump(exclude_unset=True))
        self.items[testimonial_id] = updated
        return updated

    def remove(self, testimonial_id: Optional[int]) -> None:
        self.calls.append(("remove", testimonial_id))
        self.items.pop(testimonial_id, None)


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def client(store: FakeStore):
    app.dependency_overrides[get_testimonials_service] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    token = create_access_token("admin-1", RoleEnum.admin)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers() -> Dict[str, str]:
    token = create_access_token("user-1", RoleEnum.user)
    return {"Authorization": f"Bearer {token}"}
