# testimonials_api/services/testimonials.py

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine

from testimonials_api.api.params import PaginationOptions
from testimonials_api.db.engine import get_engine
from testimonials_api.db.schema import testimonials
from testimonials_api.models.testimonials import (
    Testimonial,
    TestimonialCreate,
    TestimonialUpdate,
)

logger = logging.getLogger(__name__)


class TestimonialStore(Protocol):
    """
    Everything the HTTP layer needs from persistence.

    An id of None is an id that could not be parsed; implementations treat
    it as an unknown id.
    """

    def create(self, data: TestimonialCreate) -> Testimonial: ...

    def find_all_with_pagination(self, options: PaginationOptions) -> List[Testimonial]: ...

    def find_all_active(self) -> List[Testimonial]: ...

    def find_one(self, testimonial_id: Optional[int]) -> Optional[Testimonial]: ...

    def update(self, testimonial_id: Optional[int], data: TestimonialUpdate) -> Optional[Testimonial]: ...

    def remove(self, testimonial_id: Optional[int]) -> None: ...


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _row_to_testimonial(row) -> Testimonial:
    return Testimonial(
        id=row["id"],
        author_name=row["author_name"],
        author_title=row["author_title"],
        content=row["content"],
        rating=row["rating"],
        avatar_url=row["avatar_url"],
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class TestimonialsService:
    """SQLAlchemy-backed TestimonialStore."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def create(self, data: TestimonialCreate) -> Testimonial:
        now = _utcnow()
        values = data.model_dump()
        values["created_at"] = now
        values["updated_at"] = now

        with self.engine.begin() as conn:
            result = conn.execute(insert(testimonials).values(**values))
            new_id = result.inserted_primary_key[0]
            row = conn.execute(
                select(testimonials).where(testimonials.c.id == new_id)
            ).mappings().one()

        logger.info("Created testimonial %s", new_id)
        return _row_to_testimonial(row)

    def find_all_with_pagination(self, options: PaginationOptions) -> List[Testimonial]:
        stmt = (
            select(testimonials)
            .order_by(testimonials.c.id)
            .limit(options.limit)
            .offset(options.offset)
        )

        with self.engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()

        return [_row_to_testimonial(row) for row in rows]

    def find_all_active(self) -> List[Testimonial]:
        stmt = (
            select(testimonials)
            .where(testimonials.c.is_active.is_(True))
            .order_by(testimonials.c.id)
        )

        with self.engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()

        return [_row_to_testimonial(row) for row in rows]

    def find_one(self, testimonial_id: Optional[int]) -> Optional[Testimonial]:
        if testimonial_id is None:
            return None

        with self.engine.connect() as conn:
            row = conn.execute(
                select(testimonials).where(testimonials.c.id == testimonial_id)
            ).mappings().first()

        if row is None:
            return None
        return _row_to_testimonial(row)

    def update(self, testimonial_id: Optional[int], data: TestimonialUpdate) -> Optional[Testimonial]:
        if testimonial_id is None:
            return None

        changes: Dict[str, Any] = data.model_dump(exclude_unset=True)
        changes["updated_at"] = _utcnow()

        with self.engine.begin() as conn:
            result = conn.execute(
                update(testimonials)
                .where(testimonials.c.id == testimonial_id)
                .values(**changes)
            )
            if result.rowcount == 0:
                return None

            row = conn.execute(
                select(testimonials).where(testimonials.c.id == testimonial_id)
            ).mappings().one()

        logger.info("Updated testimonial %s (fields: %s)", testimonial_id, sorted(changes))
        return _row_to_testimonial(row)

    def remove(self, testimonial_id: Optional[int]) -> None:
        if testimonial_id is None:
            return

        with self.engine.begin() as conn:
            result = conn.execute(
                delete(testimonials).where(testimonials.c.id == testimonial_id)
            )

        logger.info("Removed testimonial %s (%s row(s))", testimonial_id, result.rowcount)


def get_testimonials_service() -> TestimonialStore:
    return TestimonialsService(get_engine())
