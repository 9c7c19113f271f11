# testimonials_api/api/testimonials.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from testimonials_api.api.params import parse_id, parse_pagination
from testimonials_api.auth.guards import require_role
from testimonials_api.auth.roles import RoleEnum
from testimonials_api.models.testimonials import (
    Testimonial,
    TestimonialCreate,
    TestimonialUpdate,
)
from testimonials_api.services.testimonials import (
    TestimonialStore,
    get_testimonials_service,
)

router = APIRouter(prefix="/testimonials", tags=["Testimonials"])

admin_only = [Depends(require_role(RoleEnum.admin))]


@router.post(
    "",
    response_model=Testimonial,
    status_code=status.HTTP_201_CREATED,
    dependencies=admin_only,
)
def create(
    payload: TestimonialCreate,
    service: TestimonialStore = Depends(get_testimonials_service),
) -> Testimonial:
    """
    Create a testimonial (admin only).
    """
    return service.create(payload)


@router.get("", response_model=List[Testimonial])
def find_all(
    page: Optional[str] = Query(default=None, description="Page number, starting at 1"),
    limit: Optional[str] = Query(default=None, description="Page size, at most 50"),
    service: TestimonialStore = Depends(get_testimonials_service),
) -> List[Testimonial]:
    """
    Return one page of testimonials. Page defaults to 1, limit to 10.
    """
    return service.find_all_with_pagination(parse_pagination(page, limit))


@router.get("/active", response_model=List[Testimonial])
def find_all_active(
    service: TestimonialStore = Depends(get_testimonials_service),
) -> List[Testimonial]:
    """
    Return every active testimonial.
    """
    return service.find_all_active()


# NOTE: an unknown id answers 200 with a null body rather than 404.
# Kept for client compatibility; revisit with product before changing.
@router.get("/{id}", response_model=Optional[Testimonial])
def find_one(
    id: str,
    service: TestimonialStore = Depends(get_testimonials_service),
) -> Optional[Testimonial]:
    """
    Return a single testimonial by id, or null when it does not exist.
    """
    return service.find_one(parse_id(id))


@router.patch("/{id}", response_model=Optional[Testimonial], dependencies=admin_only)
def update(
    id: str,
    payload: TestimonialUpdate,
    service: TestimonialStore = Depends(get_testimonials_service),
) -> Optional[Testimonial]:
    """
    Apply a partial update (admin only); null when the id does not exist.
    """
    return service.update(parse_id(id), payload)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=admin_only)
def remove(
    id: str,
    service: TestimonialStore = Depends(get_testimonials_service),
) -> Response:
    """
    Delete a testimonial (admin only).
    """
    service.remove(parse_id(id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
