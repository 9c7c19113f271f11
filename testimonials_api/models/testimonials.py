# testimonials_api/models/testimonials.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class TestimonialCreate(BaseModel):
    author_name: str = Field(..., min_length=1, max_length=255)
    author_title: Optional[str] = Field(default=None, max_length=255)
    content: str = Field(..., min_length=1)
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    avatar_url: Optional[str] = None
    is_active: bool = True


class TestimonialUpdate(BaseModel):
    """
    Partial update; only the fields the client actually sent are applied.
    """

    author_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    author_title: Optional[str] = Field(default=None, max_length=255)
    content: Optional[str] = Field(default=None, min_length=1)
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    avatar_url: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("author_name", "content", "is_active")
    @classmethod
    def not_null(cls, value):
        # Columns are NOT NULL; omit the field instead of sending null
        if value is None:
            raise ValueError("field cannot be null")
        return value


class Testimonial(BaseModel):
    id: int
    author_name: str
    author_title: Optional[str] = None
    content: str
    rating: Optional[int] = None
    avatar_url: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
