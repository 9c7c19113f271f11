# testimonials_api/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, Integer, String,
    Boolean, DateTime, CheckConstraint, Text, func
)

metadata = MetaData()

testimonials = Table(
    "testimonials",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("author_name", String(255), nullable=False),
    Column("author_title", String(255), nullable=True),
    Column("content", Text, nullable=False),
    Column("rating", Integer, nullable=True),
    Column("avatar_url", String, nullable=True),
    Column("is_active", Boolean, nullable=False, default=True, index=True),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
    Column("updated_at", DateTime, nullable=False, server_default=func.now()),
    CheckConstraint(
        "rating IS NULL OR (rating >= 1 AND rating <= 5)",
        name="ck_testimonials_rating_range",
    ),
)
