# testimonials_api/auth/roles.py

from dataclasses import dataclass
from enum import Enum


class RoleEnum(str, Enum):
    admin = "admin"
    user = "user"


@dataclass(frozen=True)
class Principal:
    """Authenticated identity attached to a request."""

    id: str
    role: RoleEnum
