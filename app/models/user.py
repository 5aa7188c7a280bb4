"""
User database model.

Owner of mesocycles; also the authentication principal.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

from app.core.clock import timestamp_type, utc_now

if TYPE_CHECKING:
    from app.models.mesocycle import Mesocycle


class User(SQLModel, table=True):
    """
    Registered athlete.

    Credentials plus a display name; training data hangs off
    :attr:`mesocycles`.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    hashed_password: str = Field(nullable=False)

    # Profile
    full_name: Optional[str] = Field(default=None, max_length=255)
    is_active: bool = Field(default=True)
    is_superuser: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_type())
    updated_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_type())

    mesocycles: List["Mesocycle"] = Relationship(sa_relationship_kwargs={"cascade": "all, delete-orphan"})
