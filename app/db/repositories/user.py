"""
User repository.

Emails are stored lowercased (see :class:`app.schemas.user.UserBase`);
lookups compare lowercased on both sides so rows written before that rule
still match.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.user import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, user: User) -> User:
        """Insert *user* and return it with its generated id."""
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        statement = select(User).where(func.lower(User.email) == email.strip().lower())
        return self.session.exec(statement).first()

    def exists_by_email(self, email: str) -> bool:
        statement = select(User.id).where(func.lower(User.email) == email.strip().lower())
        return self.session.exec(statement).first() is not None
