from enum import Enum
from sqlmodel import SQLModel, Field
from datetime import datetime
from typing import Optional


class Role(str, Enum):
    """Closed set of account roles"""
    ADMIN = "admin"
    USER = "user"


class User(SQLModel, table=True):
    """Registered account"""
    __tablename__ = "users"
    # AUTOINCREMENT keeps ids monotonic, deleted ids are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(index=True, unique=True)
    password_hash: str
    first_name: str = ""
    role: Role = Field(default=Role.USER)


class Task(SQLModel, table=True):
    """Task model for todo items"""
    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    # Ownership only; users are never deleted so no FK constraint is needed
    owner_id: int = Field(index=True)
    title: str = ""
    description: Optional[str] = None
    completed: bool = Field(default=False)
    created_at: Optional[datetime] = None
