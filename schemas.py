from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime

from models import Role


class CamelModel(BaseModel):
    """Base schema that speaks camelCase on the wire"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RegisterRequest(CamelModel):
    """Schema for registering a new account"""
    email: str = Field(..., min_length=1, max_length=254)
    password: str = Field(..., min_length=1, max_length=128)
    first_name: str = Field("", max_length=100)
    role: Optional[Role] = None

    @field_validator("role", mode="before")
    @classmethod
    def blank_role_is_default(cls, value):
        # Missing, null and empty string all mean the default role
        if not value:
            return None
        return value


class LoginRequest(CamelModel):
    """Schema for logging in"""
    email: str
    password: str


class TaskCreate(CamelModel):
    """Schema for creating a new task"""
    title: str = Field("", max_length=200)
    description: Optional[str] = Field(None, max_length=1000)


class UserResponse(CamelModel):
    """Public user representation, never carries the password hash"""
    id: int
    email: str
    first_name: str
    role: Role


class SessionUser(CamelModel):
    """User summary returned by login"""
    id: int
    email: str
    role: Role


class TaskResponse(CamelModel):
    """Schema for task response"""
    id: int
    owner_id: int
    title: str
    description: Optional[str]
    completed: bool
    created_at: Optional[datetime]


class MessageResponse(BaseModel):
    message: str


class RegisterResponse(CamelModel):
    message: str
    new_user: UserResponse


class LoginResponse(CamelModel):
    message: str
    user: SessionUser


class ProfileResponse(CamelModel):
    user: UserResponse


class UserListResponse(CamelModel):
    users: List[UserResponse]


class TaskListResponse(CamelModel):
    tasks: List[TaskResponse]


class TaskCreatedResponse(CamelModel):
    message: str
    task: TaskResponse
