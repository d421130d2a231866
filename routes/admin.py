from fastapi import APIRouter, Depends

from dependencies import get_task_store, get_user_store
from middleware.auth import require_admin
from schemas import TaskListResponse, TaskResponse, UserListResponse, UserResponse
from stores.tasks import TaskStore
from stores.users import UserStore

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/users")
async def list_users(users: UserStore = Depends(get_user_store)) -> UserListResponse:
    """All accounts, without password hashes"""
    return UserListResponse(users=[UserResponse.model_validate(user) for user in users.list_all()])


@router.get("/tasks")
async def list_all_tasks(tasks: TaskStore = Depends(get_task_store)) -> TaskListResponse:
    """Every task of every user"""
    return TaskListResponse(tasks=[TaskResponse.model_validate(task) for task in tasks.list_all()])
