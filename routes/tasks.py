from fastapi import APIRouter, Depends, status

from dependencies import get_task_store
from middleware.auth import Identity, require_user
from schemas import MessageResponse, TaskCreate, TaskCreatedResponse, TaskListResponse, TaskResponse
from stores.tasks import TaskStore

router = APIRouter()


@router.get("/tasks")
async def list_tasks(
    identity: Identity = Depends(require_user),
    tasks: TaskStore = Depends(get_task_store),
) -> TaskListResponse:
    """
    Get all tasks for authenticated user

    Args:
        identity: Verified caller
        tasks: Task store

    Returns:
        TaskListResponse with the caller's own tasks
    """
    owned = tasks.list_by_owner(identity.user_id)
    return TaskListResponse(tasks=[TaskResponse.model_validate(task) for task in owned])


@router.post("/tasks", status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: TaskCreate,
    identity: Identity = Depends(require_user),
    tasks: TaskStore = Depends(get_task_store),
) -> TaskCreatedResponse:
    """
    Create a new task

    Args:
        task_data: Task creation data
        identity: Verified caller, becomes the owner
        tasks: Task store

    Returns:
        TaskCreatedResponse with created task
    """
    task = tasks.create_now(identity.user_id, task_data.title, task_data.description)
    return TaskCreatedResponse(message="Task added", task=TaskResponse.model_validate(task))


@router.delete("/tasks/{task_id}")
async def delete_task(
    task_id: int,
    identity: Identity = Depends(require_user),
    tasks: TaskStore = Depends(get_task_store),
) -> MessageResponse:
    """
    Delete a task

    Another user's task is reported exactly like a missing one.
    """
    tasks.delete_owned(task_id, identity.user_id)
    return MessageResponse(message="Task deleted successfully")
