from fastapi import Request

from config import Settings
from stores.tasks import TaskStore
from stores.users import UserStore


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_task_store(request: Request) -> TaskStore:
    return request.app.state.task_store
