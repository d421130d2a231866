import logging
import threading
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.engine import Engine
from sqlmodel import select

from database import create_engine_lock, open_session
from errors import NotFoundOrNotAuthorized
from models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Task records scoped by owner"""

    def __init__(self, engine: Engine, lock: Optional[threading.Lock] = None):
        self.engine = engine
        self._lock = lock if lock is not None else create_engine_lock()

    def list_by_owner(self, owner_id: int) -> List[Task]:
        with open_session(self.engine, self._lock) as session:
            query = select(Task).where(Task.owner_id == owner_id).order_by(Task.id)
            return list(session.exec(query).all())

    def list_all(self) -> List[Task]:
        with open_session(self.engine, self._lock) as session:
            return list(session.exec(select(Task).order_by(Task.id)).all())

    def create(
        self,
        owner_id: int,
        title: str,
        description: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> Task:
        """Add a task for owner_id; completed starts false"""
        task = Task(
            owner_id=owner_id,
            title=title,
            description=description,
            completed=False,
            created_at=created_at,
        )
        with open_session(self.engine, self._lock) as session:
            session.add(task)
            session.commit()
            session.refresh(task)

        logger.info(f"Created task {task.id} for user {owner_id}")
        return task

    def create_now(self, owner_id: int, title: str, description: Optional[str] = None) -> Task:
        """Add a task stamped with the current time"""
        return self.create(owner_id, title, description, created_at=datetime.now(timezone.utc))

    def delete_owned(self, task_id: int, owner_id: int) -> Task:
        """
        Delete a task that belongs to owner_id

        Raises:
            NotFoundOrNotAuthorized: If no such task exists or it has another owner
        """
        with open_session(self.engine, self._lock) as session:
            task = session.get(Task, task_id)
            if not task or task.owner_id != owner_id:
                raise NotFoundOrNotAuthorized()

            session.delete(task)
            session.commit()

        logger.info(f"Deleted task {task_id} for user {owner_id}")
        return task
