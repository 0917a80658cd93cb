import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from komplist.exceptions import BadRequestError
from komplist.models.task_model import Task
from komplist.utils.db import db

logger = logging.getLogger(__name__)


class TaskRepository:
    """Queries over the ``tasks`` table using the request-scoped session."""

    def find_task_by_id(self, task_id: int) -> Optional[Task]:
        return db.session.get(Task, task_id)

    def find_all(self) -> List[Task]:
        return db.session.execute(db.select(Task).order_by(Task.id)).scalars().all()

    def query_all_open_tasks(self) -> List[Task]:
        return self._find_by_open_flag(True)

    def query_all_closed_tasks(self) -> List[Task]:
        return self._find_by_open_flag(False)

    def does_description_exist(self, description: str) -> bool:
        query = db.select(Task.id).where(Task.description == description).limit(1)
        return db.session.execute(query).first() is not None

    def exists_by_id(self, task_id: int) -> bool:
        query = db.select(Task.id).where(Task.id == task_id)
        return db.session.execute(query).first() is not None

    def save(self, task: Task) -> Task:
        db.session.add(task)
        try:
            db.session.commit()
        except IntegrityError:
            # Unique description lost a race with a concurrent write
            db.session.rollback()
            logger.warning("Rejected duplicate description %r", task.description)
            raise BadRequestError(
                f"There is already a task with description: {task.description}"
            ) from None
        db.session.refresh(task)
        logger.debug("Saved %r", task)
        return task

    def delete_by_id(self, task_id: int) -> None:
        task = self.find_task_by_id(task_id)
        if task is None:
            return
        db.session.delete(task)
        db.session.commit()
        logger.debug("Deleted task %s", task_id)

    def _find_by_open_flag(self, is_open: bool) -> List[Task]:
        query = db.select(Task).where(Task.is_task_open.is_(is_open)).order_by(Task.id)
        return db.session.execute(query).scalars().all()
