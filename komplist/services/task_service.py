import logging
from typing import List

from komplist.exceptions import BadRequestError, TaskNotFoundError
from komplist.models.task_dto import TaskCreateRequest, TaskDto, TaskUpdateRequest
from komplist.models.task_model import Task
from komplist.repositories.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Business rules around tasks: existence checks and DTO mapping."""

    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def get_all_tasks(self) -> List[TaskDto]:
        return [TaskDto.from_task(t) for t in self.repository.find_all()]

    def get_all_open_tasks(self) -> List[TaskDto]:
        return [TaskDto.from_task(t) for t in self.repository.query_all_open_tasks()]

    def get_all_closed_tasks(self) -> List[TaskDto]:
        return [TaskDto.from_task(t) for t in self.repository.query_all_closed_tasks()]

    def get_task_by_id(self, task_id: int) -> TaskDto:
        logger.debug("Fetching task %s", task_id)
        return TaskDto.from_task(self._get_existing(task_id))

    def create_task(self, request: TaskCreateRequest) -> TaskDto:
        self._check_description_free(request.description)

        task = Task(
            description=request.description,
            is_reminder_set=request.is_reminder_set,
            is_task_open=request.is_task_open,
            created_on=request.created_on,
            priority=request.priority,
        )
        saved = self.repository.save(task)
        logger.info("Created task %s (%s)", saved.id, saved.description)
        return TaskDto.from_task(saved)

    def update_task(self, task_id: int, request: TaskUpdateRequest) -> TaskDto:
        task = self._get_existing(task_id)

        changes = request.changes()
        new_description = changes.get("description")
        if new_description is not None and new_description != task.description:
            self._check_description_free(new_description)

        for name, value in changes.items():
            setattr(task, name, value)
        saved = self.repository.save(task)
        logger.info("Updated task %s: %s", task_id, ", ".join(sorted(changes)) or "no changes")
        return TaskDto.from_task(saved)

    def delete_task(self, task_id: int) -> str:
        if not self.repository.exists_by_id(task_id):
            raise TaskNotFoundError(f"Task with id: {task_id} does not exist!")
        self.repository.delete_by_id(task_id)
        logger.info("Deleted task %s", task_id)
        return f"Task with id: {task_id} has been deleted."

    def _get_existing(self, task_id: int) -> Task:
        task = self.repository.find_task_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(f"Task with id: {task_id} does not exist!")
        return task

    def _check_description_free(self, description: str) -> None:
        if self.repository.does_description_exist(description):
            raise BadRequestError(f"There is already a task with description: {description}")
