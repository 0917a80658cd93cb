from datetime import datetime

import pytest

from komplist.exceptions import BadRequestError, TaskNotFoundError
from komplist.models.task_dto import TaskCreateRequest, TaskUpdateRequest
from komplist.models.task_model import Priority


def test_get_all_tasks_maps_every_row(service, test_data):
    dtos = service.get_all_tasks()

    assert [d.id for d in dtos] == [111, 112, 113]


def test_open_and_closed_filters(service, test_data):
    assert [d.id for d in service.get_all_open_tasks()] == [113]
    assert [d.id for d in service.get_all_closed_tasks()] == [111, 112]


def test_get_task_by_id(service, test_data):
    dto = service.get_task_by_id(112)

    assert dto.description == "second test todo"
    assert dto.is_reminder_set is True
    assert dto.priority is Priority.MEDIUM
    assert dto.created_on == datetime(2021, 6, 2, 10, 30)


def test_get_task_by_id_raises_when_missing(service, test_data):
    with pytest.raises(TaskNotFoundError, match="Task with id: 5 does not exist!"):
        service.get_task_by_id(5)


def test_create_task_echoes_request(service):
    created_on = datetime(2022, 3, 4, 5, 6, 7)
    request = TaskCreateRequest(
        description="buy milk",
        priority=Priority.MEDIUM,
        is_reminder_set=True,
        is_task_open=True,
        created_on=created_on,
    )

    dto = service.create_task(request)

    assert dto.id is not None
    assert dto.description == "buy milk"
    assert dto.is_reminder_set is True
    assert dto.is_task_open is True
    assert dto.created_on == created_on
    assert dto.priority is Priority.MEDIUM


def test_create_task_rejects_duplicate_description(service, test_data):
    request = TaskCreateRequest(description="first test todo", priority=Priority.LOW)

    with pytest.raises(BadRequestError, match="already a task with description: first test todo"):
        service.create_task(request)


def test_update_task_only_touches_supplied_fields(service, test_data):
    dto = service.update_task(111, TaskUpdateRequest(is_task_open=True))

    assert dto.is_task_open is True
    assert dto.description == "first test todo"
    assert dto.priority is Priority.LOW
    assert service.get_task_by_id(111).is_task_open is True


def test_update_task_changes_description_and_priority(service, test_data):
    dto = service.update_task(
        113, TaskUpdateRequest(description="renamed todo", priority=Priority.LOW)
    )

    assert dto.description == "renamed todo"
    assert dto.priority is Priority.LOW


def test_update_task_keeps_own_description(service, test_data):
    dto = service.update_task(111, TaskUpdateRequest(description="first test todo"))

    assert dto.description == "first test todo"


def test_update_task_rejects_description_of_other_task(service, test_data):
    with pytest.raises(BadRequestError):
        service.update_task(111, TaskUpdateRequest(description="second test todo"))


def test_update_task_raises_when_missing(service, test_data):
    with pytest.raises(TaskNotFoundError):
        service.update_task(404, TaskUpdateRequest(is_task_open=False))


def test_delete_task_returns_message(service, test_data):
    message = service.delete_task(112)

    assert message == "Task with id: 112 has been deleted."
    assert len(service.get_all_tasks()) == 2


def test_delete_task_raises_when_missing(service, test_data):
    with pytest.raises(TaskNotFoundError):
        service.delete_task(999)
