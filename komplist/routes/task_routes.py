from flask import Blueprint, current_app, jsonify, request

from komplist.models.task_dto import TaskCreateRequest, TaskUpdateRequest
from komplist.utils.db import parse_task_id


tasks_bp = Blueprint("tasks", __name__)

SERVICE_KEY = "komplist.task_service"


def get_task_service():
    return current_app.extensions[SERVICE_KEY]


def _dto_list(dtos):
    return jsonify([dto.to_dict() for dto in dtos]), 200


@tasks_bp.get("/all-tasks")
def all_tasks():
    return _dto_list(get_task_service().get_all_tasks())


@tasks_bp.get("/open-tasks")
def open_tasks():
    return _dto_list(get_task_service().get_all_open_tasks())


@tasks_bp.get("/closed-tasks")
def closed_tasks():
    return _dto_list(get_task_service().get_all_closed_tasks())


@tasks_bp.get("/task/<task_id>")
def get_task(task_id):
    dto = get_task_service().get_task_by_id(parse_task_id(task_id))
    return jsonify(dto.to_dict()), 200


@tasks_bp.patch("/update/<task_id>")
def update_task(task_id):
    task_id = parse_task_id(task_id)
    update_request = TaskUpdateRequest.from_json(request.get_json(silent=True))
    dto = get_task_service().update_task(task_id, update_request)
    return jsonify(dto.to_dict()), 200


@tasks_bp.post("/create")
def create_task():
    create_request = TaskCreateRequest.from_json(request.get_json(silent=True))
    dto = get_task_service().create_task(create_request)
    return jsonify(dto.to_dict()), 200


@tasks_bp.delete("/delete/<task_id>")
def delete_task(task_id):
    message = get_task_service().delete_task(parse_task_id(task_id))
    return current_app.response_class(message, status=200, mimetype="text/plain")
