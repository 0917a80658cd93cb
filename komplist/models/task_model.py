import enum
from datetime import datetime

from komplist.utils.db import db


class Priority(enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Task(db.Model):
    __tablename__ = "tasks"

    id = db.Column(db.Integer, primary_key=True)
    description = db.Column(db.String(255), nullable=False, unique=True)
    is_reminder_set = db.Column(db.Boolean, nullable=False, default=False)
    # Open means not yet completed
    is_task_open = db.Column(db.Boolean, nullable=False, default=True)
    created_on = db.Column(db.DateTime, nullable=False, default=datetime.now)
    priority = db.Column(db.Enum(Priority), nullable=False)

    def __repr__(self):
        return f"<Task {self.id} {self.description!r} open={self.is_task_open}>"
