from enum import Enum

from employee_manager.app import db


class TaskStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, value):
        """Match a status string case-insensitively; ValueError if unknown."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace(' ', '_').replace('-', '_')
        try:
            return next(s for s in cls if s.value == normalized)
        except StopIteration:
            raise ValueError(f"Invalid status: {value}")


class Task(db.Model):
    __tablename__ = 'work_allocation'

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey('employees.id'), nullable=False)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    deadline = db.Column(db.Date, nullable=False)
    priority = db.Column(db.String(20))
    status = db.Column(db.String(20), nullable=False, default=TaskStatus.PENDING.value)

    def to_dict(self):
        return {
            'id': self.id,
            'employee_id': self.employee_id,
            'title': self.title,
            'description': self.description,
            'deadline': self.deadline.isoformat() if self.deadline else None,
            'priority': self.priority,
            'status': self.status,
        }

    def __repr__(self):
        return f'<Task {self.title} ({self.status})>'
