# app/models/__init__.py
from employee_manager.app import db

# Import models after db
from .department import Department
from .employee import Employee
from .task import Task, TaskStatus
from .team import Team
from .review import LeaveRequest, Feedback, ReviewStatus, DECISIONS
from .admin import Admin

__all__ = ['Department', 'Employee', 'Task', 'TaskStatus', 'Team', 'LeaveRequest', 'Feedback',
    'ReviewStatus', 'DECISIONS', 'Admin']
