"""Task and team allocation.

Tasks are assigned to exactly one employee. Teams hold an ordered list of
employee ids in a single JSON column; member ids are stored as given and are
not checked against the employees table.
"""
import logging
from datetime import date, datetime

from employee_manager.app import db
from employee_manager.app.envelope import require_fields
from employee_manager.app.errors import NotFoundError, ValidationError
from employee_manager.app.models import Department, Employee, Task, TaskStatus, Team
from employee_manager.app.notifications import send_task_email

logger = logging.getLogger(__name__)


def _as_int(value, field):
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be an integer")


def _to_date(value, field='deadline'):
    # ISO date or datetime; anything trailing is rejected, not truncated
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value).strip()).date()
    except ValueError:
        raise ValidationError(f"{field} must be YYYY-MM-DD")


# ---------------- tasks ----------------

def create_task(data):
    employee_id, title, deadline = require_fields(data, 'employee_id', 'title', 'deadline')
    employee_id = _as_int(employee_id, 'employee_id')
    if db.session.get(Employee, employee_id) is None:
        raise NotFoundError("Employee not found")

    task = Task(
        employee_id=employee_id,
        title=title,
        description=data.get('description'),
        deadline=_to_date(deadline),
        priority=data.get('priority'),
        status=TaskStatus.PENDING.value,
    )
    db.session.add(task)
    db.session.commit()
    logger.info("Allocated task %s to employee %s", task.id, employee_id)

    send_task_email(task)
    return task


def list_tasks():
    rows = db.session.query(Task, Employee.name).join(Employee, Task.employee_id == Employee.id) \
        .order_by(Task.id).all()
    return [{
        'taskId': task.id,
        'employee_id': task.employee_id,
        'title': task.title,
        'description': task.description,
        'deadline': task.deadline.isoformat() if task.deadline else None,
        'priority': task.priority,
        'status': task.status,
        'employee_name': employee_name,
    } for task, employee_name in rows]


def get_task(task_id):
    task = db.session.get(Task, task_id)
    if task is None:
        raise NotFoundError("Task not found")
    return task


def update_task(task_id, data):
    title, description, deadline, priority = require_fields(
        data, 'title', 'description', 'deadline', 'priority')
    deadline = _to_date(deadline)
    task = get_task(task_id)
    task.title = title
    task.description = description
    task.deadline = deadline
    task.priority = priority
    db.session.commit()
    return task


def update_task_status(task_id, status):
    if not status:
        raise ValidationError("Missing required fields")
    try:
        status = TaskStatus.parse(status)
    except ValueError as e:
        raise ValidationError(str(e))
    task = get_task(task_id)
    task.status = status.value
    db.session.commit()
    logger.info("Task %s moved to %s", task.id, task.status)
    return task


def delete_task(task_id):
    deleted = Task.query.filter_by(id=task_id).delete(synchronize_session=False)
    db.session.commit()
    if not deleted:
        raise NotFoundError("Task not found")


# ---------------- teams ----------------

def _team_name(team_name):
    if not isinstance(team_name, str) or not team_name.strip():
        raise ValidationError("Invalid input. Please provide a valid team name and select members.")
    return team_name.strip()


def _member_ids(team_members):
    if not isinstance(team_members, list) or not team_members:
        raise ValidationError("Invalid input. Please provide a valid team name and select members.")
    return [_as_int(member, 'team_members') for member in team_members]


def create_team(data):
    team_name = _team_name(data.get('team_name'))
    members = _member_ids(data.get('team_members'))

    department_id = data.get('department_id')
    if department_id not in (None, ''):
        department_id = _as_int(department_id, 'department_id')
        if db.session.get(Department, department_id) is None:
            raise NotFoundError("Department not found")
    else:
        department_id = None

    team = Team(team_name=team_name, team_members=members, department_id=department_id)
    db.session.add(team)
    db.session.commit()
    logger.info("Created team %s with %d member(s)", team.team_id, len(members))
    return team


def list_teams():
    return [team.to_dict() for team in Team.query.order_by(Team.team_id).all()]


def get_team(team_id):
    team = db.session.get(Team, team_id)
    if team is None:
        raise NotFoundError("Team not found")
    return team


def update_team(team_id, data):
    team_name, team_members = require_fields(data, 'team_name', 'team_members')
    team_name = _team_name(team_name)
    members = _member_ids(team_members)
    team = get_team(team_id)
    team.team_name = team_name
    team.team_members = members
    db.session.commit()
    return team


def delete_team(team_id):
    if team_id is None:
        raise ValidationError("Team ID is required")
    deleted = Team.query.filter_by(team_id=team_id).delete(synchronize_session=False)
    db.session.commit()
    if not deleted:
        raise NotFoundError("Team not found")
