"""Ordered deletion of an aggregate root and the rows that reference it.

The database is not trusted to cascade foreign keys, so every dependent table
is cleared explicitly before the parent row goes. Each public function runs its
whole sequence in one transaction: a failure at any step rolls back the steps
before it, and a missing target rolls back everything.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError

from employee_manager.app import db
from employee_manager.app.errors import NotFoundError, PersistenceError
from employee_manager.app.models import Department, Employee, Feedback, LeaveRequest, Task, Team

logger = logging.getLogger(__name__)

# Rows owned by an employee, in deletion order: (model, employee foreign key)
EMPLOYEE_DEPENDENTS = (
    (Feedback, Feedback.employee_id),
    (Task, Task.employee_id),
    (LeaveRequest, LeaveRequest.employee_id),
)


def _delete_where(steps, model, column, values):
    count = model.query.filter(column.in_(values)).delete(synchronize_session=False)
    steps.append({'table': model.__tablename__, 'deleted': count})
    logger.info("Deleted %d row(s) from %s", count, model.__tablename__)
    return count


def _delete_employee_rows(steps, employee_ids):
    for model, column in EMPLOYEE_DEPENDENTS:
        _delete_where(steps, model, column, employee_ids)
    return _delete_where(steps, Employee, Employee.id, employee_ids)


def _run_in_transaction(label, sequence):
    try:
        steps = sequence()
        db.session.commit()
    except NotFoundError:
        db.session.rollback()
        raise
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Cascade delete of %s failed, rolled back: %s", label, e)
        raise PersistenceError(f"Error deleting {label}")
    return steps


def delete_employee(employee_id):
    """Delete an employee with its feedback, tasks and leave requests.

    Returns the executed steps as `{'table', 'deleted'}` dicts in order.
    """
    def sequence():
        steps = []
        if _delete_employee_rows(steps, [employee_id]) == 0:
            raise NotFoundError("Employee not found")
        return steps

    return _run_in_transaction('employee', sequence)


def delete_department(department_id):
    """Delete a department, its employees and everything they own.

    Teams that belong to the department are kept but detached from it.
    """
    def sequence():
        steps = []
        employee_ids = [
            row.id for row in db.session.query(Employee.id).filter(Employee.department_id == department_id)
        ]
        if employee_ids:
            _delete_employee_rows(steps, employee_ids)
        detached = Team.query.filter(Team.department_id == department_id).update(
            {Team.department_id: None}, synchronize_session=False)
        if detached:
            logger.info("Detached %d team(s) from department %s", detached, department_id)
        if _delete_where(steps, Department, Department.id, [department_id]) == 0:
            raise NotFoundError("Department not found")
        return steps

    return _run_in_transaction('department', sequence)
