from flask_login import login_required
from sqlalchemy.exc import IntegrityError

from employee_manager.app import db
from employee_manager.app.cascade import delete_department as cascade_delete_department
from employee_manager.app.envelope import success, require_fields, json_body
from employee_manager.app.errors import DuplicateError, ValidationError
from employee_manager.app.models import Department, Employee
from employee_manager.app.routes import departments_bp as bp


@bp.route('/get_departments')
@login_required
def list_departments():
    return success([d.to_dict() for d in Department.query.order_by(Department.id).all()])


@bp.route('/add_department', methods=['POST'])
@login_required
def add_department():
    data = json_body()
    name, = require_fields(data, 'department')
    name = str(name).strip()
    if not name:
        raise ValidationError('Missing required fields')
    if Department.query.filter_by(name=name).first():
        raise DuplicateError('Department already exists')

    db.session.add(Department(name=name))
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race with a concurrent insert of the same name
        db.session.rollback()
        raise DuplicateError('Department already exists')
    return success()


@bp.route('/delete_department/<int:department_id>', methods=['DELETE'])
@login_required
def delete_department(department_id):
    steps = cascade_delete_department(department_id)
    if len(steps) > 1:
        message = 'Department and all related data deleted successfully'
    else:
        message = 'Department deleted successfully'
    return success(message=message, Deleted=steps)


@bp.route('/get_employees_by_department/<int:department_id>')
@login_required
def employees_by_department(department_id):
    employees = Employee.query.filter_by(department_id=department_id).order_by(Employee.id).all()
    if not employees:
        return success([], message='No employees found for this department')
    return success([e.to_dict() for e in employees])
