from decimal import Decimal, InvalidOperation

from flask import request
from flask_login import login_required

from employee_manager.app import db, bcrypt
from employee_manager.app.cascade import delete_employee as cascade_delete_employee
from employee_manager.app.envelope import success, require_fields, json_body
from employee_manager.app.errors import NotFoundError, ValidationError
from employee_manager.app.models import Department, Employee
from employee_manager.app.routes import employees_bp as bp
from employee_manager.app.uploads import save_upload

REQUIRED_ON_CREATE = ('name', 'email', 'password', 'role', 'department_id', 'salary', 'degree',
                      'university', 'graduation_year', 'mobile_no', 'address')
REQUIRED_ON_EDIT = ('name', 'email', 'role', 'department_id', 'salary')


def _request_data():
    # Creation comes in as multipart form data, edits as JSON
    if request.form:
        return request.form
    return json_body()


def _to_int(value, field):
    if value in (None, ''):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be an integer")


def _to_salary(value):
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValidationError("salary must be a number")


def _department_id(value):
    department_id = _to_int(value, 'department_id')
    if db.session.get(Department, department_id) is None:
        raise NotFoundError("Department not found")
    return department_id


def _get_employee(employee_id):
    employee = db.session.get(Employee, employee_id)
    if employee is None:
        raise NotFoundError("Employee not found")
    return employee


@bp.route('/add_employee', methods=['POST'])
@login_required
def add_employee():
    data = _request_data()
    require_fields(data, *REQUIRED_ON_CREATE)

    employee = Employee(
        name=data['name'],
        email=data['email'],
        password=bcrypt.generate_password_hash(data['password']).decode('utf-8'),
        role=data['role'],
        experience=_to_int(data.get('experience'), 'experience') or 0,
        department_id=_department_id(data['department_id']),
        salary=_to_salary(data['salary']),
        degree=data['degree'],
        university=data['university'],
        graduation_year=_to_int(data['graduation_year'], 'graduation_year'),
        skills=data.get('skills') or '',
        certifications=data.get('certifications') or '',
        mobile_no=data['mobile_no'],
        address=data['address'],
        resume=save_upload('resume', request.files.get('resume')),
        profile_img=save_upload('profile_img', request.files.get('profile_img')),
    )
    db.session.add(employee)
    db.session.commit()
    return success({'insertId': employee.id})


@bp.route('/edit_employee/<int:employee_id>', methods=['PUT'])
@login_required
def edit_employee(employee_id):
    data = _request_data()
    require_fields(data, *REQUIRED_ON_EDIT)
    employee = _get_employee(employee_id)

    employee.name = data['name']
    employee.email = data['email']
    employee.role = data['role']
    employee.department_id = _department_id(data['department_id'])
    employee.salary = _to_salary(data['salary'])
    employee.experience = _to_int(data.get('experience'), 'experience') or 0
    employee.degree = data.get('degree')
    employee.university = data.get('university')
    employee.graduation_year = _to_int(data.get('graduation_year'), 'graduation_year')
    employee.skills = data.get('skills') or ''
    employee.certifications = data.get('certifications') or ''
    employee.mobile_no = data.get('mobile_no')
    employee.address = data.get('address')
    # Keep the stored hash unless a new password was supplied
    if data.get('password'):
        employee.password = bcrypt.generate_password_hash(data['password']).decode('utf-8')

    db.session.commit()
    return success(employee.to_dict())


@bp.route('/delete_employee/<int:employee_id>', methods=['DELETE'])
@login_required
def delete_employee(employee_id):
    steps = cascade_delete_employee(employee_id)
    return success(message='Employee and all related data deleted successfully', Deleted=steps)


@bp.route('/get_employees')
@login_required
def list_employees():
    rows = db.session.query(Employee, Department.name) \
        .outerjoin(Department, Employee.department_id == Department.id) \
        .order_by(Employee.id).all()
    return success([{
        'employeeId': employee.id,
        'name': employee.name,
        'department': department_name,
        'role': employee.role,
    } for employee, department_name in rows])


@bp.route('/get_employee_by_id/<int:employee_id>')
@login_required
def get_employee_by_id(employee_id):
    # Wrapped in a list; the edit form reads Result[0]
    return success([_get_employee(employee_id).to_dict()])


@bp.route('/get_employee_details/<int:employee_id>')
@login_required
def get_employee_details(employee_id):
    return success(_get_employee(employee_id).to_details())
