import io
import os

from employee_manager.app import bcrypt, db
from employee_manager.app.models import Employee, Feedback, LeaveRequest, Task


def _employee_form(department_id, **overrides):
    form = {
        'name': 'Jane Doe',
        'email': 'jane@example.com',
        'password': 's3cret',
        'role': 'Engineer',
        'experience': '3',
        'department_id': str(department_id),
        'salary': '55000',
        'degree': 'BSc',
        'university': 'State University',
        'graduation_year': '2019',
        'skills': 'python, sql',
        'mobile_no': '5550100',
        'address': '1 Main St',
    }
    form.update(overrides)
    return form


def test_add_employee_hashes_password_and_stores_uploads(admin_client, app, make_department):
    department_id = make_department()
    form = _employee_form(department_id)
    form['resume'] = (io.BytesIO(b'%PDF-1.4 resume'), 'cv.pdf')
    form['profile_img'] = (io.BytesIO(b'\x89PNG'), 'me.png')

    response = admin_client.post('/add_employee', data=form, content_type='multipart/form-data')
    body = response.get_json()
    assert body['Status'] is True
    employee_id = body['Result']['insertId']

    with app.app_context():
        employee = db.session.get(Employee, employee_id)
        assert employee.password != 's3cret'
        assert bcrypt.check_password_hash(employee.password, 's3cret')
        assert employee.resume.endswith('-cv.pdf')
        assert employee.profile_img.endswith('-me.png')
        upload_root = app.config['UPLOAD_FOLDER']
        assert os.path.exists(os.path.join(upload_root, 'resumes', employee.resume))
        assert os.path.exists(os.path.join(upload_root, 'profile_images', employee.profile_img))
        resume = employee.resume

    body = admin_client.get(f'/get_employee_details/{employee_id}').get_json()
    assert body['Result']['resume'] == f'/uploads/resumes/{resume}'
    assert 'password' not in body['Result']

    response = admin_client.get(body['Result']['resume'])
    assert response.status_code == 200
    assert response.data == b'%PDF-1.4 resume'


def test_add_employee_without_files(admin_client, make_department):
    response = admin_client.post('/add_employee', data=_employee_form(make_department()))
    employee_id = response.get_json()['Result']['insertId']

    body = admin_client.get(f'/get_employee_details/{employee_id}').get_json()
    assert body['Result']['resume'] is None


def test_add_employee_missing_fields(admin_client, app, make_department):
    response = admin_client.post('/add_employee', data=_employee_form(make_department(), address=''))
    assert response.status_code == 400
    assert response.get_json() == {'Status': False, 'Error': 'Missing required fields'}
    with app.app_context():
        assert Employee.query.count() == 0


def test_add_employee_unknown_department(admin_client):
    response = admin_client.post('/add_employee', data=_employee_form(42))
    assert response.status_code == 404
    assert response.get_json()['Error'] == 'Department not found'


def test_edit_employee_keeps_password_unless_given(admin_client, app, make_department):
    department_id = make_department()
    response = admin_client.post('/add_employee', data=_employee_form(department_id))
    employee_id = response.get_json()['Result']['insertId']
    with app.app_context():
        original_hash = db.session.get(Employee, employee_id).password

    update = {'name': 'Jane Roe', 'email': 'jane@example.com', 'role': 'Lead',
              'department_id': department_id, 'salary': 60000}
    response = admin_client.put(f'/edit_employee/{employee_id}', json=update)
    assert response.get_json()['Status'] is True
    with app.app_context():
        employee = db.session.get(Employee, employee_id)
        assert employee.name == 'Jane Roe'
        assert employee.role == 'Lead'
        assert employee.password == original_hash

    update['password'] = 'new-pass'
    admin_client.put(f'/edit_employee/{employee_id}', json=update)
    with app.app_context():
        employee = db.session.get(Employee, employee_id)
        assert bcrypt.check_password_hash(employee.password, 'new-pass')


def test_edit_unknown_employee(admin_client, make_department):
    response = admin_client.put('/edit_employee/99', json={
        'name': 'X', 'email': 'x@example.com', 'role': 'R', 'department_id': make_department(), 'salary': 1,
    })
    assert response.status_code == 404
    assert response.get_json() == {'Status': False, 'Error': 'Employee not found'}


def test_get_employees_lists_department_name(admin_client, make_department, make_employee):
    make_employee(make_department('Engineering'), name='Ann Lee')

    body = admin_client.get('/get_employees').get_json()
    assert body['Result'] == [{'employeeId': 1, 'name': 'Ann Lee', 'department': 'Engineering', 'role': 'Engineer'}]


def test_get_employee_by_id(admin_client, make_department, make_employee):
    employee_id = make_employee(make_department(), name='Ann Lee')

    body = admin_client.get(f'/get_employee_by_id/{employee_id}').get_json()
    assert body['Result'][0]['name'] == 'Ann Lee'
    assert 'password' not in body['Result'][0]

    response = admin_client.get('/get_employee_by_id/999')
    assert response.status_code == 404


def test_delete_employee_cascades(admin_client, app, make_department, make_employee, add_dependents):
    department_id = make_department()
    employee_id = make_employee(department_id, name='Ann Lee')
    other_id = make_employee(department_id, name='Bob Ray')
    add_dependents(employee_id)
    add_dependents(other_id)

    body = admin_client.delete(f'/delete_employee/{employee_id}').get_json()
    assert body['Status'] is True
    assert body['Message'] == 'Employee and all related data deleted successfully'

    with app.app_context():
        assert db.session.get(Employee, employee_id) is None
        for model in (Feedback, Task, LeaveRequest):
            assert model.query.filter_by(employee_id=employee_id).count() == 0
            assert model.query.filter_by(employee_id=other_id).count() == 1


def test_delete_unknown_employee(admin_client):
    response = admin_client.delete('/delete_employee/999')
    assert response.status_code == 404
    assert response.get_json() == {'Status': False, 'Error': 'Employee not found'}
