from datetime import date

import pytest

from employee_manager.app import create_app, db
from employee_manager.app.models import Admin, Department, Employee, Feedback, LeaveRequest, Task
from employee_manager.config import Config

ADMIN_EMAIL = 'admin@example.com'
ADMIN_PASSWORD = 'password'


@pytest.fixture
def app(tmp_path):
    class TestConfig(Config):
        TESTING = True
        SECRET_KEY = 'test-secret'
        SQLALCHEMY_DATABASE_URI = 'sqlite://'
        UPLOAD_FOLDER = str(tmp_path / 'uploads')
        BCRYPT_LOG_ROUNDS = 4
        MAIL_SERVER = None

    app = create_app(TestConfig)
    with app.app_context():
        admin = Admin(email=ADMIN_EMAIL)
        admin.set_password(ADMIN_PASSWORD)
        db.session.add(admin)
        db.session.commit()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    response = client.post('/adminLogin', json={'email': ADMIN_EMAIL, 'password': ADMIN_PASSWORD})
    assert response.get_json() == {'loginStatus': True}
    return client


@pytest.fixture
def make_department(app):
    def factory(name='Engineering'):
        with app.app_context():
            department = Department(name=name)
            db.session.add(department)
            db.session.commit()
            return department.id
    return factory


@pytest.fixture
def make_employee(app):
    def factory(department_id, name='Jane Doe', email=None):
        with app.app_context():
            employee = Employee(
                name=name,
                email=email or f'{name.lower().replace(" ", ".")}@example.com',
                password='not-a-real-hash',
                role='Engineer',
                department_id=department_id,
                salary=50000,
            )
            db.session.add(employee)
            db.session.commit()
            return employee.id
    return factory


@pytest.fixture
def add_dependents(app):
    """Give an employee one feedback, one task and one leave request."""
    def factory(employee_id):
        with app.app_context():
            db.session.add_all([
                Feedback(employee_id=employee_id, message='Laptop is slow'),
                Task(employee_id=employee_id, title='Write report', deadline=date(2024, 12, 1)),
                LeaveRequest(employee_id=employee_id, leave_type='SICK', reason='Flu'),
            ])
            db.session.commit()
    return factory
