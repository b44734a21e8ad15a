from flask import jsonify
from flask_login import login_user, logout_user, login_required
from sqlalchemy.exc import IntegrityError

from employee_manager.app import db
from employee_manager.app.envelope import success, require_fields, json_body
from employee_manager.app.errors import DuplicateError
from employee_manager.app.models import Admin
from employee_manager.app.routes import admins_bp as bp


@bp.route('/adminLogin', methods=['POST'])
def admin_login():
    data = json_body()
    email = (data.get('email') or '').strip().lower()
    admin = Admin.query.filter_by(email=email).first()
    if admin and admin.check_password(data.get('password') or ''):
        login_user(admin)
        return jsonify({'loginStatus': True})
    return jsonify({'loginStatus': False, 'Error': 'Wrong email or password'})


@bp.route('/logout', methods=['POST'])
@login_required
def logout():
    logout_user()
    return success(message='Logged out')


@bp.route('/admins')
@login_required
def list_admins():
    return jsonify({'Status': True, 'Admins': [a.to_dict() for a in Admin.query.order_by(Admin.id).all()]})


@bp.route('/add_admin', methods=['POST'])
@login_required
def add_admin():
    data = json_body()
    email, password = require_fields(data, 'email', 'password')
    email = str(email).strip().lower()
    if Admin.query.filter_by(email=email).first():
        raise DuplicateError('Admin already exists')

    admin = Admin(email=email)
    admin.set_password(password)
    db.session.add(admin)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise DuplicateError('Admin already exists')
    return success(admin.to_dict())
