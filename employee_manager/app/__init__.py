import logging
import os

from flask import Flask, send_from_directory
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_bcrypt import Bcrypt
from flask_mail import Mail
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from employee_manager.config import Config

db = SQLAlchemy()
bcrypt = Bcrypt()
login_manager = LoginManager()
mail = Mail()

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    db.init_app(app)
    bcrypt.init_app(app)
    login_manager.init_app(app)
    mail.init_app(app)

    from employee_manager.app.models import Admin
    from employee_manager.app.errors import ServiceError
    from employee_manager.app.envelope import failure

    @login_manager.user_loader
    def load_user(admin_id):
        return db.session.get(Admin, int(admin_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        return failure('Unauthorized', 401)

    @app.errorhandler(ServiceError)
    def handle_service_error(error):
        return failure(error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return failure(error.description, error.code)

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        db.session.rollback()
        logger.exception('Database Query Error: %s', error)
        return failure('Database Query Error', 500)

    from employee_manager.app.uploads import UPLOAD_FOLDERS

    for folder in UPLOAD_FOLDERS.values():
        os.makedirs(os.path.join(app.config['UPLOAD_FOLDER'], folder), exist_ok=True)

    @app.route('/uploads/<folder>/<path:filename>')
    def uploaded_file(folder, filename):
        if folder not in UPLOAD_FOLDERS.values():
            return failure('File not found', 404)
        return send_from_directory(os.path.join(app.config['UPLOAD_FOLDER'], folder), filename)

    with app.app_context():
        from employee_manager.app.routes import (
            admins_bp, departments_bp, employees_bp, tasks_bp, teams_bp, reviews_bp, dashboard_bp
        )

        app.register_blueprint(admins_bp)
        app.register_blueprint(departments_bp)
        app.register_blueprint(employees_bp)
        app.register_blueprint(tasks_bp)
        app.register_blueprint(teams_bp)
        app.register_blueprint(reviews_bp)
        app.register_blueprint(dashboard_bp)

        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///'):
            db_path = app.config['SQLALCHEMY_DATABASE_URI'][len('sqlite:///'):]
            if db_path and db_path != ':memory:':
                os.makedirs(os.path.dirname(db_path) or '.', exist_ok=True)

        db.create_all()

    return app
