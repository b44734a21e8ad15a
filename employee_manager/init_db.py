import logging

from employee_manager.app import create_app, db
from employee_manager.app.models import Admin

logger = logging.getLogger(__name__)


def init_db(app):
    """Create all tables and seed the default admin when one is configured."""
    with app.app_context():
        db.create_all()

        email = app.config.get('DEFAULT_ADMIN_EMAIL')
        password = app.config.get('DEFAULT_ADMIN_PASSWORD')
        if not email or not password:
            logger.info("No default admin configured, skipping seed")
            return None

        email = email.strip().lower()
        admin = Admin.query.filter_by(email=email).first()
        if not admin:
            admin = Admin(email=email)
            admin.set_password(password)
            db.session.add(admin)
            db.session.commit()
            logger.info("Default admin %s created", email)
        return admin


if __name__ == "__main__":
    init_db(create_app())
