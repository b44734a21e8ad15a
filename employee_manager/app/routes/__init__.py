# app/routes/__init__.py
from flask import Blueprint

# Create blueprints
admins_bp = Blueprint('admins', __name__)
departments_bp = Blueprint('departments', __name__)
employees_bp = Blueprint('employees', __name__)
tasks_bp = Blueprint('tasks', __name__)
teams_bp = Blueprint('teams', __name__)
reviews_bp = Blueprint('reviews', __name__)
dashboard_bp = Blueprint('dashboard', __name__)

# Import views after blueprints are created
from . import admins, departments, employees, tasks, teams, reviews, dashboard
