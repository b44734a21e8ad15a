from flask import jsonify
from flask_login import login_required
from sqlalchemy import func, select

from employee_manager.app import db
from employee_manager.app.models import Department, Employee, LeaveRequest, ReviewStatus, Task
from employee_manager.app.routes import dashboard_bp as bp


@bp.route('/dashboard_metrics')
@login_required
def dashboard_metrics():
    # All four counts in one round trip
    counts = select(
        select(func.count(Employee.id)).scalar_subquery().label('totalEmployees'),
        select(func.count(LeaveRequest.id))
            .where(LeaveRequest.status == ReviewStatus.PENDING.value)
            .scalar_subquery().label('pendingLeaveRequests'),
        select(func.count(Department.id)).scalar_subquery().label('totalDepartments'),
        select(func.count(Task.id)).scalar_subquery().label('totalTasks'),
    )
    metrics = dict(db.session.execute(counts).one()._mapping)
    return jsonify({'Status': True, 'Metrics': metrics})
